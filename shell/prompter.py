import logging
import sys
from typing import Optional, Protocol, TextIO

from prompt_toolkit import PromptSession
from rich.console import Console

from relay import DshError, Executor, ProcessRelay, ReadFailure, RelayResult

from .config import ShellConfig
from .dispatcher import dispatch
from .display import display_error
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class LineSource(Protocol):
    def prompt(self, message: str) -> str: ...


class StreamLineReader:
    """Reads operator lines from a plain text stream, for redirected input."""

    def __init__(self, stream: Optional[TextIO] = None, output: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.output = output if output is not None else sys.stdout

    def prompt(self, message: str) -> str:
        self.output.write(message)
        self.output.flush()
        line = self.stream.readline()
        if not line:
            raise EOFError
        return line


class Prompter:
    """Runs the read, tokenize, dispatch and relay cycle for one operator."""

    def __init__(
        self,
        config: ShellConfig,
        executor: Optional[Executor] = None,
        session: Optional[LineSource] = None,
        console: Optional[Console] = None,
    ):
        """
        Initialize the Prompter.

        Args:
            config: Resolved identity and working directory for this session
            executor: Runs dispatched commands (a ProcessRelay in config.cwd by default)
            session: Source of operator lines (a prompt_toolkit PromptSession by default)
            console: Console used for error reporting
        """
        self.config = config
        self.executor = executor if executor is not None else ProcessRelay(cwd=config.cwd)
        self.session: LineSource = session if session is not None else PromptSession()
        self.console = console if console is not None else Console()

    def run_interactive_session(self) -> None:
        """
        Prompt for and run commands until the input reaches end-of-input.

        Pipeline errors are reported and the loop continues.

        Raises:
            ReadFailure: If operator input could not be read
        """
        prompt_text = self.config.prompt_text

        while True:
            try:
                line = self.session.prompt(prompt_text)
            except KeyboardInterrupt:
                continue
            except EOFError:
                logger.debug("End of input, leaving prompt loop")
                break
            except (OSError, UnicodeDecodeError) as e:
                raise ReadFailure(e) from e

            try:
                self.run_line(line)
            except KeyboardInterrupt:
                # Interrupting a running command returns to the prompt
                logger.debug("Command interrupted")
                continue

    def run_line(self, line: str) -> Optional[RelayResult]:
        """
        Run one prompt cycle for an already-read line.

        Args:
            line: Raw operator input, with or without its line terminator

        Returns:
            The RelayResult of the command, or None for an empty line or an error
        """
        tokens = tokenize(line.rstrip("\r\n"))
        logger.debug("Tokens: %r", tokens)

        try:
            return dispatch(tokens, self.executor)
        except DshError as e:
            display_error(e, self.console)
            return None
