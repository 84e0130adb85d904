"""
Run a command as a child process and relay its output streams line by line.
"""

import logging
import subprocess
import sys
import threading
from typing import IO, Callable, List, Optional, TextIO

from .errors import SpawnFailure, StreamReadFailure
from .executor import Executor, RelayResult

logger = logging.getLogger(__name__)


class ProcessRelay(Executor):
    """Spawns commands and forwards their stdout and stderr to one output sink."""

    def __init__(self, cwd: Optional[str] = None, output: Optional[TextIO] = None):
        """
        Initialize the relay.

        Args:
            cwd: Working directory for child processes (inherited when None)
            output: Text stream that receives relayed lines (sys.stdout when None)
        """
        self.cwd = cwd
        self._output = output
        self._write_lock = threading.Lock()

    @property
    def output(self) -> TextIO:
        # Resolved lazily so a replaced sys.stdout is honoured
        return self._output if self._output is not None else sys.stdout

    def run_command(self, command: List[str]) -> RelayResult:
        """
        Spawn the command and drain both of its output streams.

        Standard input is inherited. Both pipes are read concurrently, one
        thread per stream, and every line is written to the output as soon
        as it arrives. Blocks until both streams reach end-of-stream.

        Args:
            command: Program name followed by its arguments

        Returns:
            RelayResult with the exit status and relayed line counts

        Raises:
            SpawnFailure: If the process could not be created
            StreamReadFailure: If a stream could not be read to completion
            OSError: If writing to the output failed
        """
        logger.debug("Spawning %r (cwd=%s)", command, self.cwd)
        try:
            process = subprocess.Popen(
                command,
                cwd=self.cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except (OSError, ValueError) as e:
            # ValueError covers arguments Popen rejects outright, such as embedded NULs
            logger.warning("Spawn of %r failed: %s", command[0], e)
            raise SpawnFailure(command[0], e) from e

        readers = {
            "stdout": _StreamReader("stdout", process.stdout, self._emit),
            "stderr": _StreamReader("stderr", process.stderr, self._emit),
        }
        threads: List[threading.Thread] = []
        for name, reader in readers.items():
            thread = threading.Thread(target=reader.run, name=f"relay-{name}", daemon=True)
            thread.start()
            threads.append(thread)

        try:
            for thread in threads:
                thread.join()
        finally:
            returncode = process.wait()

        logger.debug("%s exited with status %d", command[0], returncode)

        for reader in readers.values():
            if reader.write_error is not None:
                raise reader.write_error

        for reader in readers.values():
            if reader.error is not None:
                logger.warning("Relay of %s aborted: %s", reader.name, reader.error)
                raise StreamReadFailure(reader.name, reader.error) from reader.error

        return RelayResult(
            returncode=returncode,
            stdout_lines=readers["stdout"].count,
            stderr_lines=readers["stderr"].count,
        )

    def _emit(self, line: str) -> None:
        with self._write_lock:
            out = self.output
            out.write(line + "\n")
            out.flush()


class _StreamReader:
    """Reads one child pipe to exhaustion, forwarding each decoded line."""

    def __init__(self, name: str, pipe: Optional[IO[bytes]], emit: Callable[[str], None]):
        self.name = name
        self.pipe = pipe
        self.emit = emit
        self.count = 0
        self.error: Optional[Exception] = None
        # Failures writing to the operator output, kept apart from read failures
        self.write_error: Optional[OSError] = None

    def run(self) -> None:
        if self.pipe is None:
            return
        try:
            while True:
                try:
                    raw = self.pipe.readline()
                    if not raw:
                        break
                    line = _decode_line(raw)
                except (OSError, UnicodeDecodeError) as e:
                    self.error = e
                    break

                try:
                    self.emit(line)
                except OSError as e:
                    self.write_error = e
                    break
                self.count += 1
        finally:
            self.pipe.close()


def _decode_line(raw: bytes) -> str:
    """Decode one line as UTF-8 and drop its line terminator."""
    line = raw.decode("utf-8")
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line
