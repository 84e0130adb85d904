import logging
from typing import List, Optional

from relay import Executor, RelayResult

logger = logging.getLogger(__name__)


def dispatch(tokens: List[str], executor: Executor) -> Optional[RelayResult]:
    """
    Hand a token sequence to the executor as program name plus arguments.

    Args:
        tokens: Output of tokenize(); the first token names the program
        executor: Executor that spawns the command and relays its output

    Returns:
        The executor's RelayResult, or None for an empty line

    Raises:
        SpawnFailure: If the command could not be started
        StreamReadFailure: If relaying the command's output failed
    """
    if not tokens:
        return None

    logger.debug("Dispatching %s with %d argument(s)", tokens[0], len(tokens) - 1)
    return executor.run_command(tokens)
