from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


@dataclass
class RelayResult:
    """Outcome of one relayed command."""

    returncode: int
    stdout_lines: int = 0
    stderr_lines: int = 0


class Executor(ABC):
    """Abstract base class for anything that can run a tokenized command."""

    @abstractmethod
    def run_command(self, command: List[str]) -> RelayResult:
        """
        Execute a command and relay its output to the operator.

        Args:
            command: Program name followed by its arguments

        Returns:
            RelayResult with the exit status and relayed line counts

        Raises:
            SpawnFailure: If the process could not be created
            StreamReadFailure: If reading the child's output failed
        """
        pass
