"""
Error taxonomy for the read, dispatch and relay pipeline.
"""

from enum import Enum


class ErrorKind(Enum):
    """Kinds of failure a prompt cycle can produce."""

    READ_FAILURE = "read_failure"
    SPAWN_FAILURE = "spawn_failure"
    STREAM_READ_FAILURE = "stream_read_failure"


class DshError(Exception):
    """Base class for every error raised by the shell pipeline."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ReadFailure(DshError):
    """The operator input stream could not be read. Fatal to the prompt loop."""

    kind = ErrorKind.READ_FAILURE

    def __init__(self, cause: BaseException):
        super().__init__(f"failed to read input: {cause}")
        self.cause = cause


class SpawnFailure(DshError):
    """The child process could not be created."""

    kind = ErrorKind.SPAWN_FAILURE

    def __init__(self, command: str, cause: OSError):
        reason = cause.strerror or str(cause)
        super().__init__(f"{command}: {reason}")
        self.command = command
        self.cause = cause


class StreamReadFailure(DshError):
    """Reading one of the child's output streams failed part way through."""

    kind = ErrorKind.STREAM_READ_FAILURE

    def __init__(self, stream: str, cause: Exception):
        super().__init__(f"failed to read {stream}: {cause}")
        self.stream = stream
        self.cause = cause
