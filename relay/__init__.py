"""
Relay package for running commands and streaming their output.

This package spawns child processes with redirected output streams and
forwards every line they produce to the operator.
"""

from .errors import DshError, ErrorKind, ReadFailure, SpawnFailure, StreamReadFailure
from .executor import Executor, RelayResult
from .process_relay import ProcessRelay

__all__ = [
    "DshError",
    "ErrorKind",
    "Executor",
    "ProcessRelay",
    "ReadFailure",
    "RelayResult",
    "SpawnFailure",
    "StreamReadFailure",
]
