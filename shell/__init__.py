"""
Shell package for the interactive command line.

This package provides the tokenizer, the command dispatcher and the
prompt loop that ties them to the process relay.
"""

from .config import ShellConfig
from .dispatcher import dispatch
from .prompter import Prompter, StreamLineReader
from .tokenizer import tokenize

__all__ = ["Prompter", "ShellConfig", "StreamLineReader", "dispatch", "tokenize"]
