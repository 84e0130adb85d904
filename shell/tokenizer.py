"""
Split one line of operator input into argument tokens.
"""

from dataclasses import dataclass, field
from typing import List, Optional

QUOTE_CHARS = ('"', "'")
WHITESPACE = (" ", "\t")
ESCAPE_CHAR = "\\"


@dataclass
class _TokenizerState:
    """Accumulator for a single tokenize() call."""

    tokens: List[str] = field(default_factory=list)
    buffer: List[str] = field(default_factory=list)
    quote: Optional[str] = None
    escape: bool = False

    def emit(self) -> None:
        self.tokens.append("".join(self.buffer))
        self.buffer = []


def tokenize(line: str) -> List[str]:
    """
    Split a line into tokens, honouring quotes and backslash escapes.

    A backslash makes the next character literal. A single or double quote
    opens a region closed only by the same character; closing it emits the
    buffered token even when empty. Unquoted spaces and tabs separate
    tokens. An unterminated quote is not an error: whatever was buffered
    is emitted as the last token.

    Args:
        line: The raw input line, without its line terminator

    Returns:
        List of tokens in input order
    """
    state = _TokenizerState()

    for ch in line:
        if state.escape:
            state.buffer.append(ch)
            state.escape = False
        elif ch == ESCAPE_CHAR:
            state.escape = True
        elif ch in QUOTE_CHARS:
            if state.quote is None:
                state.quote = ch
            elif state.quote == ch:
                state.quote = None
                state.emit()
            else:
                state.buffer.append(ch)
        elif ch in WHITESPACE and state.quote is None:
            if state.buffer:
                state.emit()
        else:
            state.buffer.append(ch)

    if state.buffer:
        state.emit()

    return state.tokens
