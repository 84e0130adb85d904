"""
Rendering of pipeline errors for the operator.
"""

from rich.console import Console
from rich.text import Text

from relay import DshError

ERROR_PREFIX = "error : "


def display_error(error: DshError, console: Console | None = None) -> None:
    """
    Print a readable, prefixed rendering of a pipeline error.

    Args:
        error: The error raised by tokenize, dispatch or relay
        console: Optional Rich console instance (creates one if not provided)
    """
    if console is None:
        console = Console()

    # Text keeps square brackets in command names from being read as markup
    console.print(Text(f"{ERROR_PREFIX}{error}", style="bold red"), soft_wrap=True)
