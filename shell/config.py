"""
Startup configuration for the shell, resolved once from the environment.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

DEFAULT_IDENTITY = "user"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV_KEY = "DSH_LOG_LEVEL"

# Windows keeps the login name under a different variable
USER_ENV_KEY = "USERNAME" if os.name == "nt" else "USER"


@dataclass(frozen=True)
class ShellConfig:
    """
    Explicit inputs for one shell session.

    Attributes:
        identity: Operator name shown in the prompt
        cwd: Working directory for spawned commands
        log_level: Name of the diagnostic log level
    """

    identity: str = DEFAULT_IDENTITY
    cwd: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def prompt_text(self) -> str:
        return f"{self.identity} dsh >> "

    @classmethod
    def from_env(
        cls, cwd: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
    ) -> "ShellConfig":
        """
        Build a config from environment variables.

        Args:
            cwd: Working directory for children (current directory when None)
            environ: Variables to read (os.environ when None)

        Returns:
            The resolved ShellConfig
        """
        if environ is None:
            environ = os.environ

        return cls(
            identity=resolve_identity(environ),
            cwd=os.path.abspath(cwd) if cwd else os.getcwd(),
            log_level=environ.get(LOG_LEVEL_ENV_KEY, DEFAULT_LOG_LEVEL).upper(),
        )


def resolve_identity(environ: Mapping[str, str]) -> str:
    """Return the current username, or the placeholder when it is not set."""
    return environ.get(USER_ENV_KEY) or DEFAULT_IDENTITY


def load_env() -> None:
    """Load a .env file from the current directory without overriding set variables."""
    load_dotenv(override=False)


def configure_logging(level: str) -> None:
    """Send diagnostic log records to stderr through rich."""
    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
