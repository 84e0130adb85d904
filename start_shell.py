#!/usr/bin/env python3
"""
Start the dsh interactive shell.
Run with: dsh [DIRECTORY]   or   python3 -m start_shell [DIRECTORY]
"""

import os
import sys

from shell import Prompter, ShellConfig, StreamLineReader
from shell.config import configure_logging, load_env


def main() -> None:
    """Start the interactive shell, running commands in the given directory."""
    base_dir = sys.argv[1] if len(sys.argv) > 1 else None
    if base_dir is not None and not os.path.isdir(base_dir):
        print(f"Error: Directory does not exist: {base_dir}")
        sys.exit(1)

    load_env()
    config = ShellConfig.from_env(cwd=base_dir)
    configure_logging(config.log_level)

    session = None if sys.stdin.isatty() else StreamLineReader()
    prompter = Prompter(config, session=session)
    prompter.run_interactive_session()


if __name__ == "__main__":
    main()
