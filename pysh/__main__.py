#!/usr/bin/env python3
"""
pysh - entry point

Startup sequence:
1. Load configuration
2. Initialize logging
3. Run the shell (interactive, or one line with -c)

Usage:
    python -m pysh
    python -m pysh -c "echo hello > out.txt"

Author: YSNRFD
Version: 1.0.0
"""

import os
import sys
from pathlib import Path
from typing import Optional, List

from pysh.core.config_loader import ConfigLoader, get_config
from pysh.exceptions import ConfigError
from pysh.logger import Logger, LogLevel, get_logger
from pysh.shell.shell import Shell


CONFIG_ENV_VAR = "PYSH_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/pysh/config.json")

USAGE = "usage: pysh [-c command]"


def find_config_path() -> Optional[str]:
    """
    Locate the configuration file.

    ``$PYSH_CONFIG`` wins; otherwise the per-user file is used if present.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        return explicit

    default = DEFAULT_CONFIG_PATH.expanduser()
    if default.exists():
        return str(default)
    return None


def load_config(config_path: Optional[str]) -> Optional[ConfigError]:
    """Load configuration, keeping defaults on failure. Returns the failure."""
    if config_path is None:
        return None
    try:
        ConfigLoader().load(config_path)
    except ConfigError as e:
        return e
    return None


def init_logging() -> None:
    """Initialize the logging system from the loaded configuration."""
    config = get_config()
    Logger.initialize(
        level=LogLevel.from_name(config.logging.level),
        log_file=config.logging.log_file,
        use_colors=config.logging.use_colors,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for pysh.

    Args:
        argv: Command line arguments, without the program name

    Returns:
        Exit status for the process
    """
    if argv is None:
        argv = sys.argv[1:]

    if argv and (argv[0] != '-c' or len(argv) != 2):
        print(USAGE, file=sys.stderr)
        return 2

    config_error = load_config(find_config_path())
    init_logging()

    logger = get_logger('config')
    if config_error is not None:
        logger.warning(
            f"Using default configuration: {config_error}",
            context=config_error.context
        )

    shell = Shell(get_config())

    try:
        if argv:
            return shell.execute_line(argv[1])
        return shell.run()
    finally:
        Logger.shutdown()


if __name__ == '__main__':
    sys.exit(main())
