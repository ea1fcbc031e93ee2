"""
pysh Core Module

Core components shared by the shell:
- Configuration Loader
- Process Environment
"""

from .config_loader import (
    ConfigLoader,
    Config,
    ShellConfig,
    SearchConfig,
    LoggingConfig,
    ConfigValidationError,
    get_config,
)
from .environment import Environment

__all__ = [
    # Config
    'ConfigLoader',
    'Config',
    'ShellConfig',
    'SearchConfig',
    'LoggingConfig',
    'ConfigValidationError',
    'get_config',
    # Environment
    'Environment',
]
