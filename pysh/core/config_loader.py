"""
pysh Configuration Loader

Configuration management for the shell:
- JSON configuration file loading
- Configuration validation
- Default value handling
- Runtime configuration updates

Author: YSNRFD
Version: 1.0.0
"""

import json
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from pysh.exceptions import ConfigError
from pysh.logger import LogLevel


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""
    pass


@dataclass
class ShellConfig:
    """Read loop settings."""
    prompt: str = "$ "


@dataclass
class SearchConfig:
    """Executable search path settings."""
    path_variable: str = "PATH"
    separator: str = ":"


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    use_colors: bool = True


@dataclass
class Config:
    """
    Main configuration container.

    Every section has defaults, so an empty file (or no file) is valid.
    """
    shell: ShellConfig = field(default_factory=ShellConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('config.json')
        >>> print(config.shell.prompt)
        $
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigError: If the file cannot be read or parsed
            ConfigValidationError: If a value is out of range
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(
                f"Configuration file not found: {config_path}",
                path=config_path
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file: {e}",
                path=config_path
            ) from e
        except OSError as e:
            raise ConfigError(
                f"Cannot read configuration file: {e}",
                path=config_path
            ) from e

        if not isinstance(data, dict):
            raise ConfigValidationError(
                "Configuration root must be a JSON object",
                path=config_path
            )

        config = self._parse_config(data)
        self._validate(config)

        self._config = config
        self._loaded = True
        return self._config

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        if 'shell' in data:
            shell_data = self._section(data, 'shell')
            config.shell = ShellConfig(
                prompt=shell_data.get('prompt', config.shell.prompt),
            )

        if 'search' in data:
            search_data = self._section(data, 'search')
            config.search = SearchConfig(
                path_variable=search_data.get('path_variable', config.search.path_variable),
                separator=search_data.get('separator', config.search.separator),
            )

        if 'logging' in data:
            log_data = self._section(data, 'logging')
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                log_file=log_data.get('log_file', config.logging.log_file),
                use_colors=log_data.get('use_colors', config.logging.use_colors),
            )

        return config

    @staticmethod
    def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
        section = data[name]
        if not isinstance(section, dict):
            raise ConfigValidationError(f"'{name}' section must be a JSON object")
        return section

    @staticmethod
    def _validate(config: Config) -> None:
        if not isinstance(config.shell.prompt, str):
            raise ConfigValidationError("shell.prompt must be a string")
        for key in ('path_variable', 'separator'):
            value = getattr(config.search, key)
            if not isinstance(value, str) or not value:
                raise ConfigValidationError(f"search.{key} must be a non-empty string")
        log_file = config.logging.log_file
        if log_file is not None and not isinstance(log_file, str):
            raise ConfigValidationError("logging.log_file must be a string")
        if not isinstance(config.logging.use_colors, bool):
            raise ConfigValidationError("logging.use_colors must be true or false")
        try:
            LogLevel.from_name(config.logging.level)
        except (KeyError, AttributeError):
            raise ConfigValidationError(
                f"Unknown log level: {config.logging.level!r}"
            ) from None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if not self._loaded:
            return Config()
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'shell.prompt')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self.config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Changes are not persisted to disk.
        """
        if not self._loaded:
            self._config = Config()
            self._loaded = True

        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}")

        final_key = parts[-1]
        if hasattr(obj, final_key):
            setattr(obj, final_key, value)
        else:
            raise ConfigValidationError(f"Invalid configuration key: {key}")

    def reset(self) -> None:
        """Drop any loaded configuration and go back to defaults."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            return obj

        return dataclass_to_dict(self.config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    loader = ConfigLoader()
    return loader.config
