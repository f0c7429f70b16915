"""
ACode Configuration Loader

Configuration management for the workspace:
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

from acode.exceptions import ConfigLoadError, ConfigValidationError
from acode.logger import LogLevel, get_logger


DEFAULT_PREVIEW_DOCUMENT = (
    '<!DOCTYPE html><html><head><title>Preview</title></head>'
    '<body><div id="root"></div></body></html>'
)


@dataclass
class WorkspaceConfig:
    """Workspace tree settings."""
    root_name: str = "TERMINAL HOME"


@dataclass
class ShellConfig:
    """Command console settings."""
    prompt: str = "user@acode:~$ "
    history_size: int = 1000
    welcome_message: str = (
        "Type 'help' for commands. Try 'mkdir src/components' or 'touch README.md'"
    )


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    log_file: Optional[str] = None
    console_output: bool = False


@dataclass
class PreviewConfig:
    """Preview builder settings."""
    fallback_document: str = DEFAULT_PREVIEW_DOCUMENT


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for an ACode session.
    """
    workspace: WorkspaceConfig = field(default_factory=WorkspaceConfig)
    shell: ShellConfig = field(default_factory=ShellConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    preview: PreviewConfig = field(default_factory=PreviewConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files, validating
    settings, and providing runtime configuration access.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('acode.json')
        >>> print(config.workspace.root_name)
        TERMINAL HOME
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
            ConfigLoadError: If the file cannot be read or parsed
            ConfigValidationError: If a value is invalid
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigLoadError(
                f"Configuration file not found: {config_path}",
                config_path=config_path
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(
                f"Invalid JSON in configuration file: {e}",
                config_path=config_path
            ) from e
        except OSError as e:
            raise ConfigLoadError(
                f"Cannot read configuration file: {e}",
                config_path=config_path
            ) from e

        if not isinstance(data, dict):
            raise ConfigLoadError(
                "Configuration root must be a JSON object",
                config_path=config_path
            )

        config = self._parse_config(data)
        self._validate(config)

        self._config = config
        self._loaded = True
        get_logger('config').info("Configuration loaded", context={'path': config_path})
        return self._config

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        if 'workspace' in data:
            ws_data = data['workspace']
            config.workspace = WorkspaceConfig(
                root_name=ws_data.get('root_name', config.workspace.root_name),
            )

        if 'shell' in data:
            shell_data = data['shell']
            config.shell = ShellConfig(
                prompt=shell_data.get('prompt', config.shell.prompt),
                history_size=shell_data.get('history_size', config.shell.history_size),
                welcome_message=shell_data.get('welcome_message', config.shell.welcome_message),
            )

        if 'logging' in data:
            log_data = data['logging']
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                log_file=log_data.get('log_file', config.logging.log_file),
                console_output=log_data.get('console_output', config.logging.console_output),
            )

        if 'preview' in data:
            preview_data = data['preview']
            config.preview = PreviewConfig(
                fallback_document=preview_data.get(
                    'fallback_document', config.preview.fallback_document
                ),
            )

        return config

    def _validate(self, config: Config) -> None:
        """Check values that would break the workspace at runtime."""
        if not isinstance(config.workspace.root_name, str) or not config.workspace.root_name:
            raise ConfigValidationError(
                "workspace.root_name must be a non-empty string",
                key='workspace.root_name'
            )

        if not isinstance(config.shell.prompt, str):
            raise ConfigValidationError("shell.prompt must be a string", key='shell.prompt')

        history_size = config.shell.history_size
        if isinstance(history_size, bool) or not isinstance(history_size, int) or history_size < 0:
            raise ConfigValidationError(
                "shell.history_size must be a non-negative integer",
                key='shell.history_size'
            )

        try:
            LogLevel.from_name(str(config.logging.level))
        except ValueError as e:
            raise ConfigValidationError(str(e), key='logging.level') from e

        if not isinstance(config.preview.fallback_document, str):
            raise ConfigValidationError(
                "preview.fallback_document must be a string",
                key='preview.fallback_document'
            )

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'workspace.root_name')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Args:
            key: Dot-notation key (e.g., 'shell.prompt')
            value: Value to set

        Note:
            This modifies configuration at runtime but does not
            persist changes to disk.
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        final_key = parts[-1]
        if not hasattr(obj, final_key):
            raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        previous = getattr(obj, final_key)
        setattr(obj, final_key, value)
        try:
            self._validate(self._config)
        except ConfigValidationError:
            setattr(obj, final_key, previous)
            raise

    def reset(self) -> None:
        """Restore the default configuration."""
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
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config
