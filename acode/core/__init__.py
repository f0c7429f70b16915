"""
ACode Core Module

Contains configuration management and the IDE session that wires the
workspace, console and generator together. Import the session from
``acode.core.session``.
"""

from .config_loader import (
    Config,
    ConfigLoader,
    LoggingConfig,
    PreviewConfig,
    ShellConfig,
    WorkspaceConfig,
    get_config,
)

__all__ = [
    'Config',
    'ConfigLoader',
    'LoggingConfig',
    'PreviewConfig',
    'ShellConfig',
    'WorkspaceConfig',
    'get_config',
]
