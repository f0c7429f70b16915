"""
ACode Shell Module

Provides the workspace command console:
- Command parsing
- Built-in commands
- Terminal log
"""

from .parser import CommandParser, ParsedCommand
from .terminal import LogType, TerminalEntry, TerminalLog
from .builtins import BuiltinCommands, HELP_TEXT
from .console import Console, create_console

__all__ = [
    'CommandParser',
    'ParsedCommand',
    'LogType',
    'TerminalEntry',
    'TerminalLog',
    'BuiltinCommands',
    'HELP_TEXT',
    'Console',
    'create_console',
]
