"""
ACode Console Module

The command console attached to the workspace terminal pane.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional

from .builtins import BuiltinCommands
from .parser import CommandParser, ParsedCommand
from .terminal import TerminalLog
from acode.core.config_loader import Config, get_config
from acode.filesystem import NodeStore
from acode.logger import Logger, get_logger


class Console:
    """
    Workspace command console.

    Provides:
    - Command parsing
    - Built-in commands (help, clear, ls, mkdir, touch)
    - Command history

    There is no working directory: every path is taken from the
    workspace root.

    Example:
        >>> console = Console(NodeStore())
        >>> console.execute("mkdir src/components")
        0
        >>> console.terminal.messages()[-1]
        'Created directory: src/components'
    """

    def __init__(
        self,
        store: NodeStore,
        terminal: Optional[TerminalLog] = None,
        config: Optional[Config] = None
    ):
        self._store = store
        self._terminal = terminal if terminal is not None else TerminalLog()
        self._config = config or get_config()
        self._logger = get_logger('console')
        self._parser = CommandParser(history_size=self._config.shell.history_size)
        self._builtins = BuiltinCommands(self)

    @property
    def store(self) -> NodeStore:
        return self._store

    @property
    def terminal(self) -> TerminalLog:
        return self._terminal

    @property
    def parser(self) -> CommandParser:
        return self._parser

    @property
    def logger(self) -> Logger:
        return self._logger

    @property
    def prompt(self) -> str:
        return self._config.shell.prompt

    def write(self, message: str) -> None:
        self._terminal.info(message)

    def error(self, message: str) -> None:
        self._terminal.error(message)

    def execute(self, line: str) -> int:
        """
        Execute a command line.

        Args:
            line: Command line string

        Returns:
            Exit code (0 success, 1 error, 127 unknown command)
        """
        cmd = self._parser.parse(line)
        if cmd is None:
            return 0
        return self._execute_command(cmd)

    def _execute_command(self, cmd: ParsedCommand) -> int:
        if self._builtins.is_builtin(cmd.command):
            code = self._builtins.execute(cmd.command, cmd.args)
            if code != 0:
                self._logger.debug(
                    "Command failed", context={'command': cmd.raw, 'code': code}
                )
            return code

        self._logger.debug("Unknown command", context={'command': cmd.command})
        self.error(f"command not found: {cmd.command}")
        return 127


def create_console(
    store: Optional[NodeStore] = None,
    config: Optional[Config] = None
) -> Console:
    """
    Create a console over a store, building a fresh store if none is given.

    Args:
        store: Workspace to operate on
        config: Configuration to use instead of the global one

    Returns:
        Console instance
    """
    config = config or get_config()
    return Console(store if store is not None else NodeStore(config), config=config)
