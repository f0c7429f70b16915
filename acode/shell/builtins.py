"""
Console Built-in Commands

Implements the workspace console commands.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Callable, List, Optional, Tuple

from acode.exceptions import WorkspaceException
from acode.filesystem import ROOT_ID, PathResolver


HELP_TEXT = 'Available commands: ls, mkdir <path>, touch <path>, clear, help'


class BuiltinCommands:
    """
    Built-in console commands.

    Every command writes its reply to the console's terminal log and
    returns an exit code.
    """

    def __init__(self, console):
        """
        Initialize built-in commands.

        Args:
            console: The console instance
        """
        self._console = console
        self._commands: dict[str, Callable[[List[str]], int]] = {
            'help': self.cmd_help,
            'clear': self.cmd_clear,
            'ls': self.cmd_ls,
            'mkdir': self.cmd_mkdir,
            'touch': self.cmd_touch,
        }

    def is_builtin(self, name: str) -> bool:
        """Check if a command is built-in."""
        return name in self._commands

    def execute(self, name: str, args: List[str]) -> int:
        """
        Execute a built-in command.

        Args:
            name: Command name
            args: Command arguments

        Returns:
            Exit code
        """
        cmd = self._commands.get(name)
        if cmd is None:
            return 127
        try:
            return cmd(args)
        except WorkspaceException as e:
            self._console.error(f"{name}: {e.message}")
            return 1

    @staticmethod
    def _split_target(param: str) -> Tuple[str, str]:
        """Split a console path into its folder prefix and final name."""
        parts = param.split('/')
        name = parts.pop()
        return '/'.join(parts), name

    # Command implementations

    def cmd_help(self, args: List[str]) -> int:
        """Display help information."""
        self._console.write(HELP_TEXT)
        return 0

    def cmd_clear(self, args: List[str]) -> int:
        """Clear the terminal."""
        self._console.terminal.clear()
        return 0

    def cmd_ls(self, args: List[str]) -> int:
        """List the workspace root."""
        children = self._console.store.children(ROOT_ID)
        if not children:
            self._console.write('(empty directory)')
            return 0

        names = [f"{node.name}/" if node.is_folder else node.name for node in children]
        self._console.write('  '.join(names))
        return 0

    def cmd_mkdir(self, args: List[str]) -> int:
        """Create a folder, creating missing parents on the way."""
        if not args:
            self._console.error('usage: mkdir <path/folder_name>')
            return 1

        param = args[0]
        store = self._console.store
        prefix, name = self._split_target(param)

        parent_id: Optional[str] = ROOT_ID
        if prefix:
            parent_id = PathResolver.resolve(store, prefix, create_intermediates=True)
            if parent_id is None:
                self._console.error(f"Error: Could not resolve path '{prefix}'")
                return 1

        if not name:
            self._console.error('Error: Invalid folder name')
            return 1

        if store.has_sibling_named(parent_id, name):
            self._console.error(f"Error: '{name}' already exists at this path.")
            return 1

        try:
            store.create_folder(parent_id, name)
        except WorkspaceException as e:
            self._console.logger.debug(
                "mkdir refused", context={'path': param, 'error': e.message}
            )
            self._console.error(f"Failed to create directory: {param}")
            return 1

        self._console.write(f"Created directory: {param}")
        return 0

    def cmd_touch(self, args: List[str]) -> int:
        """Create a file inside an existing folder."""
        if not args:
            self._console.error('usage: touch <path/file_name>')
            return 1

        param = args[0]
        store = self._console.store
        prefix, name = self._split_target(param)

        parent_id: Optional[str] = ROOT_ID
        if prefix:
            parent_id = PathResolver.resolve(store, prefix)
            if parent_id is None:
                self._console.error(f"Error: Path '{prefix}' does not exist.")
                return 1

        if not name:
            self._console.error('Error: Invalid file name')
            return 1

        if store.has_sibling_named(parent_id, name):
            self._console.error(f"Error: File '{name}' already exists.")
            return 1

        try:
            store.create_file(parent_id, name)
        except WorkspaceException as e:
            self._console.logger.debug(
                "touch refused", context={'path': param, 'error': e.message}
            )
            self._console.error(f"Failed to create file: {param}")
            return 1

        self._console.write(f"Created file: {param}")
        return 0
