"""
Command Parser Module

Parses console lines into a verb and its arguments.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, List


@dataclass
class ParsedCommand:
    """A parsed console line."""
    command: str
    args: List[str] = field(default_factory=list)
    raw: str = ''

    @property
    def first_arg(self) -> Optional[str]:
        return self.args[0] if self.args else None


class CommandParser:
    """
    Parses console command lines.

    Lines are split on whitespace; there are no quotes, pipes or flags.
    The verb is lower-cased, arguments are kept verbatim.

    Example:
        >>> parser = CommandParser()
        >>> cmd = parser.parse("MKDIR src/components")
        >>> cmd.command, cmd.args
        ('mkdir', ['src/components'])
    """

    def __init__(self, history_size: int = 1000):
        self._history: List[str] = []
        self._history_size = history_size

    def parse(self, line: str) -> Optional[ParsedCommand]:
        """
        Parse a command line.

        Args:
            line: Command line string

        Returns:
            ParsedCommand or None if the line is blank
        """
        line = line.strip()
        if not line:
            return None

        if self._history_size:
            self._history.append(line)
            if len(self._history) > self._history_size:
                self._history = self._history[-self._history_size:]

        tokens = line.split()
        return ParsedCommand(command=tokens[0].lower(), args=tokens[1:], raw=line)

    def get_history(self) -> List[str]:
        """Get command history."""
        return list(self._history)

    def clear_history(self) -> None:
        """Clear command history."""
        self._history.clear()
