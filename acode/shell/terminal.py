"""
Terminal Log Module

The scrollback shown in the IDE's terminal pane. Every console reply and
every application-level status message ends up here as a typed entry.

Author: YSNRFD
Version: 1.0.0
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List


class LogType(Enum):
    """Kind of terminal entry; decides how it is rendered."""
    INFO = 'info'
    ERROR = 'error'
    SUCCESS = 'success'


@dataclass
class TerminalEntry:
    """A single line of terminal output."""
    message: str
    type: LogType = LogType.INFO
    timestamp: float = field(default_factory=time.time)


class TerminalLog:
    """
    Append-only list of terminal entries.

    Example:
        >>> log = TerminalLog()
        >>> log.add_log("Workspace reset.", LogType.INFO)
        >>> log.messages()
        ['Workspace reset.']
    """

    def __init__(self):
        self._entries: List[TerminalEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> List[TerminalEntry]:
        return list(self._entries)

    def add_log(self, message: str, log_type: LogType = LogType.INFO) -> TerminalEntry:
        entry = TerminalEntry(message=message, type=log_type)
        self._entries.append(entry)
        return entry

    def info(self, message: str) -> TerminalEntry:
        return self.add_log(message, LogType.INFO)

    def error(self, message: str) -> TerminalEntry:
        return self.add_log(message, LogType.ERROR)

    def success(self, message: str) -> TerminalEntry:
        return self.add_log(message, LogType.SUCCESS)

    def messages(self, log_type: Optional[LogType] = None) -> List[str]:
        """Messages in order, optionally restricted to one entry type."""
        return [
            entry.message for entry in self._entries
            if log_type is None or entry.type == log_type
        ]

    def since(self, index: int) -> List[TerminalEntry]:
        """Entries added after the first ``index`` ones."""
        return self._entries[index:]

    def clear(self) -> None:
        self._entries.clear()
