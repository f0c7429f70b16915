"""
Node Module

Implements the node record of the virtual workspace.
A node is either a file or a folder; the tree shape lives entirely in
the ``parent_id`` links held by each node.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


ROOT_ID = 'root'


class NodeKind(Enum):
    """Kinds of workspace nodes."""
    FILE = 'FILE'
    FOLDER = 'FOLDER'


@dataclass
class Node:
    """
    A file or folder in the workspace.

    Attributes:
        id: Opaque identifier, stable for the node's lifetime
        name: Display name including any extension
        kind: FILE or FOLDER
        parent_id: Id of the owning folder, ``None`` only for the root
        content: Full text (files only)
        language: Editor language tag (files only)
        expanded: Whether the folder is shown open (folders only)
        modified: Changed since the last commit (files only)
    """

    id: str
    name: str
    kind: NodeKind
    parent_id: Optional[str] = None
    content: str = ''
    language: str = 'text'
    expanded: bool = False
    modified: bool = False

    @property
    def is_file(self) -> bool:
        return self.kind == NodeKind.FILE

    @property
    def is_folder(self) -> bool:
        return self.kind == NodeKind.FOLDER

    @property
    def is_root(self) -> bool:
        return self.id == ROOT_ID

    def matches_name(self, name: str) -> bool:
        """Case-insensitive name comparison used for sibling uniqueness."""
        return self.name.lower() == name.lower()
