"""
Node Store Module

The in-memory collection of workspace nodes and every operation that
mutates it. The store enforces the tree invariants:
- the ``root`` folder always exists and is the only parentless node
- sibling names are unique, compared case-insensitively
- every non-root node hangs off an existing folder
- deleting a folder removes its whole subtree

Author: YSNRFD
Version: 1.0.0
"""

import itertools
from typing import Iterator, Optional, List

from .languages import language_for, template_for
from .node import Node, NodeKind, ROOT_ID
from acode.core.config_loader import Config, get_config
from acode.exceptions import (
    DuplicateNameError,
    InvalidNameError,
    NodeNotFoundError,
    NotAFolderError,
    ProtectedRootError,
)
from acode.logger import get_logger


class NodeStore:
    """
    Flat, id-keyed store of files and folders.

    Children are never cached: they are found by filtering on
    ``parent_id`` each time they are asked for.

    Example:
        >>> store = NodeStore()
        >>> src = store.create_folder(None, 'src')
        >>> main = store.create_file(src, 'main.py')
        >>> store.path_of(main)
        'src/main.py'
    """

    def __init__(self, config: Optional[Config] = None):
        self._config = config or get_config()
        self._logger = get_logger('store')
        self._nodes: dict[str, Node] = {}
        self._ids = itertools.count(1)
        self._active_id: Optional[str] = None
        self.ensure_root()

    def ensure_root(self) -> Node:
        """Recreate the root folder if it is missing."""
        root = self._nodes.get(ROOT_ID)
        if root is None:
            root = Node(
                id=ROOT_ID,
                name=self._config.workspace.root_name,
                kind=NodeKind.FOLDER,
                parent_id=None,
                expanded=True,
            )
            self._nodes[ROOT_ID] = root
        return root

    # Internal helpers

    def _generate_id(self, kind: NodeKind) -> str:
        """Generate a new node id; ids are never reused."""
        prefix = 'file' if kind == NodeKind.FILE else 'folder'
        return f"{prefix}-{next(self._ids)}"

    def _target_parent(self, parent_id: Optional[str]) -> Node:
        """Resolve a parent id (empty meaning root) to an existing folder."""
        target_id = parent_id or ROOT_ID
        if target_id == ROOT_ID:
            return self.ensure_root()

        parent = self._nodes.get(target_id)
        if parent is None:
            raise NodeNotFoundError(target_id)
        if not parent.is_folder:
            raise NotAFolderError(target_id)
        return parent

    def _check_unique(self, parent_id: str, name: str, exclude_id: Optional[str] = None) -> None:
        for sibling in self.children(parent_id):
            if sibling.id != exclude_id and sibling.matches_name(name):
                raise DuplicateNameError(name, parent_id=parent_id)

    def insert_file(
        self,
        parent_id: Optional[str],
        name: str,
        content: str = '',
        language: Optional[str] = None
    ) -> Node:
        """
        Add a file node without templates or activation.

        This is the creation path used for generated files; the usual
        name checks still apply.

        Args:
            parent_id: Folder to create the file in (empty for root)
            name: File name
            content: Initial content
            language: Language tag, derived from the name when omitted

        Returns:
            The new file node

        Raises:
            InvalidNameError: If the name is empty
            NodeNotFoundError: If the parent does not exist
            NotAFolderError: If the parent is a file
            DuplicateNameError: If a sibling already uses the name
        """
        if not name:
            raise InvalidNameError(name, reason="name must not be empty")

        parent = self._target_parent(parent_id)
        self._check_unique(parent.id, name)

        node = Node(
            id=self._generate_id(NodeKind.FILE),
            name=name,
            kind=NodeKind.FILE,
            parent_id=parent.id,
            content=content,
            language=language or language_for(name),
            modified=True,
        )
        parent.expanded = True
        self._nodes[node.id] = node

        self._logger.debug(
            "Created file",
            context={'id': node.id, 'name': name, 'parent': parent.id}
        )
        return node

    # Queries

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def root(self) -> Node:
        return self.ensure_root()

    def get(self, node_id: Optional[str]) -> Optional[Node]:
        """Get a node by id, or None."""
        if not node_id:
            return None
        return self._nodes.get(node_id)

    def nodes(self) -> List[Node]:
        """All nodes in creation order."""
        return list(self._nodes.values())

    def files(self) -> List[Node]:
        return [node for node in self._nodes.values() if node.is_file]

    def children(self, parent_id: Optional[str]) -> List[Node]:
        """Immediate children of a folder, in creation order."""
        target_id = parent_id or ROOT_ID
        return [node for node in self._nodes.values() if node.parent_id == target_id]

    def find_child(
        self,
        parent_id: Optional[str],
        name: str,
        kind: Optional[NodeKind] = None
    ) -> Optional[Node]:
        """
        Find a child by exact name.

        Args:
            parent_id: Folder to search (empty for root)
            name: Exact, case-sensitive name
            kind: Restrict the match to files or folders

        Returns:
            The matching node or None
        """
        for node in self.children(parent_id):
            if node.name == name and (kind is None or node.kind == kind):
                return node
        return None

    def has_sibling_named(self, parent_id: Optional[str], name: str) -> bool:
        """Check whether ``name`` is taken under ``parent_id``, ignoring case."""
        return any(node.matches_name(name) for node in self.children(parent_id))

    def iter_descendants(self, node_id: str) -> Iterator[Node]:
        """Yield every descendant of a node, each after its parent."""
        stack = [node_id]
        while stack:
            for child in self.children(stack.pop()):
                yield child
                stack.append(child.id)

    def path_of(self, node_id: str) -> Optional[str]:
        """
        Get the slash-delimited path of a node relative to the root.

        Returns:
            '' for the root, None for unknown ids
        """
        node = self._nodes.get(node_id)
        if node is None:
            return None

        parts: List[str] = []
        while node is not None and not node.is_root:
            parts.append(node.name)
            node = self._nodes.get(node.parent_id) if node.parent_id else None
        return '/'.join(reversed(parts))

    def has_uncommitted_changes(self) -> bool:
        return any(node.modified for node in self._nodes.values() if node.is_file)

    # Active node

    @property
    def active_id(self) -> Optional[str]:
        return self._active_id

    @property
    def active_file(self) -> Optional[Node]:
        return self.get(self._active_id)

    def set_active(self, node_id: Optional[str]) -> None:
        """
        Bind the editor to a file.

        Passing None clears the binding; folders and unknown ids are
        ignored so the active reference always points at a file.
        """
        if node_id is None:
            self._active_id = None
            return
        node = self._nodes.get(node_id)
        if node is not None and node.is_file:
            self._active_id = node_id

    def default_parent_id(self) -> str:
        """Folder a create action targets when no parent is given."""
        active = self.active_file
        if active is None:
            return ROOT_ID
        return active.parent_id or ROOT_ID

    # Mutations

    def create_file(self, parent_id: Optional[str], name: str) -> str:
        """
        Create a new file seeded from its extension's template.

        The new file is marked modified, its parent folder is opened and
        it becomes the active file.

        Args:
            parent_id: Folder to create the file in (empty for root)
            name: File name including extension

        Returns:
            Id of the new file

        Raises:
            InvalidNameError: If the name is empty
            NodeNotFoundError: If the parent does not exist
            NotAFolderError: If the parent is a file
            DuplicateNameError: If a sibling already uses the name
        """
        node = self.insert_file(parent_id, name, content=template_for(name))
        self._active_id = node.id
        return node.id

    def create_folder(self, parent_id: Optional[str], name: str) -> str:
        """
        Create a new, expanded folder.

        Args:
            parent_id: Folder to create the folder in (empty for root)
            name: Folder name; may not contain '.'

        Returns:
            Id of the new folder

        Raises:
            InvalidNameError: If the name is empty or contains '.'
            NodeNotFoundError: If the parent does not exist
            NotAFolderError: If the parent is a file
            DuplicateNameError: If a sibling already uses the name
        """
        if not name:
            raise InvalidNameError(name, reason="name must not be empty")
        if '.' in name:
            raise InvalidNameError(name, reason="folder names may not contain '.'")

        parent = self._target_parent(parent_id)
        self._check_unique(parent.id, name)

        node = Node(
            id=self._generate_id(NodeKind.FOLDER),
            name=name,
            kind=NodeKind.FOLDER,
            parent_id=parent.id,
            expanded=True,
        )
        parent.expanded = True
        self._nodes[node.id] = node

        self._logger.debug(
            "Created folder",
            context={'id': node.id, 'name': name, 'parent': parent.id}
        )
        return node.id

    def rename_node(self, node_id: str, new_name: str) -> None:
        """
        Rename a file or folder.

        Renaming to the current name is a no-op.

        Raises:
            ProtectedRootError: If the node is the root
            NodeNotFoundError: If the node does not exist
            InvalidNameError: If the new name is empty
            DuplicateNameError: If a sibling already uses the name
        """
        if node_id == ROOT_ID:
            raise ProtectedRootError("rename")

        node = self._nodes.get(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)

        if new_name == node.name:
            return
        if not new_name:
            raise InvalidNameError(new_name, reason="name must not be empty")

        self._check_unique(node.parent_id or ROOT_ID, new_name, exclude_id=node.id)

        old_name = node.name
        node.name = new_name
        self._logger.debug(
            "Renamed node",
            context={'id': node_id, 'from': old_name, 'to': new_name}
        )

    def delete_node(self, node_id: str) -> List[str]:
        """
        Delete a node together with everything below it.

        The root and unknown ids are ignored. If the active file is
        removed, the active reference is cleared.

        Returns:
            Ids of every removed node (empty when nothing was removed)
        """
        if node_id == ROOT_ID or node_id not in self._nodes:
            return []

        removed = [node_id] + [node.id for node in self.iter_descendants(node_id)]
        for removed_id in removed:
            del self._nodes[removed_id]

        if self._active_id in removed:
            self._active_id = None

        self._logger.debug(
            "Deleted node",
            context={'id': node_id, 'removed': len(removed)}
        )
        return removed

    def toggle_folder(self, node_id: str) -> None:
        """Flip a folder between open and closed."""
        node = self._nodes.get(node_id)
        if node is not None and node.is_folder:
            node.expanded = not node.expanded

    def update_file_content(
        self,
        node_id: Optional[str],
        content: str,
        language: Optional[str] = None
    ) -> None:
        """Replace a file's content (and optionally its language) and mark it modified."""
        node = self.get(node_id)
        if node is None or not node.is_file:
            return
        node.content = content
        if language:
            node.language = language
        node.modified = True

    def set_all_unmodified(self) -> None:
        """Clear the modified flag on every file (commit simulation)."""
        for node in self._nodes.values():
            node.modified = False

    def reset_workspace(self) -> None:
        """Discard every node and start over with a bare root."""
        self._nodes.clear()
        self._active_id = None
        self.ensure_root()
        self._logger.info("Workspace reset")
