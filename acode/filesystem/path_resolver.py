"""
Path Resolver Module

Translates slash-delimited workspace paths into node ids.

Paths are always relative to the workspace root. Only a single leading
``./`` is stripped; ``..`` and other unusual segments are treated as
literal folder names.

Missing folders created on the way follow the ordinary folder naming
rule, which forbids a dot. A generated path with a dotted directory,
such as ``public/.well-known/a.txt``, therefore cannot be resolved and
the merge reports that entry as skipped.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, List, Tuple, TYPE_CHECKING

from .node import NodeKind, ROOT_ID
from acode.exceptions import WorkspaceException
from acode.logger import get_logger

if TYPE_CHECKING:
    from .store import NodeStore


class PathResolver:
    """
    Resolves and splits workspace paths.

    Example:
        >>> PathResolver.split('./src//components/')
        ['src', 'components']
        >>> folder_id = PathResolver.resolve(store, 'src/components', create_intermediates=True)
    """

    @staticmethod
    def strip_prefix(path: str) -> str:
        """Remove one leading './' from a path."""
        if path.startswith('./'):
            return path[2:]
        return path

    @staticmethod
    def split(path: str) -> List[str]:
        """
        Split a path into its non-empty segments.

        Args:
            path: Path string

        Returns:
            List of segments; empty for '', '.' and './'
        """
        if path in ('', '.', './'):
            return []
        return [segment for segment in PathResolver.strip_prefix(path).split('/') if segment]

    @staticmethod
    def split_parent(path: str) -> Tuple[List[str], str]:
        """
        Split a path into directory segments and a final name.

        Args:
            path: Path string

        Returns:
            Tuple of (directory segments, final name); the name is ''
            when the path has no segments
        """
        segments = PathResolver.split(path)
        if not segments:
            return [], ''
        return segments[:-1], segments[-1]

    @staticmethod
    def resolve(
        store: 'NodeStore',
        path: str,
        create_intermediates: bool = False
    ) -> Optional[str]:
        """
        Resolve a folder path to a node id.

        Each segment must name a folder; files never match. Missing
        folders are created through the store when
        ``create_intermediates`` is set.

        Args:
            store: Node store to walk
            path: Folder path relative to the root
            create_intermediates: Create missing folders on the way

        Returns:
            Id of the folder, or None if the path cannot be resolved
        """
        return PathResolver.resolve_segments(
            store, PathResolver.split(path), create_intermediates
        )

    @staticmethod
    def resolve_segments(
        store: 'NodeStore',
        segments: List[str],
        create_intermediates: bool = False
    ) -> Optional[str]:
        """Resolve already-split folder segments; see :meth:`resolve`."""
        current_id = ROOT_ID

        for segment in segments:
            existing = store.find_child(current_id, segment, kind=NodeKind.FOLDER)
            if existing is not None:
                current_id = existing.id
                continue

            if not create_intermediates:
                return None

            try:
                current_id = store.create_folder(current_id, segment)
            except WorkspaceException as e:
                get_logger('resolver').debug(
                    "Cannot create intermediate folder",
                    context={'path': '/'.join(segments), 'segment': segment, 'error': e.message}
                )
                return None

        return current_id

    @staticmethod
    def lookup(store: 'NodeStore', path: str) -> Optional[str]:
        """
        Find the file or folder at a full path without creating anything.

        Args:
            store: Node store to search
            path: Path relative to the root

        Returns:
            Node id, ROOT_ID for an empty path, or None
        """
        directory, name = PathResolver.split_parent(path)
        if not name:
            return ROOT_ID

        parent_id = PathResolver.resolve_segments(store, directory)
        if parent_id is None:
            return None

        node = store.find_child(parent_id, name)
        return node.id if node is not None else None
