"""
Workspace Exceptions

Exceptions related to node store operations: creation, rename and
lookup of files and folders in the virtual workspace.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class WorkspaceException(Exception):
    """
    Base exception for all workspace-related errors.

    Every failure raised by the node store derives from this class, so
    callers that only need to report a problem can catch it once.

    Attributes:
        message: Human-readable error description
        path: Name or path associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.error_code = error_code or 4000
        self.context = context or {}
        if path:
            self.context["path"] = path

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.path:
            base = f"{base} (path={self.path})"
        return base


class NodeNotFoundError(WorkspaceException):
    """
    The referenced node id does not exist.

    Example:
        >>> raise NodeNotFoundError("file-42")
    """

    def __init__(
        self,
        node_id: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Node not found: {node_id}",
            error_code=4001,
            context=context
        )
        self.node_id = node_id


class DuplicateNameError(WorkspaceException):
    """
    A sibling with the same name already exists.

    Names are compared case-insensitively, so ``README.md`` and
    ``readme.md`` cannot live in the same folder.

    Example:
        >>> raise DuplicateNameError("a.txt", parent_id="root")
    """

    def __init__(
        self,
        name: str,
        parent_id: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if parent_id is not None:
            ctx["parent_id"] = parent_id
        super().__init__(
            message=f"Name already exists: {name}",
            path=name,
            error_code=4002,
            context=ctx
        )
        self.name = name
        self.parent_id = parent_id


class ProtectedRootError(WorkspaceException):
    """
    The workspace root may not be renamed or deleted.
    """

    def __init__(
        self,
        operation: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["operation"] = operation
        super().__init__(
            message=f"Cannot {operation} the workspace root",
            error_code=4003,
            context=ctx
        )
        self.operation = operation


class InvalidNameError(WorkspaceException):
    """
    The requested name is not acceptable for the node kind.

    Empty names are rejected for every node; folder names may not
    contain a ``.`` so they can never be mistaken for files.

    Example:
        >>> raise InvalidNameError("v1.2", reason="folder names may not contain '.'")
    """

    def __init__(
        self,
        name: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        message = f"Invalid name: {name!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message=message,
            path=name or None,
            error_code=4004,
            context=ctx
        )
        self.name = name
        self.reason = reason


class NotAFolderError(WorkspaceException):
    """
    A folder was expected but the node is a file.
    """

    def __init__(
        self,
        node_id: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Not a folder: {node_id}",
            error_code=4005,
            context=context
        )
        self.node_id = node_id
