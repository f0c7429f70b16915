"""
ACode Exception Hierarchy

All workspace failures derive from WorkspaceException and all
configuration failures from ConfigException.

Architecture:
    WorkspaceException (Base, 4000)
    ├── NodeNotFoundError      (4001)
    ├── DuplicateNameError     (4002)
    ├── ProtectedRootError     (4003)
    ├── InvalidNameError       (4004)
    └── NotAFolderError        (4005)
    ConfigException (Base, 1000)
    ├── ConfigLoadError        (1001)
    └── ConfigValidationError  (1002)
"""

from .workspace_exceptions import (
    WorkspaceException,
    NodeNotFoundError,
    DuplicateNameError,
    ProtectedRootError,
    InvalidNameError,
    NotAFolderError,
)

from .config_exceptions import (
    ConfigException,
    ConfigLoadError,
    ConfigValidationError,
)

__all__ = [
    # Workspace exceptions
    "WorkspaceException",
    "NodeNotFoundError",
    "DuplicateNameError",
    "ProtectedRootError",
    "InvalidNameError",
    "NotAFolderError",
    # Config exceptions
    "ConfigException",
    "ConfigLoadError",
    "ConfigValidationError",
]
