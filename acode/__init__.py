"""
ACode - An in-memory code workspace

This package provides the workspace model behind the ACode IDE: a file
tree kept entirely in memory, a small command console, merging of
generated code and a static preview builder, using only the standard
library.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

# Import main components for convenience
from .filesystem import NodeStore, PathResolver, MergeEngine, GeneratedFile
from .shell import Console, create_console
from .core.session import IDESession

__all__ = [
    'NodeStore',
    'PathResolver',
    'MergeEngine',
    'GeneratedFile',
    'Console',
    'create_console',
    'IDESession',
]
