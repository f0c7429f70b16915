"""
ACode Virtual File System Module

Provides the in-memory workspace tree:
- Node records with parent links
- Node store enforcing the tree invariants
- Path resolution with optional folder creation
- Merge of generated file batches
- Language tags and file templates
"""

from .node import Node, NodeKind, ROOT_ID
from .languages import extension_of, language_for, template_for
from .store import NodeStore
from .path_resolver import PathResolver
from .merge import GeneratedFile, MergeEngine, MergeOutcome, MergeReport, MergeStep

__all__ = [
    # Node
    'Node',
    'NodeKind',
    'ROOT_ID',
    # Languages
    'extension_of',
    'language_for',
    'template_for',
    # Store
    'NodeStore',
    # Path Resolver
    'PathResolver',
    # Merge
    'GeneratedFile',
    'MergeEngine',
    'MergeOutcome',
    'MergeReport',
    'MergeStep',
]
