"""
Merge Engine Module

Applies batches of generated files to the workspace.

Each entry either updates an existing file in place (keeping its id,
so an open editor stays bound to it) or creates a new file, creating
any missing folders along its path first.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Optional, List, Any

from .languages import language_for
from .node import NodeKind
from .path_resolver import PathResolver
from .store import NodeStore
from acode.exceptions import WorkspaceException
from acode.logger import get_logger


@dataclass(frozen=True)
class GeneratedFile:
    """One file produced by the code generator."""
    path: str
    content: str
    language: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'GeneratedFile':
        return cls(
            path=str(data['path']),
            content=str(data.get('content', '')),
            language=data.get('language') or None,
        )


class MergeOutcome(Enum):
    """What happened to one generated entry."""
    CREATED = 'created'
    UPDATED = 'updated'
    SKIPPED = 'skipped'


@dataclass(frozen=True)
class MergeStep:
    """Progress record yielded after each entry is applied."""
    index: int
    path: str
    outcome: MergeOutcome
    node_id: Optional[str] = None
    reason: Optional[str] = None


@dataclass
class MergeReport:
    """Summary of a whole merge batch."""
    created: List[str] = field(default_factory=list)
    updated: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.created) + len(self.updated) + len(self.skipped)

    def record(self, step: MergeStep) -> None:
        if step.outcome == MergeOutcome.CREATED:
            self.created.append(step.path)
        elif step.outcome == MergeOutcome.UPDATED:
            self.updated.append(step.path)
        else:
            self.skipped.append(step.path)


class MergeEngine:
    """
    Create-or-update merge of generated files into a node store.

    Example:
        >>> engine = MergeEngine(store)
        >>> report = engine.merge_files([GeneratedFile('src/app.py', 'print(1)')])
        >>> report.created
        ['src/app.py']
    """

    def __init__(self, store: NodeStore):
        self._store = store
        self._logger = get_logger('merge')

    @property
    def store(self) -> NodeStore:
        return self._store

    def iter_merge(self, generated: Iterable[GeneratedFile]) -> Iterator[MergeStep]:
        """
        Apply a batch one entry at a time.

        Control returns to the caller after every entry, which lets a UI
        show per-file progress. Entries are applied in order; a failed
        entry is skipped and never stops the batch.

        Args:
            generated: Files to merge

        Yields:
            MergeStep for each entry
        """
        self._store.ensure_root()

        for index, entry in enumerate(generated):
            step = self._merge_one(index, entry)
            self._logger.debug(
                f"Merge entry {step.outcome.value}",
                context={'path': entry.path, 'id': step.node_id}
            )
            yield step

    def merge_files(self, generated: Iterable[GeneratedFile]) -> MergeReport:
        """
        Apply a whole batch and summarize it.

        Args:
            generated: Files to merge

        Returns:
            MergeReport listing created, updated and skipped paths
        """
        report = MergeReport()
        for step in self.iter_merge(generated):
            report.record(step)
        return report

    def _merge_one(self, index: int, entry: GeneratedFile) -> MergeStep:
        directory, name = PathResolver.split_parent(entry.path)
        if not name:
            return MergeStep(index, entry.path, MergeOutcome.SKIPPED, reason="empty path")

        parent_id = PathResolver.resolve_segments(
            self._store, directory, create_intermediates=True
        )
        if parent_id is None:
            return MergeStep(
                index, entry.path, MergeOutcome.SKIPPED,
                reason="cannot resolve parent folder"
            )

        language = entry.language or language_for(name)
        existing = self._store.find_child(parent_id, name, kind=NodeKind.FILE)

        if existing is not None:
            self._store.update_file_content(existing.id, entry.content, language)
            return MergeStep(index, entry.path, MergeOutcome.UPDATED, node_id=existing.id)

        try:
            node = self._store.insert_file(parent_id, name, entry.content, language)
        except WorkspaceException as e:
            return MergeStep(index, entry.path, MergeOutcome.SKIPPED, reason=e.message)

        return MergeStep(index, entry.path, MergeOutcome.CREATED, node_id=node.id)
