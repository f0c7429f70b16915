"""
ACode IDE Session

The session ties the pieces of a workspace together:
- Node store and merge engine
- Command console and terminal log
- Code generator (optional)
- Preview builder
- Commit simulation

Every user-level action reports to the terminal log the way the IDE
shows it in its terminal pane.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Iterable, Iterator, Optional, List

from acode.core.config_loader import Config, get_config
from acode.exceptions import WorkspaceException
from acode.filesystem import GeneratedFile, MergeEngine, MergeOutcome, MergeReport, MergeStep, NodeStore
from acode.generation import CodeGenerator, FileContext, GenerationResult, failed_generation
from acode.logger import get_logger
from acode.preview import build_preview
from acode.shell import Console, TerminalLog


class IDESession:
    """
    One open workspace with its console.

    Example:
        >>> session = IDESession()
        >>> file_id = session.create_file('index.html')
        >>> session.git_status
        'modified'
        >>> session.commit('initial')
        >>> session.git_status
        'clean'
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        generator: Optional[CodeGenerator] = None
    ):
        self._config = config or get_config()
        self._logger = get_logger('session')
        self._store = NodeStore(self._config)
        self._merge = MergeEngine(self._store)
        self._terminal = TerminalLog()
        self._console = Console(self._store, self._terminal, self._config)
        self._generator = generator
        self._preview: Optional[str] = None

    @property
    def store(self) -> NodeStore:
        return self._store

    @property
    def terminal(self) -> TerminalLog:
        return self._terminal

    @property
    def console(self) -> Console:
        return self._console

    @property
    def generator(self) -> Optional[CodeGenerator]:
        return self._generator

    @generator.setter
    def generator(self, value: Optional[CodeGenerator]) -> None:
        self._generator = value

    @property
    def preview(self) -> Optional[str]:
        """The last document built by ``run_preview``."""
        return self._preview

    @property
    def git_status(self) -> str:
        return 'modified' if self._store.has_uncommitted_changes() else 'clean'

    # Explorer actions

    def create_file(self, name: str, parent_id: Optional[str] = None) -> Optional[str]:
        """
        Create a file from the explorer.

        Args:
            name: File name
            parent_id: Target folder; defaults to the active file's folder

        Returns:
            The new id, or None if the store refused it
        """
        target = parent_id or self._store.default_parent_id()
        try:
            node_id = self._store.create_file(target, name)
        except WorkspaceException as e:
            self._logger.debug("Create file refused", context={'name': name, 'error': e.message})
            self._terminal.error(f'Failed to create file "{name}". Check duplicates.')
            return None

        self._terminal.success(f"Created file: {name}")
        return node_id

    def create_folder(self, name: str, parent_id: Optional[str] = None) -> Optional[str]:
        """Create a folder from the explorer; see ``create_file``."""
        target = parent_id or self._store.default_parent_id()
        try:
            node_id = self._store.create_folder(target, name)
        except WorkspaceException as e:
            self._logger.debug("Create folder refused", context={'name': name, 'error': e.message})
            self._terminal.error(f'Failed to create folder "{name}". Check duplicates.')
            return None

        self._terminal.success(f"Created folder: {name}")
        return node_id

    def rename(self, node_id: str, name: str) -> bool:
        try:
            self._store.rename_node(node_id, name)
        except WorkspaceException as e:
            self._logger.debug("Rename refused", context={'id': node_id, 'error': e.message})
            self._terminal.error(f'Failed to rename to "{name}".')
            return False

        self._terminal.success(f"Renamed to: {name}")
        return True

    def delete(self, node_id: str) -> List[str]:
        removed = self._store.delete_node(node_id)
        if removed:
            self._terminal.info("Item deleted.")
        return removed

    def open_file(self, node_id: str) -> None:
        self._store.set_active(node_id)

    def toggle_folder(self, node_id: str) -> None:
        self._store.toggle_folder(node_id)

    def edit_active(self, content: str) -> None:
        """Replace the content of the file open in the editor."""
        self._store.update_file_content(self._store.active_id, content)

    def reset_workspace(self) -> None:
        self._store.reset_workspace()
        self._logger.notice("Workspace reset")
        self._terminal.info("Workspace reset.")

    # Generated code

    def iter_apply_generated(self, files: Iterable[GeneratedFile]) -> Iterator[MergeStep]:
        """
        Merge a generated batch, yielding after every file.

        Skipped entries are reported to the terminal as they happen.
        """
        self._terminal.info("AI updating workspace...")

        for step in self._merge.iter_merge(files):
            if step.outcome == MergeOutcome.SKIPPED:
                self._logger.warning(
                    "Skipped generated file",
                    context={'path': step.path, 'reason': step.reason}
                )
                self._terminal.error(f"Skipped {step.path}: {step.reason}")
            yield step

        self._terminal.success("AI build complete.")

    def apply_generated(self, files: Iterable[GeneratedFile]) -> MergeReport:
        """
        Merge a generated batch into the workspace.

        Args:
            files: Generated files, applied in order

        Returns:
            MergeReport for the batch
        """
        report = MergeReport()
        for step in self.iter_apply_generated(files):
            report.record(step)
        return report

    def generate(self, prompt: str) -> Optional[MergeReport]:
        """
        Ask the generator for code and merge the result.

        The active file, if any, is sent as context. A result with no
        files is reported as an error and leaves the workspace alone.

        Args:
            prompt: What to build or change

        Returns:
            MergeReport, or None when nothing was applied
        """
        if self._generator is None:
            self._terminal.error("No code generator configured.")
            return None

        active = self._store.active_file
        context = FileContext(active.name, active.content) if active is not None else None

        try:
            result: GenerationResult = self._generator.generate_project(prompt, context)
        except Exception as e:
            self._logger.exception("Code generation failed", exc=e)
            result = failed_generation(e)

        if result.is_empty:
            self._logger.error("Generation returned no files", context={'prompt': prompt})
            self._terminal.error(result.description or "Generation returned no files.")
            return None

        if result.description:
            self._terminal.info(result.description)
        return self.apply_generated(result.files)

    # Build, run and version control

    def run_preview(self) -> str:
        """Build the preview document and remember it."""
        self._terminal.info("Building project...")
        self._preview = build_preview(self._store, self._config.preview.fallback_document)
        self._terminal.success("Build successful. Launching preview.")
        return self._preview

    def commit(self, message: str) -> None:
        self._store.set_all_unmodified()
        self._logger.notice("Workspace committed", context={'message': message})
        self._terminal.success(f'Committed: "{message}"')

    def run_command(self, line: str) -> int:
        """Run a console command line; see ``Console.execute``."""
        return self._console.execute(line)
