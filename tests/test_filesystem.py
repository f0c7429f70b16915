#!/usr/bin/env python3
"""
ACode Workspace Tests

Node store, path resolution, merging and language tagging.

Author: YSNRFD
Version: 1.0.0
"""

import unittest

from acode.core.config_loader import Config, WorkspaceConfig
from acode.exceptions import (
    DuplicateNameError,
    InvalidNameError,
    NodeNotFoundError,
    NotAFolderError,
    ProtectedRootError,
)
from acode.filesystem import (
    ROOT_ID,
    GeneratedFile,
    MergeEngine,
    MergeOutcome,
    NodeKind,
    NodeStore,
    PathResolver,
    extension_of,
    language_for,
    template_for,
)


class TestLanguages(unittest.TestCase):
    """Test extension and language lookup."""

    def test_extension_of(self):
        """Test extensions are lower-cased and taken after the last dot."""
        self.assertEqual(extension_of('App.TSX'), 'tsx')
        self.assertEqual(extension_of('archive.tar.gz'), 'gz')
        self.assertEqual(extension_of('Makefile'), '')
        self.assertEqual(extension_of('trailing.'), '')

    def test_language_for(self):
        """Test the language table and its default."""
        self.assertEqual(language_for('main.py'), 'python')
        self.assertEqual(language_for('index.ts'), 'typescript')
        self.assertEqual(language_for('Button.tsx'), 'typescript')
        self.assertEqual(language_for('app.js'), 'javascript')
        self.assertEqual(language_for('README.md'), 'markdown')
        self.assertEqual(language_for('data.unknownext'), 'text')
        self.assertEqual(language_for('LICENSE'), 'text')

    def test_template_for(self):
        """Test seed content for known and unknown extensions."""
        self.assertIn('Hello from Python', template_for('main.py'))
        self.assertIn('<!DOCTYPE html>', template_for('index.HTML'))
        self.assertEqual(template_for('notes.txt'), '')


class TestNodeStore(unittest.TestCase):
    """Test the node store and its invariants."""

    def setUp(self):
        self.store = NodeStore(Config())

    def test_initial_root(self):
        """Test a new store holds only the expanded root."""
        root = self.store.root
        self.assertEqual(len(self.store), 1)
        self.assertEqual(root.id, ROOT_ID)
        self.assertEqual(root.name, 'TERMINAL HOME')
        self.assertTrue(root.is_folder)
        self.assertTrue(root.expanded)
        self.assertIsNone(root.parent_id)

    def test_root_name_from_config(self):
        """Test the root takes its name from the configuration."""
        store = NodeStore(Config(workspace=WorkspaceConfig(root_name='PROJECT')))
        self.assertEqual(store.root.name, 'PROJECT')

    def test_create_file(self):
        """Test file creation defaults."""
        file_id = self.store.create_file(None, 'main.py')
        node = self.store.get(file_id)

        self.assertTrue(file_id.startswith('file-'))
        self.assertEqual(node.parent_id, ROOT_ID)
        self.assertEqual(node.language, 'python')
        self.assertEqual(node.content, template_for('main.py'))
        self.assertTrue(node.modified)
        self.assertEqual(self.store.active_id, file_id)

    def test_create_file_in_collapsed_folder(self):
        """Test creating a file opens its parent folder."""
        folder_id = self.store.create_folder(None, 'src')
        self.store.toggle_folder(folder_id)
        self.assertFalse(self.store.get(folder_id).expanded)

        self.store.create_file(folder_id, 'app.js')
        self.assertTrue(self.store.get(folder_id).expanded)

    def test_create_folder(self):
        """Test folder creation."""
        folder_id = self.store.create_folder('', 'src')
        node = self.store.get(folder_id)

        self.assertTrue(folder_id.startswith('folder-'))
        self.assertEqual(node.kind, NodeKind.FOLDER)
        self.assertTrue(node.expanded)
        self.assertIsNone(self.store.active_id)

    def test_ids_are_unique(self):
        """Test ids are never reused, even after deletion."""
        first = self.store.create_file(None, 'a.txt')
        self.store.delete_node(first)
        second = self.store.create_file(None, 'a.txt')
        self.assertNotEqual(first, second)

    def test_sibling_uniqueness(self):
        """Test case-insensitive sibling name clashes are refused."""
        self.store.create_file(None, 'a.txt')

        with self.assertRaises(DuplicateNameError):
            self.store.create_file(None, 'A.TXT')
        with self.assertRaises(DuplicateNameError):
            self.store.create_file(None, 'a.txt')

        self.store.create_folder(None, 'docs')
        with self.assertRaises(DuplicateNameError):
            self.store.create_file(None, 'DOCS')

        self.assertEqual(len(self.store.children(ROOT_ID)), 2)

    def test_same_name_in_different_folders(self):
        """Test uniqueness is per folder."""
        src = self.store.create_folder(None, 'src')
        self.store.create_file(None, 'index.js')
        self.store.create_file(src, 'index.js')
        self.assertEqual(len(self.store.files()), 2)

    def test_invalid_names(self):
        """Test empty names and dotted folder names are refused."""
        with self.assertRaises(InvalidNameError):
            self.store.create_file(None, '')
        with self.assertRaises(InvalidNameError):
            self.store.create_folder(None, '')
        with self.assertRaises(InvalidNameError):
            self.store.create_folder(None, 'v1.2')
        self.assertEqual(len(self.store), 1)

    def test_bad_parent(self):
        """Test creation under a missing parent or a file."""
        file_id = self.store.create_file(None, 'a.txt')

        with self.assertRaises(NodeNotFoundError):
            self.store.create_file('folder-999', 'b.txt')
        with self.assertRaises(NotAFolderError):
            self.store.create_folder(file_id, 'nested')

    def test_rename(self):
        """Test renaming keeps the id."""
        file_id = self.store.create_file(None, 'old.txt')
        self.store.rename_node(file_id, 'new.txt')
        self.assertEqual(self.store.get(file_id).name, 'new.txt')

        # same name is a no-op
        self.store.rename_node(file_id, 'new.txt')
        self.assertEqual(self.store.get(file_id).name, 'new.txt')

    def test_rename_case_only(self):
        """Test a node may change the case of its own name."""
        file_id = self.store.create_file(None, 'readme.md')
        self.store.rename_node(file_id, 'README.md')
        self.assertEqual(self.store.get(file_id).name, 'README.md')

    def test_rename_collision(self):
        """Test create-then-rename onto a sibling's name."""
        self.store.create_file(None, 'a.txt')
        b = self.store.create_file(None, 'b.txt')

        with self.assertRaises(DuplicateNameError):
            self.store.rename_node(b, 'a.txt')
        self.assertEqual(self.store.get(b).name, 'b.txt')

    def test_rename_errors(self):
        """Test renaming the root, unknown ids and empty names."""
        file_id = self.store.create_file(None, 'a.txt')

        with self.assertRaises(ProtectedRootError):
            self.store.rename_node(ROOT_ID, 'HOME')
        with self.assertRaises(NodeNotFoundError):
            self.store.rename_node('file-999', 'x.txt')
        with self.assertRaises(InvalidNameError):
            self.store.rename_node(file_id, '')

    def test_delete_closure(self):
        """Test deleting a folder removes its whole subtree."""
        src = self.store.create_folder(None, 'src')
        components = self.store.create_folder(src, 'components')
        button = self.store.create_file(components, 'Button.tsx')
        keep = self.store.create_file(None, 'README.md')

        removed = self.store.delete_node(src)

        self.assertEqual(set(removed), {src, components, button})
        for node_id in removed:
            self.assertNotIn(node_id, self.store)
        self.assertIn(keep, self.store)
        for node in self.store.nodes():
            if not node.is_root:
                self.assertIn(node.parent_id, self.store)

    def test_delete_deep_tree(self):
        """Test deleting a folder nested far deeper than the recursion limit."""
        path = '/'.join(f'd{i}' for i in range(1200)) + '/leaf.txt'
        MergeEngine(self.store).merge_files([GeneratedFile(path, 'deep')])
        self.assertEqual(len(self.store), 1202)

        top = PathResolver.resolve(self.store, 'd0')
        removed = self.store.delete_node(top)

        self.assertEqual(len(removed), 1201)
        self.assertEqual(len(self.store), 1)

    def test_delete_root_and_unknown(self):
        """Test deleting the root or an unknown id does nothing."""
        self.store.create_file(None, 'a.txt')
        self.assertEqual(self.store.delete_node(ROOT_ID), [])
        self.assertEqual(self.store.delete_node('file-999'), [])
        self.assertEqual(len(self.store), 2)

    def test_active_cleared_on_delete(self):
        """Test the active file is released when it is deleted."""
        src = self.store.create_folder(None, 'src')
        file_id = self.store.create_file(src, 'app.py')
        self.assertEqual(self.store.active_id, file_id)

        self.store.delete_node(src)
        self.assertIsNone(self.store.active_id)
        self.assertIsNone(self.store.active_file)

    def test_set_active_ignores_folders(self):
        """Test only files can become active."""
        folder_id = self.store.create_folder(None, 'src')
        self.store.set_active(folder_id)
        self.assertIsNone(self.store.active_id)

    def test_default_parent(self):
        """Test new items go next to the active file."""
        self.assertEqual(self.store.default_parent_id(), ROOT_ID)
        src = self.store.create_folder(None, 'src')
        self.store.create_file(src, 'app.py')
        self.assertEqual(self.store.default_parent_id(), src)

    def test_toggle_folder(self):
        """Test toggling folders; files and unknown ids are ignored."""
        folder_id = self.store.create_folder(None, 'src')
        file_id = self.store.create_file(None, 'a.txt')

        self.store.toggle_folder(folder_id)
        self.assertFalse(self.store.get(folder_id).expanded)
        self.store.toggle_folder(folder_id)
        self.assertTrue(self.store.get(folder_id).expanded)

        self.store.toggle_folder(file_id)
        self.store.toggle_folder('folder-999')
        self.assertFalse(self.store.get(file_id).expanded)

    def test_update_content(self):
        """Test content updates mark the file modified."""
        file_id = self.store.create_file(None, 'a.txt')
        self.store.set_all_unmodified()

        self.store.update_file_content(file_id, 'hello')
        node = self.store.get(file_id)
        self.assertEqual(node.content, 'hello')
        self.assertTrue(node.modified)

        # no-ops
        self.store.update_file_content(None, 'x')
        self.store.update_file_content(ROOT_ID, 'x')
        self.assertEqual(self.store.root.content, '')

    def test_commit_flags(self):
        """Test clearing the modified flags."""
        self.store.create_file(None, 'a.txt')
        self.assertTrue(self.store.has_uncommitted_changes())

        self.store.set_all_unmodified()
        self.assertFalse(self.store.has_uncommitted_changes())

    def test_reset_workspace(self):
        """Test reset leaves exactly one expanded root."""
        src = self.store.create_folder(None, 'src')
        self.store.create_file(src, 'app.py')

        self.store.reset_workspace()

        self.assertEqual(len(self.store), 1)
        self.assertTrue(self.store.root.expanded)
        self.assertEqual(self.store.root.name, 'TERMINAL HOME')
        self.assertIsNone(self.store.active_id)

    def test_path_of(self):
        """Test path reconstruction from parent links."""
        src = self.store.create_folder(None, 'src')
        app = self.store.create_file(src, 'app.py')

        self.assertEqual(self.store.path_of(app), 'src/app.py')
        self.assertEqual(self.store.path_of(ROOT_ID), '')
        self.assertIsNone(self.store.path_of('file-999'))


class TestPathResolver(unittest.TestCase):
    """Test path splitting and resolution."""

    def setUp(self):
        self.store = NodeStore(Config())

    def test_split(self):
        """Test normalization of paths."""
        self.assertEqual(PathResolver.split(''), [])
        self.assertEqual(PathResolver.split('.'), [])
        self.assertEqual(PathResolver.split('./'), [])
        self.assertEqual(PathResolver.split('./src//components/'), ['src', 'components'])
        self.assertEqual(PathResolver.split('/abs/path'), ['abs', 'path'])
        self.assertEqual(PathResolver.split('../up'), ['..', 'up'])

    def test_split_parent(self):
        """Test splitting off the final name."""
        self.assertEqual(PathResolver.split_parent('src/app.py'), (['src'], 'app.py'))
        self.assertEqual(PathResolver.split_parent('app.py'), ([], 'app.py'))
        self.assertEqual(PathResolver.split_parent('./'), ([], ''))

    def test_resolve_root(self):
        """Test empty paths resolve to the root."""
        for path in ('', '.', './'):
            self.assertEqual(PathResolver.resolve(self.store, path), ROOT_ID)

    def test_resolve_existing(self):
        """Test resolving existing folders."""
        src = self.store.create_folder(None, 'src')
        components = self.store.create_folder(src, 'components')

        self.assertEqual(PathResolver.resolve(self.store, 'src/components'), components)
        self.assertEqual(PathResolver.resolve(self.store, './src'), src)

    def test_resolve_missing(self):
        """Test missing folders are not created by default."""
        self.assertIsNone(PathResolver.resolve(self.store, 'src/components'))
        self.assertEqual(len(self.store), 1)

    def test_resolve_creates_intermediates(self):
        """Test missing folders are created on request."""
        folder_id = PathResolver.resolve(self.store, 'a/b/c', create_intermediates=True)

        self.assertIsNotNone(folder_id)
        self.assertEqual(self.store.path_of(folder_id), 'a/b/c')
        self.assertEqual(len(self.store), 4)

    def test_files_never_match(self):
        """Test a file blocks a folder of the same name."""
        self.store.create_file(None, 'notes')

        self.assertIsNone(PathResolver.resolve(self.store, 'notes'))
        self.assertIsNone(PathResolver.resolve(self.store, 'notes/x', create_intermediates=True))

    def test_exact_match(self):
        """Test segments match folder names exactly."""
        self.store.create_folder(None, 'Src')

        self.assertIsNone(PathResolver.resolve(self.store, 'src'))
        self.assertIsNone(PathResolver.resolve(self.store, 'src', create_intermediates=True))

    def test_dot_dot_is_literal(self):
        """Test '..' is an ordinary folder name."""
        folder_id = PathResolver.resolve(self.store, '../up', create_intermediates=True)

        # '..' contains dots, so it cannot be a folder name
        self.assertIsNone(folder_id)

    def test_lookup(self):
        """Test locating files and folders by full path."""
        src = self.store.create_folder(None, 'src')
        app = self.store.create_file(src, 'app.py')

        self.assertEqual(PathResolver.lookup(self.store, 'src/app.py'), app)
        self.assertEqual(PathResolver.lookup(self.store, 'src'), src)
        self.assertEqual(PathResolver.lookup(self.store, ''), ROOT_ID)
        self.assertIsNone(PathResolver.lookup(self.store, 'src/missing.py'))
        self.assertIsNone(PathResolver.lookup(self.store, 'lib/app.py'))


class TestMergeEngine(unittest.TestCase):
    """Test merging generated files."""

    def setUp(self):
        self.store = NodeStore(Config())
        self.engine = MergeEngine(self.store)

    def test_path_creation(self):
        """Test folders along a generated path are created."""
        report = self.engine.merge_files([GeneratedFile('src/components/Button.tsx', 'export {}')])

        self.assertEqual(report.created, ['src/components/Button.tsx'])
        names = sorted(node.name for node in self.store.nodes() if not node.is_root)
        self.assertEqual(names, ['Button.tsx', 'components', 'src'])

        button_id = PathResolver.lookup(self.store, 'src/components/Button.tsx')
        button = self.store.get(button_id)
        self.assertEqual(button.content, 'export {}')
        self.assertEqual(button.language, 'typescript')
        self.assertTrue(button.modified)

    def test_idempotent_update(self):
        """Test merging the same path twice updates in place."""
        self.engine.merge_files([GeneratedFile('src/app.py', 'v1')])
        first_id = PathResolver.lookup(self.store, 'src/app.py')
        count = len(self.store)

        report = self.engine.merge_files([GeneratedFile('./src/app.py', 'v2')])

        self.assertEqual(report.updated, ['./src/app.py'])
        self.assertEqual(len(self.store), count)
        self.assertEqual(PathResolver.lookup(self.store, 'src/app.py'), first_id)
        self.assertEqual(self.store.get(first_id).content, 'v2')

    def test_update_keeps_active(self):
        """Test an updated file stays bound to the editor."""
        file_id = self.store.create_file(None, 'index.html')
        self.store.set_all_unmodified()

        self.engine.merge_files([GeneratedFile('index.html', '<p>new</p>')])

        self.assertEqual(self.store.active_id, file_id)
        self.assertEqual(self.store.active_file.content, '<p>new</p>')
        self.assertTrue(self.store.active_file.modified)

    def test_language(self):
        """Test declared languages win over the name's tag."""
        self.engine.merge_files([
            GeneratedFile('a.py', ''),
            GeneratedFile('b.cfg', ''),
            GeneratedFile('c.txt', '', language='markdown'),
        ])
        by_name = {node.name: node.language for node in self.store.files()}
        self.assertEqual(by_name, {'a.py': 'python', 'b.cfg': 'text', 'c.txt': 'markdown'})

    def test_no_templates_or_activation(self):
        """Test merge creation leaves content and active file alone."""
        self.engine.merge_files([GeneratedFile('main.py', '')])

        self.assertEqual(self.store.files()[0].content, '')
        self.assertIsNone(self.store.active_id)

    def test_skips(self):
        """Test unusable entries are skipped without stopping the batch."""
        self.store.create_file(None, 'lib')
        self.store.create_file(None, 'readme.md')

        report = self.engine.merge_files([
            GeneratedFile('lib/util.py', 'x'),
            GeneratedFile('README.md', 'y'),
            GeneratedFile('./', 'z'),
            GeneratedFile('ok.py', 'fine'),
        ])

        self.assertEqual(report.skipped, ['lib/util.py', 'README.md', './'])
        self.assertEqual(report.created, ['ok.py'])
        self.assertEqual(report.total, 4)

    def test_dotted_directory_skipped(self):
        """Test a dotted directory segment cannot be created by a merge."""
        steps = list(self.engine.iter_merge([
            GeneratedFile('public/.well-known/a.txt', 'x'),
            GeneratedFile('.env', 'KEY=1'),
        ]))

        self.assertEqual(steps[0].outcome, MergeOutcome.SKIPPED)
        self.assertEqual(steps[0].reason, 'cannot resolve parent folder')
        self.assertIsNotNone(PathResolver.resolve(self.store, 'public'))
        self.assertIsNone(PathResolver.lookup(self.store, 'public/.well-known'))
        self.assertEqual(steps[1].outcome, MergeOutcome.CREATED)

    def test_iter_merge(self):
        """Test progress is reported once per entry, in order."""
        steps = list(self.engine.iter_merge([
            GeneratedFile('a.js', '1'),
            GeneratedFile('a.js', '2'),
        ]))

        self.assertEqual([step.index for step in steps], [0, 1])
        self.assertEqual(
            [step.outcome for step in steps],
            [MergeOutcome.CREATED, MergeOutcome.UPDATED]
        )
        self.assertEqual(steps[0].node_id, steps[1].node_id)

    def test_empty_batch(self):
        """Test an empty batch changes nothing."""
        report = self.engine.merge_files([])
        self.assertEqual(report.total, 0)
        self.assertEqual(len(self.store), 1)

    def test_from_dict(self):
        """Test building generated files from payload objects."""
        entry = GeneratedFile.from_dict({'path': 'a.go', 'content': 'package main'})
        self.assertEqual(entry.path, 'a.go')
        self.assertIsNone(entry.language)


if __name__ == '__main__':
    unittest.main()
