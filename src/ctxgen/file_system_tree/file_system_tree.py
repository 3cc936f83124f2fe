"""File system tree representation filtered by a selection policy.

This module provides the main FileSystemTree class for building a tree of the
entries that survive the selection policy and for rendering it in the two orders
the snapshot needs: directories-first for the tree listing, plain ascending for
the content section.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from ctxgen.file_system_tree.file_system_node import FileSystemNode
from ctxgen.selection.pattern_matcher import relativize
from ctxgen.selection.selection_policy import SelectionPolicy
from ctxgen.types import PathType

logger = logging.getLogger(__name__)

INDENT = "    "
MARKER = "├── "
INACCESSIBLE_PLACEHOLDER = "[inaccessible directory]"


class FileSystemTree:
    """A tree representation of a directory structure filtered by a SelectionPolicy.

    The filesystem is listed exactly once, lazily on first access. Entries for which
    the policy's ``should_ignore`` is true are left out, and ignored directories are
    not descended into. A directory that cannot be listed is kept in the tree and
    marked inaccessible instead of aborting the build.

    Directories are followed through symbolic links like any other directory; no
    cycle detection is done beyond what the operating system reports.

    Attributes:
        root_path (Path): The root directory of the analysis.
        policy (SelectionPolicy): Decides which entries are ignored.

    Example:
        >>> from ctxgen.config import AnalyzerConfig
        >>> tree = FileSystemTree(".", SelectionPolicy(AnalyzerConfig()))  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        ├── src/
            ├── App.java [120 chars]
        ├── pom.xml [800 chars]
    """

    def __init__(self, root_path: PathType, policy: SelectionPolicy) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory. Can be any path-like object.
            policy: Selection policy deciding which entries are ignored.
        """
        self.root_path = Path(root_path)
        self.policy = policy
        self._tree: Optional[FileSystemNode] = None
        self._file_count: int = 0
        self._directory_count: int = 0
        self._inaccessible_count: int = 0

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the filesystem tree, building it on first access.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
        """
        if self._tree is None:
            self._build_tree()
        assert self._tree is not None
        return self._tree

    def _build_tree(self) -> None:
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        self._file_count = 0
        self._directory_count = 0
        self._inaccessible_count = 0

        root = FileSystemNode(self.root_path.resolve().name, is_dir=True)
        self._populate(root, self.root_path)
        self._tree = root

    def _list_children(self, path: Path) -> List[str]:
        """Return the names of the entries in a directory.

        Raises:
            OSError: If the directory cannot be listed.
        """
        return os.listdir(path)

    def _populate(self, node: FileSystemNode, path: Path) -> None:
        """Attach the non-ignored children of ``path`` to ``node``, recursively."""
        try:
            names = sorted(self._list_children(path))
        except OSError as e:
            logger.warning("Could not access directory %s: %s", path, e)
            node.accessible = False
            self._inaccessible_count += 1
            return

        for name in names:
            child_path = path / name
            relative_path = relativize(self.root_path, child_path)
            if self.policy.should_ignore(relative_path):
                continue

            if _is_dir(child_path):
                self._directory_count += 1
                child = FileSystemNode(name, parent=node, is_dir=True, relative_path=relative_path)
                self._populate(child, child_path)
            else:
                self._file_count += 1
                FileSystemNode(name, parent=node, file_size=_file_size(child_path), relative_path=relative_path)

    def get_file_count(self) -> int:
        """Get the number of files in the tree (excluding ignored ones)."""
        self.get_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the number of directories in the tree, excluding the root."""
        self.get_tree()
        return self._directory_count

    def get_inaccessible_count(self) -> int:
        """Get the number of directories whose entries could not be listed."""
        self.get_tree()
        return self._inaccessible_count

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree listing one line at a time (without trailing newlines).

        Children of each directory are listed directories first, then files, each group
        in ordinal name order. Every level adds one indentation unit. Directories end in
        ``/``, files carry their size, and a directory that could not be listed gets a
        single ``[inaccessible directory]`` line one level below it.

        Yields:
            Lines of the tree representation.

        Example:
            >>> tree = FileSystemTree("project", policy)  # doctest: +SKIP
            >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
            ├── a_dir/
                ├── nested.txt [4 chars]
            ├── a.txt [1 chars]
            ├── b.txt [1 chars]
        """

        def write_node(node: FileSystemNode, depth: int) -> Iterator[str]:
            indent = INDENT * depth
            if not node.accessible:
                yield f"{indent}{MARKER}{INACCESSIBLE_PLACEHOLDER}"
                return

            for child in sorted(node.children, key=lambda n: (not n.is_dir, n.name)):
                if child.is_dir:
                    yield f"{indent}{MARKER}{child.name}/"
                    yield from write_node(child, depth + 1)
                else:
                    yield f"{indent}{MARKER}{child.name} [{child.file_size} chars]"

        yield from write_node(self.get_tree(), 0)

    def get_tree_representation(self) -> str:
        """Get the complete tree listing as a single string."""
        return "\n".join(self.stream_tree_representation())

    def iterate_files(self) -> Iterator[Tuple[str, str]]:
        """Iterate over all files in the tree in content order.

        Entries of each directory are visited in plain ascending name order, with
        subdirectories expanded in place (no directories-first rule).

        Yields:
            Pairs of (absolute_path, relative_path) for each file.

        Example:
            >>> tree = FileSystemTree("src", policy)  # doctest: +SKIP
            >>> for abs_path, rel_path in tree.iterate_files():  # doctest: +SKIP
            ...     print(rel_path)
            a.txt
            a_dir/nested.txt
            b.txt
        """

        def visit(node: FileSystemNode) -> Iterator[Tuple[str, str]]:
            for child in sorted(node.children, key=lambda n: n.name):
                if child.is_dir:
                    yield from visit(child)
                else:
                    yield str(self.root_path / child.relative_path), child.relative_path

        yield from visit(self.get_tree())


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


def _file_size(path: Path) -> int:
    try:
        return path.stat().st_size
    except OSError:
        return 0
