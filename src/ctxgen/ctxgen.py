"""Project snapshot generation with streaming support.

This module ties the selection policy, the filtered filesystem tree and the
content printer together. ``ProjectAnalyzer`` streams the three sections of the
snapshot; ``generate`` writes them to ``project_structure.md`` in the analysis root.
"""

import logging
from pathlib import Path
from typing import AbstractSet, Iterable, Iterator, Optional

from ctxgen.config import OUTPUT_FILENAME, AnalyzerConfig
from ctxgen.exceptions import OutputCreationError
from ctxgen.file_content_printer import FileContentPrinter
from ctxgen.file_system_tree.file_system_tree import FileSystemTree
from ctxgen.io.artifact_writer import ArtifactWriter
from ctxgen.output_strategies.markdown_strategy import MarkdownOutputStrategy
from ctxgen.selection.selection_policy import SelectionPolicy
from ctxgen.types import PathType

logger = logging.getLogger(__name__)

TITLE = "# Project structure overview"


def format_set(values: Iterable[str]) -> str:
    """Render a configuration list for the snapshot header, sorted for stable output.

    Example:
        >>> format_set({".kt", ".java"})
        '[.java, .kt]'
        >>> format_set(set())
        '[]'
    """
    return "[" + ", ".join(sorted(values)) + "]"


class ProjectAnalyzer:
    """Streaming project analyzer producing the snapshot section by section.

    The filesystem is listed once, at construction, so directory and file counts are
    available immediately. Each streaming operation (header, tree, contents) can only
    be performed once.

    Callers that write the snapshot into the analyzed directory pass its file name in
    ``always_ignore`` so the artifact never lists itself (``generate`` does this).

    Attributes:
        directory (Path): Directory being processed.
        config (AnalyzerConfig): The effective configuration.
        profile_name (Optional[str]): Profile the configuration came from, if any.
        always_ignore (FrozenSet[str]): Names hidden from the snapshot in every mode.
        streaming_complete (bool): Whether all streaming operations have finished.

    Example:
        >>> analyzer = ProjectAnalyzer("project", AnalyzerConfig(), always_ignore={OUTPUT_FILENAME})  # doctest: +SKIP
        >>> print("".join(analyzer.stream_tree()), end="")  # doctest: +SKIP
        ```
        ├── src/
            ├── App.java [120 chars]
        ```

    Raises:
        FileNotFoundError: If the directory does not exist.
        NotADirectoryError: If the path is not a directory.
    """

    def __init__(
        self,
        directory: PathType,
        config: AnalyzerConfig,
        *,
        profile_name: Optional[str] = None,
        always_ignore: AbstractSet[str] = frozenset(),
    ) -> None:
        """Initialize and build the filtered tree.

        Args:
            directory: Directory to process. Can be any path-like object.
            config: Effective configuration for this run.
            profile_name: Name of the profile the configuration was loaded from,
                recorded in the header when given.
            always_ignore: Names or paths to hide regardless of the selection mode.
        """
        self.directory = Path(directory)
        if not self.directory.exists():
            raise FileNotFoundError(f"'{directory}' does not exist")
        if not self.directory.is_dir():
            raise NotADirectoryError(f"'{directory}' is not a valid directory")

        self.config = config
        self.profile_name = profile_name
        self.always_ignore = frozenset(always_ignore)
        self._policy = SelectionPolicy(config, self.always_ignore)
        self._fs_tree = FileSystemTree(self.directory, self._policy)
        self._content_printer = FileContentPrinter(self._fs_tree, MarkdownOutputStrategy())

        self._directory_count = self._fs_tree.get_directory_count()
        self._file_count = self._fs_tree.get_file_count()
        self._inaccessible_count = self._fs_tree.get_inaccessible_count()
        self._content_file_count = 0

        self._header_complete = False
        self._tree_complete = False
        self._contents_complete = False

    @property
    def directory_count(self) -> int:
        """Number of directories shown in the tree (excluding root)."""
        return self._directory_count

    @property
    def file_count(self) -> int:
        """Number of files shown in the tree."""
        return self._file_count

    @property
    def inaccessible_count(self) -> int:
        """Number of directories that could not be listed."""
        return self._inaccessible_count

    @property
    def content_file_count(self) -> int:
        """Number of file blocks emitted so far, read-error blocks included."""
        return self._content_file_count

    @property
    def read_error_count(self) -> int:
        """Number of files whose content could not be read so far."""
        return self._content_printer.error_count

    @property
    def streaming_complete(self) -> bool:
        """Whether header, tree and contents have all been streamed."""
        return self._header_complete and self._tree_complete and self._contents_complete

    def stream_header(self) -> Iterator[str]:
        """Stream the title and the configuration comment.

        Raises:
            RuntimeError: If the header has already been streamed.
        """
        if self._header_complete:
            raise RuntimeError("Header has already been streamed")

        yield f"{TITLE}\n"
        yield "\n<!-- Configuration used for this analysis:\n"
        if self.profile_name is not None:
            yield f"Profile: {self.profile_name}\n"
        yield f"Include Extensions: {format_set(self.config.include_extensions)}\n"
        yield f"Include Names/Paths: {format_set(self.config.include_names_or_paths)}\n"
        yield f"Exclude Extensions: {format_set(self.config.exclude_extensions)}\n"
        yield f"Exclude Names/Paths: {format_set(self.config.exclude_names_or_paths)}\n"
        yield "-->\n\n"
        self._header_complete = True

    def stream_tree(self) -> Iterator[str]:
        """Stream the fenced tree listing line by line.

        Raises:
            RuntimeError: If the tree has already been streamed.

        Note:
            Each yielded line includes a trailing newline.
        """
        if self._tree_complete:
            raise RuntimeError("Tree has already been streamed")

        yield "```\n"
        for line in self._fs_tree.stream_tree_representation():
            yield line + "\n"
        yield "```\n"
        self._tree_complete = True

    def stream_contents(self) -> Iterator[str]:
        """Stream the content blocks of all selected files.

        Raises:
            RuntimeError: If contents have already been streamed.
        """
        if self._contents_complete:
            raise RuntimeError("Contents have already been streamed")

        for _file_path, _relative_path, content_iter in self._content_printer.yield_file_contents():
            yield from content_iter
            self._content_file_count += 1

        self._contents_complete = True

    def stream(self) -> Iterator[str]:
        """Stream the complete snapshot: header, tree, then contents."""
        yield from self.stream_header()
        yield from self.stream_tree()
        yield from self.stream_contents()


def generate(
    root_path: PathType,
    config: AnalyzerConfig,
    *,
    profile_name: Optional[str] = None,
    output_name: str = OUTPUT_FILENAME,
) -> Path:
    """Write the snapshot of ``root_path`` to ``<root_path>/<output_name>``.

    The output name is always ignored (without switching the configuration into
    exclude mode), so the artifact never includes itself and repeated runs over an
    unchanged tree are byte-identical.
    Unlistable directories and unreadable files are reported inside the artifact and
    in the log; they never abort the run.

    Args:
        root_path: Directory to analyze.
        config: Configuration as loaded from file, profile or defaults.
        profile_name: Profile name recorded in the header, if any.
        output_name: File name of the artifact. Defaults to ``project_structure.md``.

    Returns:
        Path: The absolute path of the written artifact.

    Raises:
        FileNotFoundError: If ``root_path`` does not exist.
        NotADirectoryError: If ``root_path`` is not a directory.
        OutputCreationError: If the artifact cannot be created.
        KeyboardInterrupt: If the run was interrupted with Ctrl+C.

    Example:
        >>> generate("my-project", AnalyzerConfig(include_extensions={".java"}))  # doctest: +SKIP
        PosixPath('/home/me/my-project/project_structure.md')
    """
    root = Path(root_path).resolve()
    analyzer = ProjectAnalyzer(root, config, profile_name=profile_name, always_ignore={output_name})
    output_path = root / output_name

    try:
        writer = ArtifactWriter(output_path)
    except OSError as e:
        raise OutputCreationError(str(output_path), e.strerror or str(e)) from e

    with writer:
        for chunk in analyzer.stream():
            writer.write(chunk)

    logger.debug(
        "Wrote %s: %d directories, %d files, %d with content",
        output_path,
        analyzer.directory_count,
        analyzer.file_count,
        analyzer.content_file_count,
    )
    return output_path
