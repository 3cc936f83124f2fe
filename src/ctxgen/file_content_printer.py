"""File content printer producing one formatted block per selected file.

This module walks the filtered filesystem tree in content order, asks the
selection policy which files have their content emitted, and renders each of
them through an output strategy.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .file_system_tree.file_system_tree import FileSystemTree
from .output_strategies.base_strategy import OutputStrategy
from .output_strategies.markdown_strategy import MarkdownOutputStrategy, detect_code_block_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileInfo:
    """A file selected for content emission.

    Attributes:
        path: Absolute path to the file.
        relative_path: Root-relative, forward-slash path used in the header.
        language: Code fence language hint derived from the file name.
    """

    path: Path
    relative_path: str
    language: str = ""


class FileContentPrinter:
    """Renders the content section of the snapshot.

    Files are visited in the tree's content order (plain ascending names per
    directory). Only files for which the selection policy's
    ``should_include_content`` is true are rendered.

    A file is read completely, as strict UTF-8, before any of its output is produced.
    If reading fails (missing file, permission problem, or bytes that are not valid
    UTF-8) the strategy's error block is produced instead and the run continues, so
    the snapshot never ends up with a half-written block.

    Attributes:
        fs_tree (FileSystemTree): The filtered filesystem tree to process.
        output_strategy (OutputStrategy): Strategy for wrapping each file.

    Example:
        >>> tree = FileSystemTree("src", policy)  # doctest: +SKIP
        >>> printer = FileContentPrinter(tree)  # doctest: +SKIP
        >>> for path, rel_path, content in printer.yield_file_contents():  # doctest: +SKIP
        ...     print("".join(content), end="")
    """

    def __init__(
        self,
        fs_tree: FileSystemTree,
        output_strategy: Optional[OutputStrategy] = None,
    ) -> None:
        """Initialize the FileContentPrinter.

        Args:
            fs_tree: The filtered filesystem tree to process.
            output_strategy: Strategy used to wrap file content. Defaults to Markdown.
        """
        self.fs_tree = fs_tree
        self.output_strategy = output_strategy if output_strategy is not None else MarkdownOutputStrategy()
        self.error_count = 0

    def _read_lines(self, path: Path) -> List[str]:
        """Read a file as a list of lines, each terminated by a newline.

        ``\\r\\n`` and ``\\r`` are treated as line breaks; a missing final newline is
        added so the closing fence always starts on its own line.

        Raises:
            OSError: If the file cannot be opened or read.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        with open(path, "r", encoding="utf-8", errors="strict") as f:
            return [line if line.endswith("\n") else line + "\n" for line in f]

    def _yield_wrapped_content(self, file_info: FileInfo) -> Iterator[str]:
        """Yield the formatted pieces for one file, or its error block."""
        try:
            lines = self._read_lines(file_info.path)
        except (OSError, UnicodeDecodeError) as e:
            reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            logger.warning("Skipping content of %s: %s", file_info.relative_path, reason)
            self.error_count += 1
            yield self.output_strategy.format_error(file_info.relative_path, reason)
            return

        yield self.output_strategy.format_start(file_info.relative_path, file_info.language)
        for line in lines:
            yield self.output_strategy.format_content(line)
        yield self.output_strategy.format_end()

    def iterate_selected_files(self) -> Iterator[FileInfo]:
        """Yield the files whose content belongs in the snapshot, in content order."""
        policy = self.fs_tree.policy
        for file_path, relative_path in self.fs_tree.iterate_files():
            if not policy.should_include_content(relative_path):
                continue
            path = Path(file_path)
            yield FileInfo(path=path, relative_path=relative_path, language=detect_code_block_type(path.name))

    def yield_file_contents(self) -> Iterator[Tuple[str, str, Iterator[str]]]:
        """Stream formatted file content with metadata.

        Yields:
            Tuples of (absolute_path, relative_path, content_iterator) where
            content_iterator yields the formatted pieces of that file's block.
        """
        for file_info in self.iterate_selected_files():
            yield str(file_info.path), file_info.relative_path, self._yield_wrapped_content(file_info)
