"""Output strategy base class defining the interface for file content formatting.

This module provides the abstract base class that defines how each emitted file
is wrapped in the snapshot: a header naming the file, the file's lines, and a
closing marker, plus the block written in place of a file that could not be read.
"""

from abc import ABC, abstractmethod


class OutputStrategy(ABC):
    """Abstract base class defining the interface for file content output formatting strategies.

    The output of a single file is divided into three phases:
    1. Start - outputs the header and opening wrapper, tagged with a language hint
    2. Content - formats each line of the file
    3. End - outputs the closing wrapper

    A file that cannot be read is rendered by ``format_error`` as one complete block
    instead.

    Example:
        >>> class PlainStrategy(OutputStrategy):
        ...     def format_start(self, relative_path: str, language: str = "") -> str:
        ...         return f"--- {relative_path}\\n"
        ...
        ...     def format_content(self, content: str) -> str:
        ...         return content
        ...
        ...     def format_end(self) -> str:
        ...         return "---\\n"
        ...
        ...     def format_error(self, relative_path: str, reason: str) -> str:
        ...         return f"--- {relative_path}: {reason}\\n"
        >>> PlainStrategy().format_start("a.txt")
        '--- a.txt\\n'
    """

    @abstractmethod
    def format_start(self, relative_path: str, language: str = "") -> str:
        """Format the opening wrapper for a file's content.

        Args:
            relative_path: The root-relative, forward-slash path of the file.
            language: Language hint for syntax highlighting ("" for none).

        Returns:
            The formatted opening wrapper string.
        """
        pass

    @abstractmethod
    def format_content(self, content: str) -> str:
        """Format a piece of file content (one line including its newline).

        Args:
            content: File content to format.

        Returns:
            The formatted content string.
        """
        pass

    @abstractmethod
    def format_end(self) -> str:
        """Format the closing wrapper for a file's content."""
        pass

    @abstractmethod
    def format_error(self, relative_path: str, reason: str) -> str:
        """Format the complete block written for a file that could not be read.

        Args:
            relative_path: The root-relative, forward-slash path of the file.
            reason: Human-readable description of the failure.

        Returns:
            The formatted block.
        """
        pass
