"""Output strategies for wrapping emitted file contents."""

from .base_strategy import OutputStrategy
from .markdown_strategy import MarkdownOutputStrategy, detect_code_block_type

__all__ = [
    "MarkdownOutputStrategy",
    "OutputStrategy",
    "detect_code_block_type",
]
