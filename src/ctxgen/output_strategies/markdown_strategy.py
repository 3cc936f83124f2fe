"""Markdown output strategy: bold path header followed by a fenced code block."""

from .base_strategy import OutputStrategy

# Checked in order against the lower-cased file name
LANGUAGE_HINTS = (
    (".xml", "xml"),
    (".gradle", "kotlin"),
    (".kts", "kotlin"),
    (".java", "java"),
    (".kt", "kotlin"),
    (".md", "markdown"),
    (".js", "javascript"),
    (".php", "php"),
)


def detect_code_block_type(file_name: str) -> str:
    """Return the code fence language tag for a file name, or "" if there is none.

    Example:
        >>> detect_code_block_type("build.gradle.kts")
        'kotlin'
        >>> detect_code_block_type("README.MD")
        'markdown'
        >>> detect_code_block_type("LICENSE")
        ''
    """
    lowered = file_name.lower()
    for suffix, language in LANGUAGE_HINTS:
        if lowered.endswith(suffix):
            return language
    return ""


class MarkdownOutputStrategy(OutputStrategy):
    """Markdown implementation of the OutputStrategy interface.

    Each file is written as::

        (blank line)
        **Path: `src/App.java`**
        ```java
        ...file lines...
        ```

    Content is passed through unchanged; the fence is always closed on its own line
    because every content line ends with a newline.

    Example:
        >>> strategy = MarkdownOutputStrategy()
        >>> strategy.format_start("src/App.java", "java")
        '\\n**Path: `src/App.java`**\\n```java\\n'
        >>> strategy.format_end()
        '```\\n'
    """

    def format_start(self, relative_path: str, language: str = "") -> str:
        return f"\n**Path: `{relative_path}`**\n```{language}\n"

    def format_content(self, content: str) -> str:
        return content

    def format_end(self) -> str:
        return "```\n"

    def format_error(self, relative_path: str, reason: str) -> str:
        """Write the header and an untagged block holding ``[Error reading file: ...]``."""
        return f"\n**Path: `{relative_path}`**\n```\n[Error reading file: {reason}]\n```\n"
