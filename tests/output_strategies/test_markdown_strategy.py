"""Unit tests for the Markdown output strategy."""

import pytest

from ctxgen.output_strategies import MarkdownOutputStrategy, OutputStrategy
from ctxgen.output_strategies.markdown_strategy import detect_code_block_type


@pytest.fixture
def strategy():
    return MarkdownOutputStrategy()


def test_is_output_strategy(strategy):
    assert isinstance(strategy, OutputStrategy)


def test_format_start(strategy):
    assert strategy.format_start("src/App.java", "java") == "\n**Path: `src/App.java`**\n```java\n"


def test_format_start_without_language(strategy):
    assert strategy.format_start("notes.txt") == "\n**Path: `notes.txt`**\n```\n"


def test_format_content_is_unchanged(strategy):
    line = "if (a < b && c > d) { return \"```\"; }\n"
    assert strategy.format_content(line) == line


def test_format_end(strategy):
    assert strategy.format_end() == "```\n"


def test_format_error(strategy):
    assert strategy.format_error("bad.txt", "Permission denied") == (
        "\n**Path: `bad.txt`**\n```\n[Error reading file: Permission denied]\n```\n"
    )


@pytest.mark.parametrize(
    "file_name,expected",
    [
        ("pom.xml", "xml"),
        ("build.gradle", "kotlin"),
        ("build.gradle.kts", "kotlin"),
        ("settings.kts", "kotlin"),
        ("App.java", "java"),
        ("Main.kt", "kotlin"),
        ("README.MD", "markdown"),
        ("app.js", "javascript"),
        ("index.php", "php"),
        ("App.class", ""),
        ("notes.txt", ""),
        ("Makefile", ""),
        ("script.json", ""),
    ],
)
def test_detect_code_block_type(file_name, expected):
    assert detect_code_block_type(file_name) == expected


def test_abstract_strategy_cannot_be_instantiated():
    with pytest.raises(TypeError):
        OutputStrategy()  # type: ignore[abstract]
