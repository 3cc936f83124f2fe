"""Unit tests for the FileContentPrinter class."""

from pathlib import Path

from ctxgen.config import AnalyzerConfig
from ctxgen.file_content_printer import FileContentPrinter, FileInfo
from ctxgen.file_system_tree.file_system_tree import FileSystemTree
from ctxgen.output_strategies.markdown_strategy import MarkdownOutputStrategy
from ctxgen.selection.selection_policy import SelectionPolicy


def make_printer(root, config=None):
    return FileContentPrinter(FileSystemTree(root, SelectionPolicy(config or AnalyzerConfig())))


def render(printer):
    return "".join("".join(content) for _abs, _rel, content in printer.yield_file_contents())


def test_default_strategy_is_markdown(tmp_path):
    printer = make_printer(tmp_path)
    assert isinstance(printer.output_strategy, MarkdownOutputStrategy)


def test_selected_files_in_content_order(sample_project):
    printer = make_printer(sample_project)
    assert [info.relative_path for info in printer.iterate_selected_files()] == [
        "README.md",
        "build/out.txt",
        "notes.txt",
        "src/main/App.class",
        "src/main/App.java",
    ]


def test_selected_files_carry_language(sample_project):
    printer = make_printer(sample_project, AnalyzerConfig(include_extensions={".java"}))
    assert list(printer.iterate_selected_files()) == [
        FileInfo(
            path=Path(sample_project / "src" / "main" / "App.java"),
            relative_path="src/main/App.java",
            language="java",
        )
    ]


def test_include_by_path(sample_project):
    printer = make_printer(sample_project, AnalyzerConfig(include_names_or_paths={"build", "notes.txt"}))
    assert [info.relative_path for info in printer.iterate_selected_files()] == ["build/out.txt", "notes.txt"]


def test_block_format(tmp_path):
    (tmp_path / "App.java").write_text("class App {\n}\n")
    assert render(make_printer(tmp_path)) == "\n**Path: `App.java`**\n```java\nclass App {\n}\n```\n"


def test_missing_final_newline_is_added(tmp_path):
    (tmp_path / "notes.txt").write_text("todo")
    assert render(make_printer(tmp_path)) == "\n**Path: `notes.txt`**\n```\ntodo\n```\n"


def test_crlf_line_endings_are_normalized(tmp_path):
    (tmp_path / "win.txt").write_bytes(b"one\r\ntwo\r\n")
    assert render(make_printer(tmp_path)) == "\n**Path: `win.txt`**\n```\none\ntwo\n```\n"


def test_empty_file_has_empty_block(tmp_path):
    (tmp_path / "empty.txt").write_text("")
    assert render(make_printer(tmp_path)) == "\n**Path: `empty.txt`**\n```\n```\n"


def test_invalid_utf8_produces_error_block(tmp_path, caplog):
    (tmp_path / "a.txt").write_text("fine\n")
    (tmp_path / "bad.bin").write_bytes(b"\xff\xfe\x00broken")
    printer = make_printer(tmp_path)
    output = render(printer)

    assert output.startswith("\n**Path: `a.txt`**\n```\nfine\n```\n")
    assert "\n**Path: `bad.bin`**\n```\n[Error reading file: " in output
    assert output.endswith("]\n```\n")
    assert printer.error_count == 1
    assert "Skipping content of bad.bin" in caplog.text


def test_unreadable_file_produces_error_block(tmp_path, monkeypatch):
    (tmp_path / "locked.txt").write_text("secret\n")
    (tmp_path / "open.txt").write_text("public\n")

    original = FileContentPrinter._read_lines

    def failing_read_lines(self, path):
        if Path(path).name == "locked.txt":
            raise PermissionError(13, "Permission denied", str(path))
        return original(self, path)

    monkeypatch.setattr(FileContentPrinter, "_read_lines", failing_read_lines)
    printer = make_printer(tmp_path)

    assert render(printer) == (
        "\n**Path: `locked.txt`**\n```\n[Error reading file: Permission denied]\n```\n"
        "\n**Path: `open.txt`**\n```\npublic\n```\n"
    )
    assert printer.error_count == 1


def test_file_deleted_after_listing(tmp_path):
    (tmp_path / "gone.txt").write_text("soon gone\n")
    printer = make_printer(tmp_path)
    printer.fs_tree.get_tree()
    (tmp_path / "gone.txt").unlink()

    output = render(printer)
    assert output.startswith("\n**Path: `gone.txt`**\n```\n[Error reading file: ")
    assert printer.error_count == 1


def test_yield_file_contents_metadata(tmp_path):
    (tmp_path / "a.txt").write_text("a\n")
    printer = make_printer(tmp_path)
    abs_path, rel_path, content = next(printer.yield_file_contents())
    assert Path(abs_path) == tmp_path / "a.txt"
    assert rel_path == "a.txt"
    assert "".join(content) == "\n**Path: `a.txt`**\n```\na\n```\n"
