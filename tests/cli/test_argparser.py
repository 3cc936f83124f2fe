"""Unit tests for command-line argument parsing."""

from pathlib import Path

import pytest

from ctxgen.cli.argparser import create_parser, get_command, validate_args


@pytest.fixture
def parser():
    return create_parser()


@pytest.mark.parametrize(
    "argv,command",
    [
        (["--config"], "config"),
        (["-c"], "config"),
        (["--gen"], "gen"),
        (["-g", "project"], "gen"),
        (["--use", "java"], "use"),
        (["-u", "java", "project"], "use"),
        (["--save", "java"], "save"),
        (["-s", "java"], "save"),
        (["--list"], "list"),
        (["-l"], "list"),
        (["--delete", "java"], "delete"),
        (["-d", "java"], "delete"),
        ([], None),
    ],
)
def test_get_command(parser, argv, command):
    assert get_command(parser.parse_args(argv)) == command


def test_directory_argument(parser):
    args = parser.parse_args(["--gen", "some/project"])
    assert args.directory == Path("some/project")


def test_defaults(parser):
    args = parser.parse_args([])
    assert args.directory is None
    assert args.config_file == Path("context_config.yaml")
    assert args.verbose is False


def test_commands_are_mutually_exclusive(parser):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--gen", "--list"])
    assert exc_info.value.code == 2


def test_unknown_option(parser):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--frobnicate"])
    assert exc_info.value.code == 2


@pytest.mark.parametrize("flag", ["-V", "-v", "--version"])
def test_version(parser, flag, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args([flag])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("ctxgen ")


def test_validate_accepts_directory_with_gen_and_use(parser):
    validate_args(parser.parse_args(["--gen", "project"]))
    validate_args(parser.parse_args(["--use", "java", "project"]))


def test_validate_rejects_stray_directory(parser):
    with pytest.raises(ValueError, match="directory"):
        validate_args(parser.parse_args(["--list", "project"]))
