"""Command-line argument parsing for ctxgen.

This module defines the command-line interface for ctxgen,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Optional

from ctxgen import __version__
from ctxgen.config import CONFIG_FILENAME, OUTPUT_FILENAME

# Option dest -> command name, in the order they are checked
COMMANDS = (
    ("config", "config"),
    ("gen", "gen"),
    ("use", "use"),
    ("save", "save"),
    ("list", "list"),
    ("delete", "delete"),
)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with ctxgen's options.
    """
    description = f"""
    ctxgen: project context generator.

    Writes {OUTPUT_FILENAME} into the analyzed directory: a tree of the project
    followed by the contents of the selected files, ready to paste into an LLM
    conversation or a review.

    Selection is driven by {CONFIG_FILENAME} (or a saved profile) with four lists:
    includeExtensions, includeNamesOrPaths, excludeExtensions, excludeNamesOrPaths.
    If any exclude list is non-empty, the include lists are ignored.
    """

    epilog = f"""
    Examples:
      # Create a commented {CONFIG_FILENAME} in the current directory
      ctxgen --config

      # Generate {OUTPUT_FILENAME} for the current directory or a given one
      ctxgen --gen
      ctxgen --gen path/to/project

      # Save the local configuration as a named profile, then reuse it elsewhere
      ctxgen --save java
      ctxgen --use java path/to/other/project

      # Manage saved profiles
      ctxgen --list
      ctxgen --delete java

    Notes:
      - Exclude lists take precedence over include lists in config.
      - Profiles are stored per-user (APPDATA/Library/.config).
    """

    parser = argparse.ArgumentParser(
        prog="ctxgen",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "-v", "--version", action="version", version=f"ctxgen {__version__}", help="Show the version and exit"
    )

    commands = parser.add_mutually_exclusive_group()
    commands.add_argument(
        "-c",
        "--config",
        action="store_true",
        help=f"Create a default {CONFIG_FILENAME} in the current directory.",
    )
    commands.add_argument(
        "-g",
        "--gen",
        action="store_true",
        help=f"Generate {OUTPUT_FILENAME} for DIRECTORY (default: current directory).",
    )
    commands.add_argument(
        "-u",
        "--use",
        metavar="NAME",
        help=f"Generate using the saved profile NAME; also writes it to ./{CONFIG_FILENAME}.",
    )
    commands.add_argument(
        "-s",
        "--save",
        metavar="NAME",
        help=f"Save ./{CONFIG_FILENAME} as the named profile NAME.",
    )
    commands.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="List saved profiles.",
    )
    commands.add_argument(
        "-d",
        "--delete",
        metavar="NAME",
        help="Delete the saved profile NAME.",
    )

    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        help="Project directory for --gen and --use (default: current directory).",
    )
    parser.add_argument(
        "--config-file",
        type=Path,
        metavar="FILE",
        default=Path(CONFIG_FILENAME),
        help=f"Local configuration file to read, create or save (default: ./{CONFIG_FILENAME}).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
    )

    return parser


def get_command(args: argparse.Namespace) -> Optional[str]:
    """Return the command selected on the command line, or None if there is none."""
    for dest, command in COMMANDS:
        if getattr(args, dest, None):
            return command
    return None


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.directory is not None and get_command(args) not in ("gen", "use"):
        raise ValueError("a directory can only be given with -g/--gen or -u/--use")
