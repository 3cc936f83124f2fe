"""Command-line interface for ctxgen.

This module provides the command-line interface for ctxgen: creating the local
configuration file, managing named profiles, and generating the project snapshot.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Create the configuration, then generate a snapshot of the current directory
    $ ctxgen --config
    $ ctxgen --gen

    # Generate another project with a saved profile
    $ ctxgen --use java ../other-project
"""

import argparse
import logging
import sys

from ctxgen.cli.argparser import create_parser, get_command, validate_args
from ctxgen.config import load_config, write_default_config
from ctxgen.ctxgen import generate
from ctxgen.io.interrupts import interrupt_monitor
from ctxgen.profile_store import delete_profile, list_profiles, load_profile, materialize_profile, save_profile

LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Send ctxgen's log records to stderr.

    Recoverable problems (unlistable directories, unreadable files) are logged as
    warnings; configuration loading is logged at info level.
    """
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("ctxgen").setLevel(logging.DEBUG if verbose else logging.INFO)


def run_generation(args: argparse.Namespace) -> None:
    """Load the configuration for a --gen or --use run and write the snapshot."""
    profile_name = None
    if args.use:
        profile_name = args.use
        config = load_profile(profile_name)
        try:
            materialize_profile(profile_name, args.config_file)
            print(f"Wrote profile to {args.config_file} (from '{profile_name}').")
        except OSError as e:
            print(f"Warning: Profile loaded, but failed to copy to {args.config_file}: {e}", file=sys.stderr)
    else:
        config = load_config(args.config_file)

    directory = args.directory if args.directory is not None else "."
    output_path = generate(directory, config, profile_name=profile_name)
    print(f"Analysis complete. Output written to: {output_path}")


def run_list() -> None:
    profiles = list_profiles()
    if not profiles:
        print("No profiles saved. Create one with: ctxgen --save <name>")
        return
    print(f"Profiles ({len(profiles)}):")
    for name in profiles:
        print(f"- {name}")


def main() -> None:
    """Main entry point for the ctxgen command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
    """
    parser = create_parser()
    args = parser.parse_args()

    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    configure_logging(args.verbose)
    interrupt_monitor.install()

    try:
        command = get_command(args)

        if command is None:
            parser.print_help()
        elif command == "config":
            path = write_default_config(args.config_file)
            print(f"Configuration file '{path}' created.")
        elif command == "save":
            target = save_profile(args.config_file, args.save)
            print(f"Saved profile '{args.save}' at: {target}")
        elif command == "list":
            run_list()
        elif command == "delete":
            delete_profile(args.delete)
            print(f"Deleted profile: {args.delete}")
        else:
            run_generation(args)

    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    # Ctrl+C while listing, or after the last write, is only seen here
    if interrupt_monitor.interrupted:
        print("Interrupted.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
