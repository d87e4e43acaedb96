#!/usr/bin/env python3
"""
HashFilter CLI — Command line interface for removing duplicate files from a folder.
Parses options into FilterParams, runs the engine, and turns fatal errors into exit codes.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import NoReturn

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from hashfilter.commands import FilterCommand
from hashfilter.core.errors import HashFilterError
from hashfilter.core.models import ConflictAction, FilterParams, Policy, RunStats
from hashfilter.utils.path_utils import resolve_absolute_path
from hashfilter.aliases import POLICY_HELP_TEXT, EPILOG_TEXT


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="hashfilter",
            description="HashFilter — find files with identical content in a folder and deal with the copies",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "--folder", "-f",
            default=None,
            type=str,
            help="Folder to scan (top-level files only). Default: current directory"
        )

        policy = parser.add_argument_group("conflict policy", POLICY_HELP_TEXT)
        choice = policy.add_mutually_exclusive_group()
        choice.add_argument(
            "--delete", "-d",
            dest="action",
            action="store_const",
            const=ConflictAction.DELETE.value,
            help="Delete duplicates (default)"
        )
        choice.add_argument(
            "--ask", "-a",
            dest="action",
            action="store_const",
            const=ConflictAction.ASK.value,
            help="Ask for every duplicate"
        )
        choice.add_argument(
            "--inform", "-i",
            dest="action",
            action="store_const",
            const=ConflictAction.INFORM.value,
            help="Only report duplicates"
        )
        choice.add_argument(
            "--move", "-m",
            dest="move_to",
            metavar="DIR",
            type=str,
            default=None,
            help="Move duplicates into DIR"
        )

        parser.add_argument(
            "--trash",
            action="store_true",
            help="Send deleted duplicates to the system trash instead of removing them"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and run statistics"
        )

        parsed = parser.parse_args(args)
        if parsed.move_to is not None:
            parsed.action = ConflictAction.MOVE.value
        elif parsed.action is None:
            parsed.action = ConflictAction.DELETE.value
        return parsed

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.trash and args.action not in (ConflictAction.DELETE.value, ConflictAction.ASK.value):
            self.error_exit("--trash can only be used with --delete or --ask")

        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")

        if args.folder is not None:
            folder_path = Path(args.folder)
            if not folder_path.exists():
                self.error_exit(f"Directory not found: {args.folder}")
            if not folder_path.is_dir():
                self.error_exit(f"Path is not a directory: {args.folder}")

        if args.move_to is not None:
            move_path = Path(args.move_to)
            if not move_path.is_dir():
                self.warning(f"Move destination is not an existing directory: {args.move_to}")

    def create_params(self, args: argparse.Namespace) -> FilterParams:
        """Create FilterParams from CLI arguments."""
        try:
            if args.folder is None:
                folder = os.getcwd()
            else:
                folder = resolve_absolute_path(args.folder)

            action = ConflictAction(args.action)
            if action is ConflictAction.MOVE:
                policy = Policy.move(resolve_absolute_path(args.move_to))
            else:
                policy = Policy(action, trash=args.trash)

            return FilterParams(folder=folder, policy=policy)
        except HashFilterError as e:
            self.error_exit(str(e))
        except OSError as e:
            self.error_exit(f"Can't see the current directory: {e}")
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def run_filter(self, params: FilterParams) -> RunStats:
        """Execute the filtering run; the first fatal error ends the process."""
        command = FilterCommand()
        try:
            return command.execute(params)
        except HashFilterError as e:
            self.error_exit(str(e))

    def output_results(self, stats: RunStats) -> None:
        if self.quiet:
            return

        if stats.duplicates == 0:
            print("No duplicate files found.")
        else:
            print(f"\nHandled {stats.duplicates} duplicate file(s) among {stats.files_seen} checked.")

        if self.verbose:
            print()
            print(stats.print_summary())

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        self.validate_args(args)
        params = self.create_params(args)

        if not self.quiet:
            print(f"Scanning folder: {params.folder} (policy: {params.policy.describe()})")

        stats = self.run_filter(params)
        self.output_results(stats)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
