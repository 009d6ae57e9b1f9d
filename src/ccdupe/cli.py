#!/usr/bin/env python3
"""
ccdupe CLI — Command line interface for duplicate file detection and removal.
Runs the scan pipeline, then either asks about every duplicate pair interactively,
prints a JSON report, or starts the HTTP API.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import Optional, NoReturn
import logging

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import send2trash  # noqa: F401
except ImportError:
    _MISSING_DEPS.append("send2trash")

try:
    import xxhash  # noqa: F401
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    print("\nOr install the package with its dependencies:", file=sys.stderr)
    print("   pip install ccdupe", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from ccdupe.aliases import HASH_ALIASES, HASH_CHOICES, HASH_HELP_TEXT, EPILOG_TEXT
from ccdupe.commands import DuplicateScanCommand
from ccdupe.core.errors import CcdupeError
from ccdupe.core.models import ScanParams, ScanResult
from ccdupe.logging_config import setup_logging
from ccdupe.services.resolution import InteractiveResolver, TerminalHandler, render_json
from ccdupe.utils.convert_utils import ConvertUtils

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """argparse parser whose usage errors exit with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = _ArgumentParser(
            prog="ccdupe",
            description="ccdupe — find byte-identical files and remove redundant copies",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "directory",
            nargs="?",
            help="Directory to scan for duplicates"
        )

        # Filtering options
        parser.add_argument(
            "--minsize", "--min-size", "-m",
            dest="min_size",
            default="0",
            type=str,
            metavar="SIZE",
            help="Minimum file size to consider, in bytes or human form (e.g. 1, 500KB). Default: 0"
        )
        parser.add_argument(
            "--follow-symlinks", "-L",
            action="store_true",
            help="Follow symbolic links and compare their targets' content"
        )
        parser.add_argument(
            "--hash",
            choices=HASH_CHOICES,
            default="xxhash",
            type=str,
            help=HASH_HELP_TEXT
        )

        # Modes
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print a JSON report instead of prompting; nothing is deleted"
        )
        parser.add_argument(
            "--trash",
            action="store_true",
            help="Move files chosen for deletion to the system trash instead of removing them"
        )
        parser.add_argument(
            "--web",
            action="store_true",
            help="Start the HTTP API instead of scanning"
        )
        parser.add_argument(
            "--host",
            default="127.0.0.1",
            help="Address for --web. Default: 127.0.0.1"
        )
        parser.add_argument(
            "--port",
            default=8080,
            type=int,
            help="Port for --web. Default: 8080"
        )

        # Output options
        parser.add_argument(
            "--log-file",
            default=os.environ.get("CCDUPE_LOG_FILE"),
            metavar="PATH",
            help="Append INFO/ERROR events to this file (env: CCDUPE_LOG_FILE)"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress and detailed logging"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.web:
            if args.json:
                self.error_exit("--json cannot be combined with --web")
            return

        if not args.directory:
            self.error_exit("Usage: ccdupe [--minsize=<size>] [--follow-symlinks] [--json] <directory>")

        if args.json and args.trash:
            self.error_exit("--trash has no effect with --json (the report never deletes files)")

        if not ConvertUtils.is_valid_size_format(args.min_size):
            self.error_exit(f"Invalid size format: {args.min_size}")

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams.from_human_readable(
                root_dir=args.directory,
                min_size=args.min_size,
                follow_symlinks=args.follow_symlinks,
                hash_algorithm=HASH_ALIASES[args.hash],
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        sys.stderr.flush()

    def run_scan(self, params: ScanParams) -> ScanResult:
        """Execute the scan pipeline; a failure to scan the root is fatal."""
        try:
            result = DuplicateScanCommand().execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None,
            )
        except CcdupeError as e:
            logger.error(f"Error scanning directory: {e}")
            self.error_exit(f"Error scanning directory: {e}")

        if self.verbose:
            sys.stderr.write("\n")
        return result

    def output_json(self, result: ScanResult) -> None:
        try:
            print(render_json(result))
        except CcdupeError as e:
            self.error_exit(str(e))

    def run_interactive(self, result: ScanResult, use_trash: bool) -> None:
        """Prompt for every duplicate pair and delete the chosen files."""
        if not result.groups:
            if not self.quiet:
                print("No duplicate groups found.")
            return

        if not self.quiet:
            print(f"Found {len(result.groups)} duplicate groups "
                  f"({result.total_duplicates} of {result.total_files} files)")

        resolver = InteractiveResolver(TerminalHandler(use_trash=use_trash))
        report = resolver.resolve(result.groups)

        if not self.quiet:
            print()
            print(report.summary())

    def run_web(self, host: str, port: int, use_trash: bool = False) -> None:
        """Serve the HTTP API until interrupted."""
        import uvicorn
        from ccdupe.web.app import create_app

        print(f"HTTP API listening on http://{host}:{port} (POST /scan, POST /delete, GET /health)")
        logger.info(f"Web server starting on {host}:{port}")
        uvicorn.run(create_app(use_trash=use_trash), host=host, port=port, log_config=None)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet or args.json

        level = logging.DEBUG if args.verbose else logging.ERROR
        setup_logging(level=level, log_file=args.log_file)

        self.validate_args(args)

        if args.web:
            self.run_web(args.host, args.port, use_trash=args.trash)
            return

        params = self.create_params(args)
        if not self.quiet:
            print(f"Scanning directory: {params.root_dir}")

        result = self.run_scan(params)

        if args.json:
            self.output_json(result)
        else:
            self.run_interactive(result, use_trash=args.trash)

        elapsed = time.time() - self.start_time
        if self.verbose and not args.json:
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
        logger.exception("Unexpected error")
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
