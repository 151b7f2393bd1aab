#!/usr/bin/env python3
"""
refdedup CLI — removes files from a target directory that already exist in a reference directory.
A target file counts as a duplicate only if a reference file has the same name and identical bytes.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)
logger = logging.getLogger(__name__)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import send2trash  # noqa: F401
except ImportError:
    _MISSING_DEPS.append("send2trash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from refdedup import __version__
from refdedup.core.models import DedupParams, DeletionMethod, DuplicatePair, Stage
from refdedup.commands import DedupCommand
from refdedup.services.duplicate_service import DuplicateService
from refdedup.utils.convert_utils import ConvertUtils

STAGE_MESSAGES = {
    Stage.SCAN_REFERENCE: "Scanning reference directory...",
    Stage.SCAN_TARGET: "Scanning target directory...",
    Stage.MATCH: "Comparing files...",
}

EPILOG_TEXT = """
Examples:
  Show which files in ~/Downloads already exist in ~/Photos, delete nothing
  %(prog)s --dry-run ~/Photos ~/Downloads

  Delete them permanently
  %(prog)s ~/Photos ~/Downloads

  Move them to the system trash instead
  %(prog)s --trash ~/Photos ~/Downloads

Reference and target must be different directories, and neither may
contain the other: such runs are refused before anything is scanned.
"""


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles and escape undecodable file names
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8', errors='backslashreplace')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="refdedup",
            description="refdedup — remove files from TARGET that already exist in REFERENCE",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "reference",
            type=str,
            help="Path to a reference directory"
        )
        parser.add_argument(
            "target",
            type=str,
            help="Path to a target directory to be deduplicated"
        )

        # Actions
        parser.add_argument(
            "--dry-run", "-n",
            action="store_true",
            dest="dry_run",
            help="Perform a trial run with no changes made"
        )
        parser.add_argument(
            "--trash",
            action="store_true",
            help="Move duplicates to the system trash instead of deleting them permanently"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress progress and summary output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show detailed statistics, progress and debug logging"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.trash and args.dry_run:
            self.warning("--trash has no effect together with --dry-run")

        # A tree nested in the other would match every file against itself
        reference = Path(args.reference).resolve()
        target = Path(args.target).resolve()
        if reference == target:
            self.error_exit("Reference and target must be different directories")
        if reference in target.parents or target in reference.parents:
            self.error_exit("Reference and target directories must not contain each other")

    def create_params(self, args: argparse.Namespace) -> DedupParams:
        """Create DedupParams from CLI arguments."""
        try:
            return DedupParams(
                reference_dir=args.reference,
                target_dir=args.target,
                dry_run=args.dry_run,
                deletion=DeletionMethod.TRASH if args.trash else DeletionMethod.DELETE,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(
                f"\r  [{stage}] {current}/{total} ({percent:.1f}%)"
            )
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files found...")
        sys.stderr.flush()

    def stage_callback(self, stage: Stage) -> None:
        """Announce each pipeline stage."""
        if not self.quiet:
            print(STAGE_MESSAGES[stage])

    def run_detection(self, params: DedupParams) -> List[DuplicatePair]:
        """Execute scan and match workflow."""
        command = DedupCommand()
        try:
            duplicates, stats = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None,
                stage_callback=self.stage_callback
            )
        except OSError as e:
            logger.error(f"Detection failed: {e}")
            self.error_exit(str(e))

        if self.verbose:
            sys.stderr.write("\n")
            print()
            print(stats.print_summary())

        return duplicates

    @staticmethod
    def report_pair(pair: DuplicatePair) -> None:
        print(f"Duplicate found: {pair.target} -> {pair.reference}")

    def remove_duplicates(self, duplicates: List[DuplicatePair], params: DedupParams) -> None:
        """Report every duplicate and remove it unless this is a dry run."""
        try:
            removed, total_size = DuplicateService.remove_duplicates(
                duplicates,
                dry_run=params.dry_run,
                method=params.deletion,
                on_pair=self.report_pair
            )
        except OSError as e:
            logger.error(f"Removal failed: {e}")
            self.error_exit(str(e))

        if self.quiet:
            return

        size_str = ConvertUtils.bytes_to_human(total_size)
        found = ConvertUtils.pluralize(len(duplicates), "duplicate")
        if not duplicates:
            print("No duplicates found.")
        elif params.dry_run:
            print(f"Found {found} ({size_str}). Dry run: nothing was removed.")
        else:
            if params.deletion == DeletionMethod.TRASH:
                action, size_note = "moved to trash", "reclaimable"
            else:
                action, size_note = "deleted", "freed"
            print(f"Found {found}, {len(removed)} {action} ({size_str} {size_note}).")

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
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        self.validate_args(args)
        params = self.create_params(args)

        duplicates = self.run_detection(params)
        self.remove_duplicates(duplicates, params)

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
