"""
TENEX Tasks CLI module.

Provides the main entry point for the tenex-task command.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .config import Settings
from .errors import TenexTaskError, UsageError
from .pipeline import read_transcript, run_pipeline

logger = logging.getLogger("tenex_tasks.cli")

EXIT_FAILURE = 1
EXIT_USAGE = 2


def configure_logging(level: str) -> None:
    """Send log records to stderr at the given level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tenex-task",
        description="TENEX Tasks - Transcripts to published project tasks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"tenex-task {__version__}"
    )
    parser.add_argument("transcript", help="Path to the transcript file")
    parser.add_argument("--project", help="Project name to use instead of detecting it")
    parser.add_argument("--dry-run", action="store_true", help="Print the task, don't publish")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    return parser


def cmd_task(args, settings: Settings) -> int:
    """Process a transcript into a task."""
    logger.info("Processing Tenex task from: %s", args.transcript)

    transcript = read_transcript(args.transcript)
    result = run_pipeline(
        transcript,
        settings,
        project=args.project,
        dry_run=args.dry_run,
    )

    if args.dry_run:
        print(f"Project: {result.project}")
        print("-" * 40)
        print(result.task.body)

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits 0 for --help/--version and 2 for bad usage
        return e.code if isinstance(e.code, int) else EXIT_USAGE

    try:
        settings = Settings.from_env()
    except TenexTaskError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    configure_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        return cmd_task(args, settings)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Usage: tenex-task <path_to_transcript_file>", file=sys.stderr)
        return EXIT_USAGE
    except TenexTaskError as e:
        logger.debug("Error during processing", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
