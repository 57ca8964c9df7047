"""Command-line interface for cleaning old files and old cleanup logs."""

from __future__ import annotations

import argparse
import os
import stat
import sys
import tempfile
from collections.abc import Iterator, Sequence
from datetime import datetime, timedelta

from cleanout.cleaner import clean_directory

_DEFAULT_DAYS = 7
_LOGS_DIR = "logs"

_CLEAN_EPILOG = """\
examples:
  # Default cleanup: system temp directory, files older than 7 days
  cleanout clean

  # Preview what would be deleted without deleting anything
  cleanout clean --dry-run

  # Delete files older than 30 days
  cleanout clean --days 30

  # Clean old files in a specific folder
  cleanout clean --path "C:\\MyCache" --days 10

  # Show detailed output while deleting
  cleanout clean --path /tmp --days 5 --verbose

  # Combine flags: custom folder, details, preview only
  cleanout clean --path ~/Downloads --days 14 --dry-run --verbose
"""

_CLEAN_LOGS_EPILOG = """\
examples:
  # Delete logs older than 7 days (default)
  cleanout clean-logs

  # Delete logs older than 14 days
  cleanout clean-logs --days 14
"""


def _walk_entries(root: str) -> Iterator[tuple[str, os.stat_result | None, OSError | None]]:
    """Yield every path under *root* in lexical order, with its stat or an error."""
    try:
        info = os.lstat(root)
    except OSError as exc:
        yield root, None, exc
        return
    yield root, info, None
    if not stat.S_ISDIR(info.st_mode):
        return
    try:
        names = sorted(os.listdir(root))
    except OSError as exc:
        yield root, info, exc
        return
    for name in names:
        yield from _walk_entries(os.path.join(root, name))


def clean_logs(logs_dir: str | os.PathLike[str] = _LOGS_DIR, days: int = _DEFAULT_DAYS) -> int:
    """Delete files in *logs_dir* older than *days* days.

    Returns the number of files whose deletion was attempted.
    """
    directory = os.fspath(logs_dir)
    cutoff = (datetime.now() - timedelta(days=days)).timestamp()

    print(f"🧹 Cleaning log files older than {days}  days in  {directory}")

    if not os.path.exists(directory):
        print("Logs directory does not exist:", directory, file=sys.stderr)
        return 0

    attempted = 0
    for current, info, error in _walk_entries(directory):
        if error is not None or info is None:
            print(f"⚠️ Failed to access {current}: {error}")
            continue
        if info.st_mtime < cutoff and not stat.S_ISDIR(info.st_mode):
            attempted += 1
            try:
                os.remove(current)
            except OSError as exc:
                print("❌ Error deleting file:", current, exc, file=sys.stderr)
            else:
                print("🗑️ Deleted file:", current, file=sys.stderr)

    print("✅ Log cleanup complete.")
    print(f"Total files deleted: {attempted}")
    return attempted


def _run_clean(args: argparse.Namespace) -> int:
    path = os.path.normpath(os.path.expanduser(args.path))

    if not os.path.exists(path):
        print(f"Error: Directory does not exist: {path}")
        if " " in path:
            print("Hint: If your path contains spaces, wrap it in double quotes.")
        return 0

    if args.verbose:
        print("🔍 Scanning:", path)
        print(f"🕒 Looking for files older than {args.days} days...")

    try:
        result = clean_directory(path, args.days, args.dry_run, args.verbose)
    except OSError as exc:
        print(f"Error during cleanup: {exc}")
        return 0

    print("\n📊 Summary:")
    print(f"✓ Files checked: {result.files_checked}")
    if args.dry_run:
        print(f"🗑️ Files marked for deletion: {result.files_marked_for_deletion}")
        print("ℹ️ No files were actually deleted (dry-run mode)")
    else:
        print(f"🗑️ Files deleted successfully: {result.files_actually_deleted}")
        failed = result.files_marked_for_deletion - result.files_actually_deleted
        if failed > 0:
            print(f"⚠️ Failed to delete {failed} files")
    return 0


def _run_clean_logs(args: argparse.Namespace) -> int:
    clean_logs(_LOGS_DIR, args.days)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the ``clean`` and ``clean-logs`` commands."""
    parser = argparse.ArgumentParser(
        prog="cleanout",
        description=(
            "Cleanout is a CLI utility for scanning and removing old temp/cache files. "
            "It supports dry-run mode, custom paths, and age threshold."
        ),
    )
    commands = parser.add_subparsers(dest="command", metavar="command")

    clean = commands.add_parser(
        "clean",
        help="Clean old files from a directory",
        description=(
            "Scans a directory and deletes files older than N days. "
            "Supports dry-run mode to preview deletions."
        ),
        epilog=_CLEAN_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    clean.add_argument("--path", default=tempfile.gettempdir(), help="Directory to scan")
    clean.add_argument(
        "--days", type=int, default=_DEFAULT_DAYS, help="Delete files older than N days"
    )
    clean.add_argument("--dry-run", action="store_true", help="Preview deletions only")
    clean.add_argument("--verbose", action="store_true", help="Show detailed logs")
    clean.set_defaults(handler=_run_clean)

    logs = commands.add_parser(
        "clean-logs",
        help="Delete old log files from the logs directory",
        description=(
            "Manually delete log files older than a given number of days "
            "from the logs directory."
        ),
        epilog=_CLEAN_LOGS_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    logs.add_argument(
        "--days",
        type=int,
        default=_DEFAULT_DAYS,
        help="Delete log files older than this many days",
    )
    logs.set_defaults(handler=_run_clean_logs)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())