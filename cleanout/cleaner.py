"""Removal of files older than a given number of days."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, timedelta

from cleanout.logger import DELETE, SCAN, Logger, is_path_accessible


@dataclass
class CleanResult:
    """Counts gathered while cleaning a directory."""

    files_checked: int = 0
    files_marked_for_deletion: int = 0
    files_actually_deleted: int = 0


class PathNotAccessibleError(OSError):
    """Raised when the directory to clean cannot be reached."""

    def __init__(self, path: str) -> None:
        super().__init__(f"path is not accessible: {path}")
        self.path = path


_WalkItem = tuple[str, "os.stat_result | None", "OSError | None"]


def _walk(root: str) -> Iterator[_WalkItem]:
    """Walk *root* in lexical order without following symlinks."""
    try:
        info = os.lstat(root)
    except OSError as exc:
        yield root, None, exc
        return
    yield from _walk_from(root, info)


def _walk_from(path: str, info: os.stat_result) -> Iterator[_WalkItem]:
    if not stat.S_ISDIR(info.st_mode):
        yield path, info, None
        return
    try:
        names = sorted(os.listdir(path))
    except OSError as exc:
        yield path, info, exc
        return
    yield path, info, None
    for name in names:
        child = os.path.join(path, name)
        try:
            child_info = os.lstat(child)
        except OSError as exc:
            yield child, None, exc
            continue
        yield from _walk_from(child, child_info)


def clean_directory(
    path: str | os.PathLike[str],
    days: int,
    dry_run: bool = False,
    verbose: bool = False,
) -> CleanResult:
    """Delete (or, in dry-run mode, list) files under *path* older than *days*.

    A log of the run is written to the ``logs`` directory of the current
    working directory.
    """
    result = CleanResult()
    logger = Logger(dry_run)
    root = os.path.normpath(os.fspath(path))

    if not is_path_accessible(root):
        raise PathNotAccessibleError(root)

    cutoff = (datetime.now() - timedelta(days=days)).timestamp()

    for current, info, error in _walk(root):
        if error is not None or info is None:
            logger.log_file_operation(SCAN, current, False, error)
            if verbose:
                print(f"⚠️ Skipping {current}: {error}")
            continue

        result.files_checked += 1
        logger.log_file_operation(SCAN, current, True, None)

        if stat.S_ISDIR(info.st_mode):
            if verbose:
                print(f"📂 Skipping directory: {current}")
            continue

        if info.st_mtime < cutoff:
            result.files_marked_for_deletion += 1
            if dry_run:
                print("[DRY-RUN] Would delete:", current)
                logger.log_file_operation(DELETE, current, True, None)
                continue
            if verbose:
                print("🗑️ Deleting:", current)
            try:
                os.remove(current)
            except OSError as exc:
                logger.log_file_operation(DELETE, current, False, exc)
                print(f"❌ Failed to delete {current}: {exc}")
            else:
                logger.log_file_operation(DELETE, current, True, None)
                result.files_actually_deleted += 1
        elif verbose:
            print("✅ Keeping:", current)

    logger.finalize_summary()
    logger.print_summary()
    try:
        logger.save_log_to_file()
    except OSError as exc:
        if verbose:
            print(f"Warning: Failed to save log file: {exc}")

    return result