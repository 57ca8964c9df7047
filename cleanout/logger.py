"""Recording and reporting of the file operations made during a cleanup run."""

from __future__ import annotations

import os
import stat
import time
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from pathlib import Path

SCAN = "SCAN"
DELETE = "DELETE"
WOULD_DELETE = "WOULD_DELETE"

_UNIT = 1024
_PREFIXES = "KMGTPE"


@dataclass(frozen=True)
class LogEntry:
    """A single recorded file operation."""

    timestamp: datetime
    action: str
    file_path: str
    file_size: int = 0
    is_directory: bool = False
    success: bool = True
    error: str = ""


@dataclass
class LogSummary:
    """Totals for a cleanup run."""

    start_time: datetime = field(default_factory=datetime.now)
    end_time: datetime | None = None
    total_files_scanned: int = 0
    total_bytes_processed: int = 0
    successful_deletes: int = 0
    failed_deletes: int = 0
    dry_run: bool = False

    @property
    def duration(self) -> timedelta:
        """Time between start and end (or now, if the run is not finished)."""
        end = self.end_time if self.end_time is not None else datetime.now()
        return end - self.start_time


class Logger:
    """Collects log entries and summary statistics for a cleanup run."""

    def __init__(self, dry_run: bool = False) -> None:
        self.entries: list[LogEntry] = []
        self.summary = LogSummary(dry_run=dry_run)

    @property
    def dry_run(self) -> bool:
        return self.summary.dry_run

    def log_file_operation(
        self,
        action: str,
        path: str | os.PathLike[str],
        success: bool,
        error: BaseException | str | None = None,
    ) -> LogEntry:
        """Record one operation on *path* and update the running totals."""
        file_path = os.fspath(path)
        try:
            info = os.stat(file_path)
        except OSError:
            file_size, is_dir = 0, False
        else:
            file_size, is_dir = info.st_size, stat.S_ISDIR(info.st_mode)

        if self.dry_run and action == DELETE:
            action = WOULD_DELETE

        entry = LogEntry(
            timestamp=datetime.now(),
            action=action,
            file_path=file_path,
            file_size=file_size,
            is_directory=is_dir,
            success=success,
            error="" if error is None else str(error),
        )
        self.entries.append(entry)

        if action in (DELETE, WOULD_DELETE):
            if success:
                self.summary.successful_deletes += 1
                self.summary.total_bytes_processed += file_size
            else:
                self.summary.failed_deletes += 1
        self.summary.total_files_scanned += 1
        return entry

    def finalize_summary(self) -> LogSummary:
        """Stamp the end time and return a snapshot of the summary."""
        self.summary.end_time = datetime.now()
        return replace(self.summary)

    def print_summary(self) -> None:
        """Print a human-readable summary of the run to standard output."""
        summary = self.summary
        end = summary.end_time if summary.end_time is not None else datetime.now()
        print("\n📊 Operation Summary:")
        print(f"Start Time: {summary.start_time:%Y-%m-%d %H:%M:%S}")
        print(f"End Time: {end:%Y-%m-%d %H:%M:%S}")
        print(f"Duration: {_format_duration(end - summary.start_time)}")
        print(f"Total Files Scanned: {summary.total_files_scanned}")
        print(f"Total Data Processed: {format_bytes(summary.total_bytes_processed)}")
        if summary.dry_run:
            print(f"Files that would be deleted: {summary.successful_deletes}")
        else:
            print(f"Successfully Deleted: {summary.successful_deletes}")
            print(f"Failed Deletions: {summary.failed_deletes}")

    def save_log_to_file(self, log_dir: str | os.PathLike[str] = "logs") -> Path:
        """Write the log to a timestamped file in *log_dir* and return its path."""
        directory = Path(log_dir)
        try:
            directory.mkdir(mode=0o755, parents=True, exist_ok=True)
        except OSError as exc:
            raise OSError(f"failed to create log directory: {exc}") from exc

        now = datetime.now()
        name = "cleanup_dry_run" if self.dry_run else "cleanup"
        log_file = directory / f"{name}_{now:%Y%m%d_%H%M%S}.log"

        try:
            handle = log_file.open("w", encoding="utf-8")
        except OSError as exc:
            raise OSError(f"failed to create log file: {exc}") from exc

        with handle:
            stamp = f"{datetime.now():%Y-%m-%d %H:%M:%S}"
            if self.dry_run:
                handle.write(f"DRY RUN - Cleanup Operation Log - {stamp}\n")
                handle.write("NO FILES WERE ACTUALLY DELETED\n")
            else:
                handle.write(f"Cleanup Operation Log - {stamp}\n")
            handle.write("----------------------------------------\n\n")

            for entry in self.entries:
                if entry.action == SCAN and not entry.is_directory:
                    continue  # plain file scans are too noisy to keep
                handle.write(
                    f"[{entry.timestamp:%H:%M:%S}] {entry.action} - {entry.file_path}\n"
                )
                if entry.error:
                    handle.write(f"  Error: {entry.error}\n")

            summary = self.summary
            handle.write("\nSummary:\n")
            handle.write(f"Total Files Scanned: {summary.total_files_scanned}\n")
            handle.write(
                f"Total Data Processed: {format_bytes(summary.total_bytes_processed)}\n"
            )
            handle.write(f"Successful Deletes: {summary.successful_deletes}\n")
            handle.write(f"Failed Deletes: {summary.failed_deletes}\n")
        return log_file


def format_bytes(size: int) -> str:
    """Render a byte count in binary units, e.g. ``1.5 KB``."""
    if size < _UNIT:
        return f"{size} B"
    divisor, exponent = _UNIT, 0
    n = size // _UNIT
    while n >= _UNIT:
        divisor *= _UNIT
        exponent += 1
        n //= _UNIT
    return f"{size / divisor:.1f} {_PREFIXES[exponent]}B"


def is_path_accessible(path: str | os.PathLike[str]) -> bool:
    """Return True if *path* can be stat'ed."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def get_file_age(path: str | os.PathLike[str]) -> float:
    """Return the age of *path* in days, measured from its modification time."""
    return (time.time() - os.stat(path).st_mtime) / 86400


def _format_duration(duration: timedelta) -> str:
    """Format a duration rounded to milliseconds in the compact h/m/s style."""
    millis = round(duration / timedelta(milliseconds=1))
    sign = "-" if millis < 0 else ""
    millis = abs(millis)
    if millis == 0:
        return "0s"
    if millis < 1000:
        return f"{sign}{millis}ms"
    hours, rest = divmod(millis, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, fraction = divmod(rest, 1000)
    secs = str(seconds)
    if fraction:
        secs += "." + f"{fraction:03d}".rstrip("0")
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    return f"{sign}{secs}s"