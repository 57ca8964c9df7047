import os
import time
from datetime import datetime, timedelta

import pytest

from cleanout.logger import (
    LogSummary,
    Logger,
    format_bytes,
    get_file_age,
    is_path_accessible,
)


def _write(path, content="data"):
    path.write_text(content)
    return path


def test_format_bytes_below_one_kilobyte_is_plain_bytes():
    assert format_bytes(0) == "0 B"
    assert format_bytes(1023) == "1023 B"


def test_format_bytes_kilobytes():
    assert format_bytes(1024) == "1.0 KB"
    assert format_bytes(1536) == "1.5 KB"


@pytest.mark.parametrize("power", range(1, 7))
def test_format_bytes_unit_prefixes(power):
    text = format_bytes(1024**power)
    assert text.endswith(" " + "KMGTPE"[power - 1] + "B")
    assert text.startswith("1.0")


def test_is_path_accessible(tmp_path):
    assert is_path_accessible(tmp_path) is True
    assert is_path_accessible(tmp_path / "missing") is False


def test_get_file_age(tmp_path):
    target = _write(tmp_path / "old.txt")
    stamp = time.time() - 3 * 86400
    os.utime(target, (stamp, stamp))
    assert get_file_age(target) == pytest.approx(3, abs=0.01)


def test_delete_becomes_would_delete_in_dry_run(tmp_path):
    target = _write(tmp_path / "a.txt", "hello")
    logger = Logger(dry_run=True)
    entry = logger.log_file_operation("DELETE", target, True, None)
    assert entry.action == "WOULD_DELETE"
    assert logger.entries[-1] == entry
    assert logger.summary.successful_deletes == 1
    assert logger.summary.total_bytes_processed == len("hello")


def test_delete_keeps_action_outside_dry_run(tmp_path):
    target = _write(tmp_path / "a.txt")
    logger = Logger(dry_run=False)
    entry = logger.log_file_operation("DELETE", target, True, None)
    assert entry.action == "DELETE"


def test_failed_delete_records_error(tmp_path):
    logger = Logger()
    entry = logger.log_file_operation("DELETE", tmp_path / "gone", False, OSError("boom"))
    assert entry.error == "boom"
    assert entry.file_size == 0
    assert logger.summary.failed_deletes == 1
    assert logger.summary.successful_deletes == 0


def test_scan_counts_but_is_not_a_delete(tmp_path):
    logger = Logger()
    entry = logger.log_file_operation("SCAN", tmp_path, True, None)
    assert entry.is_directory is True
    assert logger.summary.total_files_scanned == 1
    assert logger.summary.successful_deletes == 0
    assert logger.summary.total_bytes_processed == 0


def test_finalize_summary_returns_snapshot():
    logger = Logger(dry_run=True)
    snapshot = logger.finalize_summary()
    assert isinstance(snapshot, LogSummary)
    assert snapshot.end_time >= snapshot.start_time
    assert snapshot.dry_run is True
    logger.summary.total_files_scanned += 5
    assert snapshot.total_files_scanned == 0


def test_print_summary_dry_run(tmp_path, capsys):
    target = _write(tmp_path / "a.txt")
    logger = Logger(dry_run=True)
    logger.log_file_operation("SCAN", target, True, None)
    logger.log_file_operation("DELETE", target, True, None)
    logger.finalize_summary()
    logger.print_summary()
    out = capsys.readouterr().out
    assert "Total Files Scanned: 2" in out
    assert "Files that would be deleted: 1" in out
    assert "Failed Deletions" not in out


def test_print_summary_real_run(capsys):
    logger = Logger(dry_run=False)
    start = datetime(2024, 1, 1, 12, 0, 0)
    logger.summary.start_time = start
    logger.summary.end_time = start + timedelta(seconds=1.5)
    logger.print_summary()
    out = capsys.readouterr().out
    assert "Start Time: 2024-01-01 12:00:00" in out
    assert "Duration: 1.5s" in out
    assert "Successfully Deleted: 0" in out
    assert "Failed Deletions: 0" in out


def test_save_log_to_file_real_run(tmp_path):
    logger = Logger(dry_run=False)
    log_file = logger.save_log_to_file(tmp_path / "nested" / "logs")
    assert log_file.exists()
    assert log_file.name.startswith("cleanup_")
    assert "dry_run" not in log_file.name
    content = log_file.read_text(encoding="utf-8")
    assert content.startswith("Cleanup Operation Log - ")
    assert "NO FILES WERE ACTUALLY DELETED" not in content


def test_save_log_to_file_reports_directory_failure(tmp_path):
    blocker = _write(tmp_path / "blocker")
    with pytest.raises(OSError, match="failed to create log directory"):
        Logger().save_log_to_file(blocker / "logs")