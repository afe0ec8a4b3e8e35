"""LogService: lifecycle, validation, line format, error traces, rotation, concurrency."""

import logging
import os
import re
import shutil
import threading
from datetime import date
from unittest.mock import patch

import pytest

from engineer_manager.application.exceptions import LogSinkError, NotInitializedError
from engineer_manager.config.logging import PACKAGE_LOGGER, configure_logging
from engineer_manager.domain.exceptions import InvalidArgumentError
from engineer_manager.infrastructure.logging.log_service import (
    DEFAULT_LOG_DIR,
    LOG_BACKUP_COUNT,
    MAX_LOG_SIZE_BYTES,
    LogService,
)

LINE_PATTERN = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] \[(\w+)\] (.*)$")


def _lines(path):
    with open(path, encoding="utf-8") as f:
        return f.read().splitlines()


# ---------- 1. Lifecycle ----------


def test_defaults():
    assert MAX_LOG_SIZE_BYTES == 10 * 1024 * 1024
    assert LOG_BACKUP_COUNT == 1
    assert DEFAULT_LOG_DIR == "logs"


def test_initialize_creates_directory_and_dated_file(log_service, log_dir, log_file):
    assert not log_service.is_initialized
    log_service.initialize(str(log_dir / "nested"))
    nested_file = log_dir / "nested" / log_file.name
    assert log_service.is_initialized
    assert log_service.log_directory == os.path.abspath(str(log_dir / "nested"))
    assert log_service.log_file_path == str(nested_file)
    assert nested_file.is_file()
    assert _lines(nested_file)[-1].endswith("[INFO] LogService initialized successfully")


def test_current_log_file_name_uses_clock():
    service = LogService(clock=lambda: date(2024, 12, 31))
    assert service.current_log_file_name() == "System-2024-12-31.log"


def test_initialize_is_idempotent(initialized_log_service, log_dir, tmp_path):
    first_dir = initialized_log_service.log_directory
    initialized_log_service.initialize(str(tmp_path / "other"))
    assert initialized_log_service.log_directory == first_dir
    assert not (tmp_path / "other").exists()


def test_initialize_default_uses_relative_logs_dir(log_service, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    log_service.initialize_default()
    assert log_service.log_directory == str(tmp_path / "logs")


@pytest.mark.parametrize("directory", [None, "", "   "])
def test_initialize_rejects_missing_directory(log_service, tmp_path, monkeypatch, directory):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(InvalidArgumentError):
        log_service.initialize(directory)
    assert not log_service.is_initialized
    assert list(tmp_path.iterdir()) == []


def test_initialize_wraps_os_errors_and_stays_uninitialized(log_service, tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")
    with pytest.raises(LogSinkError) as exc_info:
        log_service.initialize(str(blocker / "logs"))
    assert isinstance(exc_info.value.__cause__, OSError)
    assert not log_service.is_initialized
    assert log_service.log_directory is None
    with pytest.raises(NotInitializedError):
        log_service.log(logging.INFO, "still not ready")


def test_failed_startup_write_rolls_back_initialization(log_dir, log_file):
    """A rollover failure on the first line leaves the service uninitialized and retryable."""
    log_dir.mkdir()
    log_file.write_text("x" * 500)
    blocked_backup = log_dir / (log_file.name + ".1")
    blocked_backup.mkdir()
    (blocked_backup / "keep").write_text("x")

    service = LogService(max_bytes=100, clock=lambda: date(2025, 2, 10))
    with pytest.raises(LogSinkError):
        service.initialize(str(log_dir))
    assert not service.is_initialized
    assert service.log_directory is None
    assert service.log_file_path is None
    with pytest.raises(NotInitializedError):
        service.log(logging.INFO, "after failed start")

    shutil.rmtree(blocked_backup)
    service.initialize(str(log_dir))
    service.cleanup()
    assert service.is_initialized
    assert _lines(log_file)[-1].endswith("[INFO] LogService initialized successfully")


def test_startup_line_written_above_configured_level(log_dir, log_file):
    service = LogService(level=logging.WARNING, clock=lambda: date(2025, 2, 10))
    service.initialize(str(log_dir))
    service.log(logging.INFO, "filtered info")
    service.log(logging.WARNING, "kept warning")
    service.cleanup()
    lines = _lines(log_file)
    assert lines[0].endswith("[INFO] LogService initialized successfully")
    assert not any("filtered info" in line for line in lines)
    assert lines[-1].endswith("[WARNING] kept warning")


# ---------- 2. Validation before/after initialize ----------


def test_log_before_initialize_fails(log_service):
    with pytest.raises(NotInitializedError):
        log_service.log(logging.INFO, "hello")
    with pytest.raises(NotInitializedError):
        log_service.log_error("hello", RuntimeError("x"))


def test_not_initialized_checked_before_message(log_service):
    with pytest.raises(NotInitializedError):
        log_service.log(logging.INFO, None)


def test_null_message_rejected_without_writing(initialized_log_service, log_file):
    before = _lines(log_file)
    with pytest.raises(InvalidArgumentError):
        initialized_log_service.log(logging.INFO, None)
    assert _lines(log_file) == before
    assert initialized_log_service.is_initialized


def test_log_error_rejects_null_arguments(initialized_log_service):
    with pytest.raises(InvalidArgumentError):
        initialized_log_service.log_error(None, RuntimeError("x"))
    with pytest.raises(InvalidArgumentError):
        initialized_log_service.log_error("message", None)


# ---------- 3. Line format ----------


def test_line_format_and_levels(initialized_log_service, log_file):
    initialized_log_service.log(logging.INFO, "info message")
    initialized_log_service.log(logging.WARNING, "warning message")
    initialized_log_service.log(logging.ERROR, "error message")
    parsed = [LINE_PATTERN.match(line).groups() for line in _lines(log_file)]
    assert parsed[-3:] == [
        ("INFO", "info message"),
        ("WARNING", "warning message"),
        ("ERROR", "error message"),
    ]


def test_messages_below_level_are_dropped(log_dir, log_file):
    service = LogService(level=logging.INFO, clock=lambda: date(2025, 2, 10))
    service.initialize(str(log_dir))
    service.log(logging.DEBUG, "debug detail")
    service.cleanup()
    assert not any("debug detail" in line for line in _lines(log_file))


def test_percent_signs_are_written_verbatim(initialized_log_service, log_file):
    initialized_log_service.log(logging.INFO, "100% done %s")
    assert _lines(log_file)[-1].endswith("[INFO] 100% done %s")


def test_log_error_writes_indented_trace_with_cause(initialized_log_service, log_file):
    try:
        try:
            raise ValueError("inner failure")
        except ValueError as inner:
            raise RuntimeError("wrapped failure") from inner
    except RuntimeError as e:
        initialized_log_service.log_error("Chained failure", e)

    lines = _lines(log_file)
    head = next(i for i, line in enumerate(lines) if line.endswith("[ERROR] Chained failure"))
    trace = lines[head + 1:]
    assert trace and all(line.startswith("\t") for line in trace)
    text = "\n".join(trace)
    assert "ValueError: inner failure" in text
    assert "RuntimeError: wrapped failure" in text


def test_log_error_accepts_exception_that_was_never_raised(initialized_log_service, log_file):
    initialized_log_service.log_error("Not raised", KeyError("missing"))
    lines = _lines(log_file)
    assert lines[-2].endswith("[ERROR] Not raised")
    assert lines[-1] == "\tKeyError: 'missing'"


def test_echo_shows_caller_origin_on_verbose_console(log_dir, capsys):
    configure_logging("INFO", verbose=True)
    service = LogService(clock=lambda: date(2025, 2, 10), echo=True)

    def record_from_named_function():
        service.log(logging.INFO, "echoed line")

    try:
        service.initialize(str(log_dir))
        record_from_named_function()
    finally:
        service.cleanup()
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)

    err = capsys.readouterr().err
    assert "test_log_service:record_from_named_function:" in err
    assert "echoed line" in err


def test_without_echo_console_stays_silent(initialized_log_service, capsys):
    configure_logging("INFO", verbose=True)
    try:
        initialized_log_service.log(logging.INFO, "file only")
    finally:
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
    assert "file only" not in capsys.readouterr().err


# ---------- 4. Cleanup, rotation, write failures ----------


def test_cleanup_is_repeatable_and_keeps_state(initialized_log_service, log_file):
    initialized_log_service.cleanup()
    initialized_log_service.cleanup()
    assert initialized_log_service.is_initialized
    initialized_log_service.log(logging.INFO, "after cleanup")
    initialized_log_service.cleanup()
    assert _lines(log_file)[-1].endswith("[INFO] after cleanup")


def test_cleanup_before_initialize_is_noop(log_service):
    log_service.cleanup()
    assert not log_service.is_initialized


def test_rotation_keeps_one_backup(log_dir, log_file):
    service = LogService(max_bytes=200, clock=lambda: date(2025, 2, 10))
    service.initialize(str(log_dir))
    for i in range(30):
        service.log(logging.INFO, f"line {i:02d} " + "x" * 40)
    service.cleanup()
    names = sorted(p.name for p in log_dir.iterdir())
    assert names == [log_file.name, log_file.name + ".1"]
    assert os.path.getsize(log_file) <= 200
    assert _lines(log_file)[-1].endswith("line 29 " + "x" * 40)


def test_write_failure_propagates_as_log_sink_error(initialized_log_service):
    with patch.object(
        initialized_log_service._handler, "emit", side_effect=OSError("disk full")
    ):
        with pytest.raises(LogSinkError) as exc_info:
            initialized_log_service.log(logging.INFO, "lost")
    assert "disk full" in exc_info.value.message


def test_stream_write_failure_is_not_swallowed(initialized_log_service):
    handler = initialized_log_service._handler
    with patch.object(handler.stream, "write", side_effect=OSError("device error")):
        with pytest.raises(LogSinkError):
            initialized_log_service.log(logging.INFO, "lost")


# ---------- 5. Concurrency ----------


def test_concurrent_writers_produce_complete_lines(initialized_log_service, log_file):
    threads_count, per_thread = 8, 50
    barrier = threading.Barrier(threads_count)

    def writer(n):
        barrier.wait()
        for i in range(per_thread):
            initialized_log_service.log(logging.INFO, f"thread-{n} message-{i} " + "y" * 64)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    lines = [line for line in _lines(log_file) if "thread-" in line]
    assert len(lines) == threads_count * per_thread
    assert all(LINE_PATTERN.match(line) and line.endswith("y" * 64) for line in lines)


def test_concurrent_initialize_opens_single_sink(log_service, log_dir, log_file):
    threads = [
        threading.Thread(target=log_service.initialize, args=(str(log_dir),))
        for _ in range(5)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    initialized_lines = [line for line in _lines(log_file) if "initialized successfully" in line]
    assert len(initialized_lines) == 1
