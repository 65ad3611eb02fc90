import io
import sys

from daily_file_logger.configuration.logger import StderrHandler
from daily_file_logger.configuration.exception import (
    DegradedWriteError,
    FatalInitError,
    error_message_detail,
)


def test_detail_includes_location_for_caught_error() -> None:
    try:
        raise OSError("disk full")
    except OSError as e:
        detail = error_message_detail(e, sys)

    assert "File      : " in detail
    assert "Line No   : " in detail
    assert detail.endswith("Error     : disk full")


def test_detail_without_traceback() -> None:
    detail = error_message_detail(FileNotFoundError("gone"), sys)
    assert detail == "Error     : gone"


def test_detail_ignores_unrelated_active_exception() -> None:
    try:
        raise ValueError("caller's own problem")
    except ValueError:
        detail = error_message_detail(FileNotFoundError("gone"), sys)

    assert detail == "Error     : gone"


def test_report_goes_to_stderr(capsys) -> None:
    DegradedWriteError(FileNotFoundError("gone"), sys).report()
    FatalInitError(PermissionError("denied"), sys).report()

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ERROR - Log file unavailable" in captured.err
    assert "CRITICAL - Could not create the log folder" in captured.err
    assert "Error     : denied" in captured.err


def test_str_is_detailed_message() -> None:
    error = DegradedWriteError(OSError("boom"), sys)
    assert str(error).startswith("Log file unavailable")
    assert str(error).endswith("boom")


def test_stderr_handler_ignores_set_stream() -> None:
    handler = StderrHandler()

    assert handler.setStream(io.StringIO()) is None
    assert handler.stream is sys.stderr
