import os
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Callable, Optional, Union

from daily_file_logger.configuration.exception import (
    DegradedWriteError,
    FatalInitError,
)


# ============================================================
# CONSTANTS
# ============================================================

LOG_DIR_NAME = "log"
LOG_FILE_SUFFIX = ".log"

INFO = "INFO"
ERROR = "ERROR"

START_OF_LOG = "/" + "-" * 33 + " Start of Log " + "-" * 33 + "\\"
END_OF_LOG = "\\" + "-" * 33 + " End of Log " + "-" * 33 + "/\n"


# ============================================================
# FORMATTING & PATHS (PURE)
# ============================================================

def format_time(moment: datetime) -> str:
    """hh:mm:ss AM/PM, independent of the process locale."""
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{hour:02d}:{moment.minute:02d}:{moment.second:02d} {meridiem}"


def format_date(day: date) -> str:
    return f"{day.month}_{day.day}_{day.year}"


def format_line(owner_name: str, level: str, message: str, moment: datetime) -> str:
    return f"[{owner_name}][{format_time(moment)}][{level}]: {message}"


def log_dir_path(base_dir: Union[str, Path]) -> Path:
    return Path(base_dir) / LOG_DIR_NAME


def log_file_path(log_dir: Union[str, Path], day: date) -> Path:
    """
    Daily log file for `day`: <log_dir>/<M_D_Y>.log
    Every logger created on the same day resolves to the same file.
    """
    return Path(log_dir) / f"{format_date(day)}{LOG_FILE_SUFFIX}"


# ============================================================
# BOOTSTRAP
# ============================================================

def ensure_log_dir(log_dir: Path) -> Path:
    """
    Create the log folder if absent. Losing a creation race to another
    logger is fine, anything else is a FatalInitError.
    """
    if not log_dir.is_dir():
        try:
            os.makedirs(log_dir, exist_ok=True)
        except OSError as e:
            raise FatalInitError(e, sys) from e
    return log_dir


# ============================================================
# LOGGER
# ============================================================

class DailyFileLogger:
    """
    Per-object logger. Each line is tagged with the owner's name and the
    time, appended to today's log file and echoed to the console:

        [OwnerName][hh:mm:ss AM/PM][INFO]: message

    Not meant to be shared between owners.
    """

    def __init__(
        self,
        owner_name: str,
        base_dir: Optional[Union[str, Path]] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._owner_name = owner_name
        self._clock = clock

        try:
            log_dir = ensure_log_dir(
                log_dir_path(os.getcwd() if base_dir is None else base_dir)
            )
        except FatalInitError as e:
            # Logging is a prerequisite for the rest of the run
            e.report()
            sys.exit(1)

        # Fixed for the lifetime of the instance, no rollover at midnight
        self._log_file_path = log_file_path(log_dir, clock().date())

        if self._create_log_file():
            self._write(START_OF_LOG)

    @property
    def owner_name(self) -> str:
        return self._owner_name

    @property
    def log_file_path(self) -> Path:
        return self._log_file_path

    def _create_log_file(self) -> bool:
        if self._log_file_path.exists():
            return True
        try:
            self._log_file_path.touch(exist_ok=True)
        except OSError as e:
            DegradedWriteError(e, sys).report()
            return False
        return True

    def _write(self, message: str) -> str:
        """
        Append `message` to the log file if it exists, one open/write/close
        per call. Failures are reported and swallowed. Returns `message`
        unchanged so it can be echoed to the console.
        """
        if not self._log_file_path.exists():
            DegradedWriteError(
                FileNotFoundError(f"Log file not found: {self._log_file_path}"), sys
            ).report()
            return message

        try:
            with self._log_file_path.open(
                "a", encoding="utf-8", errors="backslashreplace"
            ) as handle:
                handle.write(f"{message}\n")
        except (OSError, ValueError) as e:
            DegradedWriteError(e, sys).report()

        return message

    def info(self, message: str) -> None:
        line = format_line(self._owner_name, INFO, message, self._clock())
        print(self._write(line))

    def error(self, message: str) -> None:
        line = format_line(self._owner_name, ERROR, message, self._clock())
        print(self._write(line), file=sys.stderr)

    def end_session(self) -> None:
        """Mark the end of this logging session in the log file only."""
        self._write(END_OF_LOG)


__all__ = [
    "DailyFileLogger",
    "ensure_log_dir",
    "format_date",
    "format_line",
    "format_time",
    "log_dir_path",
    "log_file_path",
    "START_OF_LOG",
    "END_OF_LOG",
]
