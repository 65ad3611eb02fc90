from daily_file_logger.src.file_logger import (
    DailyFileLogger,
    END_OF_LOG,
    START_OF_LOG,
    format_line,
    format_time,
    log_file_path,
)
from daily_file_logger.configuration.exception import (
    DegradedWriteError,
    FatalInitError,
    LoggerException,
)

__all__ = [
    "DailyFileLogger",
    "DegradedWriteError",
    "FatalInitError",
    "LoggerException",
    "END_OF_LOG",
    "START_OF_LOG",
    "format_line",
    "format_time",
    "log_file_path",
]
