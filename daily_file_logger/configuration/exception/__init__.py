import sys
from daily_file_logger.configuration.logger import logger


def error_message_detail(error: Exception, error_detail: sys) -> str:
    """
    Creates detailed error message with file name and line number
    """
    _, exc_value, exc_tb = error_detail.exc_info()

    # Error was built, not caught: the active traceback (if any) is not its own
    if exc_tb is None or exc_value is not error:
        return f"Error     : {str(error)}"

    file_name = exc_tb.tb_frame.f_code.co_filename
    line_number = exc_tb.tb_lineno

    return (
        f"File      : {file_name}\n"
        f"Line No   : {line_number}\n"
        f"Error     : {str(error)}"
    )


class LoggerException(Exception):
    """
    Base exception for the daily file logger
    """
    headline = "Logger failure"

    def __init__(self, error: Exception, error_detail: sys):
        super().__init__(str(error))
        self.error_message = (
            f"{self.headline}\n{error_message_detail(error, error_detail)}"
        )

    def __str__(self):
        return self.error_message

    def report(self) -> None:
        logger.error(self.error_message)


class FatalInitError(LoggerException):
    """
    The log directory could not be created. The process cannot continue.
    """
    headline = "Could not create the log folder"

    def report(self) -> None:
        logger.critical(self.error_message)


class DegradedWriteError(LoggerException):
    """
    The log file is missing or could not be written. Logging continues
    on the console only.
    """
    headline = "Log file unavailable, message kept on console only"


__all__ = [
    "error_message_detail",
    "LoggerException",
    "FatalInitError",
    "DegradedWriteError",
]
