import logging
import sys

# ============================================================
# DIAGNOSTIC LOGGER
# ============================================================

LOGGER_NAME = "daily_file_logger"

LOG_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"


class StderrHandler(logging.StreamHandler):
    """
    Stream handler bound to whatever sys.stderr is at emit time,
    so redirected or captured stderr still receives the report.
    """
    def __init__(self, level=logging.NOTSET):
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr

    def setStream(self, stream):
        # Always follows sys.stderr, nothing to swap
        return None


# ============================================================
# LOGGER CONFIGURATION
# ============================================================

logger = logging.getLogger(LOGGER_NAME)

# Avoid adding handlers multiple times on re-import
if not logger.handlers:
    handler = StderrHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

logger.setLevel(logging.INFO)
logger.propagate = False

# Expose logger
__all__ = ["logger", "LOGGER_NAME"]
