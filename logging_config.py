# logging_config.py
import logging
import sys

from config import get_config

config = get_config()
DEBUG_MODE = config["DEBUG_MODE"]

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# The feeder log uses WARN rather than WARNING.
logging.addLevelName(logging.WARNING, "WARN")

# Configure logging once for the entire application.
logging.basicConfig(
    level=logging.DEBUG if DEBUG_MODE else logging.INFO,
    format=LOG_FORMAT,
    datefmt=LOG_DATE_FORMAT,
)


class FallbackFileHandler(logging.FileHandler):
    """
    Append-only file handler that degrades to a fallback stream.

    The file is opened lazily on the first record. If it cannot be opened or
    written, the failure is reported once on the fallback stream and every
    affected record is written there instead.
    """

    def __init__(self, filename: str, fallback_stream=None):
        super().__init__(filename, mode="a", encoding="utf-8", delay=True)
        self.fallback_stream = fallback_stream
        self.failure_reported = False

    def emit(self, record: logging.LogRecord) -> None:
        # FileHandler opens a delayed stream outside its own error handling.
        try:
            super().emit(record)
        except OSError:
            self.handleError(record)

    def handleError(self, record: logging.LogRecord) -> None:
        stream = self.fallback_stream or sys.stderr
        try:
            if not self.failure_reported:
                # The stream stays unset when the delayed open failed.
                action = "open" if self.stream is None else "write to"
                stream.write(
                    f"Error: Could not {action} log file: {self.baseFilename}\n"
                )
                self.failure_reported = True
            stream.write(self.format(record) + "\n")
            stream.flush()
        except Exception:
            # Nowhere left to report to.
            pass


def configure_file_logging(
    filename: str, logger: logging.Logger | None = None
) -> FallbackFileHandler:
    """
    Attaches the feeder log file to the given logger (root by default).

    Returns the handler so callers can detach it again.
    """
    handler = FallbackFileHandler(filename)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    (logger or logging.getLogger()).addHandler(handler)
    return handler


def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger with the given name.
    """
    return logging.getLogger(name)
