import io
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from chatline.config.settings import Config

NO_CORRELATION_ID = "NO Correlation ID"


class SafeFormatter(logging.Formatter):
    """Formatter that ensures correlation_id and user always exist."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        if not hasattr(record, "user"):
            record.user = "-"
        return super().format(record)


def setup_logging(level: str = "INFO", log_file: str | None = None):
    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # Keep third-party loggers quiet
    formatter = SafeFormatter(Config.LOG_FORMAT)

    if not any(getattr(h, "_chatline", False) for h in root.handlers):
        stream_handler = logging.StreamHandler(
            io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", line_buffering=True)
        )
        stream_handler.setFormatter(formatter)
        stream_handler._chatline = True
        root.addHandler(stream_handler)

        # Set up file logging if log_file provided with rotation
        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file, maxBytes=10 * 1024 * 1024, backupCount=5
            )
            file_handler.setFormatter(formatter)
            file_handler._chatline = True
            root.addHandler(file_handler)

    logging.getLogger("chatline").setLevel(
        getattr(logging, level.upper(), logging.INFO)
    )
    logging.getLogger("chatline").info("Logging is set up.")

    return root
