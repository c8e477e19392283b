"""
Logging configuration shared by the CLI and the MCP server
"""
import logging
from datetime import datetime, timezone

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


class MillisecondFormatter(logging.Formatter):
    """Custom formatter with milliseconds as :XXXX format"""
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        ct = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if datefmt:
            s = ct.strftime(datefmt)
            ms = int((record.created % 1) * 10000)
            return f"{s}:{ms:04d}"
        return super().formatTime(record, datefmt)


def configure_logging(level: int = logging.INFO) -> None:
    """Install the root handler; HTTP client chatter stays at WARNING"""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)

    for handler in logging.root.handlers:
        handler.setFormatter(MillisecondFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
