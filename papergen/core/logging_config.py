"""
Logging configuration for PaperGen.

Provides:
- JSON formatting for production
- Colored console formatting for development
- Rotating log files (all logs plus a separate error log)
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union
import json
from datetime import datetime, timezone

LOG_FILE_NAME = "papergen.log"
ERROR_LOG_FILE_NAME = "papergen-errors.log"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10MB
LOG_BACKUP_COUNT = 5


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Pipeline stage, when the caller passes extra={"stage": ...}
        if hasattr(record, "stage"):
            log_data["stage"] = record.stage

        return json.dumps(log_data)


class ConsoleFormatter(logging.Formatter):
    """Colored console formatter for development."""

    COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[35m",   # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)

        # Format: [LEVEL] logger:line - message
        formatted = (
            f"{color}[{record.levelname}]{self.RESET} "
            f"{record.name}:{record.lineno} - {record.getMessage()}"
        )

        if record.exc_info:
            formatted += f"\n{self.formatException(record.exc_info)}"

        return formatted


def _rotating_handler(path: Path, level: int = logging.NOTSET) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    # File logs are always JSON
    handler.setFormatter(JSONFormatter())
    return handler


def setup_logging(
    environment: str = "development",
    log_level: str = "INFO",
    log_dir: Optional[Union[str, Path]] = None,
) -> None:
    """
    Configure application logging on the root logger.

    Args:
        environment: "development" or "production"
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files (None = no file logging)

    Example:
        setup_logging("production", "INFO", "logs")
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    if environment == "production":
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(ConsoleFormatter())
    root_logger.addHandler(console_handler)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        root_logger.addHandler(_rotating_handler(log_dir / LOG_FILE_NAME))
        root_logger.addHandler(_rotating_handler(log_dir / ERROR_LOG_FILE_NAME, logging.ERROR))

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={environment}, "
        f"level={log_level}, file_logging={log_dir is not None}"
    )
