"""Centralized logging configuration."""
import logging
import sys
from pathlib import Path
from typing import Optional
import json
from datetime import datetime, timezone


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_type: str = "json",
    enabled: bool = True
) -> None:
    """Configure application logging."""

    if not enabled:
        logging.disable(logging.CRITICAL)
        return

    # Re-enable in case an earlier call disabled everything
    logging.disable(logging.NOTSET)
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    handlers = [console_handler]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=numeric_level,
        handlers=handlers,
        force=True  # Override existing configuration
    )


class JsonFormatter(logging.Formatter):
    """Format logs as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "correlation_id"):
            log_data["correlation_id"] = record.correlation_id

        return json.dumps(log_data)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""
    return logging.getLogger(name)
