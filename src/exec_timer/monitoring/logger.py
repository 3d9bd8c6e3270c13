"""
Logging configuration with support for both text and JSON formatting.

Settings (environment or .env):
    LOG_LEVEL: Set the log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    LOG_FORMAT: Set to 'json' for JSON formatted logs, or anything else for text
"""
import sys
import json
import logging
from typing import Any, Dict, Optional, Union
from datetime import datetime, timezone

from exec_timer.config import settings

# Default log format
DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Standard LogRecord attributes that are not user supplied extras
_RESERVED_ATTRS = frozenset([
    'args', 'asctime', 'created', 'exc_info', 'exc_text',
    'filename', 'funcName', 'id', 'levelname', 'levelno',
    'lineno', 'module', 'msecs', 'message', 'msg',
    'name', 'pathname', 'process', 'processName', 'relativeCreated',
    'stack_info', 'taskName', 'thread', 'threadName', 'extra'
])

class JsonFormatter(logging.Formatter):
    """Custom formatter for JSON logs."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_record: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        # Add any extra attributes
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith('_'):
                log_record[key] = value

        return json.dumps(log_record, ensure_ascii=False, default=str)

def get_logger(
    name: str,
    level: Optional[Union[str, int]] = None,
    json_format: Optional[bool] = None
) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Name of the logger
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, use JSON formatting. If None, use LOG_FORMAT setting

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Don't add handlers if they're already configured
    if logger.handlers:
        return logger

    if level is None:
        level = settings.LOG_LEVEL

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger.setLevel(level)

    use_json = json_format if json_format is not None else (settings.LOG_FORMAT.lower() == 'json')

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter() if use_json else logging.Formatter(DEFAULT_LOG_FORMAT))
    logger.addHandler(handler)

    # Prevent duplicate logs when uvicorn configures the root logger
    logger.propagate = False

    return logger
