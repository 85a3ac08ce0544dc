"""
Logging Configuration

Provides the package loggers with:
- Structured single-line output for parsing
- Environment-based levels (LOG_LEVEL)
- Optional file output
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional
import os


DEFAULT_LEVEL = 'INFO'


class StructuredFormatter(logging.Formatter):
    """
    Structured log formatter for better parsing and debugging.

    Format: [TIMESTAMP] [LEVEL] [MODULE:FUNCTION:LINE] MESSAGE {context}
    """

    def format(self, record: logging.LogRecord) -> str:
        # Callers may attach extra={'vat_context': ...}
        context = getattr(record, 'vat_context', '')

        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        location = f"{record.module}:{record.funcName}:{record.lineno}"

        base_msg = f"[{timestamp}] [{record.levelname:8s}] [{location}] {record.getMessage()}"

        if record.exc_info:
            base_msg += f"\n{self.formatException(record.exc_info)}"

        if context:
            base_msg += f" {context}"

        return base_msg


def resolve_level(level: Optional[str] = None) -> int:
    """
    Turn a level name into a logging level.

    Args:
        level: Level name. Defaults to the LOG_LEVEL env var, then INFO

    Returns:
        Numeric logging level; unknown names map to INFO
    """
    if level is None:
        level = os.getenv('LOG_LEVEL', DEFAULT_LEVEL)

    log_level = getattr(logging, level.strip().upper(), None)
    if not isinstance(log_level, int):
        return logging.INFO
    return log_level


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with structured formatting and optional file output.

    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env var or INFO
        log_file: Optional file path for logs

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    log_level = resolve_level(level)
    logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger
