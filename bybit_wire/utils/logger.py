"""
Logging system for the wire layer.
Provides structured, human-readable logs with console and optional file output.

The models never log; this logger is used by the response adapter
(exchanges/responses.py), which sits between a transport and the models.
"""

import copy
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config.config import get_config


# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        # copy so file handlers on the same logger get the uncolored record
        record = copy.copy(record)
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        record.levelname = f"{color}{record.levelname}{Colors.RESET}"
        record.msg = f"{color}{record.msg}{Colors.RESET}"
        return super().format(record)


class WireLogger:
    """
    Central logger for response decoding.

    Features:
    - Console output with colors
    - Optional dated log file (plain text)
    - Structured lines for API errors and decode failures
    """

    _instance: Optional['WireLogger'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_dir: str = "logs", log_level: str = "INFO", log_to_file: bool = False):
        if WireLogger._initialized:
            return

        self.log_dir = Path(log_dir)
        self.log_to_file = log_to_file
        if log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._create_logger("bybit_wire", log_level)

        WireLogger._initialized = True

    def _create_logger(self, name: str, level: str) -> logging.Logger:
        """Create a configured logger instance."""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper()))
        logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)

        if self.log_to_file:
            log_file = self.log_dir / f"wire_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logger.addHandler(file_handler)

        return logger

    def info(self, msg: str, *args, **kwargs):
        self.main_logger.info(msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        self.main_logger.debug(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self.main_logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self.main_logger.error(msg, *args, **kwargs)

    def api_error(self, endpoint: str, code: int, message: str, **kwargs):
        """
        Log a non-zero retCode with structured format.

        Args:
            endpoint: Request path or label (e.g., /v5/order/create)
            code: Bybit retCode
            message: Bybit retMsg
            **kwargs: Additional fields
        """
        parts = ["[API_ERROR]", f"endpoint={endpoint}", f"code={code}", f"msg={message}"]
        for key, value in kwargs.items():
            parts.append(f"{key}={value}")
        self.main_logger.warning(" | ".join(parts))

    def decode_failure(self, endpoint: str, model: str, error: Exception, payload: str = ""):
        """
        Log a payload that did not match its model.

        Args:
            endpoint: Request path or label
            model: Name of the model the payload was decoded into
            error: The MappingError raised
            payload: Truncated payload preview
        """
        parts = [
            "[DECODE_FAILED]",
            f"endpoint={endpoint}",
            f"model={model}",
            f"error={type(error).__name__}: {error}",
        ]
        if payload:
            parts.append(f"payload={payload}")
        self.main_logger.warning(" | ".join(parts))


# Global logger instance
_logger: Optional[WireLogger] = None


def get_logger() -> WireLogger:
    """Get or create the global logger instance from the current config."""
    global _logger
    if _logger is None:
        log = get_config().log
        _logger = WireLogger(log.log_dir, log.level, log.log_to_file)
    return _logger


def setup_logger(log_dir: str = "logs", log_level: str = "INFO", log_to_file: bool = False) -> WireLogger:
    """Initialize the logger with custom settings."""
    global _logger
    WireLogger._initialized = False
    WireLogger._instance = None
    _logger = WireLogger(log_dir, log_level, log_to_file)
    return _logger
