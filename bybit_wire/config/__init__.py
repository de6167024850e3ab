"""
Configuration management.
"""

from .config import (
    Config,
    get_config,
    reset_config,
    LogConfig,
    DecodeConfig,
)

from .constants import (
    SUCCESS_RET_CODE,
    RATE_LIMIT_HEADERS,
)

__all__ = [
    # Config classes
    "Config",
    "get_config",
    "reset_config",
    "LogConfig",
    "DecodeConfig",
    # Exchange constants
    "SUCCESS_RET_CODE",
    "RATE_LIMIT_HEADERS",
]
