"""
Utility modules.
"""

from .logger import get_logger, setup_logger, WireLogger
from .helpers import now_ms, blank_to_none, json_kind, preview

__all__ = [
    # Logger
    "get_logger",
    "setup_logger",
    "WireLogger",
    # Helpers
    "now_ms",
    "blank_to_none",
    "json_kind",
    "preview",
]
