"""
Centralized constants for the wire layer.

Environment variable names and their defaults live here so config.py and
the tests agree on them.
"""

# ==================== Exchange Response Codes ====================

# retCode of a successful V5 response
SUCCESS_RET_CODE = 0

# Rate limit headers returned with every authenticated V5 response
RATE_LIMIT_HEADERS = (
    "X-Bapi-Limit",
    "X-Bapi-Limit-Status",
    "X-Bapi-Limit-Reset-Timestamp",
)


# ==================== Environment Variables ====================

ENV_LOG_LEVEL = "BYBIT_WIRE_LOG_LEVEL"
ENV_LOG_DIR = "BYBIT_WIRE_LOG_DIR"
ENV_LOG_TO_FILE = "BYBIT_WIRE_LOG_TO_FILE"
ENV_LOG_DECODE_FAILURES = "BYBIT_WIRE_LOG_DECODE_FAILURES"
ENV_PAYLOAD_PREVIEW_CHARS = "BYBIT_WIRE_PAYLOAD_PREVIEW_CHARS"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIR = "logs"
DEFAULT_PAYLOAD_PREVIEW_CHARS = 300

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
