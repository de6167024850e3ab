"""
Exchange response handling.

Turns what a Bybit transport returns into typed models and typed errors.
"""

from .responses import (
    BybitAPIError,
    RateLimitHeader,
    RawResponse,
    ResponseDecodeError,
    decode_response,
    decode_result,
    extract_payload,
)

__all__ = [
    # Errors
    "BybitAPIError",
    "ResponseDecodeError",
    # Metadata
    "RateLimitHeader",
    "RawResponse",
    # Unwrapping
    "extract_payload",
    "decode_response",
    "decode_result",
]
