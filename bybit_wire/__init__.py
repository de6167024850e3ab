"""
bybit_wire - typed wire models for the Bybit V5 API.

Maps the exchange's JSON payloads onto immutable pydantic models and back:

    from bybit_wire import decode, encode
    from bybit_wire.models.responses import BatchPlaceResponse

    resp = decode(BatchPlaceResponse, payload)
    for order, confirmation in resp.pair_confirmations():
        ...
"""

__version__ = "0.1.0"

from .models import (
    ApiResponse,
    Empty,
    ListEnvelope,
    MalformedEnvelope,
    MappingError,
    MissingField,
    PaginatedListEnvelope,
    TimestampedSample,
    TypeMismatch,
    UnknownEnumToken,
    WireModel,
    decode,
    decode_json,
    encode,
    encode_json,
)
from .exchanges import (
    BybitAPIError,
    ResponseDecodeError,
    decode_response,
    decode_result,
    extract_payload,
)

__all__ = [
    "__version__",
    "WireModel",
    "decode",
    "decode_json",
    "encode",
    "encode_json",
    "MappingError",
    "MissingField",
    "TypeMismatch",
    "UnknownEnumToken",
    "MalformedEnvelope",
    "Empty",
    "ListEnvelope",
    "PaginatedListEnvelope",
    "TimestampedSample",
    "ApiResponse",
    "BybitAPIError",
    "ResponseDecodeError",
    "extract_payload",
    "decode_response",
    "decode_result",
]
