"""
Unwrapping of raw V5 REST responses into typed models.

A transport (pybit's HTTP session, requests, aiohttp, ...) hands back either
the parsed JSON body or, with pybit's return_response_headers=True, a
(body, elapsed, headers) tuple. This module turns that into:

- the decoded model, via decode_response() / decode_result()
- BybitAPIError when the exchange answered with a non-zero retCode
- ResponseDecodeError when the body does not match the model
- RateLimitHeader from the X-Bapi-Limit* headers, when present

Usage:
    resp = session.place_order(**OrderRequest(...).to_wire())
    order = decode_result(OrderStatus, resp, endpoint="/v5/order/create")

This is the only place that logs; the models themselves never do.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Mapping, Optional

from ..config.config import get_config
from ..config.constants import RATE_LIMIT_HEADERS, SUCCESS_RET_CODE
from ..models.base import M, WireModel, decode, wire_field
from ..models.errors import MappingError, TypeMismatch
from ..models.wire_types import OptionalStrInt, StrInt
from ..utils.helpers import json_kind, preview
from ..utils.logger import get_logger


class BybitAPIError(Exception):
    """The exchange answered with a non-zero retCode."""

    def __init__(self, code: int, message: str, response: dict = None):
        self.code = code
        self.message = message
        self.response = response
        super().__init__(f"Bybit API Error {code}: {message}")


class ResponseDecodeError(MappingError):
    """
    A response body did not match the model it was decoded into.

    Attributes:
        endpoint: Label of the request that produced the body
        model: Name of the target model
        error: The underlying MappingError
    """

    def __init__(self, endpoint: str, model: str, error: MappingError):
        self.endpoint = endpoint
        self.model = model
        self.error = error
        where = f" from {endpoint}" if endpoint else ""
        super().__init__(f"cannot decode {model}{where}: {error}")


class RateLimitHeader(WireModel):
    """Per-endpoint rate limit state sent back with authenticated requests."""

    limit: StrInt = wire_field(alias="X-Bapi-Limit")
    remaining: StrInt = wire_field(alias="X-Bapi-Limit-Status")
    reset_timestamp: StrInt = wire_field(alias="X-Bapi-Limit-Reset-Timestamp")
    trace_id: Optional[str] = wire_field(None, alias="Traceid")
    time_now: OptionalStrInt = wire_field(None, alias="Timenow")

    @classmethod
    def from_headers(cls, headers: Optional[Mapping[str, Any]]) -> Optional["RateLimitHeader"]:
        """
        Read the rate limit headers, matching names case-insensitively.

        Returns None when the response carries no X-Bapi-Limit header
        (public endpoints).
        """
        if not headers:
            return None
        by_lower = {str(k).lower(): v for k, v in headers.items()}
        if RATE_LIMIT_HEADERS[0].lower() not in by_lower:
            return None
        wanted = RATE_LIMIT_HEADERS + ("Traceid", "Timenow")
        return decode(cls, {
            name: by_lower[name.lower()]
            for name in wanted
            if name.lower() in by_lower
        })


@dataclass
class RawResponse:
    """A response body split from its transport metadata."""
    payload: dict
    rate_limit: Optional[RateLimitHeader] = None
    elapsed: Optional[timedelta] = None


def extract_payload(response: Any) -> RawResponse:
    """
    Split a transport response into body and metadata.

    When return_response_headers=True, pybit returns:
    - 3-tuple: (data_dict, timedelta_duration, headers_dict)
    A 2-tuple (data_dict, headers_dict) is accepted too.

    Raises:
        TypeMismatch: If the body is not a JSON object
    """
    headers = None
    elapsed = None
    if isinstance(response, tuple):
        data = response[0] if response else None
        if len(response) >= 3:
            elapsed = response[1] if isinstance(response[1], timedelta) else None
            headers = response[2]
        elif len(response) == 2 and isinstance(response[1], Mapping):
            headers = response[1]
    else:
        data = response

    if not isinstance(data, dict):
        raise TypeMismatch("response", "object", json_kind(data))

    return RawResponse(
        payload=data,
        rate_limit=RateLimitHeader.from_headers(headers),
        elapsed=elapsed,
    )


def _check_ret_code(payload: dict, endpoint: str) -> None:
    code = payload.get("retCode", SUCCESS_RET_CODE)
    if code != SUCCESS_RET_CODE:
        message = payload.get("retMsg", "")
        get_logger().api_error(endpoint or "?", code, message)
        raise BybitAPIError(code, message, payload)


def _decode_logged(model: type[M], wire: Any, endpoint: str, payload: dict) -> M:
    try:
        decoded = decode(model, wire)
    except MappingError as exc:
        decode_config = get_config().decode
        if decode_config.log_failures:
            get_logger().decode_failure(
                endpoint or "?",
                model.__name__,
                exc,
                preview(payload, decode_config.payload_preview_chars),
            )
        raise ResponseDecodeError(endpoint, model.__name__, exc) from exc
    get_logger().debug(f"Decoded {model.__name__} from {endpoint or '?'}")
    return decoded


def decode_response(model: type[M], response: Any, endpoint: str = "") -> M:
    """
    Decode a whole response body (usually an ApiResponse alias).

    Args:
        model: Target model, e.g. BatchPlaceResponse
        response: Body dict or pybit (body, elapsed, headers) tuple
        endpoint: Request label used in errors and logs

    Raises:
        BybitAPIError: retCode was not 0
        ResponseDecodeError: The body does not match model
    """
    raw = extract_payload(response)
    _check_ret_code(raw.payload, endpoint)
    return _decode_logged(model, raw.payload, endpoint, raw.payload)


def decode_result(model: type[M], response: Any, endpoint: str = "") -> M:
    """
    Decode only the "result" member of a response body.

    A missing "result" decodes as {} (so Empty works for bodiless answers).

    Raises:
        BybitAPIError: retCode was not 0
        ResponseDecodeError: The result does not match model
    """
    raw = extract_payload(response)
    _check_ret_code(raw.payload, endpoint)
    return _decode_logged(model, raw.payload.get("result", {}), endpoint, raw.payload)
