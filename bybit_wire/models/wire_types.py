"""
Annotated field types for the exchange's numeric and optional encodings.

Bybit transports prices, sizes and rates as decimal strings ("27123.50"),
some integers as strings ("1702617474601") and many optional values as ""
instead of null. These types decode those shapes into exact Python values
and encode them back into the same shapes:

    Type              decodes                  encodes (JSON mode)
    ----------------  -----------------------  -------------------
    WireDecimal       "1.50" / 1.5 / 2         "1.50"
    OptionalDecimal   "" / null / "0.1"        "" / "0.1"
    StrInt            "1700" / 1700            "1700"
    OptionalStrInt    "" / null / "1700"       "" / "1700"
    blankable(T)      "" / null / token        "" / token

Models validate strictly, so these validators are the only place a string
becomes a number. Decimals always encode in positional notation ("0.00000010",
never "1.0E-7").

Decimal is used for every quantity so nothing passes through binary floats;
decode_json() parses JSON numbers straight to Decimal for the same reason.
"""

from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, PlainSerializer, WrapSerializer

from ..utils.helpers import blank_to_none


def _to_decimal(value: Any) -> Any:
    # anything that does not convert is left for the strict check to reject
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        # repr() is the shortest string that round-trips the float
        return Decimal(repr(value))
    if isinstance(value, (int, str)):
        try:
            return Decimal(value)
        except InvalidOperation:
            return value
    return value


def _to_int(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return value
    return value


def _decimal_to_str(value: Decimal) -> str:
    return format(value, "f")


def _to_str(value: Any) -> str:
    return str(value)


def _blank_as_empty_string(value: Any, handler) -> Any:
    if value is None:
        return ""
    return handler(value)


WireDecimal = Annotated[
    Decimal,
    BeforeValidator(_to_decimal),
    PlainSerializer(_decimal_to_str, return_type=str, when_used="json"),
]

OptionalDecimal = Annotated[
    Optional[Decimal],
    BeforeValidator(lambda v: _to_decimal(blank_to_none(v))),
    WrapSerializer(
        lambda v, handler: "" if v is None else _decimal_to_str(v), when_used="json"
    ),
]

StrInt = Annotated[
    int,
    BeforeValidator(_to_int),
    PlainSerializer(_to_str, return_type=str, when_used="json"),
]

OptionalStrInt = Annotated[
    Optional[int],
    BeforeValidator(lambda v: _to_int(blank_to_none(v))),
    WrapSerializer(
        lambda v, handler: "" if v is None else _to_str(v), when_used="json"
    ),
]


def blankable(tp: Any) -> Any:
    """Optional[tp] where "" on the wire means None, and None encodes as ""."""
    return Annotated[
        Optional[tp],
        BeforeValidator(blank_to_none),
        WrapSerializer(_blank_as_empty_string, when_used="json"),
    ]
