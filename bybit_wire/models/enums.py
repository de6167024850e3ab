"""
Enums whose members map one-to-one onto Bybit wire tokens.

A member's wire token is its own identifier unless the class body gives an
explicit string value:

    class PositionStatus(WireEnum):
        Normal = auto()                     # "Normal"
        LiquidationInProgress = "Liq"       # override

@unique keeps the member<->token mapping a bijection. Decoding an unknown
token always fails; a type may designate one member (@wire_default) that
stands in for absent data (missing key, null or "").
"""

from enum import Enum, auto, unique
from typing import Any, Optional

from pydantic_core import PydanticCustomError, core_schema


class WireEnum(str, Enum):
    """Base class for enums carried on the wire as string tokens."""

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return name

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> Optional["WireEnum"]:
        """The designated stand-in for absent data, if the type has one."""
        return cls.__dict__.get("__wire_default__")

    @classmethod
    def tokens(cls) -> list[str]:
        return [m.value for m in cls]

    @classmethod
    def from_wire(cls, value: Any) -> "WireEnum":
        """Resolve a wire token; raises pydantic errors the decoder classifies."""
        if isinstance(value, cls):
            return value
        if value is None or (isinstance(value, str) and not value.strip()):
            default = cls.default()
            if default is not None:
                return default
        if not isinstance(value, str):
            raise PydanticCustomError(
                "enum_token_type",
                "{type_name} token must be a string",
                {"type_name": cls.__name__},
            )
        try:
            return cls(value)
        except ValueError:
            raise PydanticCustomError(
                "unknown_enum_token",
                "'{token}' is not a known {type_name} token",
                {"type_name": cls.__name__, "token": value},
            ) from None

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        return core_schema.no_info_plain_validator_function(
            cls.from_wire,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda member: member.value, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema, handler):
        return {"type": "string", "enum": cls.tokens(), "title": cls.__name__}


def wire_default(member_name: str):
    """Class decorator designating the member used when the wire has no value."""
    def decorate(cls):
        cls.__wire_default__ = cls[member_name]
        return cls
    return decorate


@wire_default("Linear")
@unique
class Category(WireEnum):
    """Product line an endpoint operates on."""
    Spot = "spot"
    Linear = "linear"
    Inverse = "inverse"
    Option = "option"


@unique
class Side(WireEnum):
    Buy = auto()
    Sell = auto()


@unique
class OrderType(WireEnum):
    Limit = auto()
    Market = auto()


@unique
class TimeInForce(WireEnum):
    GTC = auto()
    IOC = auto()
    FOK = auto()
    PostOnly = auto()


@wire_default("Normal")
@unique
class PositionStatus(WireEnum):
    """Risk state of a position."""
    Normal = auto()
    LiquidationInProgress = "Liq"
    AutoDeleverageInProgress = "Adl"


@unique
class TickDirection(WireEnum):
    """Direction of the last price change relative to the previous trade."""
    PlusTick = auto()
    ZeroPlusTick = auto()
    MinusTick = auto()
    ZeroMinusTick = auto()
