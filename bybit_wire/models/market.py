"""
Market data entities: server time and tickers.

The public "tickers.{symbol}" stream sends a full snapshot first and then
deltas carrying only the fields that changed. Linear tickers keep the last
snapshot and fold each delta into it:

    snapshot = decode_ws_ticker(first_message).data
    for message in stream:
        frame = decode_ws_ticker(message)
        snapshot = snapshot.apply(frame.data) if frame.is_delta else frame.data

Spot ticker frames are always snapshots.
"""

from decimal import Decimal
from typing import Annotated, Any, Generic, Optional, TypeVar, Union

from pydantic import Discriminator

from .base import WireModel, decode, optional_on_encode, union_tag, wire_field
from .enums import TickDirection
from .wire_types import OptionalDecimal, OptionalStrInt, StrInt, WireDecimal, blankable

T = TypeVar("T")

ZERO = Decimal("0")


class ServerTime(WireModel):
    """Result of /v5/market/time; both values arrive as strings."""
    time_second: StrInt
    time_nano: StrInt

    @property
    def time_ms(self) -> int:
        return self.time_nano // 1_000_000


class SpotTickerData(WireModel):
    symbol: str
    last_price: WireDecimal
    high_price_24h: WireDecimal
    low_price_24h: WireDecimal
    prev_price_24h: WireDecimal
    volume_24h: WireDecimal
    turnover_24h: WireDecimal
    price_24h_pcnt: WireDecimal
    usd_index_price: OptionalDecimal


class LinearTickerSnapshot(WireModel):
    """Full state of a linear (USDT/USDC perpetual or futures) ticker."""
    symbol: str
    tick_direction: TickDirection
    price_24h_pcnt: WireDecimal = ZERO
    last_price: WireDecimal = ZERO
    prev_price_24h: WireDecimal = ZERO
    high_price_24h: WireDecimal = ZERO
    low_price_24h: WireDecimal = ZERO
    prev_price_1h: WireDecimal = ZERO
    open_interest_value: WireDecimal = ZERO
    turnover_24h: WireDecimal = ZERO
    volume_24h: WireDecimal = ZERO
    bid_price: WireDecimal = wire_field(ZERO, alias="bid1Price")
    bid_size: WireDecimal = wire_field(ZERO, alias="bid1Size")
    ask_price: WireDecimal = wire_field(ZERO, alias="ask1Price")
    ask_size: WireDecimal = wire_field(ZERO, alias="ask1Size")
    pre_open_price: OptionalDecimal = None
    pre_qty: OptionalDecimal = None
    cur_pre_listing_phase: blankable(str) = optional_on_encode()
    funding_rate: WireDecimal = ZERO
    next_funding_time: StrInt = 0
    index_price: WireDecimal = ZERO
    mark_price: WireDecimal = ZERO
    open_interest: WireDecimal = ZERO

    @property
    def spread(self) -> Decimal:
        return self.ask_price - self.bid_price

    @property
    def mid_price(self) -> Decimal:
        if self.bid_price and self.ask_price:
            return (self.bid_price + self.ask_price) / 2
        return ZERO

    def apply(self, delta: "LinearTickerDelta") -> "LinearTickerSnapshot":
        """
        Return a new snapshot with every field the delta carries applied.

        Fields absent from the delta keep their current values.

        Raises:
            ValueError: If the delta belongs to another symbol
        """
        if delta.symbol != self.symbol:
            raise ValueError(
                f"delta for {delta.symbol} cannot update {self.symbol} snapshot"
            )
        changes = {
            name: value
            for name, value in delta
            if name != "symbol" and value is not None
        }
        return self.model_copy(update=changes)


class LinearTickerDelta(WireModel):
    """Changed fields of a linear ticker; absent fields are None and not re-encoded."""
    symbol: str
    tick_direction: Optional[TickDirection] = optional_on_encode()
    price_24h_pcnt: OptionalDecimal = optional_on_encode()
    last_price: OptionalDecimal = optional_on_encode()
    prev_price_24h: OptionalDecimal = optional_on_encode()
    high_price_24h: OptionalDecimal = optional_on_encode()
    low_price_24h: OptionalDecimal = optional_on_encode()
    prev_price_1h: OptionalDecimal = optional_on_encode()
    open_interest_value: OptionalDecimal = optional_on_encode()
    turnover_24h: OptionalDecimal = optional_on_encode()
    volume_24h: OptionalDecimal = optional_on_encode()
    bid_price: OptionalDecimal = optional_on_encode(alias="bid1Price")
    bid_size: OptionalDecimal = optional_on_encode(alias="bid1Size")
    ask_price: OptionalDecimal = optional_on_encode(alias="ask1Price")
    ask_size: OptionalDecimal = optional_on_encode(alias="ask1Size")
    pre_open_price: OptionalDecimal = optional_on_encode()
    pre_qty: OptionalDecimal = optional_on_encode()
    cur_pre_listing_phase: blankable(str) = optional_on_encode()
    funding_rate: OptionalDecimal = optional_on_encode()
    next_funding_time: OptionalStrInt = optional_on_encode()
    index_price: OptionalDecimal = optional_on_encode()
    mark_price: OptionalDecimal = optional_on_encode()
    open_interest: OptionalDecimal = optional_on_encode()


def _ticker_market(value: Any) -> str:
    # only spot tickers carry usdIndexPrice
    if isinstance(value, dict):
        return "spot" if "usdIndexPrice" in value else "linear"
    return "spot" if isinstance(value, SpotTickerData) else "linear"


TickerSnapshot = Annotated[
    Union[
        Annotated[SpotTickerData, union_tag("spot")],
        Annotated[LinearTickerSnapshot, union_tag("linear")],
    ],
    Discriminator(_ticker_market),
]


class WsTicker(WireModel, Generic[T]):
    """One message of the tickers.{symbol} WebSocket topic."""
    topic: str
    event_type: str = wire_field(alias="type")
    data: T
    cs: int
    ts: int

    @property
    def is_delta(self) -> bool:
        return self.event_type == "delta"


WsTickerSnapshot = WsTicker[TickerSnapshot]
WsTickerDelta = WsTicker[LinearTickerDelta]


def decode_ws_ticker(message: Any) -> WsTicker:
    """
    Decode a ticker stream message, picking the payload type from "type".

    "delta" messages carry a LinearTickerDelta; anything else is a snapshot,
    spot or linear depending on the payload's keys.
    """
    if isinstance(message, dict) and message.get("type") == "delta":
        return decode(WsTickerDelta, message)
    return decode(WsTickerSnapshot, message)
