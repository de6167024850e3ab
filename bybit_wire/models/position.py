"""
Position entities: open position info and option delivery records.
"""

from .base import WireModel, wire_field
from .enums import PositionStatus, Side
from .envelopes import PaginatedListEnvelope
from .wire_types import (
    OptionalDecimal,
    OptionalStrInt,
    StrInt,
    WireDecimal,
    blankable,
)


class PositionInfo(WireModel):
    """
    One row of /v5/position/list.

    side is "" (decoded as None) for an empty one-way-mode slot.
    position_status falls back to Normal when the exchange omits it.
    """
    position_idx: int
    risk_id: int
    risk_limit_value: WireDecimal
    symbol: str
    side: blankable(Side)
    size: WireDecimal
    avg_price: OptionalDecimal
    position_value: OptionalDecimal
    trade_mode: int
    position_status: PositionStatus = wire_field(default_factory=PositionStatus.default)
    auto_add_margin: int
    adl_rank_indicator: int
    leverage: OptionalDecimal
    position_balance: WireDecimal
    mark_price: WireDecimal
    liq_price: OptionalDecimal
    bust_price: OptionalDecimal
    position_mm: OptionalDecimal = wire_field(alias="positionMM")
    position_im: OptionalDecimal = wire_field(alias="positionIM")
    tpsl_mode: str
    take_profit: OptionalDecimal
    stop_loss: OptionalDecimal
    trailing_stop: OptionalDecimal
    unrealised_pnl: OptionalDecimal
    cum_realised_pnl: OptionalDecimal
    seq: int
    is_reduce_only: bool
    mmr_sys_updated_time: OptionalStrInt = None
    leverage_sys_updated_time: OptionalStrInt = None
    created_time: StrInt
    updated_time: StrInt

    @property
    def is_long(self) -> bool:
        return self.side is Side.Buy

    @property
    def is_short(self) -> bool:
        return self.side is Side.Sell

    @property
    def is_open(self) -> bool:
        return self.size > 0

    @property
    def is_liquidating(self) -> bool:
        return self.position_status is PositionStatus.LiquidationInProgress

    @property
    def is_adl(self) -> bool:
        return self.position_status is PositionStatus.AutoDeleverageInProgress


class DeliveryRecord(WireModel):
    """One settled option/futures delivery from /v5/asset/delivery-record."""
    symbol: str
    side: Side
    delivery_time: int
    strike: WireDecimal
    fee: WireDecimal
    position: WireDecimal
    delivery_price: WireDecimal
    delivery_rpl: WireDecimal


PositionInfoPage = PaginatedListEnvelope[PositionInfo]
DeliveryRecordResult = PaginatedListEnvelope[DeliveryRecord]
