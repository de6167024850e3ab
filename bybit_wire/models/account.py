"""
Account entities: wallet balances, collateral, fees and borrowing.

Unified-account endpoints report most amounts as decimal strings and use ""
for values that do not apply to the account type (for example
totalMarginBalance on a classic account). Those fields are OptionalDecimal;
the always-present ones are WireDecimal.
"""

from typing import Optional

from .base import WireModel, optional_on_encode, wire_field
from .envelopes import ListEnvelope
from .wire_types import OptionalDecimal, StrInt, WireDecimal


class CollateralInfo(WireModel):
    """One coin's row from /v5/account/collateral-info."""
    currency: str
    hourly_borrow_rate: OptionalDecimal
    max_borrowing_amount: OptionalDecimal
    free_borrowing_amount: OptionalDecimal
    free_borrowing_limit: OptionalDecimal
    free_borrow_amount: OptionalDecimal
    borrow_amount: WireDecimal
    available_to_borrow: OptionalDecimal
    borrowable: bool
    borrow_usage_rate: OptionalDecimal
    margin_collateral: bool
    collateral_switch: bool
    collateral_ratio: OptionalDecimal


class FeeRate(WireModel):
    symbol: str
    maker_fee_rate: WireDecimal
    taker_fee_rate: WireDecimal


class CoinData(WireModel):
    """Per-coin balance inside a WalletData entry."""
    coin: str
    equity: WireDecimal
    usd_value: WireDecimal
    wallet_balance: WireDecimal
    available_to_withdraw: OptionalDecimal = None
    available_to_borrow: OptionalDecimal = None
    borrow_amount: WireDecimal
    accrued_interest: WireDecimal
    total_order_im: WireDecimal = wire_field(alias="totalOrderIM")
    total_position_im: WireDecimal = wire_field(alias="totalPositionIM")
    total_position_mm: WireDecimal = wire_field(alias="totalPositionMM")
    unrealised_pnl: WireDecimal
    cum_realised_pnl: WireDecimal
    bonus: WireDecimal
    collateral_switch: bool
    margin_collateral: bool
    locked: WireDecimal
    spot_hedging_qty: WireDecimal


class WalletData(WireModel):
    """One account from /v5/account/wallet-balance."""
    account_im_rate: OptionalDecimal = wire_field(None, alias="accountIMRate")
    account_mm_rate: OptionalDecimal = wire_field(None, alias="accountMMRate")
    total_equity: WireDecimal
    total_wallet_balance: WireDecimal
    total_margin_balance: OptionalDecimal = None
    total_available_balance: OptionalDecimal = None
    total_perp_upl: WireDecimal = wire_field(alias="totalPerpUPL")
    total_initial_margin: OptionalDecimal = None
    total_maintenance_margin: OptionalDecimal = None
    coin: list[CoinData]
    account_ltv: OptionalDecimal = wire_field(None, alias="accountLTV")
    account_type: Optional[str] = optional_on_encode()

    def coin_balance(self, coin: str) -> Optional[CoinData]:
        """Find the balance row for one coin (e.g. "USDT")."""
        for entry in self.coin:
            if entry.coin == coin:
                return entry
        return None


class BorrowHistoryEntry(WireModel):
    currency: str
    created_time: int
    borrow_cost: WireDecimal
    hourly_borrow_rate: WireDecimal
    interest_bearing_borrow_size: WireDecimal
    cost_exemption: str
    borrow_amount: WireDecimal
    unrealised_loss: WireDecimal
    free_borrowed_amount: WireDecimal


class BorrowHistory(WireModel):
    """Cursor-paginated borrow history; rows instead of list on the wire."""
    rows: list[BorrowHistoryEntry]
    next_page_cursor: str = ""

    @property
    def has_next_page(self) -> bool:
        return self.next_page_cursor != ""


class AccountInfo(WireModel):
    """Margin mode and account flags from /v5/account/info."""
    unified_margin_status: int
    margin_mode: str
    is_master_trader: bool
    spot_hedging_status: str
    updated_time: StrInt
    dcp_status: str
    time_window: int
    smp_group: int


class LiabilityQtyData(WireModel):
    coin: str
    repayment_qty: WireDecimal


class SwitchListData(WireModel):
    coin: str
    collateral_switch: str


CollateralInfoList = ListEnvelope[CollateralInfo]
FeeRateList = ListEnvelope[FeeRate]
WalletList = ListEnvelope[WalletData]
LiabilityQty = ListEnvelope[LiabilityQtyData]
SwitchList = ListEnvelope[SwitchListData]
