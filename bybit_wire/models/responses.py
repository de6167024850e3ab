"""
Typed V5 REST responses: ApiResponse parametrised per endpoint.

    resp = decode(WalletResponse, payload)
    if resp.ok:
        balances = resp.result.items
"""

from .account import (
    AccountInfo,
    BorrowHistory,
    CollateralInfoList,
    FeeRateList,
    LiabilityQty,
    SwitchList,
    WalletList,
)
from .envelopes import ApiResponse, Empty
from .market import ServerTime
from .position import DeliveryRecordResult, PositionInfoPage
from .trade import (
    AmendedOrderList,
    BatchedOrderList,
    CanceledOrderList,
    CancelledList,
    OrderConfirmationList,
    OrderStatus,
)

# Market
ServerTimeResponse = ApiResponse[ServerTime, Empty]

# Trade
OrderResponse = ApiResponse[OrderStatus, Empty]
AmendOrderResponse = ApiResponse[OrderStatus, Empty]
CancelOrderResponse = ApiResponse[OrderStatus, Empty]
CancelAllResponse = ApiResponse[CancelledList, Empty]
BatchPlaceResponse = ApiResponse[BatchedOrderList, OrderConfirmationList]
BatchAmendResponse = ApiResponse[AmendedOrderList, OrderConfirmationList]
BatchCancelResponse = ApiResponse[CanceledOrderList, OrderConfirmationList]

# Position
PositionInfoResponse = ApiResponse[PositionInfoPage, Empty]
LeverageResponse = ApiResponse[Empty, Empty]
TradingStopResponse = ApiResponse[Empty, Empty]

# Account
WalletResponse = ApiResponse[WalletList, Empty]
AccountInfoResponse = ApiResponse[AccountInfo, Empty]
FeeRateResponse = ApiResponse[FeeRateList, Empty]
CollateralInfoResponse = ApiResponse[CollateralInfoList, Empty]
BorrowHistoryResponse = ApiResponse[BorrowHistory, Empty]
RepayLiabilityResponse = ApiResponse[LiabilityQty, Empty]
SetCollateralCoinResponse = ApiResponse[Empty, Empty]
BatchSetCollateralCoinResponse = ApiResponse[SwitchList, Empty]

# Asset
DeliveryRecordResponse = ApiResponse[DeliveryRecordResult, Empty]
