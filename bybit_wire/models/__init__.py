"""
Typed wire models for the Bybit V5 API.

Re-exports the mapping entry points, the error taxonomy, the generic
envelopes and every concrete entity.
"""

from .base import (
    WireModel,
    decode,
    decode_json,
    encode,
    encode_json,
    optional_on_encode,
    wire_field,
)
from .errors import (
    MappingError,
    MissingField,
    TypeMismatch,
    UnknownEnumToken,
    MalformedEnvelope,
)
from .naming import to_camel
from .enums import (
    WireEnum,
    wire_default,
    Category,
    Side,
    OrderType,
    TimeInForce,
    PositionStatus,
    TickDirection,
)
from .wire_types import (
    WireDecimal,
    OptionalDecimal,
    StrInt,
    OptionalStrInt,
    blankable,
)
from .envelopes import (
    Empty,
    ListEnvelope,
    PaginatedListEnvelope,
    TimestampedSample,
    ApiResponse,
)
from .trade import (
    OrderStatus,
    BatchedOrder,
    AmendedOrder,
    CanceledOrder,
    OrderConfirmation,
    BatchedOrderList,
    AmendedOrderList,
    CanceledOrderList,
    CancelledList,
    OrderConfirmationList,
    OrderRequest,
    AmendOrderRequest,
    CancelOrderRequest,
    BatchPlaceRequest,
    BatchAmendRequest,
    BatchCancelRequest,
)
from .account import (
    CollateralInfo,
    FeeRate,
    CoinData,
    WalletData,
    BorrowHistoryEntry,
    BorrowHistory,
    AccountInfo,
    LiabilityQtyData,
    SwitchListData,
    CollateralInfoList,
    FeeRateList,
    WalletList,
    LiabilityQty,
    SwitchList,
)
from .position import (
    PositionInfo,
    DeliveryRecord,
    PositionInfoPage,
    DeliveryRecordResult,
)
from .market import (
    ServerTime,
    SpotTickerData,
    LinearTickerSnapshot,
    LinearTickerDelta,
    TickerSnapshot,
    WsTicker,
    WsTickerSnapshot,
    WsTickerDelta,
    decode_ws_ticker,
)
from . import responses

__all__ = [
    # Mapping
    "WireModel",
    "decode",
    "decode_json",
    "encode",
    "encode_json",
    "optional_on_encode",
    "wire_field",
    "to_camel",
    # Errors
    "MappingError",
    "MissingField",
    "TypeMismatch",
    "UnknownEnumToken",
    "MalformedEnvelope",
    # Enums
    "WireEnum",
    "wire_default",
    "Category",
    "Side",
    "OrderType",
    "TimeInForce",
    "PositionStatus",
    "TickDirection",
    # Field types
    "WireDecimal",
    "OptionalDecimal",
    "StrInt",
    "OptionalStrInt",
    "blankable",
    # Envelopes
    "Empty",
    "ListEnvelope",
    "PaginatedListEnvelope",
    "TimestampedSample",
    "ApiResponse",
    # Trade
    "OrderStatus",
    "BatchedOrder",
    "AmendedOrder",
    "CanceledOrder",
    "OrderConfirmation",
    "BatchedOrderList",
    "AmendedOrderList",
    "CanceledOrderList",
    "CancelledList",
    "OrderConfirmationList",
    "OrderRequest",
    "AmendOrderRequest",
    "CancelOrderRequest",
    "BatchPlaceRequest",
    "BatchAmendRequest",
    "BatchCancelRequest",
    # Account
    "CollateralInfo",
    "FeeRate",
    "CoinData",
    "WalletData",
    "BorrowHistoryEntry",
    "BorrowHistory",
    "AccountInfo",
    "LiabilityQtyData",
    "SwitchListData",
    "CollateralInfoList",
    "FeeRateList",
    "WalletList",
    "LiabilityQty",
    "SwitchList",
    # Position
    "PositionInfo",
    "DeliveryRecord",
    "PositionInfoPage",
    "DeliveryRecordResult",
    # Market
    "ServerTime",
    "SpotTickerData",
    "LinearTickerSnapshot",
    "LinearTickerDelta",
    "TickerSnapshot",
    "WsTicker",
    "WsTickerSnapshot",
    "WsTickerDelta",
    "decode_ws_ticker",
    # Responses module (ApiResponse aliases per endpoint)
    "responses",
]
