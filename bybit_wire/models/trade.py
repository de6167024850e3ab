"""
Order entities: batch results, per-item confirmations and outgoing requests.

Results (decoded from the exchange):
- BatchedOrder, AmendedOrder, CanceledOrder, OrderStatus
- OrderConfirmation (one per batch item, carried in retExtInfo)

Requests (encoded for the exchange):
- OrderRequest, AmendOrderRequest, CancelOrderRequest
- BatchPlaceRequest, BatchAmendRequest, BatchCancelRequest

OrderRequest also has presets for common shapes (spot_market,
futures_limit_with_market_tpsl, futures_market_close, ...).

Request fields the caller leaves unset are left out of the payload rather
than sent as null, matching how the V5 endpoints expect optional parameters.
"""

from typing import Optional

from pydantic import field_serializer, model_validator

from .base import WireModel, optional_on_encode
from .enums import Category, OrderType, Side, TimeInForce
from .envelopes import ListEnvelope
from .wire_types import WireDecimal


# ==============================================================================
# Results
# ==============================================================================

class OrderStatus(WireModel):
    """Identifiers returned by single-order create/amend/cancel."""
    order_id: str
    order_link_id: str


class BatchedOrder(WireModel):
    category: Category
    symbol: str
    order_id: str
    order_link_id: str
    create_at: str


class AmendedOrder(WireModel):
    category: Category
    symbol: str
    order_id: str
    order_link_id: str


class CanceledOrder(WireModel):
    category: Category
    symbol: str
    order_id: str
    order_link_id: str


class OrderConfirmation(WireModel):
    """Per-item outcome of a batch operation (code 0 == success)."""
    code: int
    msg: str

    @property
    def ok(self) -> bool:
        return self.code == 0


BatchedOrderList = ListEnvelope[BatchedOrder]
AmendedOrderList = ListEnvelope[AmendedOrder]
CanceledOrderList = ListEnvelope[CanceledOrder]
CancelledList = ListEnvelope[OrderStatus]
OrderConfirmationList = ListEnvelope[OrderConfirmation]


# ==============================================================================
# Requests
# ==============================================================================

class OrderRequest(WireModel):
    """Parameters of POST /v5/order/create (also one item of a batch)."""
    category: Category
    symbol: str
    side: Side
    order_type: OrderType
    qty: WireDecimal
    price: Optional[WireDecimal] = optional_on_encode()
    is_leverage: Optional[int] = optional_on_encode()
    market_unit: Optional[str] = optional_on_encode()
    trigger_direction: Optional[int] = optional_on_encode()
    order_filter: Optional[str] = optional_on_encode()
    trigger_price: Optional[WireDecimal] = optional_on_encode()
    trigger_by: Optional[str] = optional_on_encode()
    order_iv: Optional[WireDecimal] = optional_on_encode()
    time_in_force: Optional[TimeInForce] = optional_on_encode()
    position_idx: Optional[int] = optional_on_encode()
    order_link_id: Optional[str] = optional_on_encode()
    take_profit: Optional[WireDecimal] = optional_on_encode()
    stop_loss: Optional[WireDecimal] = optional_on_encode()
    tp_trigger_by: Optional[str] = optional_on_encode()
    sl_trigger_by: Optional[str] = optional_on_encode()
    reduce_only: Optional[bool] = optional_on_encode()
    close_on_trigger: Optional[bool] = optional_on_encode()
    smp_type: Optional[str] = optional_on_encode()
    mmp: Optional[bool] = optional_on_encode()
    tpsl_mode: Optional[str] = optional_on_encode()
    tp_limit_price: Optional[WireDecimal] = optional_on_encode()
    sl_limit_price: Optional[WireDecimal] = optional_on_encode()
    tp_order_type: Optional[OrderType] = optional_on_encode()
    sl_order_type: Optional[OrderType] = optional_on_encode()

    @model_validator(mode="after")
    def _limit_needs_price(self):
        if self.order_type is OrderType.Limit and self.price is None:
            raise ValueError("Limit orders require a price")
        return self

    # ------------------------------------------------------------------
    # Presets for common order shapes
    # ------------------------------------------------------------------

    @classmethod
    def spot_limit_with_market_tpsl(cls, symbol, side, qty, price, tp, sl) -> "OrderRequest":
        """Post-only spot limit entry whose TP/SL fire as market orders."""
        return cls(
            category=Category.Spot, symbol=symbol, side=side,
            order_type=OrderType.Limit, qty=qty, price=price,
            time_in_force=TimeInForce.PostOnly,
            take_profit=tp, stop_loss=sl,
            tp_order_type=OrderType.Market, sl_order_type=OrderType.Market,
        )

    @classmethod
    def spot_limit_with_limit_tpsl(cls, symbol, side, qty, price, tp, sl) -> "OrderRequest":
        """Post-only spot limit entry whose TP/SL rest as limit orders at tp/sl."""
        return cls(
            category=Category.Spot, symbol=symbol, side=side,
            order_type=OrderType.Limit, qty=qty, price=price,
            time_in_force=TimeInForce.PostOnly,
            take_profit=tp, stop_loss=sl,
            tp_limit_price=tp, sl_limit_price=sl,
            tp_order_type=OrderType.Limit, sl_order_type=OrderType.Limit,
        )

    @classmethod
    def spot_postonly(cls, symbol, side, qty, price) -> "OrderRequest":
        """Maker-only spot limit order."""
        return cls(
            category=Category.Spot, symbol=symbol, side=side,
            order_type=OrderType.Limit, qty=qty, price=price,
            time_in_force=TimeInForce.PostOnly,
        )

    @classmethod
    def spot_tpsl(cls, symbol, side, qty, price, order_link_id=None) -> "OrderRequest":
        """Standalone spot TP/SL order (orderFilter=tpslOrder)."""
        return cls(
            category=Category.Spot, symbol=symbol, side=side,
            order_type=OrderType.Limit, qty=qty, price=price,
            time_in_force=TimeInForce.GTC,
            order_link_id=order_link_id, order_filter="tpslOrder",
        )

    @classmethod
    def spot_margin(cls, symbol, side, qty, price) -> "OrderRequest":
        """Spot order on borrowed funds (isLeverage=1)."""
        return cls(
            category=Category.Spot, symbol=symbol, side=side,
            order_type=OrderType.Market, qty=qty, price=price,
            time_in_force=TimeInForce.PostOnly, is_leverage=1,
        )

    @classmethod
    def spot_market(cls, symbol, side, qty) -> "OrderRequest":
        return cls(
            category=Category.Spot, symbol=symbol, side=side,
            order_type=OrderType.Market, qty=qty,
            time_in_force=TimeInForce.IOC,
        )

    @classmethod
    def futures_limit_with_market_tpsl(cls, symbol, side, qty, price, tp, sl) -> "OrderRequest":
        """Linear post-only entry, full-position TP/SL as market orders."""
        return cls(
            category=Category.Linear, symbol=symbol, side=side,
            order_type=OrderType.Limit, qty=qty, price=price,
            time_in_force=TimeInForce.PostOnly, reduce_only=False,
            take_profit=tp, stop_loss=sl, tpsl_mode="Full",
            tp_order_type=OrderType.Market, sl_order_type=OrderType.Market,
        )

    @classmethod
    def futures_limit_with_limit_tpsl(cls, symbol, side, qty, price, tp, sl) -> "OrderRequest":
        """Linear post-only entry, partial TP/SL as limit orders at tp/sl."""
        return cls(
            category=Category.Linear, symbol=symbol, side=side,
            order_type=OrderType.Limit, qty=qty, price=price,
            time_in_force=TimeInForce.PostOnly, reduce_only=False,
            take_profit=tp, stop_loss=sl, tpsl_mode="Partial",
            tp_limit_price=tp, sl_limit_price=sl,
            tp_order_type=OrderType.Limit, sl_order_type=OrderType.Limit,
        )

    @classmethod
    def futures_market(cls, symbol, side, qty) -> "OrderRequest":
        return cls(
            category=Category.Linear, symbol=symbol, side=side,
            order_type=OrderType.Market, qty=qty,
            time_in_force=TimeInForce.IOC, reduce_only=False,
        )

    @classmethod
    def futures_close_limit(cls, symbol, side, qty, price, order_link_id) -> "OrderRequest":
        """Reduce-only GTC limit order closing (part of) a linear position."""
        return cls(
            category=Category.Linear, symbol=symbol, side=side,
            order_type=OrderType.Limit, qty=qty, price=price,
            time_in_force=TimeInForce.GTC,
            order_link_id=order_link_id, reduce_only=True,
        )

    @classmethod
    def futures_market_close(cls, symbol, side, qty) -> "OrderRequest":
        """Reduce-only IOC market order closing a linear position."""
        return cls(
            category=Category.Linear, symbol=symbol, side=side,
            order_type=OrderType.Market, qty=qty,
            time_in_force=TimeInForce.IOC, reduce_only=True,
        )


class AmendOrderRequest(WireModel):
    """Parameters of POST /v5/order/amend. One of order_id/order_link_id is required."""
    category: Category
    symbol: str
    order_id: Optional[str] = optional_on_encode()
    order_link_id: Optional[str] = optional_on_encode()
    order_iv: Optional[WireDecimal] = optional_on_encode()
    trigger_price: Optional[WireDecimal] = optional_on_encode()
    qty: Optional[WireDecimal] = optional_on_encode()
    price: Optional[WireDecimal] = optional_on_encode()
    tpsl_mode: Optional[str] = optional_on_encode()
    take_profit: Optional[WireDecimal] = optional_on_encode()
    stop_loss: Optional[WireDecimal] = optional_on_encode()
    tp_trigger_by: Optional[str] = optional_on_encode()
    sl_trigger_by: Optional[str] = optional_on_encode()
    trigger_by: Optional[str] = optional_on_encode()
    tp_limit_price: Optional[WireDecimal] = optional_on_encode()
    sl_limit_price: Optional[WireDecimal] = optional_on_encode()

    @model_validator(mode="after")
    def _needs_order_ref(self):
        _require_order_ref(self)
        return self


class CancelOrderRequest(WireModel):
    """Parameters of POST /v5/order/cancel. One of order_id/order_link_id is required."""
    category: Category
    symbol: str
    order_id: Optional[str] = optional_on_encode()
    order_link_id: Optional[str] = optional_on_encode()
    order_filter: Optional[str] = optional_on_encode()

    @model_validator(mode="after")
    def _needs_order_ref(self):
        _require_order_ref(self)
        return self


def _require_order_ref(request) -> None:
    if not (request.order_id or request.order_link_id):
        raise ValueError("either order_id or order_link_id is required")


class _BatchRequest(WireModel):
    """
    Body of the /v5/order/*-batch endpoints.

    The category is given once at the top level. Items decoded without one
    inherit it, and the per-item copies are dropped from the encoded
    "request" list.
    """
    category: Category

    @model_validator(mode="before")
    @classmethod
    def _inherit_category(cls, data):
        category = data.get("category") if isinstance(data, dict) else None
        if category is not None and isinstance(data.get("request"), list):
            data = {
                **data,
                "request": [
                    {"category": category, **item} if isinstance(item, dict) else item
                    for item in data["request"]
                ],
            }
        return data

    @model_validator(mode="after")
    def _same_category(self):
        for item in self.request:
            if item.category is not self.category:
                raise ValueError(
                    f"batch item category {item.category.value} != {self.category.value}"
                )
        return self

    @field_serializer("request", mode="wrap", when_used="json", check_fields=False)
    def _strip_item_category(self, items, handler):
        encoded = handler(items)
        for item in encoded:
            item.pop("category", None)
        return encoded


class BatchPlaceRequest(_BatchRequest):
    request: list[OrderRequest]


class BatchAmendRequest(_BatchRequest):
    request: list[AmendOrderRequest]


class BatchCancelRequest(_BatchRequest):
    request: list[CancelOrderRequest]
