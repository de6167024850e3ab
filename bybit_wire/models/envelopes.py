"""
Generic containers shared by many endpoints.

Bybit wraps most results in one of a few shapes. Instead of one wrapper
class per endpoint, each shape is a single generic model:

    ListEnvelope[T]            {"list": [T, ...]}
    PaginatedListEnvelope[T]   {"category": ..., "list": [...], "nextPageCursor": "..."}
    TimestampedSample[T]       {"time": <local ms>, "data": T}
    ApiResponse[R, E]          {"retCode", "retMsg", "result": R, "retExtInfo": E, "time"}
    Empty                      {}

Sequence order is kept exactly as received; a failing element aborts the
whole decode with MalformedEnvelope(index, ...).
"""

from typing import Generic, List, Optional, TypeVar

from ..utils.helpers import now_ms
from .base import WireModel, wire_field
from .enums import Category

T = TypeVar("T")
R = TypeVar("R")
E = TypeVar("E")


class Empty(WireModel):
    """
    Zero-field placeholder for endpoints that answer with {}.

    Any object decodes (extra keys are ignored); encodes to {}.
    """


class ListEnvelope(WireModel, Generic[T]):
    """Ordered batch or snapshot of one kind of record."""

    items: List[T] = wire_field(alias="list")


class PaginatedListEnvelope(ListEnvelope[T], Generic[T]):
    """
    One page of a cursor-paginated result.

    The cursor is opaque: it is passed back to the exchange unchanged to get
    the next page. An empty cursor means this is the last page.
    """

    category: Category
    next_page_cursor: str = ""

    @property
    def has_next_page(self) -> bool:
        return self.next_page_cursor != ""


class TimestampedSample(WireModel, Generic[T]):
    """A payload paired with the local time (epoch ms) it was received."""

    time: int
    data: T

    @classmethod
    def received(cls, data, at_ms: Optional[int] = None) -> "TimestampedSample":
        """Stamp data with the local receipt time (now unless at_ms is given)."""
        return cls(time=now_ms() if at_ms is None else at_ms, data=data)


class ApiResponse(WireModel, Generic[R, E]):
    """
    Envelope of every V5 REST response.

    ret_code 0 means the request succeeded. For batch endpoints,
    ret_ext_info carries one OrderConfirmation per request item, in the same
    order as result.items; a batch where some items failed still decodes
    successfully and the failures are visible per item.
    """

    ret_code: int
    ret_msg: str
    result: R
    ret_ext_info: E
    time: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.ret_code == 0

    def pair_confirmations(self) -> list[tuple]:
        """
        Zip batch results with their per-item confirmations.

        Returns:
            List of (result_item, OrderConfirmation) in exchange order

        Raises:
            TypeError: If result/ret_ext_info are not list envelopes
        """
        if not isinstance(self.result, ListEnvelope) or not isinstance(
            self.ret_ext_info, ListEnvelope
        ):
            raise TypeError("pair_confirmations() needs list envelopes on both sides")
        return list(zip(self.result.items, self.ret_ext_info.items))
