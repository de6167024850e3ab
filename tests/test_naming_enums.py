"""
Tests for the field-name convention and wire enums.

Validates that:
1. to_camel() produces Bybit's camelCase keys, digit-led words included
2. Enum members map one-to-one onto wire tokens, overrides included
3. The designated default member stands in for absent data only
4. Unknown tokens fail with UnknownEnumToken
"""

from enum import auto, unique

import pytest

from bybit_wire.models import (
    Category,
    PositionStatus,
    Side,
    TickDirection,
    UnknownEnumToken,
    TypeMismatch,
    WireEnum,
    decode,
    encode,
    to_camel,
    wire_default,
)
from bybit_wire.models.trade import AmendedOrder


class TestToCamel:
    """Test snake_case -> camelCase conversion."""

    @pytest.mark.parametrize("name,expected", [
        ("symbol", "symbol"),
        ("order_link_id", "orderLinkId"),
        ("price_24h_pcnt", "price24hPcnt"),
        ("high_price_24h", "highPrice24h"),
        ("prev_price_1h", "prevPrice1h"),
        ("next_page_cursor", "nextPageCursor"),
        ("usd_index_price", "usdIndexPrice"),
    ])
    def test_known_keys(self, name, expected):
        """Python names should map to the exact keys Bybit sends."""
        assert to_camel(name) == expected

    def test_is_deterministic(self):
        """Same input always yields the same token."""
        assert to_camel("cum_realised_pnl") == to_camel("cum_realised_pnl")


class TestEnumTokens:
    """Test member <-> token mapping."""

    def test_identifier_is_default_token(self):
        """Members declared with auto() use their own name on the wire."""
        assert Side.Buy.value == "Buy"
        assert TickDirection.ZeroMinusTick.value == "ZeroMinusTick"
        assert Side.tokens() == ["Buy", "Sell"]

    def test_explicit_override_tokens(self):
        """Explicit values replace the identifier."""
        assert Category.Linear.value == "linear"
        assert PositionStatus.LiquidationInProgress.value == "Liq"
        assert PositionStatus.AutoDeleverageInProgress.value == "Adl"
        assert str(Category.Spot) == "spot"

    def test_from_wire_resolves_aliases(self):
        """Wire tokens resolve to members, not names."""
        assert PositionStatus.from_wire("Liq") is PositionStatus.LiquidationInProgress
        assert PositionStatus.from_wire("Normal") is PositionStatus.Normal
        assert Category.from_wire("option") is Category.Option

    def test_duplicate_tokens_rejected(self):
        """Two members may not share a token."""
        with pytest.raises(ValueError):
            @unique
            class Broken(WireEnum):
                First = "x"
                Second = "x"


class TestEnumDefaults:
    """Test the designated default member."""

    def test_declared_defaults(self):
        """Category and PositionStatus declare defaults; Side does not."""
        assert Category.default() is Category.Linear
        assert PositionStatus.default() is PositionStatus.Normal
        assert Side.default() is None

    def test_default_for_null_and_blank(self):
        """null and "" decode to the default member."""
        assert Category.from_wire(None) is Category.Linear
        assert Category.from_wire("") is Category.Linear

    def test_custom_default(self):
        """wire_default() works on any WireEnum."""
        @wire_default("Off")
        @unique
        class Switch(WireEnum):
            On = auto()
            Off = auto()

        assert Switch.default() is Switch.Off
        assert Switch.from_wire(None) is Switch.Off
        assert Switch.from_wire("On") is Switch.On

    def test_undeclared_default_is_none(self):
        """Types without a declaration have no default."""
        assert TickDirection.default() is None


class TestEnumDecoding:
    """Test enums inside records."""

    def _amended(self, category):
        return {
            "category": category,
            "symbol": "BTCUSDT",
            "orderId": "c6f055d9-7f21-4079-913d-e6523a9cfffa",
            "orderLinkId": "linear-004",
        }

    def test_token_decodes_and_encodes_back(self):
        """Round trip keeps the wire token, not the member name."""
        order = decode(AmendedOrder, self._amended("inverse"))
        assert order.category is Category.Inverse
        assert encode(order)["category"] == "inverse"

    def test_null_category_uses_default(self):
        """A null category falls back to Linear."""
        order = decode(AmendedOrder, self._amended(None))
        assert order.category is Category.Linear

    def test_unknown_token_fails(self):
        """An undeclared token is never replaced by the default."""
        with pytest.raises(UnknownEnumToken) as exc_info:
            decode(AmendedOrder, self._amended("futures"))

        err = exc_info.value
        assert err.type_name == "Category"
        assert err.token == "futures"
        assert err.field == "category"

    def test_member_name_is_not_a_token(self):
        """"Linear" is the member name; the wire token is "linear"."""
        with pytest.raises(UnknownEnumToken):
            decode(AmendedOrder, self._amended("Linear"))

    def test_non_string_token_is_type_mismatch(self):
        """Numbers are not enum tokens."""
        with pytest.raises(TypeMismatch) as exc_info:
            decode(AmendedOrder, self._amended(3))

        assert exc_info.value.field == "category"
        assert exc_info.value.expected == "enum"
        assert exc_info.value.actual == "number"
