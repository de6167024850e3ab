"""
Tests for response unwrapping.

Validates that:
1. extract_payload() accepts bodies and pybit (body, elapsed, headers) tuples
2. Non-zero retCode raises BybitAPIError and is logged
3. Bodies that do not match their model raise ResponseDecodeError and are logged
"""

import logging
from datetime import timedelta

import pytest

from bybit_wire.exchanges import (
    BybitAPIError,
    RateLimitHeader,
    ResponseDecodeError,
    decode_response,
    decode_result,
    extract_payload,
)
from bybit_wire.models import (
    Empty,
    MappingError,
    MissingField,
    OrderStatus,
    TypeMismatch,
    WalletList,
)
from bybit_wire.models.responses import BatchPlaceResponse
from bybit_wire.utils.logger import setup_logger


HEADERS = {
    "X-Bapi-Limit": "10",
    "X-Bapi-Limit-Status": "9",
    "X-Bapi-Limit-Reset-Timestamp": "1686110470999",
    "Traceid": "6d5b8a4c7a1f",
    "Content-Type": "application/json",
}


@pytest.fixture(autouse=True)
def wire_logger():
    """Fresh console-only logger so caplog controls the level."""
    return setup_logger()


class TestExtractPayload:
    """Test transport response splitting."""

    def test_plain_body(self, batch_place_payload):
        """A dict is the body itself."""
        raw = extract_payload(batch_place_payload)

        assert raw.payload is batch_place_payload
        assert raw.rate_limit is None
        assert raw.elapsed is None

    def test_pybit_tuple(self, batch_place_payload):
        """(body, elapsed, headers): headers come from index 2."""
        raw = extract_payload((batch_place_payload, timedelta(milliseconds=42), HEADERS))

        assert raw.payload is batch_place_payload
        assert raw.elapsed == timedelta(milliseconds=42)
        assert raw.rate_limit == RateLimitHeader(
            limit=10,
            remaining=9,
            reset_timestamp=1686110470999,
            trace_id="6d5b8a4c7a1f",
        )

    def test_header_names_case_insensitive(self, batch_place_payload):
        """Lower-cased header names are found too."""
        headers = {k.lower(): v for k, v in HEADERS.items()}
        raw = extract_payload((batch_place_payload, timedelta(0), headers))

        assert raw.rate_limit.remaining == 9

    def test_public_endpoint_without_limits(self, batch_place_payload):
        """No X-Bapi-Limit header -> no rate limit info."""
        raw = extract_payload((batch_place_payload, timedelta(0), {"Content-Type": "application/json"}))
        assert raw.rate_limit is None

    def test_two_tuple(self, batch_place_payload):
        """(body, headers) is accepted as well."""
        raw = extract_payload((batch_place_payload, HEADERS))
        assert raw.rate_limit.limit == 10

    def test_non_object_body(self):
        """Anything but an object is rejected."""
        with pytest.raises(TypeMismatch) as exc_info:
            extract_payload("Service Unavailable")

        assert exc_info.value.field == "response"
        assert exc_info.value.actual == "string"


class TestDecodeResponse:
    """Test successful decoding."""

    def test_full_response(self, batch_place_payload):
        """decode_response() decodes the whole envelope."""
        resp = decode_response(BatchPlaceResponse, batch_place_payload, endpoint="/v5/order/create-batch")

        assert resp.ok
        assert len(resp.result.items) == 2

    def test_result_only(self, wallet_payload, make_response):
        """decode_result() decodes just the result member."""
        wallets = decode_result(WalletList, make_response(wallet_payload))
        assert wallets.items[0].coin_balance("BTC").available_to_borrow == 3

    def test_missing_result_is_empty(self):
        """Bodiless answers decode as Empty."""
        assert decode_result(Empty, {"retCode": 0, "retMsg": "OK"}) == Empty()

    def test_debug_log(self, batch_place_payload, caplog):
        """Successful decodes are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="bybit_wire"):
            decode_response(BatchPlaceResponse, batch_place_payload, endpoint="/v5/order/create-batch")

        assert "/v5/order/create-batch" in caplog.text


class TestApiErrors:
    """Test non-zero retCode handling."""

    def test_raises_bybit_api_error(self, make_response):
        """retCode != 0 raises with code, message and body."""
        body = make_response({}, ret_code=110007, ret_msg="ab not enough for new order")

        with pytest.raises(BybitAPIError) as exc_info:
            decode_result(OrderStatus, body, endpoint="/v5/order/create")

        err = exc_info.value
        assert err.code == 110007
        assert err.message == "ab not enough for new order"
        assert err.response is body
        assert "110007" in str(err)

    def test_logged_as_warning(self, make_response, caplog):
        """API errors are logged with the endpoint."""
        body = make_response({}, ret_code=10001, ret_msg="params error")

        with caplog.at_level(logging.WARNING, logger="bybit_wire"):
            with pytest.raises(BybitAPIError):
                decode_response(BatchPlaceResponse, body, endpoint="/v5/order/create-batch")

        assert "[API_ERROR]" in caplog.text
        assert "code=10001" in caplog.text


class TestDecodeFailures:
    """Test bodies that do not match the model."""

    def test_wraps_mapping_error(self, make_response):
        """The original MappingError is kept with endpoint context."""
        body = make_response({"orderId": "1321003749386327552"})

        with pytest.raises(ResponseDecodeError) as exc_info:
            decode_result(OrderStatus, body, endpoint="/v5/order/create")

        err = exc_info.value
        assert isinstance(err, MappingError)
        assert err.endpoint == "/v5/order/create"
        assert err.model == "OrderStatus"
        assert isinstance(err.error, MissingField)
        assert err.error.field == "orderLinkId"

    def test_logged_with_preview(self, make_response, caplog):
        """Decode failures are logged with a payload preview."""
        body = make_response({"orderId": "1321003749386327552"})

        with caplog.at_level(logging.WARNING, logger="bybit_wire"):
            with pytest.raises(ResponseDecodeError):
                decode_result(OrderStatus, body, endpoint="/v5/order/create")

        assert "[DECODE_FAILED]" in caplog.text
        assert "1321003749386327552" in caplog.text

    def test_logging_can_be_disabled(self, make_response, caplog, monkeypatch):
        """BYBIT_WIRE_LOG_DECODE_FAILURES=false silences the warning."""
        monkeypatch.setenv("BYBIT_WIRE_LOG_DECODE_FAILURES", "false")
        body = make_response({"orderId": "1"})

        with caplog.at_level(logging.WARNING, logger="bybit_wire"):
            with pytest.raises(ResponseDecodeError):
                decode_result(OrderStatus, body)

        assert "[DECODE_FAILED]" not in caplog.text
