"""
Pytest configuration and representative exchange payloads.

Payload shapes follow real Bybit V5 responses (trimmed to the fields the
models declare, plus a few extra keys to exercise unknown-key tolerance).
"""

import pytest

from bybit_wire.config import reset_config
from bybit_wire.config.constants import (
    ENV_LOG_DECODE_FAILURES,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    ENV_LOG_TO_FILE,
    ENV_PAYLOAD_PREVIEW_CHARS,
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Every test starts from default configuration."""
    for name in (
        ENV_LOG_LEVEL,
        ENV_LOG_DIR,
        ENV_LOG_TO_FILE,
        ENV_LOG_DECODE_FAILURES,
        ENV_PAYLOAD_PREVIEW_CHARS,
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def batch_place_payload() -> dict:
    """/v5/order/create-batch answer where the second item was rejected."""
    return {
        "retCode": 0,
        "retMsg": "OK",
        "result": {
            "list": [
                {
                    "category": "linear",
                    "symbol": "BTCUSDT",
                    "orderId": "1666800494330512128",
                    "orderLinkId": "spot-btc-03",
                    "createAt": "1686110470425",
                },
                {
                    "category": "linear",
                    "symbol": "ETHUSDT",
                    "orderId": "",
                    "orderLinkId": "spot-eth-01",
                    "createAt": "",
                },
            ]
        },
        "retExtInfo": {
            "list": [
                {"code": 0, "msg": "OK"},
                {"code": 10001, "msg": "Qty invalid"},
            ]
        },
        "time": 1686110470427,
    }


@pytest.fixture
def wallet_payload() -> dict:
    """/v5/account/wallet-balance result for a unified account."""
    return {
        "list": [
            {
                "totalEquity": "3.31216591",
                "accountIMRate": "0",
                "totalMarginBalance": "3.00326056",
                "totalInitialMargin": "0",
                "accountType": "UNIFIED",
                "totalAvailableBalance": "3.00326056",
                "accountMMRate": "0",
                "totalPerpUPL": "0",
                "totalWalletBalance": "3.00326056",
                "accountLTV": "0",
                "totalMaintenanceMargin": "0",
                "coin": [
                    {
                        "availableToBorrow": "3",
                        "bonus": "0",
                        "accruedInterest": "0",
                        "availableToWithdraw": "0",
                        "totalOrderIM": "0",
                        "equity": "0",
                        "totalPositionMM": "0",
                        "usdValue": "0",
                        "unrealisedPnl": "0",
                        "collateralSwitch": True,
                        "spotHedgingQty": "0",
                        "borrowAmount": "0.0",
                        "totalPositionIM": "0",
                        "walletBalance": "0",
                        "cumRealisedPnl": "0",
                        "locked": "0",
                        "marginCollateral": True,
                        "coin": "BTC",
                    },
                    {
                        "availableToBorrow": "",
                        "bonus": "0",
                        "accruedInterest": "0",
                        "availableToWithdraw": "",
                        "totalOrderIM": "0",
                        "equity": "3.31216591",
                        "totalPositionMM": "0",
                        "usdValue": "3.31216591",
                        "unrealisedPnl": "0",
                        "collateralSwitch": True,
                        "spotHedgingQty": "0",
                        "borrowAmount": "0",
                        "totalPositionIM": "0",
                        "walletBalance": "3.00326056",
                        "cumRealisedPnl": "-0.00018935",
                        "locked": "0",
                        "marginCollateral": True,
                        "coin": "USDT",
                    },
                ],
            }
        ]
    }


@pytest.fixture
def position_page_payload() -> dict:
    """/v5/position/list result with one open long and one empty slot."""
    base = {
        "positionIdx": 0,
        "riskId": 1,
        "riskLimitValue": "2000000",
        "symbol": "BTCUSDT",
        "side": "Buy",
        "size": "0.001",
        "avgPrice": "27123.5",
        "positionValue": "27.1235",
        "tradeMode": 0,
        "autoAddMargin": 0,
        "positionStatus": "Normal",
        "adlRankIndicator": 2,
        "leverage": "10",
        "positionBalance": "2.72",
        "markPrice": "27200.10",
        "liqPrice": "24500",
        "bustPrice": "24400",
        "positionMM": "0.15",
        "positionIM": "2.71",
        "tpslMode": "Full",
        "takeProfit": "",
        "stopLoss": "26000",
        "trailingStop": "0",
        "unrealisedPnl": "0.0766",
        "cumRealisedPnl": "-1.2",
        "seq": 4688002127,
        "isReduceOnly": False,
        "mmrSysUpdatedTime": "",
        "leverageSysUpdatedTime": "",
        "createdTime": "1676538056258",
        "updatedTime": "1697673600012",
        "sessionAvgPrice": "",
    }
    empty_slot = {
        **base,
        "symbol": "ETHUSDT",
        "side": "",
        "size": "0",
        "avgPrice": "",
        "positionValue": "",
        "liqPrice": "",
        "bustPrice": "",
        "stopLoss": "",
        "unrealisedPnl": "",
    }
    del empty_slot["positionStatus"]
    return {
        "list": [base, empty_slot],
        "nextPageCursor": "BTCUSDT%3A1657711949945%2C1",
        "category": "linear",
    }


@pytest.fixture
def linear_ticker_snapshot_message() -> dict:
    """First message of the tickers.BTCUSDT linear stream."""
    return {
        "topic": "tickers.BTCUSDT",
        "type": "snapshot",
        "data": {
            "symbol": "BTCUSDT",
            "tickDirection": "PlusTick",
            "price24hPcnt": "0.017103",
            "lastPrice": "17216.00",
            "prevPrice24h": "16926.50",
            "highPrice24h": "17281.50",
            "lowPrice24h": "16915.00",
            "prevPrice1h": "17238.00",
            "markPrice": "17217.33",
            "indexPrice": "17227.36",
            "openInterest": "68744.761",
            "openInterestValue": "1183601235.91",
            "turnover24h": "1570383121.943499",
            "volume24h": "91705.276",
            "nextFundingTime": "1673280000000",
            "fundingRate": "-0.000212",
            "bid1Price": "17215.50",
            "bid1Size": "84.489",
            "ask1Price": "17216.00",
            "ask1Size": "83.020",
        },
        "cs": 24987956059,
        "ts": 1673272861686,
    }


@pytest.fixture
def linear_ticker_delta_message() -> dict:
    """A later message on the same stream carrying only changed fields."""
    return {
        "topic": "tickers.BTCUSDT",
        "type": "delta",
        "data": {
            "symbol": "BTCUSDT",
            "tickDirection": "MinusTick",
            "lastPrice": "17215.50",
            "bid1Price": "17215.00",
            "bid1Size": "12.001",
        },
        "cs": 24987956060,
        "ts": 1673272861700,
    }


@pytest.fixture
def spot_ticker_message() -> dict:
    """A tickers.BTCUSDT message from the spot stream."""
    return {
        "topic": "tickers.BTCUSDT",
        "ts": 1673853746003,
        "type": "snapshot",
        "cs": 2588407389,
        "data": {
            "symbol": "BTCUSDT",
            "lastPrice": "21109.77",
            "highPrice24h": "21426.99",
            "lowPrice24h": "20575",
            "prevPrice24h": "20704.93",
            "volume24h": "6780.866843",
            "turnover24h": "141946527.22907118",
            "price24hPcnt": "0.0196",
            "usdIndexPrice": "21120.2400136",
        },
    }


@pytest.fixture
def borrow_history_payload() -> dict:
    """/v5/account/borrow-history result (rows, not list)."""
    return {
        "nextPageCursor": "2671153%3A1%2C2671153%3A1",
        "rows": [
            {
                "borrowAmount": "1.06333265702840778",
                "costExemption": "0",
                "freeBorrowedAmount": "0",
                "createdTime": 1697439900204,
                "interestBearingBorrowSize": "1.06333265702840778",
                "currency": "BTC",
                "unrealisedLoss": "0",
                "hourlyBorrowRate": "0.000001216904",
                "borrowCost": "0.00000129",
            }
        ],
    }


@pytest.fixture
def make_response():
    """Factory wrapping a result in the V5 response envelope."""
    def _make(result, ret_ext_info=None, ret_code=0, ret_msg="OK") -> dict:
        return {
            "retCode": ret_code,
            "retMsg": ret_msg,
            "result": result,
            "retExtInfo": {} if ret_ext_info is None else ret_ext_info,
            "time": 1700000000000,
        }
    return _make
