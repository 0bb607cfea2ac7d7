"""Pytest fixtures for quote tests"""

import json
import sys
from pathlib import Path

import pytest

# =============================================================================
# Global Test Setup
# =============================================================================

# Add src to Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from quote.domain.models import Snapshot  # noqa: E402

# Worked example: an interior null close drops its timestamp too
TSLA_BODY = (
    '{"chart":{"result":[{"meta":{"symbol":"TSLA","currency":"USD",'
    '"regularMarketPrice":250.5,"previousClose":245.0},'
    '"indicators":{"quote":[{"close":[240,null,245,250.5]}]},'
    '"timestamp":[100,200,300,400]}]}}'
)

NOT_FOUND_BODY = (
    '{"chart":{"result":null,"error":{"code":"Not Found",'
    '"description":"No data found, symbol may be delisted"}}}'
)

BASE_TS = 1760967000


def _aapl_payload() -> dict:
    """Chart response shaped like the live endpoint (field order preserved)"""
    return {
        "chart": {
            "result": [
                {
                    "meta": {
                        "currency": "USD",
                        "symbol": "AAPL",
                        "exchangeName": "NMS",
                        "fullExchangeName": "NasdaqGS",
                        "instrumentType": "EQUITY",
                        "firstTradeDate": 345479400,
                        "regularMarketTime": 1760990401,
                        "gmtoffset": -14400,
                        "timezone": "EDT",
                        "regularMarketPrice": 262.24,
                        "fiftyTwoWeekHigh": 265.29,
                        "fiftyTwoWeekLow": 169.21,
                        "regularMarketDayHigh": 264.38,
                        "regularMarketDayLow": 255.63,
                        "regularMarketVolume": 90483029,
                        "longName": "Apple Inc.",
                        "shortName": "Apple Inc.",
                        "chartPreviousClose": 252.29,
                        "previousClose": 252.29,
                        "scale": 3,
                        "priceHint": 2,
                        "currentTradingPeriod": {
                            "pre": {
                                "timezone": "EDT",
                                "start": 1760947200,
                                "end": 1760967000,
                                "gmtoffset": -14400,
                            },
                            "regular": {
                                "timezone": "EDT",
                                "start": 1760967000,
                                "end": 1760990400,
                                "gmtoffset": -14400,
                            },
                        },
                        "dataGranularity": "1m",
                        "range": "1d",
                    },
                    "timestamp": [BASE_TS + i * 60 for i in range(6)],
                    "indicators": {
                        "quote": [
                            {
                                "volume": [1200, 900, None, 800, 750, 990],
                                "open": [255.7, 256.1, None, 257.0, 257.4, 258.0],
                                "high": [256.3, 256.9, None, 257.6, 258.1, 262.5],
                                "low": [255.6, 255.9, None, 256.8, 257.2, 257.9],
                                "close": [256.1, 256.8, None, 257.4, 258.0, 262.24],
                            }
                        ]
                    },
                }
            ],
            "error": None,
        }
    }


@pytest.fixture
def tsla_body() -> str:
    return TSLA_BODY


@pytest.fixture
def not_found_body() -> str:
    return NOT_FOUND_BODY


@pytest.fixture
def aapl_body() -> str:
    """Pretty-printed payload, with whitespace around separators"""
    return json.dumps(_aapl_payload(), indent=2)


@pytest.fixture
def aapl_compact_body() -> str:
    return json.dumps(_aapl_payload(), separators=(",", ":"))


@pytest.fixture
def sample_snapshot() -> Snapshot:
    """Snapshot with data for rendering tests"""
    return Snapshot(
        symbol="TSLA",
        name="Tesla, Inc.",
        currency="USD",
        exchange_name="NMS",
        current_price=250.5,
        previous_close=245.0,
        day_high=252.0,
        day_low=241.1,
        fifty_two_week_high=488.54,
        fifty_two_week_low=138.8,
        volume=1234567,
        prices=[240.0, 245.0, 250.5],
        timestamps=[BASE_TS, BASE_TS + 60, BASE_TS + 120],
        has_data=True,
    )
