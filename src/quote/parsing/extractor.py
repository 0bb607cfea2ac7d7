"""Snapshot extraction from raw chart API responses.

Fields are located by key lookup over the response text rather than by
parsing the whole document. Anything missing or malformed falls back to
its default, so a partial or odd payload still yields a usable Snapshot.
Scalar lookups are confined to the meta region (from the ``"meta"`` key to
the next ``"timestamp"`` key) so same-named keys elsewhere in the payload
are never matched.
"""

import re
from collections.abc import Iterator

from loguru import logger

from quote.domain.models import Snapshot
from quote.validation.number_parsing import (
    NumberParsingError,
    parse_float_token,
    parse_int_token,
    safe_parse_float,
    safe_parse_int,
)

NULL_RESULT_PATTERN = re.compile(r'"result"\s*:\s*(?:null|\[\s*\])')
ERROR_OBJECT_PATTERN = re.compile(r'"error"\s*:\s*\{')

META_MARKER = '"meta"'
TIMESTAMP_MARKER = '"timestamp"'
INDICATORS_MARKER = '"indicators"'
QUOTE_MARKER = '"quote"'

STRING_FIELDS = {
    "symbol": "symbol",
    "currency": "currency",
    "exchange_name": "exchangeName",
}
NAME_KEY = "longName"
NAME_FALLBACK_KEY = "shortName"

FLOAT_FIELDS = {
    "current_price": "regularMarketPrice",
    "previous_close": "previousClose",
    "day_high": "regularMarketDayHigh",
    "day_low": "regularMarketDayLow",
    "fifty_two_week_high": "fiftyTwoWeekHigh",
    "fifty_two_week_low": "fiftyTwoWeekLow",
}
VOLUME_KEY = "regularMarketVolume"
PRICE_FALLBACK_KEY = "chartPreviousClose"


def extract(raw_body: str | bytes | None) -> Snapshot:
    """Parse a raw chart response body into a Snapshot.

    Never raises. Absent or unparseable fields keep their defaults and
    ``has_data`` is only True when a positive current price was found.

    Args:
        raw_body: Response body as text or bytes

    Returns:
        Freshly built Snapshot
    """
    text = _as_text(raw_body)

    if NULL_RESULT_PATTERN.search(text) or ERROR_OBJECT_PATTERN.search(text):
        logger.debug("Chart response carries a null result or error object")
        return Snapshot()

    meta = meta_region(text)
    snapshot = Snapshot()

    for attr, key in STRING_FIELDS.items():
        setattr(snapshot, attr, string_field(meta, key))

    snapshot.name = string_field(meta, NAME_KEY) or string_field(
        meta, NAME_FALLBACK_KEY
    )

    for attr, key in FLOAT_FIELDS.items():
        setattr(snapshot, attr, safe_parse_float(scalar_token(meta, key)))

    snapshot.volume = safe_parse_int(scalar_token(meta, VOLUME_KEY))

    if snapshot.current_price == 0.0:
        # Live price is often missing outside market hours
        snapshot.current_price = safe_parse_float(
            scalar_token(meta, PRICE_FALLBACK_KEY)
        )

    snapshot.prices, snapshot.timestamps = _extract_series(text)
    snapshot.has_data = snapshot.current_price > 0

    if not snapshot.has_data:
        logger.debug("No usable current price in chart response")

    return snapshot


def _as_text(raw_body: str | bytes | None) -> str:
    if raw_body is None:
        return ""
    if isinstance(raw_body, bytes):
        return raw_body.decode("utf-8", errors="replace")
    return str(raw_body)


def meta_region(text: str) -> str:
    """Return the substring from the meta key to the next timestamp key.

    Empty when there is no meta key; runs to the end of the text when no
    timestamp key follows it.
    """
    start = text.find(META_MARKER)
    if start == -1:
        return ""

    end = text.find(TIMESTAMP_MARKER, start)
    if end == -1:
        return text[start:]
    return text[start:end]


def _value_starts(text: str, key: str, start: int = 0) -> Iterator[int]:
    """Yield the offset of the value after each ``"key":`` occurrence."""
    marker = f'"{key}"'
    index = text.find(marker, start)

    while index != -1:
        pos = index + len(marker)
        while pos < len(text) and text[pos].isspace():
            pos += 1

        if pos < len(text) and text[pos] == ":":
            pos += 1
            while pos < len(text) and text[pos].isspace():
                pos += 1
            yield pos

        index = text.find(marker, index + 1)


def string_field(region: str, key: str) -> str:
    """Read a quoted string value for ``key``, or "" when absent."""
    for pos in _value_starts(region, key):
        if pos >= len(region) or region[pos] != '"':
            return ""
        end = region.find('"', pos + 1)
        if end == -1:
            return ""
        return region[pos + 1 : end]
    return ""


def scalar_token(region: str, key: str) -> str | None:
    """Read the raw text of a scalar value up to the next ``,`` or ``}``.

    Returns:
        Trimmed token, or None when the key is absent
    """
    for pos in _value_starts(region, key):
        delimiters = (region.find(",", pos), region.find("}", pos))
        ends = [i for i in delimiters if i != -1]
        end = min(ends) if ends else len(region)
        return region[pos:end].strip()
    return None


def array_tokens(text: str, key: str, start: int = 0) -> list[str] | None:
    """Split the bracketed array value of ``key`` into trimmed tokens.

    Returns:
        Tokens in order, or None when no array value is found for the key
    """
    for pos in _value_starts(text, key, start):
        if pos >= len(text) or text[pos] != "[":
            continue

        end = text.find("]", pos)
        body = text[pos + 1 :] if end == -1 else text[pos + 1 : end]

        if not body.strip():
            return []
        return [token.strip() for token in body.split(",")]
    return None


def _close_tokens(text: str) -> list[str]:
    indicators = text.find(INDICATORS_MARKER)
    if indicators == -1:
        return []

    quote = text.find(QUOTE_MARKER, indicators)
    if quote == -1:
        return []

    return array_tokens(text, "close", quote) or []


def _timestamp_tokens(text: str) -> list[str]:
    return array_tokens(text, "timestamp") or []


def _extract_series(text: str) -> tuple[list[float], list[int]]:
    """Build lock-stepped price and timestamp lists.

    Raw close and timestamp tokens are paired from the trailing end. A pair
    survives only when both sides parse; closes older than the first
    timestamp have no partner and are kept on their own.
    """
    close_tokens = _close_tokens(text)
    stamp_tokens = _timestamp_tokens(text)

    if len(stamp_tokens) > len(close_tokens):
        stamp_tokens = stamp_tokens[len(stamp_tokens) - len(close_tokens) :]

    offset = len(close_tokens) - len(stamp_tokens)
    prices: list[float] = []
    timestamps: list[int] = []

    for index, token in enumerate(close_tokens):
        try:
            price = parse_float_token(token)
        except NumberParsingError:
            price = None

        if index < offset:
            if price is not None:
                prices.append(price)
            continue

        try:
            stamp = parse_int_token(stamp_tokens[index - offset])
        except NumberParsingError:
            continue

        if price is None:
            continue

        prices.append(price)
        timestamps.append(stamp)

    return prices, timestamps
