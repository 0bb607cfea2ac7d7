"""Number parsing utilities for scraped chart payload values.

Tokens come straight out of the response text, so they may carry
whitespace, surrounding quotes, JSON ``null`` or outright garbage.
"""

import math


class NumberParsingError(Exception):
    """Raised when a token cannot be parsed as a number"""

    pass


def clean_token(value: str) -> str:
    """Strip whitespace and one level of surrounding double quotes.

    Args:
        value: Raw token sliced out of the payload

    Returns:
        Cleaned token text
    """
    cleaned = value.strip()
    if len(cleaned) >= 2 and cleaned[0] == '"' and cleaned[-1] == '"':
        cleaned = cleaned[1:-1].strip()
    return cleaned


def parse_float_token(value: str | int | float | None) -> float:
    """Parse a payload token into a finite float.

    Args:
        value: Token to parse (string, int, float, or None)

    Returns:
        Parsed value as float

    Raises:
        NumberParsingError: If the token is empty, null, non-numeric or
            not finite
    """
    if value is None:
        raise NumberParsingError("Cannot parse None value")

    if isinstance(value, bool):
        raise NumberParsingError(f"Unsupported type: {type(value)}")

    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        cleaned = clean_token(value)

        if not cleaned:
            raise NumberParsingError("Empty string cannot be parsed")

        if cleaned == "null":
            raise NumberParsingError("Token is null")

        try:
            result = float(cleaned)
        except ValueError as e:
            raise NumberParsingError(
                f"Cannot parse number '{value}': {e}"
            ) from e
    else:
        raise NumberParsingError(f"Unsupported type: {type(value)}")

    if math.isnan(result) or math.isinf(result):
        raise NumberParsingError(f"Non-finite number '{value}'")

    return result


def parse_int_token(value: str | int | float | None) -> int:
    """Parse a payload token into an int.

    Integral text is parsed exactly; anything else that parses as a float
    (``1.5e6``, ``1200.0``) is truncated toward zero.

    Raises:
        NumberParsingError: If the token cannot be parsed
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    if isinstance(value, str):
        cleaned = clean_token(value)
        try:
            return int(cleaned)
        except ValueError:
            pass

    return int(parse_float_token(value))


def safe_parse_float(
    value: str | int | float | None, default: float = 0.0
) -> float:
    """Parse a float with fallback to default value."""
    try:
        return parse_float_token(value)
    except NumberParsingError:
        return default


def safe_parse_int(value: str | int | float | None, default: int = 0) -> int:
    """Parse an int with fallback to default value."""
    try:
        return parse_int_token(value)
    except NumberParsingError:
        return default
