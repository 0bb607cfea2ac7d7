"""Tolerant value coercion for scraped payloads."""

from .number_parsing import (
    NumberParsingError,
    parse_float_token,
    parse_int_token,
    safe_parse_float,
    safe_parse_int,
)

__all__ = [
    "NumberParsingError",
    "parse_float_token",
    "parse_int_token",
    "safe_parse_float",
    "safe_parse_int",
]
