"""Tests for tolerant number parsing of payload tokens"""

import pytest

from quote.validation.number_parsing import (
    NumberParsingError,
    clean_token,
    parse_float_token,
    parse_int_token,
    safe_parse_float,
    safe_parse_int,
)


@pytest.mark.unit
class TestNumberParsing:
    """Tests for number parsing utilities"""

    def test_parse_float_token_normal_values(self):
        """Test parsing plain numeric tokens"""
        assert parse_float_token("250.5") == 250.5
        assert parse_float_token("245") == 245.0
        assert parse_float_token("0.0001") == 0.0001
        assert parse_float_token("-3.25") == -3.25

    def test_parse_float_token_scientific_notation(self):
        """Test parsing scientific notation"""
        assert parse_float_token("5e-3") == 0.005
        assert parse_float_token("1.2E4") == 12000.0

    def test_parse_float_token_with_whitespace_and_quotes(self):
        """Test tokens sliced with surrounding whitespace or quotes"""
        assert parse_float_token(" 1.50 ") == 1.50
        assert parse_float_token("\n\t262.24\n") == 262.24
        assert parse_float_token('"12.5"') == 12.5

    def test_parse_float_token_numbers_pass_through(self):
        assert parse_float_token(3) == 3.0
        assert parse_float_token(2.5) == 2.5

    def test_parse_float_token_invalid_inputs(self):
        """Test parsing invalid tokens"""
        for value in ["", "   ", "null", "abc", "1.2.3", '""', None]:
            with pytest.raises(NumberParsingError):
                parse_float_token(value)

    def test_parse_float_token_rejects_non_finite(self):
        for value in ["nan", "inf", "-Infinity", float("nan")]:
            with pytest.raises(NumberParsingError):
                parse_float_token(value)

    def test_parse_float_token_rejects_unsupported_types(self):
        with pytest.raises(NumberParsingError):
            parse_float_token(True)

        with pytest.raises(NumberParsingError):
            parse_float_token([1.0])

    def test_parse_int_token(self):
        assert parse_int_token("90483029") == 90483029
        assert parse_int_token(" 12 ") == 12
        assert parse_int_token("1.5e6") == 1500000
        assert parse_int_token("1200.9") == 1200
        assert parse_int_token(7) == 7

    def test_parse_int_token_invalid_inputs(self):
        for value in ["", "null", "abc", None]:
            with pytest.raises(NumberParsingError):
                parse_int_token(value)

    def test_clean_token(self):
        assert clean_token('  "AAPL" ') == "AAPL"
        assert clean_token("12") == "12"
        assert clean_token('"') == '"'


@pytest.mark.unit
class TestSafeParsing:
    def test_safe_parse_float_defaults(self):
        assert safe_parse_float("abc") == 0.0
        assert safe_parse_float(None) == 0.0
        assert safe_parse_float("null", default=-1.0) == -1.0
        assert safe_parse_float("9.75") == 9.75

    def test_safe_parse_int_defaults(self):
        assert safe_parse_int("abc") == 0
        assert safe_parse_int(None) == 0
        assert safe_parse_int("", default=5) == 5
        assert safe_parse_int("42") == 42
