# tests/test_validator.py

import pytest

from src.application.validator import query_length, validate_query
from src.domain.models import ValidationResult


@pytest.mark.parametrize("text", ["", " ", "   ", "\t", "\n  \t"])
def test_blank_query_is_empty(text):
    assert validate_query(text) is ValidationResult.EMPTY


def test_empty_message():
    assert ValidationResult.EMPTY.message == "Please enter a search query."


def test_exactly_255_characters_is_valid():
    assert validate_query("a" * 255) is ValidationResult.VALID


def test_256_characters_is_too_long():
    result = validate_query("a" * 256)
    assert result is ValidationResult.TOO_LONG
    assert result.message == "Query is too long. Maximum 255 characters allowed."


def test_length_limit_counts_surrounding_whitespace():
    """Trimming is only for the emptiness check; length uses the raw text."""
    text = " " + "a" * 254 + " "
    assert len(text) == 256
    assert validate_query(text) is ValidationResult.TOO_LONG


def test_padded_query_is_valid():
    assert validate_query("  apple  ") is ValidationResult.VALID


def test_valid_has_no_message():
    assert ValidationResult.VALID.is_valid is True
    assert ValidationResult.VALID.message is None
    assert ValidationResult.EMPTY.is_valid is False


# ── Whitespace set and length units ───────────────────────────────────────────

@pytest.mark.parametrize("codepoint", [0xA0, 0x2028, 0x3000, 0xFEFF])
def test_unicode_blank_query_is_empty(codepoint):
    assert validate_query(chr(codepoint) * 3) is ValidationResult.EMPTY


@pytest.mark.parametrize("codepoint", [0x1C, 0x1F, 0x85])
def test_control_separators_are_not_whitespace(codepoint):
    assert validate_query(chr(codepoint)) is ValidationResult.VALID


def test_astral_characters_count_twice_toward_the_limit():
    emoji = chr(0x1F600)
    assert query_length(emoji) == 2
    assert validate_query(emoji * 127) is ValidationResult.VALID
    assert validate_query(emoji * 128) is ValidationResult.TOO_LONG
