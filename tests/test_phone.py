"""Tests for E.164 phone normalization."""


from addressbook.domain import Phone
from addressbook.infrastructure.phone import is_known_region, to_e164


def test_raw_with_country_code_ignores_region():
    assert to_e164("+65 9312 1534", None) == "+6593121534"
    assert to_e164("+1 202 555 1234", "SG") == "+12025551234"


def test_raw_without_country_code_uses_region():
    assert to_e164("9312 1534", "SG") == "+6593121534"
    assert to_e164("202 555 1234", "US") == "+12025551234"


def test_phone_value_is_read_in_region():
    assert to_e164(Phone("93121534"), "SG") == "+6593121534"
    assert to_e164(Phone("93121534"), "SG") == to_e164("+65 9312-1534", "SG")


def test_phone_value_without_region_returns_none():
    assert to_e164(Phone("93121534"), None) is None


def test_invalid_returns_none():
    assert to_e164("", None) is None
    assert to_e164("   ", None) is None
    assert to_e164(None, "SG") is None
    assert to_e164("abc", "SG") is None
    assert to_e164("123", "US") is None  # too short


def test_whitespace_stripped():
    assert to_e164("  +6593121534  ", None) == "+6593121534"


def test_is_known_region():
    assert is_known_region("SG")
    assert not is_known_region("ZZ")
