"""E.164 form of phone numbers, for matching numbers typed in different formats."""

import phonenumbers

from addressbook.domain import Phone


def to_e164(number: Phone | str, region: str | None) -> str | None:
    """Return the E.164 form of number, or None if it cannot be a phone number.

    A Phone is always local and is read in region. Raw text may carry its own
    country code ("+65 9312 1534"), which takes precedence over region.
    """
    if isinstance(number, Phone):
        text = number.value
    else:
        text = (number or "").strip()
    if not text:
        return None
    try:
        parsed = phonenumbers.parse(text, region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_possible_number(parsed):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


def is_known_region(region: str) -> bool:
    return region in phonenumbers.SUPPORTED_REGIONS
