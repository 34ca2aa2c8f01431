"""Parse raw user input into validated domain values.

Every function trims its input first. Invalid input raises ValidationError with the
target type's fixed MESSAGE_CONSTRAINTS; None raises NullInputError (except
parse_address, where None means "no address").
"""

import logging
import re
from collections.abc import Iterable

from addressbook.domain import (
    Address,
    Email,
    Index,
    Insurance,
    Name,
    NameContainsKeywordsPredicate,
    NonEmptyAddress,
    Phone,
    Priority,
    Remark,
    Tag,
    ValidationError,
    create_address,
)
from addressbook.domain.errors import require_non_null
from addressbook.domain.values import ValidatedString

logger = logging.getLogger(__name__)

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

_UNSIGNED_INTEGER = re.compile(r"[0-9]+")
_MAX_INDEX = 2**31 - 1


def _is_non_zero_unsigned_integer(text: str) -> bool:
    if not _UNSIGNED_INTEGER.fullmatch(text):
        return False
    return 0 < int(text) <= _MAX_INDEX


def _parse_value(value_type: type[ValidatedString], raw: str, field: str):
    require_non_null(raw, field)
    trimmed = raw.strip()
    if not value_type.is_valid(trimmed):
        logger.debug("Rejected %s input %r", field, raw)
        raise ValidationError(value_type.MESSAGE_CONSTRAINTS)
    return value_type(trimmed)


def parse_index(one_based_index: str) -> Index:
    """Parse a one-based index such as " 3 " into an Index."""
    require_non_null(one_based_index, "index")
    trimmed = one_based_index.strip()
    if not _is_non_zero_unsigned_integer(trimmed):
        logger.debug("Rejected index input %r", one_based_index)
        raise ValidationError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(trimmed))


def parse_name(name: str) -> Name:
    return _parse_value(Name, name, "name")


def parse_phone(phone: str) -> Phone:
    return _parse_value(Phone, phone, "phone")


def parse_email(email: str) -> Email:
    return _parse_value(Email, email, "email")


def parse_address(address: str | None) -> Address:
    """Parse an address; None gives the empty address, "" is invalid."""
    if address is None:
        return create_address(None)
    return _parse_value(NonEmptyAddress, address, "address")


def parse_remark(remark: str) -> Remark:
    return _parse_value(Remark, remark, "remark")


def parse_priority(priority: str) -> Priority:
    return _parse_value(Priority, priority, "priority")


def parse_tag(tag: str) -> Tag:
    return _parse_value(Tag, tag, "tag")


def parse_tags(tags: Iterable[str]) -> set[Tag]:
    """Parse every tag; the first invalid one aborts the whole parse."""
    require_non_null(tags, "tags")
    return {parse_tag(t) for t in tags}


def parse_insurance(insurance: str) -> Insurance:
    return _parse_value(Insurance, insurance, "insurance")


def parse_insurances(insurances: Iterable[str]) -> set[Insurance]:
    """Parse every insurance name; the first invalid one aborts the whole parse."""
    require_non_null(insurances, "insurances")
    return {parse_insurance(i) for i in insurances}


def parse_name_keywords(keywords: str) -> NameContainsKeywordsPredicate:
    """Split free text on whitespace into a name predicate. Content is not validated."""
    require_non_null(keywords, "keywords")
    return NameContainsKeywordsPredicate(tuple(keywords.split()))
