"""Application layer: input parsing and ports. Depends only on domain."""

from addressbook.application.parser_util import (
    MESSAGE_INVALID_INDEX,
    parse_address,
    parse_email,
    parse_index,
    parse_insurance,
    parse_insurances,
    parse_name,
    parse_name_keywords,
    parse_phone,
    parse_priority,
    parse_remark,
    parse_tag,
    parse_tags,
)
from addressbook.application.ports import PersonRepository

__all__ = [
    "MESSAGE_INVALID_INDEX",
    "PersonRepository",
    "parse_address",
    "parse_email",
    "parse_index",
    "parse_insurance",
    "parse_insurances",
    "parse_name",
    "parse_name_keywords",
    "parse_phone",
    "parse_priority",
    "parse_remark",
    "parse_tag",
    "parse_tags",
]
