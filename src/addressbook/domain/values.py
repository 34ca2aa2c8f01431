"""Validated value types for contact fields.

Each type wraps one string, checks it against a format predicate at construction
and is immutable afterwards. None raises NullInputError; a failing predicate raises
ValidationError carrying the type's MESSAGE_CONSTRAINTS.
"""

import re
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import ClassVar

from addressbook.domain.errors import NullInputError, ValidationError, require_non_null

# Max length for free-text remarks; same bound the profile bio used.
REMARK_MAX_LENGTH = 2000

_ALNUM = "[A-Za-z0-9]"


@dataclass(frozen=True)
class ValidatedString:
    """Base for single-string value types. Subclasses set MESSAGE_CONSTRAINTS and PATTERN."""

    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""
    PATTERN: ClassVar[re.Pattern[str]]

    def __post_init__(self):
        if self.value is None:
            raise NullInputError(f"{type(self).__name__} value must not be None.")
        if not self.is_valid(self.value):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", self.value.strip())

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        require_non_null(raw, "raw")
        return cls.PATTERN.fullmatch(raw) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Name(ValidatedString):
    """A person's display name."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")


@dataclass(frozen=True)
class Phone(ValidatedString):
    """A local phone number: exactly 8 digits, no country code."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, and it should be exactly 8 digits long"
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]{8}")


_EMAIL_SPECIAL_CHARACTERS = "+_.-"
_EMAIL_LOCAL_PART = rf"{_ALNUM}+([{re.escape(_EMAIL_SPECIAL_CHARACTERS)}]{_ALNUM}+)*"
_EMAIL_DOMAIN_LABEL = rf"{_ALNUM}+(-{_ALNUM}+)*"
_EMAIL_DOMAIN_LAST_LABEL = rf"(?=[A-Za-z0-9-]*{_ALNUM}{{2}}){_EMAIL_DOMAIN_LABEL}"
_EMAIL_DOMAIN = rf"({_EMAIL_DOMAIN_LABEL}\.)*{_EMAIL_DOMAIN_LAST_LABEL}"


@dataclass(frozen=True)
class Email(ValidatedString):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special characters, "
        f"excluding the parentheses, ({_EMAIL_SPECIAL_CHARACTERS}). The local-part may not start or end "
        "with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of domain labels "
        "separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by hyphens, if any."
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(rf"{_EMAIL_LOCAL_PART}@{_EMAIL_DOMAIN}")


@dataclass(frozen=True)
class EmptyAddress:
    """The absent address. All instances are equal."""

    @property
    def value(self) -> str:
        return ""

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True)
class NonEmptyAddress(ValidatedString):
    """A physical address; any text that does not start with whitespace."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Addresses can take any values, and it should not be blank"
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"\S.*", re.DOTALL)


Address = EmptyAddress | NonEmptyAddress

EMPTY_ADDRESS = EmptyAddress()


def create_address(raw: str | None) -> Address:
    """Build an Address; None gives EMPTY_ADDRESS, anything else must be a valid address."""
    if raw is None:
        return EMPTY_ADDRESS
    return NonEmptyAddress(raw)


def address_text(address: Address) -> str | None:
    """Return the address string, or None for the empty variant."""
    match address:
        case EmptyAddress():
            return None
        case NonEmptyAddress(value=value):
            return value
    raise TypeError(f"Not an address: {address!r}")


@dataclass(frozen=True)
class Remark(ValidatedString):
    """Free-text note about a person. May be empty."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        f"Remarks can take any values on a single line, up to {REMARK_MAX_LENGTH} characters"
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[^\r\n]*")

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        return super().is_valid(raw) and len(raw) <= REMARK_MAX_LENGTH


@dataclass(frozen=True)
class Tag(ValidatedString):
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tags names should be alphanumeric"
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(rf"{_ALNUM}+")


@dataclass(frozen=True)
class Insurance(ValidatedString):
    """Name of an insurance plan held by a contact."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Insurance names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")


class PriorityLevel(IntEnum):
    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3


NONE_PRIORITY_KEYWORD = "none"

_PRIORITY_KEYWORDS = {level.name.lower(): level for level in PriorityLevel}


@total_ordering
@dataclass(frozen=True)
class Priority(ValidatedString):
    """Urgency of a contact, one of a closed set of keywords. Orders by level."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Priority should be one of: " + ", ".join(_PRIORITY_KEYWORDS)
    )

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        require_non_null(raw, "raw")
        return raw in _PRIORITY_KEYWORDS

    @classmethod
    def none(cls) -> "Priority":
        return cls(NONE_PRIORITY_KEYWORD)

    @property
    def level(self) -> PriorityLevel:
        return _PRIORITY_KEYWORDS[self.value]

    def __lt__(self, other: "Priority") -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.level < other.level
