"""Domain layer: value types, the Person aggregate and its edit descriptor. No dependencies on outer layers."""

from addressbook.domain.descriptor import EditPersonDescriptor
from addressbook.domain.errors import (
    AddressBookError,
    DuplicatePersonError,
    NullInputError,
    PersonNotFoundError,
    ValidationError,
)
from addressbook.domain.index import Index
from addressbook.domain.person import Person
from addressbook.domain.predicates import NameContainsKeywordsPredicate
from addressbook.domain.values import (
    EMPTY_ADDRESS,
    Address,
    Email,
    EmptyAddress,
    Insurance,
    Name,
    NonEmptyAddress,
    Phone,
    Priority,
    PriorityLevel,
    Remark,
    Tag,
    address_text,
    create_address,
)

__all__ = [
    "EMPTY_ADDRESS",
    "Address",
    "AddressBookError",
    "DuplicatePersonError",
    "EditPersonDescriptor",
    "Email",
    "EmptyAddress",
    "Index",
    "Insurance",
    "Name",
    "NameContainsKeywordsPredicate",
    "NonEmptyAddress",
    "NullInputError",
    "Person",
    "PersonNotFoundError",
    "Phone",
    "Priority",
    "PriorityLevel",
    "Remark",
    "Tag",
    "ValidationError",
    "address_text",
    "create_address",
]
