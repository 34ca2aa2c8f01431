"""
Address book core: clean-architecture layout.

- domain: validated values (Name, Phone, ...), Person, EditPersonDescriptor. No outer dependencies.
- application: parsing of raw input (parser_util), ports (PersonRepository).
- infrastructure: adapters (InMemoryPersonRepository), settings, phone normalization.
"""

from addressbook.application import PersonRepository
from addressbook.domain import (
    EditPersonDescriptor,
    NullInputError,
    Person,
    ValidationError,
)
from addressbook.infrastructure import InMemoryPersonRepository, Settings

__all__ = [
    "EditPersonDescriptor",
    "InMemoryPersonRepository",
    "NullInputError",
    "Person",
    "PersonRepository",
    "Settings",
    "ValidationError",
]
