"""Infrastructure layer: configuration and concrete implementations of application ports."""

from addressbook.infrastructure.config import Settings
from addressbook.infrastructure.memory_repository import InMemoryPersonRepository
from addressbook.infrastructure.phone import to_e164

__all__ = [
    "InMemoryPersonRepository",
    "Settings",
    "to_e164",
]
