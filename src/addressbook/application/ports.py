"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from addressbook.domain import Index, Person


class PersonRepository(Protocol):
    """Holds the contact list. No two persons in it are the same person (same name)."""

    def contains(self, person: Person) -> bool:
        """Return True if a person with the same identity is stored."""
        ...

    def add(self, person: Person) -> None:
        """Store a person. Raises DuplicatePersonError if the same person exists."""
        ...

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace target with edited. Raises PersonNotFoundError or DuplicatePersonError."""
        ...

    def remove(self, person: Person) -> None:
        """Remove an equal person. Raises PersonNotFoundError if absent."""
        ...

    def get(self, index: Index) -> Person:
        """Return the person at index. Raises IndexError when out of range."""
        ...

    def list_all(self) -> list[Person]:
        """Return all persons in insertion order."""
        ...

    def find_by_phone(self, raw_phone: str) -> Person | None:
        """Return the person whose phone matches raw_phone in any dialable format, or None."""
        ...
