"""In-memory implementation of PersonRepository (no storage)."""

import logging

from addressbook.domain import DuplicatePersonError, Index, Person, PersonNotFoundError
from addressbook.infrastructure.config import Settings
from addressbook.infrastructure.phone import to_e164

logger = logging.getLogger(__name__)


class InMemoryPersonRepository:
    """Stores persons in memory. Order preserved by insertion.
    Persons are identified by is_same_person (name); the list never holds two with the same name.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()
        self._persons: list[Person] = []

    def contains(self, person: Person) -> bool:
        return any(p.is_same_person(person) for p in self._persons)

    def add(self, person: Person) -> None:
        if self.contains(person):
            raise DuplicatePersonError()
        self._persons.append(person)
        logger.info("Added person %s", person.name)

    def set_person(self, target: Person, edited: Person) -> None:
        try:
            position = self._persons.index(target)
        except ValueError:
            raise PersonNotFoundError() from None
        if not target.is_same_person(edited) and self.contains(edited):
            raise DuplicatePersonError()
        self._persons[position] = edited
        logger.info("Replaced person %s with %s", target.name, edited.name)

    def remove(self, person: Person) -> None:
        try:
            self._persons.remove(person)
        except ValueError:
            raise PersonNotFoundError() from None
        logger.info("Removed person %s", person.name)

    def get(self, index: Index) -> Person:
        if index.zero_based >= len(self._persons):
            raise IndexError(f"No person at index {index.one_based}")
        return self._persons[index.zero_based]

    def list_all(self) -> list[Person]:
        return list(self._persons)

    def find_by_phone(self, raw_phone: str) -> Person | None:
        region = self._settings.phone_region
        wanted = to_e164(raw_phone, region)
        if wanted is None:
            return None
        return next((p for p in self._persons if to_e164(p.phone, region) == wanted), None)
