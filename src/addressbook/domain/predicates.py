"""Keyword predicates handed to search and filter collaborators."""

from dataclasses import dataclass

from addressbook.domain.person import Person


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """Matches a person whose name contains any keyword as a whole word (case-insensitive)."""

    keywords: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "keywords", tuple(self.keywords))

    def __call__(self, person: Person) -> bool:
        words = {w.lower() for w in person.name.value.split()}
        return any(keyword.lower() in words for keyword in self.keywords)
