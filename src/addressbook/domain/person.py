"""Person aggregate: one contact record composed of validated values."""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from addressbook.domain.descriptor import EditPersonDescriptor
from addressbook.domain.errors import require_all_non_null
from addressbook.domain.values import (
    Address,
    Email,
    Name,
    Phone,
    Priority,
    PriorityLevel,
    Remark,
    Tag,
)


@dataclass(frozen=True)
class Person:
    """
    Represents a contact in the address book.
    Every field is present and validated; a Person is never modified in place.
    Updates return a new Person. Equality compares all seven fields.
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    remark: Remark
    tags: frozenset[Tag]
    priority: Priority = field(default_factory=Priority.none)

    def __post_init__(self):
        require_all_non_null(
            self.name,
            self.phone,
            self.email,
            self.address,
            self.remark,
            self.tags,
            self.priority,
        )
        object.__setattr__(self, "tags", frozenset(self.tags))

    @property
    def priority_level(self) -> PriorityLevel:
        return self.priority.level

    @property
    def tags_count(self) -> int:
        return len(self.tags)

    def is_same_person(self, other: "Person | None") -> bool:
        """True if other is this person or has the same name.

        Weaker than ==; used to detect duplicates in a contact list.
        """
        if other is self:
            return True
        return other is not None and other.name == self.name

    def has_same_priority(self, priority: Priority) -> bool:
        return self.priority == priority

    def with_updated_tags(
        self, tags_to_add: Iterable[Tag], tags_to_delete: Iterable[Tag]
    ) -> "Person":
        """Return a copy with tags_to_delete removed, then tags_to_add added.

        A tag present in both ends up on the result.
        """
        require_all_non_null(tags_to_add, tags_to_delete)
        updated = (self.tags - frozenset(tags_to_delete)) | frozenset(tags_to_add)
        return replace(self, tags=updated)

    def with_updated_priority(self, new_priority: Priority) -> "Person":
        require_all_non_null(new_priority)
        return replace(self, priority=new_priority)

    def with_edited_information(self, descriptor: EditPersonDescriptor) -> "Person":
        """Return a copy with name, phone, email and address taken from descriptor where supplied.

        Remark, tags and priority are always kept from this person.
        """
        require_all_non_null(descriptor)
        return replace(
            self,
            name=_or_default(descriptor.name, self.name),
            phone=_or_default(descriptor.phone, self.phone),
            email=_or_default(descriptor.email, self.email),
            address=_or_default(descriptor.address, self.address),
        )

    def __str__(self) -> str:
        tags = ", ".join(sorted(str(t) for t in self.tags))
        return (
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; "
            f"Address: {self.address}; Remark: {self.remark}; "
            f"Tags: [{tags}]; Priority: {self.priority}"
        )


def _or_default(value, default):
    return default if value is None else value
