"""Sparse change set for editing a person."""

from dataclasses import dataclass, replace

from addressbook.domain.errors import is_any_non_null
from addressbook.domain.values import Address, Email, Name, Phone


@dataclass
class EditPersonDescriptor:
    """Fields the caller wants to change. None means "not supplied, keep existing".

    Only identity and address fields can be edited; remark, tags and priority have
    their own update operations on Person.
    """

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None

    def is_any_field_edited(self) -> bool:
        return is_any_non_null((self.name, self.phone, self.email, self.address))

    def copy(self) -> "EditPersonDescriptor":
        return replace(self)
