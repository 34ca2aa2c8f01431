"""Error kinds raised by the domain layer."""

from collections.abc import Iterable


class AddressBookError(Exception):
    """Base class for all address book errors."""


class NullInputError(AddressBookError, TypeError):
    """A required argument was None."""


class ValidationError(AddressBookError, ValueError):
    """A present argument failed its format constraint.

    ``message`` is the fixed, type-specific constraint text; callers show it to users.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicatePersonError(AddressBookError):
    """The contact list already holds a person with the same name."""

    def __init__(self) -> None:
        super().__init__("Operation would result in duplicate persons")


class PersonNotFoundError(AddressBookError):
    """The person is not in the contact list."""

    def __init__(self) -> None:
        super().__init__("Person not found in the contact list")


def require_non_null(value, name: str = "argument"):
    """Return value unchanged, or raise NullInputError if it is None."""
    if value is None:
        raise NullInputError(f"{name} must not be None.")
    return value


def require_all_non_null(*values) -> None:
    """Raise NullInputError if any of values is None."""
    if any(v is None for v in values):
        raise NullInputError("All arguments must be present (not None).")


def is_any_non_null(values: Iterable) -> bool:
    return any(v is not None for v in values)
