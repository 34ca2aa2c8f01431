"""Position of an item in a list, convertible between zero- and one-based forms."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Index:
    """Stored zero-based; use one_based when talking to users."""

    zero_based: int

    def __post_init__(self):
        if self.zero_based < 0:
            raise ValueError("Index must not be negative.")

    @classmethod
    def from_zero_based(cls, zero_based: int) -> "Index":
        return cls(zero_based)

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        return cls(one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1
