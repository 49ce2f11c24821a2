"""Record and configuration types for the hash multiset."""

from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = ["DEFAULT_MAX_COUNT", "MultisetConfig"]

T = TypeVar("T")

DEFAULT_MAX_COUNT = 2**31 - 1


@dataclass(frozen=True)
class MultisetConfig:
    """Configuration for a hash multiset.

    Attributes
    ----------
    max_count : int
        Largest occurrence count a single payload may reach, by default
        2**31 - 1.
    """

    max_count: int = DEFAULT_MAX_COUNT

    def __post_init__(self) -> None:
        """Validate limits."""
        if isinstance(self.max_count, bool) or not isinstance(self.max_count, int):
            raise TypeError(f"max_count must be an int, got {type(self.max_count).__name__}")
        if self.max_count < 1:
            raise ValueError(f"max_count must be >= 1, got {self.max_count}")


@dataclass(frozen=True)
class _Record(Generic[T]):
    """Payload paired with its occurrence count.

    Equality and hash cover both fields, so a record is replaced rather
    than mutated whenever the count changes.
    """

    payload: T
    count: int
