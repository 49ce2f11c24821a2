"""Exception hierarchy shared by the disjoint-set and multiset containers.

Every failure is a contract violation raised synchronously before the
structure is touched. Each class also derives from the closest builtin
exception so callers may catch either.
"""

__all__ = [
    "SetKitError",
    "NullInputError",
    "AlreadyInSetError",
    "NotInAnySetError",
    "NegativeCountError",
    "CountOverflowError",
    "ConcurrentModificationError",
    "CountTypeError",
]


class SetKitError(Exception):
    """Base class for all setkit errors."""


class NullInputError(SetKitError, TypeError):
    """Raised when a required argument is None."""

    def __init__(self, argument: str) -> None:
        """Initialize null input error.

        Parameters
        ----------
        argument : str
            Name of the argument that was None.
        """
        super().__init__(f"{argument} must not be None")
        self.argument = argument


class AlreadyInSetError(SetKitError, ValueError):
    """Raised when making a set out of an element that already belongs to one."""


class NotInAnySetError(SetKitError, ValueError):
    """Raised when an element is not part of any current disjoint set."""


class NegativeCountError(SetKitError, ValueError):
    """Raised when an occurrence delta or target count is negative."""

    def __init__(self, value: int) -> None:
        """Initialize negative count error.

        Parameters
        ----------
        value : int
            The rejected count.
        """
        super().__init__(f"Occurrence count must be non-negative, got {value}")
        self.value = value


class CountOverflowError(SetKitError, OverflowError):
    """Raised when an occurrence count would exceed the configured maximum."""

    def __init__(self, count: int, max_count: int) -> None:
        """Initialize count overflow error.

        Parameters
        ----------
        count : int
            Occurrence count the operation would have produced.
        max_count : int
            Largest representable count.
        """
        super().__init__(f"Occurrence count {count} exceeds max count {max_count}")
        self.count = count
        self.max_count = max_count


class ConcurrentModificationError(SetKitError, RuntimeError):
    """Raised by a fail-fast iterator when its source changed after creation."""


class CountTypeError(SetKitError, TypeError):
    """Raised when an occurrence count is not an int (bool is rejected too)."""

    def __init__(self, value: object) -> None:
        """Initialize count type error.

        Parameters
        ----------
        value : object
            The rejected count.
        """
        super().__init__(f"Occurrence count must be an int, got {type(value).__name__}")
        self.value = value
