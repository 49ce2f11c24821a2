"""Hash-based multiset with a fail-fast iterator."""

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from setkit.audit import AuditLogger
from setkit.errors import (
    ConcurrentModificationError,
    CountOverflowError,
    CountTypeError,
    NegativeCountError,
    NullInputError,
)
from setkit.multiset.models import MultisetConfig, _Record

__all__ = ["HashMultiset", "MultisetIterator"]

T = TypeVar("T")


def _check_count(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise CountTypeError(value)
    if value < 0:
        raise NegativeCountError(value)


class HashMultiset(Generic[T]):
    """Multiset counting occurrences of hashable payloads.

    Each distinct payload is stored once as an immutable ``(payload, count)``
    record indexed by payload. Any count change swaps in a new record and
    bumps ``version``; iterators compare that counter on every step and
    fail fast once the multiset has been modified.

    Payloads are referenced, not copied, and must not change their
    equality or hash while stored. None is never a valid payload.

    Attributes
    ----------
    config : MultisetConfig
        Limits applied to occurrence counts.
    audit_logger : AuditLogger | None
        Receives count_changed, cleared and iteration_invalidated events.
        If None, no logging.
    """

    def __init__(
        self,
        iterable: Iterable[T] | None = None,
        *,
        config: MultisetConfig | None = None,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        """Initialize multiset, optionally adding one occurrence per item.

        Parameters
        ----------
        iterable : Iterable[T] | None, optional
            Initial payloads, by default None.
        config : MultisetConfig | None, optional
            Count limits, by default ``MultisetConfig()``.
        audit_logger : AuditLogger | None, optional
            Logger for mutation events, by default None.
        """
        self.config = config if config is not None else MultisetConfig()
        self.audit_logger = audit_logger
        self._records: dict[T, _Record[T]] = {}
        self._size = 0
        self._version = 0

        if iterable is not None:
            for element in iterable:
                self.add(element)

    @property
    def version(self) -> int:
        """Modification counter, bumped by every change to counts."""
        return self._version

    def size(self) -> int:
        """Return the total number of occurrences."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def is_empty(self) -> bool:
        """Return True if the multiset holds no occurrences."""
        return self._size == 0

    def count(self, element: T) -> int:
        """Return the occurrences of ``element``.

        Parameters
        ----------
        element : T
            Payload to count.

        Returns
        -------
        int
            Occurrence count, 0 if absent.

        Raises
        ------
        NullInputError
            If ``element`` is None.
        """
        if element is None:
            raise NullInputError("element")
        record = self._records.get(element)
        return record.count if record is not None else 0

    def add(self, element: T, occurrences: int = 1) -> int:
        """Add occurrences of ``element``.

        Parameters
        ----------
        element : T
            Payload to add.
        occurrences : int, optional
            Number of occurrences to add, by default 1. Zero leaves the
            multiset untouched.

        Returns
        -------
        int
            Count of ``element`` before the call.

        Raises
        ------
        NullInputError
            If ``element`` is None.
        CountTypeError
            If ``occurrences`` is not an int.
        NegativeCountError
            If ``occurrences`` is negative.
        CountOverflowError
            If the resulting count would exceed ``config.max_count``.
        """
        if element is None:
            raise NullInputError("element")
        _check_count(occurrences)

        previous = self.count(element)
        if occurrences == 0:
            return previous

        updated = previous + occurrences
        if updated > self.config.max_count:
            raise CountOverflowError(updated, self.config.max_count)

        self._update(element, previous, updated)
        return previous

    def remove(self, element: T, occurrences: int = 1) -> int:
        """Remove up to ``occurrences`` occurrences of ``element``.

        Removing at least as many occurrences as are stored drops the
        payload entirely; the size shrinks by the stored count only.

        Parameters
        ----------
        element : T
            Payload to remove.
        occurrences : int, optional
            Number of occurrences to remove, by default 1. Zero leaves the
            multiset untouched.

        Returns
        -------
        int
            Count of ``element`` before the call, 0 if absent.

        Raises
        ------
        NullInputError
            If ``element`` is None.
        CountTypeError
            If ``occurrences`` is not an int.
        NegativeCountError
            If ``occurrences`` is negative.
        """
        if element is None:
            raise NullInputError("element")
        _check_count(occurrences)

        previous = self.count(element)
        if occurrences == 0 or previous == 0:
            return previous

        self._update(element, previous, max(previous - occurrences, 0))
        return previous

    def discard(self, element: T) -> bool:
        """Remove a single occurrence of ``element``.

        Parameters
        ----------
        element : T
            Payload to remove.

        Returns
        -------
        bool
            False if ``element`` was absent, True otherwise.

        Raises
        ------
        NullInputError
            If ``element`` is None.
        """
        return self.remove(element) > 0

    def set_count(self, element: T, count: int) -> int:
        """Set the occurrences of ``element`` to exactly ``count``.

        Parameters
        ----------
        element : T
            Payload to update.
        count : int
            Target count. Zero removes the payload.

        Returns
        -------
        int
            Count of ``element`` before the call.

        Raises
        ------
        NullInputError
            If ``element`` is None.
        CountTypeError
            If ``count`` is not an int.
        NegativeCountError
            If ``count`` is negative.
        CountOverflowError
            If ``count`` exceeds ``config.max_count``.
        """
        if element is None:
            raise NullInputError("element")
        _check_count(count)
        if count > self.config.max_count:
            raise CountOverflowError(count, self.config.max_count)

        previous = self.count(element)
        if count == previous:
            return previous

        self._update(element, previous, count)
        return previous

    def element_set(self) -> set[T]:
        """Return a new set of the distinct payloads, counts discarded."""
        return set(self._records)

    def items(self) -> Iterator[tuple[T, int]]:
        """Iterate over ``(payload, count)`` pairs."""
        for record in self._records.values():
            yield record.payload, record.count

    def contains(self, element: T) -> bool:
        """Return True if ``element`` occurs at least once.

        Raises
        ------
        NullInputError
            If ``element`` is None.
        """
        if element is None:
            raise NullInputError("element")
        return element in self._records

    def __contains__(self, element: object) -> bool:
        return self.contains(element)  # type: ignore[arg-type]

    def clear(self) -> None:
        """Remove every occurrence."""
        removed = self._size
        self._records.clear()
        self._size = 0
        self._version += 1

        if self.audit_logger is not None:
            self.audit_logger.cleared(type(self).__name__, removed, self._version)

    def iterator(self) -> "MultisetIterator[T]":
        """Return a fail-fast iterator over all occurrences.

        Each payload is yielded ``count`` consecutive times. Order across
        payloads is not guaranteed.
        """
        return MultisetIterator(self)

    def __iter__(self) -> "MultisetIterator[T]":
        return self.iterator()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, HashMultiset):
            return NotImplemented
        return self._size == other._size and self._records == other._records

    def __hash__(self) -> int:
        # Order independent; changes whenever counts change.
        return sum(hash(record) for record in self._records.values())

    def __repr__(self) -> str:
        counts = ", ".join(f"{r.payload!r}: {r.count}" for r in self._records.values())
        return f"{type(self).__name__}({{{counts}}})"

    def _update(self, element: T, previous: int, updated: int) -> None:
        record = self._records.get(element)
        payload = record.payload if record is not None else element

        if updated == 0:
            del self._records[payload]
        else:
            self._records[payload] = _Record(payload, updated)

        self._size += updated - previous
        self._version += 1

        if self.audit_logger is not None:
            self.audit_logger.count_changed(
                type(self).__name__, payload, previous, updated, self._version
            )


class MultisetIterator(Generic[T]):
    """Fail-fast iterator over the occurrences of a ``HashMultiset``.

    The iterator snapshots the multiset's ``version`` on creation and
    raises ``ConcurrentModificationError`` from ``__next__`` as soon as the
    live version differs. It is single-use.
    """

    def __init__(self, multiset: HashMultiset[T]) -> None:
        self._multiset = multiset
        self._expected_version = multiset.version
        self._records = iter(multiset._records.values())
        self._current: T | None = None
        self._remaining = 0

    def __iter__(self) -> "MultisetIterator[T]":
        return self

    def __next__(self) -> T:
        actual = self._multiset.version
        if actual != self._expected_version:
            logger = self._multiset.audit_logger
            if logger is not None:
                logger.iteration_invalidated(
                    type(self._multiset).__name__, self._expected_version, actual
                )
            raise ConcurrentModificationError(
                f"Multiset modified during iteration (version {self._expected_version} -> {actual})"
            )

        if self._remaining == 0:
            record = next(self._records)
            self._current = record.payload
            self._remaining = record.count

        self._remaining -= 1
        return self._current  # type: ignore[return-value]
