"""Disjoint sets represented as linked lists with weighted union."""

from collections.abc import Set
from typing import Generic, TypeVar

from setkit.audit import AuditLogger
from setkit.disjoint.models import DisjointSetElement
from setkit.errors import AlreadyInSetError, NotInAnySetError, NullInputError

__all__ = ["LinkedListDisjointSets"]

E = TypeVar("E", bound=DisjointSetElement)


class LinkedListDisjointSets(Generic[E]):
    """Collection of disjoint sets stored as chains inside the elements.

    Every member points straight at its set's representative, so
    ``find_set`` is O(1) without path compression. The representative
    heads a singly linked chain through ``next`` and carries the set size.
    ``union`` always relinks the smaller set, so its cost is proportional to
    the smaller cardinality and any sequence of unions over n elements does
    O(n log n) relinking in total.

    The registry does not own its elements. An element must not be shared
    between two registries.

    Attributes
    ----------
    audit_logger : AuditLogger | None
        Receives set_created and sets_merged events. If None, no logging.
    """

    def __init__(self, *, audit_logger: AuditLogger | None = None) -> None:
        """Initialize an empty collection of disjoint sets.

        Parameters
        ----------
        audit_logger : AuditLogger | None, optional
            Logger for mutation events, by default None.
        """
        self._representatives: set[E] = set()
        self.audit_logger = audit_logger

    def __len__(self) -> int:
        return len(self._representatives)

    def __contains__(self, e: object) -> bool:
        return getattr(e, "representative", None) is not None

    def is_present(self, e: E | None) -> bool:
        """Check whether an element belongs to some disjoint set.

        Parameters
        ----------
        e : E | None
            Element to check. None is tolerated.

        Returns
        -------
        bool
            True if ``e`` has a representative, False otherwise (including
            when ``e`` is None).
        """
        if e is None:
            return False
        return e.representative is not None

    def make_set(self, e: E) -> None:
        """Create a singleton set containing ``e``.

        Parameters
        ----------
        e : E
            Element that becomes its own representative.

        Raises
        ------
        NullInputError
            If ``e`` is None.
        AlreadyInSetError
            If ``e`` already belongs to a set.
        """
        if e is None:
            raise NullInputError("e")
        if self.is_present(e):
            raise AlreadyInSetError(f"{e!r} already belongs to a disjoint set")

        e.representative = e
        e.size = 1
        e.next = None
        self._representatives.add(e)

        if self.audit_logger is not None:
            self.audit_logger.set_created(type(self).__name__, e, len(self._representatives))

    def find_set(self, e: E) -> E:
        """Return the representative of the set containing ``e``.

        Parameters
        ----------
        e : E
            Element to look up.

        Returns
        -------
        E
            Representative of ``e``'s set.

        Raises
        ------
        NullInputError
            If ``e`` is None.
        NotInAnySetError
            If ``e`` is in no set.
        """
        self._check_member(e, "e")
        return e.representative  # type: ignore[return-value]

    def union(self, e1: E, e2: E) -> None:
        """Merge the sets containing ``e1`` and ``e2``.

        The larger set absorbs the smaller one. On equal cardinalities the
        representative of ``e1``'s set survives. Nothing happens when both
        elements already share a representative.

        Parameters
        ----------
        e1 : E
            Member of the first set.
        e2 : E
            Member of the second set.

        Raises
        ------
        NullInputError
            If either element is None.
        NotInAnySetError
            If either element is in no set.
        """
        if e1 is None:
            raise NullInputError("e1")
        if e2 is None:
            raise NullInputError("e2")
        self._check_member(e1, "e1")
        self._check_member(e2, "e2")

        rep1 = e1.representative
        rep2 = e2.representative
        if rep1 is rep2:
            return

        if rep1.size >= rep2.size:
            big, small = rep1, rep2
        else:
            big, small = rep2, rep1

        # Splice the small chain between big and its old successor.
        old_next = big.next
        big.next = small
        node = small
        while True:
            node.representative = big
            if node.next is None:
                break
            node = node.next
        node.next = old_next

        big.size += small.size
        self._representatives.discard(small)

        if self.audit_logger is not None:
            self.audit_logger.sets_merged(
                type(self).__name__,
                survivor=big,
                absorbed=small,
                cardinality=big.size,
                partitions=len(self._representatives),
            )

    def get_current_representatives(self) -> Set[E]:
        """Return the live collection of current representatives.

        Returns
        -------
        collections.abc.Set[E]
            One representative per partition. The collection reflects later
            ``make_set`` and ``union`` calls and must not be mutated.
        """
        return self._representatives

    def get_current_elements_of_set_containing(self, e: E) -> set[E]:
        """Collect every member of the set containing ``e``.

        Parameters
        ----------
        e : E
            Member of the set to collect.

        Returns
        -------
        set[E]
            New set holding all members, representative included.

        Raises
        ------
        NullInputError
            If ``e`` is None.
        NotInAnySetError
            If ``e`` is in no set.
        """
        self._check_member(e, "e")

        members: set[E] = set()
        node = e.representative
        while node is not None:
            members.add(node)
            node = node.next
        return members

    def get_cardinality_of_set_containing(self, e: E) -> int:
        """Return the number of members in the set containing ``e``.

        Parameters
        ----------
        e : E
            Member of the set.

        Returns
        -------
        int
            Cardinality stored on the representative.

        Raises
        ------
        NullInputError
            If ``e`` is None.
        NotInAnySetError
            If ``e`` is in no set.
        """
        self._check_member(e, "e")
        return e.representative.size  # type: ignore[union-attr]

    def get_components(self) -> list[set[E]]:
        """Get all current sets.

        Returns
        -------
        list[set[E]]
            One member set per partition.
        """
        return [
            self.get_current_elements_of_set_containing(representative)
            for representative in self._representatives
        ]

    def _check_member(self, e: E | None, argument: str) -> None:
        if e is None:
            raise NullInputError(argument)
        if not self.is_present(e):
            raise NotInAnySetError(f"{argument}={e!r} is not in any disjoint set")
