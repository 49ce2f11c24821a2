"""Element types for linked-list disjoint sets."""

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

__all__ = ["DisjointSetElement", "LinkedSetElement"]


@runtime_checkable
class DisjointSetElement(Protocol):
    """Capability every element stored in a disjoint-set registry provides.

    Attributes
    ----------
    representative : DisjointSetElement | None
        Back-reference to the representative of the element's set, or None
        when the element is in no set.
    next : DisjointSetElement | None
        Following member in the set's chain, None at the tail.
    size : int
        Cardinality of the set; only meaningful on a representative.
    """

    representative: "DisjointSetElement | None"
    next: "DisjointSetElement | None"
    size: int


@dataclass(eq=False)
class LinkedSetElement:
    """Ready-made disjoint-set element wrapping an arbitrary value.

    Elements compare and hash by identity, so two wrappers around equal
    values are still distinct members.

    Attributes
    ----------
    value : Any
        Caller payload.
    representative : LinkedSetElement | None
        Representative of the containing set.
    next : LinkedSetElement | None
        Next member in the set's chain.
    size : int
        Set cardinality when this element is the representative.
    """

    value: Any = None
    representative: "LinkedSetElement | None" = field(default=None, repr=False)
    next: "LinkedSetElement | None" = field(default=None, repr=False)
    size: int = field(default=0, repr=False)
