"""In-memory set abstractions for reuse by higher-level algorithms.

This package provides:
- Disjoint sets (setkit.disjoint): linked-list union-find with weighted union
- Multisets (setkit.multiset): counted bag with fail-fast iteration
- Errors (setkit.errors): shared exception hierarchy
- Audit (setkit.audit): optional JSONL event logging
"""

__version__ = "0.1.0"
__license__ = "MIT"

from setkit.disjoint import DisjointSetElement, LinkedListDisjointSets, LinkedSetElement
from setkit.errors import (
    AlreadyInSetError,
    ConcurrentModificationError,
    CountOverflowError,
    CountTypeError,
    NegativeCountError,
    NotInAnySetError,
    NullInputError,
    SetKitError,
)
from setkit.multiset import HashMultiset, MultisetConfig

__all__ = [
    "__version__",
    "__license__",
    "DisjointSetElement",
    "LinkedListDisjointSets",
    "LinkedSetElement",
    "HashMultiset",
    "MultisetConfig",
    "SetKitError",
    "NullInputError",
    "AlreadyInSetError",
    "NotInAnySetError",
    "NegativeCountError",
    "CountOverflowError",
    "CountTypeError",
    "ConcurrentModificationError",
]
