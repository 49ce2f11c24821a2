"""Disjoint sets (union-find) over linked-list chains.

Elements carry their own ``representative``/``next``/``size`` fields; the
registry keeps the set of current representatives and merges with the
weighted-union rule.
"""

from setkit.disjoint.linked_list import LinkedListDisjointSets
from setkit.disjoint.models import DisjointSetElement, LinkedSetElement

__all__ = [
    "DisjointSetElement",
    "LinkedListDisjointSets",
    "LinkedSetElement",
]
