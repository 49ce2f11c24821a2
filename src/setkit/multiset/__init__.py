"""Multiset (bag) of hashable payloads with fail-fast iteration."""

from setkit.multiset.hash_multiset import HashMultiset, MultisetIterator
from setkit.multiset.models import DEFAULT_MAX_COUNT, MultisetConfig

__all__ = [
    "DEFAULT_MAX_COUNT",
    "HashMultiset",
    "MultisetConfig",
    "MultisetIterator",
]
