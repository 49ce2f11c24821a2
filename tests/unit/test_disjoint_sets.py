"""Tests for linked-list disjoint sets."""

from collections.abc import Callable

import pytest

from setkit.disjoint import DisjointSetElement, LinkedListDisjointSets, LinkedSetElement
from setkit.errors import AlreadyInSetError, NotInAnySetError, NullInputError

MakeElements = Callable[..., list[LinkedSetElement]]


def _chain(representative: LinkedSetElement) -> list[LinkedSetElement]:
    """Walk the next chain from a representative."""
    nodes = []
    node = representative
    while node is not None:
        nodes.append(node)
        node = node.next
    return nodes


# ---------------------------------------------------------------------------
# Presence and make_set
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_is_present_tolerates_none(registry: LinkedListDisjointSets) -> None:
    """Test is_present returns False for None instead of raising."""
    assert registry.is_present(None) is False


@pytest.mark.unit
def test_make_set_creates_singleton(
    registry: LinkedListDisjointSets, make_elements: MakeElements
) -> None:
    """Test make_set wires a singleton and registers its representative."""
    (a,) = make_elements("a")
    assert not registry.is_present(a)

    registry.make_set(a)

    assert registry.is_present(a)
    assert a.representative is a
    assert a.size == 1
    assert a.next is None
    assert registry.find_set(a) is a
    assert registry.get_cardinality_of_set_containing(a) == 1
    assert set(registry.get_current_representatives()) == {a}
    assert len(registry) == 1
    assert a in registry


@pytest.mark.unit
def test_make_set_rejects_none_and_duplicates(
    registry: LinkedListDisjointSets, make_elements: MakeElements
) -> None:
    """Test make_set validation errors."""
    (a,) = make_elements("a")
    registry.make_set(a)

    with pytest.raises(NullInputError):
        registry.make_set(None)
    with pytest.raises(AlreadyInSetError):
        registry.make_set(a)

    assert len(registry) == 1


@pytest.mark.unit
@pytest.mark.parametrize(
    "method",
    ["find_set", "get_current_elements_of_set_containing", "get_cardinality_of_set_containing"],
)
def test_queries_reject_none_and_absent(
    registry: LinkedListDisjointSets, make_elements: MakeElements, method: str
) -> None:
    """Test query operations fail on None and on elements in no set."""
    (a,) = make_elements("a")

    with pytest.raises(NullInputError):
        getattr(registry, method)(None)
    with pytest.raises(NotInAnySetError):
        getattr(registry, method)(a)


@pytest.mark.unit
def test_errors_are_builtin_compatible(registry: LinkedListDisjointSets) -> None:
    """Test errors can be caught as their builtin counterparts."""
    with pytest.raises(TypeError):
        registry.find_set(None)
    with pytest.raises(ValueError):
        registry.find_set(LinkedSetElement("x"))


# ---------------------------------------------------------------------------
# Union
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_union_three_way_scenario(
    registry: LinkedListDisjointSets, make_elements: MakeElements
) -> None:
    """Test a, b, c joined pairwise end up in one set represented by a."""
    a, b, c = make_elements("a", "b", "c")
    for e in (a, b, c):
        registry.make_set(e)

    registry.union(a, b)
    assert registry.get_cardinality_of_set_containing(a) == 2
    assert registry.find_set(b) is a

    registry.union(b, c)
    assert registry.get_cardinality_of_set_containing(c) == 3
    assert registry.find_set(a) is registry.find_set(c)
    assert set(registry.get_current_representatives()) == {a}


@pytest.mark.unit
def test_union_tie_keeps_first_representative(
    registry: LinkedListDisjointSets, make_elements: MakeElements
) -> None:
    """Test equal cardinalities keep the representative of e1's set."""
    a, b = make_elements("a", "b")
    registry.make_set(a)
    registry.make_set(b)

    registry.union(b, a)

    assert registry.find_set(a) is b
    assert set(registry.get_current_representatives()) == {b}


@pytest.mark.unit
def test_union_larger_set_absorbs_smaller(
    registry: LinkedListDisjointSets, make_elements: MakeElements
) -> None:
    """Test the larger set's representative survives regardless of order."""
    a, b, c, d = make_elements("a", "b", "c", "d")
    for e in (a, b, c, d):
        registry.make_set(e)
    registry.union(c, d)
    registry.union(c, b)

    registry.union(a, d)

    assert registry.find_set(a) is c
    assert registry.get_cardinality_of_set_containing(a) == 4
    assert set(registry.get_current_representatives()) == {c}


@pytest.mark.unit
def test_union_splices_small_chain_after_representative(
    registry: LinkedListDisjointSets, make_elements: MakeElements
) -> None:
    """Test the smaller chain is inserted right after the big representative."""
    a, b, c, d, e = make_elements("a", "b", "c", "d", "e")
    for x in (a, b, c, d, e):
        registry.make_set(x)
    registry.union(a, b)
    registry.union(a, c)
    registry.union(d, e)

    registry.union(a, d)

    assert _chain(a)[:3] == [a, d, e]
    assert len(_chain(a)) == 5
    assert all(x.representative is a for x in _chain(a))


@pytest.mark.unit
def test_union_same_set_is_noop(
    registry: LinkedListDisjointSets, make_elements: MakeElements
) -> None:
    """Test union of already joined elements changes nothing."""
    a, b = make_elements("a", "b")
    registry.make_set(a)
    registry.make_set(b)
    registry.union(a, b)
    partitions = len(registry.get_current_representatives())

    registry.union(b, a)
    registry.union(a, a)

    assert len(registry.get_current_representatives()) == partitions
    assert registry.get_cardinality_of_set_containing(a) == 2
    assert len(_chain(a)) == 2


@pytest.mark.unit
def test_union_validation(registry: LinkedListDisjointSets, make_elements: MakeElements) -> None:
    """Test union fails on None before checking membership, and on absent elements."""
    a, b = make_elements("a", "b")
    registry.make_set(a)

    with pytest.raises(NullInputError):
        registry.union(a, None)
    with pytest.raises(NullInputError):
        registry.union(b, None)
    with pytest.raises(NotInAnySetError):
        registry.union(a, b)
    with pytest.raises(NotInAnySetError):
        registry.union(b, a)

    assert a.size == 1
    assert a.next is None


# ---------------------------------------------------------------------------
# Members and components
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_members_match_cardinality_for_every_member(
    registry: LinkedListDisjointSets, make_elements: MakeElements
) -> None:
    """Test member collection agrees with cardinality from any member."""
    elements = make_elements(*range(10))
    for e in elements:
        registry.make_set(e)
    for left, right in [(0, 1), (2, 3), (1, 3), (4, 5), (6, 4), (3, 6)]:
        registry.union(elements[left], elements[right])

    for e in elements:
        members = registry.get_current_elements_of_set_containing(e)
        assert len(members) == registry.get_cardinality_of_set_containing(e)
        assert e in members

    assert len(registry.get_current_elements_of_set_containing(elements[0])) == 7
    assert len(registry) == 4


@pytest.mark.unit
def test_get_components(registry: LinkedListDisjointSets, make_elements: MakeElements) -> None:
    """Test get_components returns one member set per partition."""
    a, b, c, d, e = make_elements("a", "b", "c", "d", "e")
    for x in (a, b, c, d, e):
        registry.make_set(x)
    registry.union(a, b)
    registry.union(b, c)
    registry.union(d, e)

    components = registry.get_components()

    assert len(components) == 2
    assert {a, b, c} in components
    assert {d, e} in components


@pytest.mark.unit
def test_representatives_view_is_live(
    registry: LinkedListDisjointSets, make_elements: MakeElements
) -> None:
    """Test the representatives collection reflects later operations."""
    a, b = make_elements("a", "b")
    representatives = registry.get_current_representatives()
    registry.make_set(a)
    registry.make_set(b)
    assert len(representatives) == 2

    registry.union(a, b)
    assert len(representatives) == 1


@pytest.mark.unit
def test_equal_values_are_distinct_elements(
    registry: LinkedListDisjointSets, make_elements: MakeElements
) -> None:
    """Test elements compare by identity, not by their value."""
    first, second = make_elements("same", "same")
    registry.make_set(first)
    registry.make_set(second)

    assert len(registry) == 2
    assert isinstance(first, DisjointSetElement)


@pytest.mark.unit
def test_custom_element_type(registry: LinkedListDisjointSets) -> None:
    """Test any object with the three attributes can be stored."""

    class Node:
        def __init__(self) -> None:
            self.representative = None
            self.next = None
            self.size = 0

    x, y = Node(), Node()
    registry.make_set(x)
    registry.make_set(y)
    registry.union(x, y)

    assert registry.find_set(y) is x
    assert registry.get_current_elements_of_set_containing(y) == {x, y}


@pytest.mark.unit
def test_many_unions_collapse_to_one_set(
    registry: LinkedListDisjointSets, make_elements: MakeElements
) -> None:
    """Test sequential unions over many elements keep chain and size consistent."""
    elements = make_elements(*range(200))
    for e in elements:
        registry.make_set(e)
    for left, right in zip(elements, elements[1:], strict=False):
        registry.union(right, left)

    rep = registry.find_set(elements[-1])
    assert len(registry) == 1
    assert rep.size == 200
    assert len(_chain(rep)) == 200
    assert all(registry.find_set(e) is rep for e in elements)


@pytest.mark.unit
@pytest.mark.parametrize("candidate", ["abc", 42, None, object()])
def test_in_operator_safe_for_any_object(
    registry: LinkedListDisjointSets, candidate: object
) -> None:
    """Test membership on objects without element attributes is False."""
    assert (candidate in registry) is False
