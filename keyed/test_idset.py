import pytest
from dataclasses import dataclass

from keyed.idset import IdentitySet


@dataclass
class User:
    name: str


@pytest.fixture
def products():
    a = IdentitySet(["phone", "laptop", "tablet"])
    b = IdentitySet(["laptop", "camera", "tablet"])
    return a, b


def test_duplicates_collapse():
    s = IdentitySet([1, 2, 2, 3, 3])
    assert s.size() == 3
    assert list(s) == [1, 2, 3]

def test_add_returns_self_and_ignores_duplicates():
    s = IdentitySet()
    assert s.add(1234) is s
    s.add(1234)
    assert len(s) == 1

def test_has_delete_clear():
    s = IdentitySet(["READ", "WRITE"])
    assert s.has("READ")
    assert not s.has("DELETE")
    assert s.delete("READ") is True
    assert s.delete("READ") is False
    s.clear()
    assert s.size() == 0

def test_equal_records_are_both_kept():
    s = IdentitySet([User("Ali"), User("Ali")])
    assert len(s) == 2

def test_values_view_is_restartable():
    s = IdentitySet(["a", "b"])
    view = s.values()
    assert list(view) == ["a", "b"]
    s.add("c")
    assert list(view) == ["a", "b", "c"]

def test_intersection(products):
    a, b = products
    assert list(a.intersection(b)) == ["laptop", "tablet"]
    assert list(a & b) == ["laptop", "tablet"]

def test_difference(products):
    a, b = products
    assert list(a.difference(b)) == ["phone"]
    assert list(b - a) == ["camera"]

def test_union(products):
    a, b = products
    assert list(a | b) == ["phone", "laptop", "tablet", "camera"]

def test_symmetric_difference(products):
    a, b = products
    assert list(a ^ b) == ["phone", "camera"]

def test_algebra_accepts_plain_iterables(products):
    a, _ = products
    assert list(a.intersection(["tablet", "tv"])) == ["tablet"]
    assert list(a.union(["tv"])) == ["phone", "laptop", "tablet", "tv"]

def test_subset_superset_disjoint():
    small = IdentitySet(["READ"])
    big = IdentitySet(["READ", "WRITE"])
    assert small.is_subset_of(big)
    assert small <= big
    assert big.is_superset_of(small)
    assert big >= small
    assert small < big
    assert not big.is_subset_of(small)
    assert small.is_disjoint_from(["DELETE"])
    assert not small.is_disjoint_from(big)

def test_equality_ignores_order():
    assert IdentitySet([1, 2]) == IdentitySet([2, 1])
    assert IdentitySet([1, 2]) != IdentitySet([1])
    assert IdentitySet([User("Ali")]) != IdentitySet([User("Ali")])

def test_repr():
    assert repr(IdentitySet(["a", 1])) == "IdentitySet({'a', 1})"

def test_comparisons_with_builtin_sets():
    small = IdentitySet(["a"])
    assert small < {"a", "b"}
    assert small <= {"a"}
    assert not small > {"a"}
    assert IdentitySet(["a", "b"]) >= {"b"}
    assert {"a", "b"} > small
    assert list(small | {"b"}) == ["a", "b"]
    assert list(IdentitySet(["a", "b"]) - {"a"}) == ["b"]
