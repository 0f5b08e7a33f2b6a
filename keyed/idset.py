import collections.abc
from typing import Any, Iterable, Iterator, Optional

from keyed.store import IdentityKeyedStore


class IdentitySet(collections.abc.Set):
    """
    An insertion-ordered set of unique values.

    Membership follows the `IdentityKeyedStore` key rule, so two distinct
    records with equal fields are both kept.
    """

    __slots__ = ("_store",)

    def __init__(self, values: Optional[Iterable[Any]] = None):
        self._store = IdentityKeyedStore()
        if values is not None:
            for value in values:
                self.add(value)

    def add(self, value: Any) -> 'IdentitySet':
        if not self._store.has(value):
            self._store.set(value, value)
        return self

    def has(self, value: Any) -> bool:
        return self._store.has(value)

    def delete(self, value: Any) -> bool:
        return self._store.delete(value)

    def clear(self) -> None:
        self._store.clear()

    def size(self) -> int:
        return self._store.size()

    def values(self) -> collections.abc.KeysView:
        return self._store.keys()

    def __contains__(self, value):
        return self._store.has(value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._store)

    def __len__(self):
        return self._store.size()

    @classmethod
    def _from_iterable(cls, it):
        return cls(it)

    # -- set algebra -----------------------------------------------------

    def union(self, other: Iterable[Any]) -> 'IdentitySet':
        result = IdentitySet(self)
        for value in other:
            result.add(value)
        return result

    def intersection(self, other: Iterable[Any]) -> 'IdentitySet':
        other = _as_identity_set(other)
        return IdentitySet(v for v in self if other.has(v))

    def difference(self, other: Iterable[Any]) -> 'IdentitySet':
        other = _as_identity_set(other)
        return IdentitySet(v for v in self if not other.has(v))

    def symmetric_difference(self, other: Iterable[Any]) -> 'IdentitySet':
        other = _as_identity_set(other)
        result = self.difference(other)
        for value in other:
            if not self.has(value):
                result.add(value)
        return result

    def is_subset_of(self, other: Iterable[Any]) -> bool:
        other = _as_identity_set(other)
        return all(other.has(v) for v in self)

    def is_superset_of(self, other: Iterable[Any]) -> bool:
        return all(self.has(v) for v in other)

    def is_disjoint_from(self, other: Iterable[Any]) -> bool:
        return not any(self.has(v) for v in other)

    def __or__(self, other):
        if not isinstance(other, collections.abc.Set):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, collections.abc.Set):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other):
        if not isinstance(other, collections.abc.Set):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other):
        if not isinstance(other, collections.abc.Set):
            return NotImplemented
        return self.symmetric_difference(other)

    def __le__(self, other):
        if not isinstance(other, collections.abc.Set):
            return NotImplemented
        return self.is_subset_of(other)

    def __ge__(self, other):
        if not isinstance(other, collections.abc.Set):
            return NotImplemented
        return self.is_superset_of(other)

    def __eq__(self, other):
        if not isinstance(other, IdentitySet):
            return NotImplemented
        return len(self) == len(other) and self.is_subset_of(other)

    __hash__ = None

    def __repr__(self):
        return f"{self.__class__.__name__}({{{', '.join(repr(v) for v in self)}}})"


def _as_identity_set(values: Iterable[Any]) -> IdentitySet:
    if isinstance(values, IdentitySet):
        return values
    return IdentitySet(values)
