import collections.abc
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple

from keyed.id import MISSING, key_token


class StoreKeyError(KeyError):
    pass


class IdentityKeyedStore(collections.abc.MutableMapping):
    """
    An insertion-ordered key -> value store.

    Primitive keys (None, bool, int, float, complex, str, bytes) compare by
    value; `1` and `1.0` are one key, `True` and `1` are two. Every other key compares by identity, so two records with
    equal fields are two different entries, and unhashable objects such as
    lists or dicts can be used as keys.

    Values are kept by reference. Mutating a value returned by `get` changes
    what the store holds; no second `set` is needed.

    Iterating a view while the store is being resized raises RuntimeError,
    as with a plain dict. Don't rely on any other behaviour.
    """

    __slots__ = ("_storage",)

    def __init__(self, pairs: Optional[Iterable[Tuple[Any, Any]]] = None):
        # token -> (original_key, value); the key is held to keep identity tokens valid
        self._storage: dict = {}
        if pairs is not None:
            self.update(pairs)

    # -- core operations -------------------------------------------------

    def set(self, key: Any, value: Any) -> None:
        token = key_token(key)
        existing = self._storage.get(token)
        if existing is not None:
            # 0.0 and -0.0 share a token; keep the key that was stored first
            key = existing[0]
        self._storage[token] = (key, value)

    def get(self, key: Any, default: Any = MISSING) -> Any:
        entry = self._storage.get(key_token(key))
        if entry is None:
            return default
        return entry[1]

    def has(self, key: Any) -> bool:
        return key_token(key) in self._storage

    def delete(self, key: Any) -> bool:
        return self._storage.pop(key_token(key), None) is not None

    def clear(self) -> None:
        self._storage.clear()

    def size(self) -> int:
        return len(self._storage)

    def entries(self) -> collections.abc.ItemsView:
        return collections.abc.ItemsView(self)

    def for_each(self, fn: Callable[[Any, Any, 'IdentityKeyedStore'], Any]) -> None:
        for key, value in self.entries():
            fn(value, key, self)

    def copy(self) -> 'IdentityKeyedStore':
        result = IdentityKeyedStore()
        result._storage = dict(self._storage)
        return result

    # -- mapping protocol ------------------------------------------------

    def __getitem__(self, key):
        entry = self._storage.get(key_token(key))
        if entry is None:
            raise StoreKeyError(key)
        return entry[1]

    def __setitem__(self, key, value):
        self.set(key, value)

    def __delitem__(self, key):
        if not self.delete(key):
            raise StoreKeyError(key)

    def __iter__(self) -> Iterator[Any]:
        for (stored_key, _) in self._storage.values():
            yield stored_key

    def __len__(self):
        return len(self._storage)

    def __contains__(self, key):
        return self.has(key)

    def keys(self) -> collections.abc.KeysView:
        return collections.abc.KeysView(self)

    def values(self) -> collections.abc.ValuesView:
        return collections.abc.ValuesView(self)

    def items(self) -> collections.abc.ItemsView:
        return self.entries()

    def update(self, other=(), /, **kwargs):
        if isinstance(other, IdentityKeyedStore):
            pairs = other._storage.values()
        elif isinstance(other, collections.abc.Mapping):
            pairs = other.items()
        else:
            pairs = other
        for key, value in pairs:
            self.set(key, value)
        for key, value in kwargs.items():
            self.set(key, value)

    def __eq__(self, other):
        if not isinstance(other, IdentityKeyedStore):
            return NotImplemented
        if self._storage.keys() != other._storage.keys():
            return False
        return all(value == other._storage[token][1]
                   for token, (_, value) in self._storage.items())

    __hash__ = None

    def __repr__(self):
        items_str = ', '.join(
            f'{k!r}: {v!r}' for (k, v) in self._storage.values()
        )
        return f'{self.__class__.__name__}({{{items_str}}})'
