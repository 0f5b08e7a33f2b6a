"""Common patterns over `IdentityKeyedStore`: counting, grouping and nesting."""

from typing import Any, Callable, Iterable, Iterator, Tuple

from keyed.id import MISSING
from keyed.store import IdentityKeyedStore


def count(items: Iterable[Any]) -> IdentityKeyedStore:
    """Frequency of each item, in first-seen order."""
    counts = IdentityKeyedStore()
    for item in items:
        counts.set(item, counts.get(item, 0) + 1)
    return counts


def most_frequent(items: Iterable[Any]) -> Tuple[Any, int]:
    """
    Returns `(item, count)` for the most common item.

    On a tie the item that reached the winning count first is returned.
    """
    counts = IdentityKeyedStore()
    best, best_count = MISSING, 0
    for item in items:
        c = counts.get(item, 0) + 1
        counts.set(item, c)
        if c > best_count:
            best, best_count = item, c

    if best is MISSING:
        raise ValueError("most_frequent() arg is an empty iterable")
    return best, best_count


def get_or_set(store: IdentityKeyedStore, key: Any, factory: Callable[[], Any]) -> Any:
    value = store.get(key)
    if value is MISSING:
        value = factory()
        store.set(key, value)
    return value


def group_by(items: Iterable[Any], key_fn: Callable[[Any], Any]) -> IdentityKeyedStore:
    groups = IdentityKeyedStore()
    for item in items:
        get_or_set(groups, key_fn(item), list).append(item)
    return groups


def nested_set(store: IdentityKeyedStore, outer: Any, inner: Any, value: Any) -> None:
    get_or_set(store, outer, IdentityKeyedStore).set(inner, value)


def nested_get(store: IdentityKeyedStore, outer: Any, inner: Any, default: Any = MISSING) -> Any:
    inner_store = store.get(outer)
    if inner_store is MISSING:
        return default
    return inner_store.get(inner, default)


def walk_nested(store: IdentityKeyedStore) -> Iterator[Tuple[Any, Any, Any]]:
    for outer, inner_store in store.entries():
        for inner, value in inner_store.entries():
            yield outer, inner, value
