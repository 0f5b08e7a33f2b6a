import functools
import logging
from typing import Any, Callable, Generic, Optional, TypeVar

from keyed.store import IdentityKeyedStore
from keyed.tracing import trace

logger = logging.getLogger(__name__)

_NOT_CACHED = object()

K = TypeVar('K')
R = TypeVar('R')


class MemoCache(Generic[K, R]):
    """
    Caches the results of a one-argument function, keyed by its input.

    Inputs are matched with the same rule as `IdentityKeyedStore`: strings and
    numbers by value, everything else by identity. The function runs at most
    once per distinct input for as long as the entry is kept. If it raises,
    the exception reaches the caller and nothing is cached for that input.

    There is no eviction; the cache grows until `clear` or `invalidate`.
    """

    def __init__(self, fn: Callable[[K], R], store: Optional[IdentityKeyedStore] = None):
        self.fn = fn
        self.store = store if store is not None else IdentityKeyedStore()
        self.hits = 0
        self.misses = 0

    @trace
    def resolve(self, input: K) -> R:
        cached = self.store.get(input, _NOT_CACHED)
        if cached is not _NOT_CACHED:
            self.hits += 1
            logger.debug("cache hit for %r", input)
            return cached

        self.misses += 1
        logger.debug("cache miss for %r, computing", input)
        result = self.fn(input)
        self.store.set(input, result)
        return result

    def __call__(self, input: K) -> R:
        return self.resolve(input)

    def has(self, input: K) -> bool:
        return self.store.has(input)

    def invalidate(self, input: K) -> bool:
        removed = self.store.delete(input)
        if removed:
            logger.debug("invalidated %r", input)
        return removed

    def clear(self) -> None:
        self.store.clear()
        self.hits = 0
        self.misses = 0

    def size(self) -> int:
        return self.store.size()

    def __len__(self):
        return self.store.size()

    def __repr__(self) -> str:
        name = getattr(self.fn, '__name__', repr(self.fn))
        return f'{self.__class__.__name__}({name}, size={self.size()}, hits={self.hits}, misses={self.misses})'


def memoize(fn: Callable | None = None) -> Any:
    """Decorator form of `MemoCache`; works as `@memoize` and `@memoize()`."""
    def decorator(f):
        cache = MemoCache(f)
        functools.update_wrapper(cache, f)
        return cache

    if fn is None:
        return decorator
    else:
        return decorator(fn)
