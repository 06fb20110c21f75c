"""Function combinators that wrap a callable and manage private state.

Each factory in this module takes a target function and returns a new callable
that intercepts every call:

    - **once**: runs the target a single time and replays its result.
    - **memoize**: caches results of a single-argument target by cache key.
    - **invoke**: maps a method (by name) or a function over a collection.

The callables returned by ``once`` and ``memoize`` are pydantic models
(:class:`Once`, :class:`Memoized`). Their state lives in private attributes,
so two wrappers never share state, even when they wrap the same function.
State is read and updated under a per-instance re-entrant lock; a memoized
recursive function may therefore call its own wrapper.

Examples:
    >>> from loscore.functional.combinators import once, memoize, invoke
    >>> init = once(lambda config: {"ready": True, **config})
    >>> init({"a": 1})
    {'ready': True, 'a': 1}
    >>> init({"b": 2})  # target not called again
    {'ready': True, 'a': 1}
    >>>
    >>> square = memoize(lambda x: x * x)
    >>> square(4), square(4)
    (16, 16)
    >>> invoke(["hello", "world"], "upper")
    ['HELLO', 'WORLD']

Note:
    ``memoize`` keys its cache on ``str(argument)`` unless a resolver is
    given, so ``1`` and ``"1"`` share one cache entry.
"""

import threading
from typing import Any, Callable, Dict, Hashable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from loscore.core.types import Collection, Resolver
from loscore.functional.collections import map_
from loscore.logger.logger import logger

__all__ = [
    "Once",
    "Memoized",
    "once",
    "memoize",
    "invoke",
]


def _name_of(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


class _Wrapper(BaseModel):
    """Base for wrappers whose private state belongs to one instance only.

    Copies are rebuilt from the public fields, so a copy starts with fresh
    state and its own lock instead of sharing the original's.
    """

    model_config = ConfigDict(frozen=True)

    def model_copy(
        self, *, update: Optional[Dict[str, Any]] = None, deep: bool = False
    ):
        return type(self)(**{**dict(self), **(update or {})})

    def __copy__(self):
        return self.model_copy()

    def __deepcopy__(self, memo: Optional[Dict[int, Any]] = None):
        return self.model_copy()


class Once(_Wrapper):
    """Call gate that lets its target run a single time.

    The first call runs ``func`` and stores the result; every later call
    returns that result without looking at its arguments. A call made from
    inside ``func`` while it is still running returns the current result slot
    (``None``) without running ``func`` again. A first call that raises does
    not consume the gate, so the next call tries again.

    Attributes:
        func: The wrapped target function.
    """

    func: Callable[..., Any] = Field(..., description="Target function to gate.")

    _called: bool = PrivateAttr(default=False)
    _running: bool = PrivateAttr(default=False)
    _result: Any = PrivateAttr(default=None)
    _lock: Any = PrivateAttr(default_factory=threading.RLock)

    @property
    def called(self) -> bool:
        """Whether the target has completed its single run."""
        return self._called

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            if self._called or self._running:
                return self._result
            self._running = True
            try:
                result = self.func(*args, **kwargs)
            except Exception:
                logger.debug(
                    "once(%s): first call failed, gate left open", _name_of(self.func)
                )
                raise
            finally:
                self._running = False
            self._result = result
            self._called = True
            logger.debug("once(%s): gate triggered", _name_of(self.func))
            return result

    def __repr__(self) -> str:
        return f"Once(func={_name_of(self.func)}, called={self._called})"


class Memoized(_Wrapper):
    """Single-argument function wrapper with an unbounded result cache.

    The cache key is ``str(argument)``, or ``resolver(argument)`` when a
    resolver is supplied. Arguments sharing a key share a cache entry, so the
    target runs at most once per key. Nothing is cached when the target raises.

    Attributes:
        func: The wrapped target function.
        resolver: Optional function computing the cache key.
    """

    func: Callable[[Any], Any] = Field(..., description="Target function to cache.")
    resolver: Optional[Callable[[Any], Hashable]] = Field(
        None, description="Computes the cache key. Defaults to str(argument)."
    )

    _cache: Dict[Hashable, Any] = PrivateAttr(default_factory=dict)
    _lock: Any = PrivateAttr(default_factory=threading.RLock)

    @property
    def cache(self) -> Dict[Hashable, Any]:
        """A copy of the cache, keyed by cache key."""
        with self._lock:
            return dict(self._cache)

    def cache_key(self, value: Any) -> Hashable:
        """Return the cache key used for ``value``."""
        if self.resolver is not None:
            return self.resolver(value)
        return str(value)

    def __call__(self, value: Any) -> Any:
        key = self.cache_key(value)
        with self._lock:
            if key in self._cache:
                logger.debug("memoize(%s): cache hit for %r", _name_of(self.func), key)
                return self._cache[key]
            logger.debug("memoize(%s): cache miss for %r", _name_of(self.func), key)
            result = self.func(value)
            self._cache[key] = result
            return result

    def __repr__(self) -> str:
        return f"Memoized(func={_name_of(self.func)}, cached={len(self._cache)})"


def once(func: Callable[..., Any]) -> Once:
    """Wrap ``func`` so that it runs at most once.

    Args:
        func: Target function.

    Returns:
        A :class:`Once` gate around ``func``.
    """
    return Once(func=func)


def memoize(
    func: Callable[[Any], Any], resolver: Optional[Resolver] = None
) -> Memoized:
    """Wrap a single-argument ``func`` with a result cache.

    Args:
        func: Target function taking exactly one argument.
        resolver: Optional function computing the cache key from the argument.
            Defaults to ``str``.

    Returns:
        A :class:`Memoized` wrapper around ``func``.

    Example:
        >>> calls = []
        >>> double = memoize(lambda x: calls.append(x) or x * 2)
        >>> double(3), double(3), double("3")
        (6, 6, 6)
        >>> calls
        [3]
    """
    return Memoized(func=func, resolver=resolver)


def invoke(
    collection: Collection, method: Union[str, Callable[[Any], Any]]
) -> List[Any]:
    """Call a method on every value of ``collection``.

    Args:
        collection: Values to call the method on.
        method: Either the name of a zero-argument method looked up on each
            value, or a function called with each value as its only argument.

    Returns:
        List of results, in the collection's order.

    Raises:
        AttributeError: If a value has no method called ``method``. The call
            aborts on the first such value.
        TypeError: If ``method`` is neither a string nor callable.
    """
    if isinstance(method, str):
        return map_(collection, lambda value: getattr(value, method)())
    if callable(method):
        return map_(collection, method)
    raise TypeError(
        f"method must be a method name or a callable, got {type(method).__name__}."
    )
