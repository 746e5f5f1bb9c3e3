"""Immutable string-keyed dictionary.

This module provides :class:`Dict`, a persistent associative container. A
``Dict`` never changes after construction: every operation that "modifies" one
returns a brand-new ``Dict`` built on a fresh copy of the backing store, and the
argument is left exactly as it was. The store itself is never handed out, so
``Dict`` values can be shared freely, including across threads.

The whole algebra lives on the class as static methods taking the container as
their LAST argument. Every operation with two or more parameters can be called
with all but that last argument, returning a one-argument callable. This makes
operations easy to partially apply and chain:

    >>> from dictum import Dict
    >>> from dictum.functional import flow
    >>>
    >>> register = flow(Dict.insert("three", 3), Dict.update("one", lambda v: v * 10))
    >>> d = register(Dict.from_hash_map({"one": 1, "two": 2}))
    >>> Dict.to_hash_map(d)
    {'one': 10, 'two': 2, 'three': 3}

Key Features:
    - Lookups return :data:`dictum.core.maybe.Maybe` instead of raising or ``None``
    - Missing keys are a no-op for ``update`` and ``remove``
    - ``union`` prefers the FIRST dictionary on key collisions

Note:
    Iteration follows the insertion order of the backing ``dict``. Overwriting a
    key keeps its original position and ``remove`` followed by ``insert`` moves
    it to the end. ``keys``, ``values``, ``map``, ``filter`` and ``reduce`` all
    traverse in this order.
"""

import functools
import typing as tp

from pydantic import BaseModel, ConfigDict, PrivateAttr

from dictum.core.maybe import Just, Maybe, Nothing
from dictum.core.types import HashMap, PairList, hash_map_adapter, pair_list_adapter
from dictum.functional.composition import PENDING
from dictum.logger.logger import get_logger

__all__ = [
    "Dict",
]

logger = get_logger(__name__)

T = tp.TypeVar("T")
A = tp.TypeVar("A")
B = tp.TypeVar("B")


class Dict(BaseModel, tp.Generic[T]):
    """Immutable mapping from string keys to values of type ``T``.

    Instances are created through :meth:`empty`, :meth:`singleton`,
    :meth:`from_hash_map` or :meth:`from_list` and transformed with the static
    methods of this class. Supports ``len()``, ``in`` and iteration over keys,
    but no item assignment or deletion.

    Two dictionaries are equal when they hold the same key/value pairs,
    regardless of order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Internal state, never shared between instances
    _store: tp.Dict[str, T] = PrivateAttr(default_factory=dict)

    @classmethod
    def _wrap(cls, store: tp.Dict[str, T]) -> "Dict[T]":
        # Takes ownership of ``store``; callers must pass a dict nobody else holds
        instance = cls()
        instance._store = store
        return instance

    # --- Python protocol ---

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __iter__(self) -> tp.Iterator[str]:  # type: ignore[override]
        return iter(tuple(self._store))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dict):
            return NotImplemented
        return self._store == other._store

    def __hash__(self) -> int:
        return hash(frozenset(self._store.items()))

    def __repr__(self) -> str:
        return f"Dict({self._store!r})"

    __str__ = __repr__

    # --- Construction ---

    @staticmethod
    def empty() -> "Dict[T]":
        """Create a dictionary with no entries."""
        return Dict._wrap({})

    @tp.overload
    @staticmethod
    def singleton(key: str) -> tp.Callable[[T], "Dict[T]"]: ...
    @tp.overload
    @staticmethod
    def singleton(key: str, value: T) -> "Dict[T]": ...
    @staticmethod
    def singleton(key, value=PENDING):
        """Create a dictionary holding exactly one key/value pair."""
        if value is PENDING:
            return functools.partial(Dict.singleton, key)
        return Dict._wrap({key: value})

    @staticmethod
    def from_hash_map(hash_map: tp.Mapping[str, T]) -> "Dict[T]":
        """Create a dictionary from a plain string-keyed mapping.

        The entries are copied, so mutating ``hash_map`` afterwards does not
        affect the result.

        Args:
            hash_map: Mapping with string keys.

        Returns:
            A new dictionary with the same entries.

        Raises:
            pydantic.ValidationError: If ``hash_map`` is not a mapping or has a
                non-string key.
        """
        store = hash_map_adapter.validate_python(hash_map)
        return Dict._wrap(store)

    @staticmethod
    def from_list(pairs: tp.Sequence[tp.Tuple[str, T]]) -> "Dict[T]":
        """Create a dictionary from a sequence of ``(key, value)`` pairs.

        Pairs are inserted left to right, so when a key appears more than once
        the LAST pair wins.

        Args:
            pairs: Key/value pairs.

        Returns:
            A new dictionary.

        Raises:
            pydantic.ValidationError: If ``pairs`` is not a sequence of
                two-element pairs with string keys.
        """
        validated: PairList = pair_list_adapter.validate_python(pairs)

        store: tp.Dict[str, T] = {}
        for key, value in validated:
            store[key] = value

        if len(store) < len(validated):
            logger.debug(
                f"from_list folded {len(validated)} pairs into {len(store)} keys; "
                "later pairs overrode earlier ones."
            )
        return Dict._wrap(store)

    # --- Query ---

    @tp.overload
    @staticmethod
    def get(key: str) -> tp.Callable[["Dict[T]"], Maybe[T]]: ...
    @tp.overload
    @staticmethod
    def get(key: str, dict: "Dict[T]") -> Maybe[T]: ...
    @staticmethod
    def get(key, dict=PENDING):
        """Look up ``key``.

        Returns:
            ``Just(value)`` if ``key`` is present, even when the stored value is
            ``None``, otherwise ``Nothing()``.
        """
        if dict is PENDING:
            return functools.partial(Dict.get, key)
        if key in dict._store:
            return Just(dict._store[key])
        return Nothing()

    @tp.overload
    @staticmethod
    def member(key: str) -> tp.Callable[["Dict[T]"], bool]: ...
    @tp.overload
    @staticmethod
    def member(key: str, dict: "Dict[T]") -> bool: ...
    @staticmethod
    def member(key, dict=PENDING):
        """Check whether ``key`` is present."""
        if dict is PENDING:
            return functools.partial(Dict.member, key)
        return key in dict._store

    @staticmethod
    def is_empty(dict: "Dict[T]") -> bool:
        return not dict._store

    @staticmethod
    def size(dict: "Dict[T]") -> int:
        return len(dict._store)

    @staticmethod
    def keys(dict: "Dict[T]") -> tp.Tuple[str, ...]:
        """All keys, in iteration order."""
        return tuple(dict._store.keys())

    @staticmethod
    def values(dict: "Dict[T]") -> tp.Tuple[T, ...]:
        """All values, positionally aligned with :meth:`keys`."""
        return tuple(dict._store.values())

    @staticmethod
    def to_hash_map(dict: "Dict[T]") -> HashMap[T]:
        """Copy the entries into a plain ``dict`` the caller is free to mutate."""
        return {**dict._store}

    @staticmethod
    def to_list(dict: "Dict[T]") -> tp.List[tp.Tuple[str, T]]:
        """Copy the entries into a list of ``(key, value)`` pairs."""
        return list(dict._store.items())

    # --- Transformation ---

    @tp.overload
    @staticmethod
    def insert(key: str, val: T) -> tp.Callable[["Dict[T]"], "Dict[T]"]: ...
    @tp.overload
    @staticmethod
    def insert(key: str, val: T, dict: "Dict[T]") -> "Dict[T]": ...
    @staticmethod
    def insert(key, val, dict=PENDING):
        """Add ``key`` with ``val``, replacing the value if ``key`` already exists."""
        if dict is PENDING:
            return functools.partial(Dict.insert, key, val)
        return Dict._wrap({**dict._store, key: val})

    @tp.overload
    @staticmethod
    def update(
        key: str, transform: tp.Callable[[T], T]
    ) -> tp.Callable[["Dict[T]"], "Dict[T]"]: ...
    @tp.overload
    @staticmethod
    def update(
        key: str, transform: tp.Callable[[T], T], dict: "Dict[T]"
    ) -> "Dict[T]": ...
    @staticmethod
    def update(key, transform, dict=PENDING):
        """Replace the value under ``key`` with ``transform(old_value)``.

        A missing key is not an error: ``transform`` is not called and the
        content is unchanged.
        """
        if dict is PENDING:
            return functools.partial(Dict.update, key, transform)
        if key not in dict._store:
            return dict
        return Dict._wrap({**dict._store, key: transform(dict._store[key])})

    @tp.overload
    @staticmethod
    def remove(key: str) -> tp.Callable[["Dict[T]"], "Dict[T]"]: ...
    @tp.overload
    @staticmethod
    def remove(key: str, dict: "Dict[T]") -> "Dict[T]": ...
    @staticmethod
    def remove(key, dict=PENDING):
        """Drop ``key`` if present; a missing key leaves the content unchanged."""
        if dict is PENDING:
            return functools.partial(Dict.remove, key)
        return Dict._wrap({k: v for k, v in dict._store.items() if k != key})

    @tp.overload
    @staticmethod
    def map(f: tp.Callable[[str, A], B]) -> tp.Callable[["Dict[A]"], "Dict[B]"]: ...
    @tp.overload
    @staticmethod
    def map(f: tp.Callable[[str, A], B], dict: "Dict[A]") -> "Dict[B]": ...
    @staticmethod
    def map(f, dict=PENDING):
        """Apply ``f(key, value)`` to every entry, keeping the same keys.

        Args:
            f: Function of the key and the current value.
            dict: Source dictionary. When omitted, a callable awaiting it is
                returned.

        Returns:
            A dictionary with the same keys and transformed values.
        """
        if dict is PENDING:
            return functools.partial(Dict.map, f)
        return Dict._wrap({key: f(key, val) for key, val in dict._store.items()})

    @tp.overload
    @staticmethod
    def filter(
        predicate: tp.Callable[[str, T], bool]
    ) -> tp.Callable[["Dict[T]"], "Dict[T]"]: ...
    @tp.overload
    @staticmethod
    def filter(predicate: tp.Callable[[str, T], bool], dict: "Dict[T]") -> "Dict[T]": ...
    @staticmethod
    def filter(predicate, dict=PENDING):
        """Keep only the entries for which ``predicate(key, value)`` is true."""
        if dict is PENDING:
            return functools.partial(Dict.filter, predicate)
        return Dict._wrap(
            {key: val for key, val in dict._store.items() if predicate(key, val)}
        )

    @tp.overload
    @staticmethod
    def reduce(
        f: tp.Callable[[str, A, B], B], initial: B
    ) -> tp.Callable[["Dict[A]"], B]: ...
    @tp.overload
    @staticmethod
    def reduce(f: tp.Callable[[str, A, B], B], initial: B, dict: "Dict[A]") -> B: ...
    @staticmethod
    def reduce(f, initial, dict=PENDING):
        """Fold over the entries in iteration order.

        Args:
            f: Function of ``(key, value, accumulator)`` returning the next
                accumulator.
            initial: Starting accumulator.
            dict: Source dictionary. When omitted, a callable awaiting it is
                returned.

        Returns:
            The final accumulator, ``initial`` for an empty dictionary.
        """
        if dict is PENDING:
            return functools.partial(Dict.reduce, f, initial)
        return functools.reduce(
            lambda accum, item: f(item[0], item[1], accum),
            dict._store.items(),
            initial,
        )

    @tp.overload
    @staticmethod
    def union(first: "Dict[T]") -> tp.Callable[["Dict[T]"], "Dict[T]"]: ...
    @tp.overload
    @staticmethod
    def union(first: "Dict[T]", second: "Dict[T]") -> "Dict[T]": ...
    @staticmethod
    def union(first, second=PENDING):
        """Combine two dictionaries, preferring ``first`` on key collisions.

        Keys of ``second`` come first in iteration order, followed by the keys
        found only in ``first``.
        """
        if second is PENDING:
            return functools.partial(Dict.union, first)
        return Dict._wrap({**second._store, **first._store})
