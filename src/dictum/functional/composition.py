"""Composition helpers for building point-free pipelines.

Every multi-argument operation in :mod:`dictum.core` can be called with all of
its arguments, or with all but the last one to get back a one-argument callable.
The helpers in this module glue such partially applied calls together.

Examples:
    >>> from dictum import Dict
    >>> from dictum.functional import flow, pipe
    >>>
    >>> add_defaults = flow(Dict.insert("retries", 3), Dict.remove("debug"))
    >>> Dict.to_hash_map(add_defaults(Dict.singleton("debug", True)))
    {'retries': 3}
    >>> pipe(Dict.empty(), Dict.insert("a", 1), Dict.size)
    1
"""

import enum
import functools
import typing as tp

__all__ = [
    "Pending",
    "PENDING",
    "compose",
    "flow",
    "pipe",
]


class Pending(enum.Enum):
    """Marker for a trailing argument that has not been supplied yet."""

    PENDING = "PENDING"

    def __repr__(self) -> str:
        return "PENDING"


# Default value of the last parameter of every curried operation
PENDING = Pending.PENDING


def _identity(value: tp.Any) -> tp.Any:
    return value


def compose(*fns: tp.Callable[[tp.Any], tp.Any]) -> tp.Callable[[tp.Any], tp.Any]:
    """Compose single-argument functions from right to left.

    ``compose(f, g, h)(x)`` is ``f(g(h(x)))``. With no functions the identity
    function is returned.

    Args:
        *fns: Single-argument callables.

    Returns:
        A single-argument callable applying ``fns`` last to first.
    """
    return flow(*reversed(fns))


def flow(*fns: tp.Callable[[tp.Any], tp.Any]) -> tp.Callable[[tp.Any], tp.Any]:
    """Compose single-argument functions from left to right.

    ``flow(f, g, h)(x)`` is ``h(g(f(x)))``.

    Args:
        *fns: Single-argument callables.

    Returns:
        A single-argument callable applying ``fns`` first to last.
    """
    if not fns:
        return _identity

    def run(value: tp.Any) -> tp.Any:
        return functools.reduce(lambda acc, fn: fn(acc), fns, value)

    return run


def pipe(value: tp.Any, *fns: tp.Callable[[tp.Any], tp.Any]) -> tp.Any:
    """Feed ``value`` through ``fns`` from left to right and return the result."""
    return flow(*fns)(value)
