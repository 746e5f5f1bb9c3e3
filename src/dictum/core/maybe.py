"""Optional values without ``None``.

A ``Maybe`` is either ``Just(value)`` or ``Nothing()``. The two variants are
frozen pydantic models and form a closed union: code that consumes a ``Maybe``
checks ``isinstance(m, Just)`` and treats everything else as ``Nothing``.

The module level functions give the small functional vocabulary needed to work
with optional results (``map``, ``and_then``, ``with_default``, ``ap``,
``pure``). Each binary function can be called with both arguments, or with only
the first one to get a callable awaiting the ``Maybe``, so that steps can be
chained with :func:`dictum.functional.flow`.

Examples:
    >>> from dictum.core import maybe
    >>> from dictum.functional import flow
    >>>
    >>> def safe_divide(divisor):
    ...     return lambda n: maybe.Nothing() if divisor == 0 else maybe.Just(n / divisor)
    >>>
    >>> chain = flow(safe_divide(2), maybe.and_then(safe_divide(4)))
    >>> chain(32)
    Just(4.0)
    >>> flow(safe_divide(0), maybe.and_then(safe_divide(4)))(32)
    Nothing()
"""

import functools
import typing as tp

from pydantic import BaseModel, ConfigDict
from typing_extensions import TypeAliasType

from dictum.functional.composition import PENDING

__all__ = [
    "Just",
    "Nothing",
    "Maybe",
    "from_nullable",
    "to_nullable",
    "map",
    "and_then",
    "with_default",
    "ap",
    "pure",
]

T = tp.TypeVar("T")
A = tp.TypeVar("A")
B = tp.TypeVar("B")


class Just(BaseModel, tp.Generic[T]):
    """A present value."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: T

    def __init__(self, value: T, **data: tp.Any) -> None:
        super().__init__(value=value, **data)

    @property
    def is_just(self) -> bool:
        return True

    @property
    def is_nothing(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Just({self.value!r})"

    __str__ = __repr__


class Nothing(BaseModel):
    """An absent value. All instances are equal."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def is_just(self) -> bool:
        return False

    @property
    def is_nothing(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "Nothing()"

    __str__ = __repr__


Maybe = TypeAliasType("Maybe", tp.Union[Just[T], Nothing], type_params=(T,))


def from_nullable(value: tp.Optional[T]) -> Maybe[T]:
    """Wrap ``value`` in ``Just`` unless it is ``None``."""
    return Nothing() if value is None else Just(value)


def to_nullable(m: Maybe[T]) -> tp.Optional[T]:
    """Unwrap ``m`` back to a plain value, using ``None`` for ``Nothing``."""
    return m.value if isinstance(m, Just) else None


@tp.overload
def map(f: tp.Callable[[A], B]) -> tp.Callable[[Maybe[A]], Maybe[B]]: ...
@tp.overload
def map(f: tp.Callable[[A], B], m: Maybe[A]) -> Maybe[B]: ...
def map(f, m=PENDING):
    """Apply ``f`` to the value inside ``m``.

    Args:
        f: Function applied to the wrapped value.
        m: The optional value. When omitted, a callable awaiting it is returned.

    Returns:
        ``Just(f(value))`` for a ``Just``, ``Nothing()`` otherwise.
    """
    if m is PENDING:
        return functools.partial(map, f)
    if isinstance(m, Just):
        return Just(f(m.value))
    return Nothing()


@tp.overload
def and_then(f: tp.Callable[[A], Maybe[B]]) -> tp.Callable[[Maybe[A]], Maybe[B]]: ...
@tp.overload
def and_then(f: tp.Callable[[A], Maybe[B]], m: Maybe[A]) -> Maybe[B]: ...
def and_then(f, m=PENDING):
    """Chain a step that may itself produce ``Nothing``.

    ``f`` returns a ``Maybe`` and its result is returned as is, so nothing is
    wrapped twice. A ``Nothing`` input short-circuits: ``f`` is never called,
    which lets the first missing value propagate through a whole chain.

    Args:
        f: Function from the wrapped value to a new ``Maybe``.
        m: The optional value. When omitted, a callable awaiting it is returned.

    Returns:
        ``f(value)`` for a ``Just``, ``Nothing()`` otherwise.
    """
    if m is PENDING:
        return functools.partial(and_then, f)
    if isinstance(m, Just):
        return f(m.value)
    return Nothing()


@tp.overload
def with_default(default: T) -> tp.Callable[[Maybe[T]], T]: ...
@tp.overload
def with_default(default: T, m: Maybe[T]) -> T: ...
def with_default(default, m=PENDING):
    """Return the value inside ``m``, or ``default`` when there is none."""
    if m is PENDING:
        return functools.partial(with_default, default)
    if isinstance(m, Just):
        return m.value
    return default


@tp.overload
def ap(mf: Maybe[tp.Callable[[A], B]]) -> tp.Callable[[Maybe[A]], Maybe[B]]: ...
@tp.overload
def ap(mf: Maybe[tp.Callable[[A], B]], m: Maybe[A]) -> Maybe[B]: ...
def ap(mf, m=PENDING):
    """Apply a wrapped function to a wrapped value.

    Args:
        mf: Optional function.
        m: Optional argument. When omitted, a callable awaiting it is returned.

    Returns:
        ``Just(f(value))`` when both sides are ``Just``, ``Nothing()`` otherwise.
    """
    if m is PENDING:
        return functools.partial(ap, mf)
    if isinstance(mf, Just) and isinstance(m, Just):
        return Just(mf.value(m.value))
    return Nothing()


def pure(value: T) -> Maybe[T]:
    """Lift ``value`` into ``Just``. Unlike :func:`from_nullable`, ``None`` is kept."""
    return Just(value)

