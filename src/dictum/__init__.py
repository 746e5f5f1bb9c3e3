"""dictum: an immutable string-keyed dictionary and an optional-value type.

``Dict`` operations never mutate: each returns a new value and lookups return a
``Maybe`` (``Just(value)`` or ``Nothing()``) instead of raising. Every
multi-argument operation can be partially applied by leaving out its last
argument, which makes the pieces compose with :func:`dictum.functional.flow`.
"""

from dictum.core import Dict, Just, Maybe, Nothing, maybe
from dictum.functional import compose, flow, pipe

__version__ = "0.1.0"

__all__ = [
    "Dict",
    "Just",
    "Maybe",
    "Nothing",
    "maybe",
    "compose",
    "flow",
    "pipe",
]
