"""Boundary types for converting between plain Python values and containers.

Type Aliases:
    HashMap: A plain ``dict`` mapping string keys to values.
    PairList: A list of ``(key, value)`` tuples.

The adapters validate input shape only: keys must be strings and the outer
structure must be mapping- or sequence-shaped. Values are passed through
untouched.
"""

import typing as tp

from pydantic import TypeAdapter

__all__ = [
    "HashMap",
    "PairList",
    "hash_map_adapter",
    "pair_list_adapter",
]

T = tp.TypeVar("T")

# A plain string-keyed dictionary
HashMap = tp.Dict[str, T]

# An ordered sequence of key/value pairs, later pairs override earlier ones
PairList = tp.List[tp.Tuple[str, T]]

# Validation of the outer shape always yields a freshly built container
hash_map_adapter: TypeAdapter[tp.Dict[str, tp.Any]] = TypeAdapter(tp.Dict[str, tp.Any])
pair_list_adapter: TypeAdapter[tp.List[tp.Tuple[str, tp.Any]]] = TypeAdapter(
    tp.List[tp.Tuple[str, tp.Any]]
)
