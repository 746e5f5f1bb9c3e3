"""Immutable containers and optional values."""

from dictum.core import maybe
from dictum.core.dictionary import Dict
from dictum.core.maybe import Just, Maybe, Nothing
from dictum.core.types import HashMap, PairList

__all__ = [
    "Dict",
    "Just",
    "Maybe",
    "Nothing",
    "HashMap",
    "PairList",
    "maybe",
]
