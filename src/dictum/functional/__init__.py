"""Functional primitives for dictum.

This module provides the small set of functional programming utilities used by
the core containers. Utilities are stateless and side-effect-free so curried
container operations can be composed into pipelines.
"""

from dictum.functional.composition import PENDING, Pending, compose, flow, pipe

__all__ = [
    "PENDING",
    "Pending",
    "compose",
    "flow",
    "pipe",
]
