"""Functional primitives for arraykoans.

This package provides the array utilities the koans are built around. The
utilities are stateless and side-effect-free so they can be composed freely
and checked in isolation.
"""

from arraykoans.functional.arrays import (
    chunk,
    compact,
    drop,
    drop_right,
    drop_right_while,
    drop_while,
    fill,
    find_index,
    find_last_index,
    head,
    initial,
    last,
    nth,
    tail,
    zip,
)

__all__ = [
    "chunk",
    "compact",
    "head",
    "tail",
    "initial",
    "last",
    "drop",
    "drop_right",
    "drop_while",
    "drop_right_while",
    "fill",
    "find_index",
    "find_last_index",
    "nth",
    "zip",
]
