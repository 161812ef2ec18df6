"""arraykoans: learn generics, defaults and predicates by rebuilding array utilities."""

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
