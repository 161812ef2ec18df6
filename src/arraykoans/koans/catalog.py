"""Catalog of array koans.

Each koan is one documented example of a utility from
:mod:`arraykoans.functional.arrays`. A learner re-implementing the utilities
is done once every koan in :data:`ARRAY_KOANS` passes.
"""

import typing as tp

from arraykoans.functional import arrays
from arraykoans.koans.models import Koan

__all__ = ["ARRAY_KOANS", "koans_for"]

NaN = float("nan")


ARRAY_KOANS: tp.List[Koan] = [
    # chunk
    Koan(
        name="chunk",
        call='chunk(["a", "b", "c", "d"], 2)',
        run=lambda: arrays.chunk(["a", "b", "c", "d"], 2),
        expected=[["a", "b"], ["c", "d"]],
    ),
    Koan(
        name="chunk",
        call='chunk(["a", "b", "c", "d"], 3)',
        run=lambda: arrays.chunk(["a", "b", "c", "d"], 3),
        expected=[["a", "b", "c"], ["d"]],
    ),
    Koan(
        name="chunk",
        call='chunk(["a", "b", "c"])',
        run=lambda: arrays.chunk(["a", "b", "c"]),
        expected=[["a"], ["b"], ["c"]],
    ),
    Koan(name="chunk", call="chunk([], 2)", run=lambda: arrays.chunk([], 2), expected=[]),
    # compact
    Koan(
        name="compact",
        call="compact([1, None, 2, None, 3])",
        run=lambda: arrays.compact([1, None, 2, None, 3]),
        expected=[1, 2, 3],
    ),
    Koan(
        name="compact",
        call="compact([1, nan, 2, nan, 3])",
        run=lambda: arrays.compact([1, NaN, 2, NaN, 3]),
        expected=[1, 2, 3],
    ),
    Koan(
        name="compact",
        call="compact([1, 0, 2, 0, 3])",
        run=lambda: arrays.compact([1, 0, 2, 0, 3]),
        expected=[1, 2, 3],
    ),
    Koan(
        name="compact",
        call="compact([1, None, nan, False, 0, 2, 3])",
        run=lambda: arrays.compact([1, None, NaN, False, 0, 2, 3]),
        expected=[1, 2, 3],
    ),
    # head / last / tail / initial
    Koan(name="head", call="head([1, 2, 3])", run=lambda: arrays.head([1, 2, 3]), expected=1),
    Koan(name="head", call="head([])", run=lambda: arrays.head([]), expected=None),
    Koan(name="last", call="last([1, 2, 3])", run=lambda: arrays.last([1, 2, 3]), expected=3),
    Koan(name="last", call="last([])", run=lambda: arrays.last([]), expected=None),
    Koan(
        name="tail",
        call="tail([1, 2, 3])",
        run=lambda: arrays.tail([1, 2, 3]),
        expected=[2, 3],
    ),
    Koan(name="tail", call="tail([])", run=lambda: arrays.tail([]), expected=[]),
    Koan(
        name="initial",
        call="initial([1, 2, 3])",
        run=lambda: arrays.initial([1, 2, 3]),
        expected=[1, 2],
    ),
    Koan(name="initial", call="initial([])", run=lambda: arrays.initial([]), expected=[]),
    # drop family
    Koan(
        name="drop",
        call="drop([1, 2, 3, 4], 2)",
        run=lambda: arrays.drop([1, 2, 3, 4], 2),
        expected=[3, 4],
    ),
    Koan(
        name="drop",
        call="drop([1, 2, 3, 4])",
        run=lambda: arrays.drop([1, 2, 3, 4]),
        expected=[2, 3, 4],
    ),
    Koan(
        name="drop",
        call="drop([1, 2], 5)",
        run=lambda: arrays.drop([1, 2], 5),
        expected=[],
    ),
    Koan(
        name="drop_right",
        call="drop_right([1, 2, 3, 4], 2)",
        run=lambda: arrays.drop_right([1, 2, 3, 4], 2),
        expected=[1, 2],
    ),
    Koan(
        name="drop_right",
        call="drop_right([1, 2, 3, 4])",
        run=lambda: arrays.drop_right([1, 2, 3, 4]),
        expected=[1, 2, 3],
    ),
    Koan(
        name="drop_while",
        call="drop_while([1, 2, 3, 4, 5, 1], lambda value: value < 3)",
        run=lambda: arrays.drop_while([1, 2, 3, 4, 5, 1], lambda value: value < 3),
        expected=[3, 4, 5, 1],
    ),
    Koan(
        name="drop_right_while",
        call="drop_right_while([5, 4, 3, 2, 1], lambda value: value < 3)",
        run=lambda: arrays.drop_right_while([5, 4, 3, 2, 1], lambda value: value < 3),
        expected=[5, 4, 3],
    ),
    # fill
    Koan(
        name="fill",
        call='fill([4, 6, 8, 10], "* ", 1, 3)',
        run=lambda: arrays.fill([4, 6, 8, 10], "* ", 1, 3),
        expected=[4, "* ", "* ", 10],
    ),
    # find_index / find_last_index
    Koan(
        name="find_index",
        call="find_index([4, 6, 8, 10], lambda value: False)",
        run=lambda: arrays.find_index([4, 6, 8, 10], lambda value: False),
        expected=-1,
    ),
    Koan(
        name="find_index",
        call="find_index([4, 6, 8, 10], lambda value: value == 6)",
        run=lambda: arrays.find_index([4, 6, 8, 10], lambda value: value == 6),
        expected=1,
    ),
    Koan(
        name="find_index",
        call="find_index([4, 6, 6, 8, 10], lambda value: value == 6, 2)",
        run=lambda: arrays.find_index([4, 6, 6, 8, 10], lambda value: value == 6, 2),
        expected=2,
    ),
    Koan(
        name="find_last_index",
        call="find_last_index([4, 6, 8, 10], lambda value: False)",
        run=lambda: arrays.find_last_index([4, 6, 8, 10], lambda value: False),
        expected=-1,
    ),
    Koan(
        name="find_last_index",
        call="find_last_index([4, 6, 8, 10], lambda value: value == 6)",
        run=lambda: arrays.find_last_index([4, 6, 8, 10], lambda value: value == 6),
        expected=1,
    ),
    Koan(
        name="find_last_index",
        call="find_last_index([4, 6, 8, 6, 10], lambda value: value == 6)",
        run=lambda: arrays.find_last_index([4, 6, 8, 6, 10], lambda value: value == 6),
        expected=3,
    ),
    Koan(
        name="find_last_index",
        call="find_last_index([4, 6, 6, 8, 10], lambda value: value == 6, 1)",
        run=lambda: arrays.find_last_index([4, 6, 6, 8, 10], lambda value: value == 6, 1),
        expected=1,
    ),
    Koan(
        name="find_last_index",
        call="find_last_index([4, 6, 8, 10], lambda value: value == 4)",
        run=lambda: arrays.find_last_index([4, 6, 8, 10], lambda value: value == 4),
        expected=0,
    ),
    # nth
    Koan(name="nth", call="nth([1, 2, 3], 0)", run=lambda: arrays.nth([1, 2, 3], 0), expected=1),
    Koan(name="nth", call="nth([1, 2, 3], 1)", run=lambda: arrays.nth([1, 2, 3], 1), expected=2),
    Koan(name="nth", call="nth([1, 2, 3], 2)", run=lambda: arrays.nth([1, 2, 3], 2), expected=3),
    Koan(name="nth", call="nth([1, 2, 3])", run=lambda: arrays.nth([1, 2, 3]), expected=1),
    Koan(name="nth", call="nth([1, 2, 3], 3)", run=lambda: arrays.nth([1, 2, 3], 3), expected=None),
    # zip
    Koan(
        name="zip",
        call='zip(["a", "b"], [1, 2], [True, False])',
        run=lambda: arrays.zip(["a", "b"], [1, 2], [True, False]),
        expected=[("a", 1, True), ("b", 2, False)],
    ),
    Koan(
        name="zip",
        call='zip(["a", "b", "c"], [1])',
        run=lambda: arrays.zip(["a", "b", "c"], [1]),
        expected=[("a", 1)],
    ),
]


def koans_for(name: str) -> tp.List[Koan]:
    """Return the koans exercising the utility called ``name``."""
    return [koan for koan in ARRAY_KOANS if koan.name == name]
