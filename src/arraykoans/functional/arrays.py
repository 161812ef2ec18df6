"""Array utilities in the spirit of Lodash / Underscore.

This module provides small, generic, side-effect-free helpers over ordered
sequences. Every function accepts any indexable sequence (``list``, ``tuple``,
``str``, ``range`` or a one-dimensional ``numpy.ndarray``) and every sequence
it returns is a brand new ``list``. Inputs are never mutated or retained.

Utilities:
    - **Slicing**: :func:`head`, :func:`last`, :func:`tail`, :func:`initial`,
      :func:`nth`
    - **Dropping**: :func:`drop`, :func:`drop_right`, :func:`drop_while`,
      :func:`drop_right_while`
    - **Searching**: :func:`find_index`, :func:`find_last_index`
    - **Reshaping**: :func:`chunk`, :func:`compact`, :func:`fill`, :func:`zip`

Absence:
    Asking for an element that does not exist never raises. Element accessors
    return ``None``, index searches return ``-1`` and sequence results come
    back empty. Only malformed integer arguments (a non-positive chunk size,
    a negative drop count) raise a :class:`pydantic.ValidationError`.

Examples:
    >>> from arraykoans.functional.arrays import chunk, drop_while, zip
    >>> chunk(["a", "b", "c", "d"], 2)
    [['a', 'b'], ['c', 'd']]
    >>> drop_while([1, 2, 3, 4, 5, 1], lambda value: value < 3)
    [3, 4, 5, 1]
    >>> zip(["a", "b"], [1, 2], [True, False])
    [('a', 1, True), ('b', 2, False)]
"""

import builtins
import typing as tp

import numpy as np

from arraykoans.core.types import (
    ArrayLike,
    DropWhilePredicate,
    FindIndexPredicate,
    T,
    as_list,
    validate_chunk_size,
    validate_count,
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


def chunk(array: ArrayLike[T], chunk_size: int = 1) -> tp.List[tp.List[T]]:
    """Split an array into groups of ``chunk_size`` elements.

    If the array can't be split evenly, the final chunk holds the remaining
    elements.

    Args:
        array: The sequence to split.
        chunk_size: Length of each group. Must be a positive integer.

    Returns:
        A list of chunks. An empty input gives an empty list.

    Raises:
        pydantic.ValidationError: If ``chunk_size`` is not a positive integer.

    Examples:
        >>> chunk(["a", "b", "c", "d"], 3)
        [['a', 'b', 'c'], ['d']]
        >>> chunk(["a", "b", "c"])
        [['a'], ['b'], ['c']]
    """
    chunk_size = validate_chunk_size(chunk_size)
    items = as_list(array)
    return [items[i : i + chunk_size] for i in range(0, len(items), chunk_size)]


def _is_nan(value: tp.Any) -> bool:
    return isinstance(value, (float, np.floating)) and bool(np.isnan(value))


def _is_truthy(value: tp.Any) -> bool:
    # numpy arrays have no single truth value; treat only empty ones as falsy
    if isinstance(value, np.ndarray):
        return value.size > 0
    return bool(value) and not _is_nan(value)


def compact(array: ArrayLike[T]) -> tp.List[T]:
    """Remove falsy values from an array.

    Falsy follows Python truthiness (``0``, ``""``, ``None``, ``False``, empty
    containers) extended with not-a-number, which Python itself treats as
    truthy. A numpy array element is falsy only when it is empty.

    Examples:
        >>> compact([1, None, 2, float("nan"), 0, 3])
        [1, 2, 3]
    """
    return [value for value in as_list(array) if _is_truthy(value)]


def head(array: ArrayLike[T]) -> tp.Optional[T]:
    """Return the first element, or ``None`` for an empty array."""
    return nth(array, 0)


def tail(array: ArrayLike[T]) -> tp.List[T]:
    """Return every element except the first."""
    return as_list(array)[1:]


def initial(array: ArrayLike[T]) -> tp.List[T]:
    """Return every element except the last."""
    return as_list(array)[:-1]


def last(array: ArrayLike[T]) -> tp.Optional[T]:
    """Return the last element, or ``None`` for an empty array."""
    return nth(array, -1)


def drop(array: ArrayLike[T], n: int = 1) -> tp.List[T]:
    """Return the array with ``n`` elements removed from the beginning.

    Args:
        array: The sequence to drop from.
        n: How many leading elements to remove. ``0`` keeps every element and
            a count larger than the array yields an empty list.

    Raises:
        pydantic.ValidationError: If ``n`` is negative.

    Examples:
        >>> drop([1, 2, 3, 4], 2)
        [3, 4]
        >>> drop([1, 2, 3, 4])
        [2, 3, 4]
    """
    n = validate_count(n)
    items = as_list(array)
    return items[min(n, len(items)) :]


def drop_right(array: ArrayLike[T], n: int = 1) -> tp.List[T]:
    """Return the array with ``n`` elements removed from the end.

    Examples:
        >>> drop_right([1, 2, 3, 4], 2)
        [1, 2]
        >>> drop_right([1, 2, 3, 4])
        [1, 2, 3]
    """
    n = validate_count(n)
    items = as_list(array)
    return items[: max(len(items) - n, 0)]


def drop_while(array: ArrayLike[T], predicate: DropWhilePredicate[T]) -> tp.List[T]:
    """Remove leading elements while ``predicate`` holds.

    The predicate receives one element at a time and scanning stops at the
    first element it rejects. It is never called once the array is exhausted.

    Examples:
        >>> drop_while([1, 2, 3, 4, 5, 1], lambda value: value < 3)
        [3, 4, 5, 1]
    """
    items = as_list(array)
    start = 0
    while start < len(items) and predicate(items[start]):
        start += 1
    return items[start:]


def drop_right_while(
    array: ArrayLike[T], predicate: DropWhilePredicate[T]
) -> tp.List[T]:
    """Remove trailing elements while ``predicate`` holds.

    Examples:
        >>> drop_right_while([5, 4, 3, 2, 1], lambda value: value < 3)
        [5, 4, 3]
    """
    items = as_list(array)
    end = len(items)
    while end > 0 and predicate(items[end - 1]):
        end -= 1
    return items[:end]


def fill(
    array: ArrayLike[tp.Any],
    fill_value: T,
    start: int = 0,
    end: tp.Optional[int] = None,
) -> tp.List[tp.Any]:
    """Return a copy of ``array`` with positions ``[start, end)`` set to ``fill_value``.

    The caller's array is left untouched. Bounds are compared against each
    position as given, so a negative ``start`` simply fills from the beginning
    and an ``end`` past the array fills to the end.

    Args:
        array: The source sequence.
        fill_value: Value written into the range.
        start: First position to fill (inclusive).
        end: Position to stop at (exclusive). ``None`` means the array length.

    Examples:
        >>> fill([4, 6, 8, 10], "* ", 1, 3)
        [4, '* ', '* ', 10]
    """
    items = as_list(array)
    end = len(items) if end is None else end
    return [
        fill_value if start <= index < end else value
        for index, value in enumerate(items)
    ]


def find_index(
    array: ArrayLike[T], predicate: FindIndexPredicate[T], start: int = 0
) -> int:
    """Return the first index at or after ``start`` whose element satisfies ``predicate``.

    Args:
        array: The sequence to search.
        predicate: Called with each candidate element.
        start: Index to start searching from. Negative values start at 0.

    Returns:
        The matching index, or ``-1`` when nothing matches.

    Examples:
        >>> find_index([4, 6, 8, 10], lambda value: False)
        -1
        >>> find_index([4, 6, 6, 8, 10], lambda value: value == 6, 2)
        2
    """
    items = as_list(array)
    for index in range(max(start, 0), len(items)):
        if predicate(items[index]):
            return index
    return -1


def find_last_index(
    array: ArrayLike[T],
    predicate: FindIndexPredicate[T],
    start: tp.Optional[int] = None,
) -> int:
    """Return the last index at or before ``start`` whose element satisfies ``predicate``.

    Scanning runs backwards from ``start`` down to and including index 0.

    Args:
        array: The sequence to search.
        predicate: Called with each candidate element.
        start: Index to start searching from, the last index by default.
            Values past the end are clamped to the last index.

    Returns:
        The matching index, or ``-1`` when nothing matches.

    Examples:
        >>> find_last_index([4, 6, 8, 6, 10], lambda value: value == 6)
        3
        >>> find_last_index([4, 6, 6, 8, 10], lambda value: value == 6, 1)
        1
    """
    items = as_list(array)
    start = len(items) - 1 if start is None else min(start, len(items) - 1)
    for index in range(start, -1, -1):
        if predicate(items[index]):
            return index
    return -1


def nth(array: ArrayLike[T], index: int = 0) -> tp.Optional[T]:
    """Return the element at ``index``, or ``None`` when it is out of range.

    Negative indices count back from the end, ``-1`` being the last element.

    Examples:
        >>> nth([1, 2, 3], 1)
        2
        >>> nth([1, 2, 3], 3) is None
        True
    """
    items = as_list(array)
    if -len(items) <= index < len(items):
        return items[index]
    return None


def zip(*arrays: ArrayLike[tp.Any]) -> tp.List[tp.Tuple[tp.Any, ...]]:
    """Group the elements of several arrays by position.

    Tuple ``i`` holds the ``i``-th element of every input. The result is as
    long as the shortest input, so no tuple has a missing slot.

    Examples:
        >>> zip(["a", "b"], [1, 2], [True, False])
        [('a', 1, True), ('b', 2, False)]
        >>> zip([1, 2, 3], ["x"])
        [(1, 'x')]
    """
    return list(builtins.zip(*(as_list(array) for array in arrays)))
