"""Reusable type definitions for the arraykoans utilities.

This module provides type aliases and constrained types that can be used across
different parts of the package for type safety and validation.

Type Aliases:
    ArrayLike: Any ordered, indexable input sequence (including 1-D numpy arrays).
    Predicate: A callable from one element to a truth value.
    DropWhilePredicate: Predicate consumed by ``drop_while``/``drop_right_while``.
    FindIndexPredicate: Predicate consumed by ``find_index``/``find_last_index``.
    ChunkSize: A strictly positive integer.
    Count: A non-negative integer.

Predicates are plain callables. Any function, lambda or object with
``__call__`` taking a single element satisfies them.
"""

from typing import Annotated, Callable, List, Sequence, TypeVar, Union

import annotated_types as at
import numpy as np
from pydantic import Strict, TypeAdapter

__all__ = [
    "T",
    "ArrayLike",
    "Predicate",
    "DropWhilePredicate",
    "FindIndexPredicate",
    "ChunkSize",
    "Count",
    "validate_chunk_size",
    "validate_count",
    "as_list",
]

T = TypeVar("T")

ArrayLike = Union[Sequence[T], np.ndarray]

Predicate = Callable[[T], bool]
DropWhilePredicate = Predicate
FindIndexPredicate = Predicate

# Group length for chunk; zero or negative sizes have no meaning
ChunkSize = Annotated[int, Strict(), at.Gt(0)]

# Number of elements to drop
Count = Annotated[int, Strict(), at.Ge(0)]

_chunk_size_adapter = TypeAdapter(ChunkSize)
_count_adapter = TypeAdapter(Count)


def _unwrap_numpy_int(value):
    # numpy integers are not int subclasses, strict validation would reject them
    if isinstance(value, np.integer):
        return value.item()
    return value


def validate_chunk_size(value: int) -> int:
    """Validate a chunk size.

    Args:
        value: Candidate chunk size.
    Returns:
        int: The validated size.
    Raises:
        pydantic.ValidationError: If the value is not a positive integer. Strings, floats
            and booleans are rejected.
    """
    return _chunk_size_adapter.validate_python(_unwrap_numpy_int(value))


def validate_count(value: int) -> int:
    """Validate a drop count.

    Args:
        value: Candidate count.
    Returns:
        int: The validated count.
    Raises:
        pydantic.ValidationError: If the value is not a non-negative integer. Strings,
            floats and booleans are rejected.
    """
    return _count_adapter.validate_python(_unwrap_numpy_int(value))


def as_list(array: ArrayLike) -> List:
    """Return a fresh list holding the elements of ``array``.

    numpy arrays are converted with ``tolist`` so their elements come back as
    plain Python scalars.
    """
    if isinstance(array, np.ndarray):
        return array.tolist()
    return list(array)
