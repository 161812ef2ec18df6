"""Core types and settings shared across arraykoans."""

from arraykoans.core.config import Settings
from arraykoans.core.types import (
    ArrayLike,
    ChunkSize,
    Count,
    DropWhilePredicate,
    FindIndexPredicate,
    Predicate,
)

__all__ = [
    "Settings",
    "ArrayLike",
    "ChunkSize",
    "Count",
    "Predicate",
    "DropWhilePredicate",
    "FindIndexPredicate",
]
