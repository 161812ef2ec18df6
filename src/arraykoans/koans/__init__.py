"""Koans: documented utility examples that can be checked as pass/fail."""

from arraykoans.koans.catalog import ARRAY_KOANS, koans_for
from arraykoans.koans.checker import check_koan, check_koans, summarize
from arraykoans.koans.models import Koan, KoanResult

__all__ = [
    "ARRAY_KOANS",
    "Koan",
    "KoanResult",
    "check_koan",
    "check_koans",
    "koans_for",
    "summarize",
]
