"""Data models describing koans and their outcomes."""

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field


class Koan(BaseModel):
    """One documented example of an array utility.

    Attributes:
        name: Name of the utility being exercised (e.g. ``"chunk"``).
        call: Human readable rendering of the call, shown in reports.
        run: Zero-argument callable performing the call.
        expected: Value the call must return for the koan to pass.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str = Field(min_length=1)
    call: str
    run: Callable[[], Any]
    expected: Any = None


class KoanResult(BaseModel):
    """Outcome of checking a single koan."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    koan: Koan
    passed: bool
    actual: Any = None
    error: Optional[str] = None

    @property
    def label(self) -> str:
        return f"{self.koan.name}: {self.koan.call}"
