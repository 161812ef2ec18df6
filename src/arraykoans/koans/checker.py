"""Evaluate koans and report which of them pass."""

import typing as tp

from rich.progress import Progress

from arraykoans.koans.catalog import ARRAY_KOANS
from arraykoans.koans.models import Koan, KoanResult
from arraykoans.logger.logger import logger

__all__ = ["check_koan", "check_koans", "summarize"]


def check_koan(koan: Koan) -> KoanResult:
    """Run a single koan and compare its value against the expected one.

    An exception raised by the koan, or by comparing its value, does not
    propagate. It marks the koan as failed and its message is kept on the
    result.
    """
    actual = None
    try:
        actual = koan.run()
        passed = bool(actual == koan.expected)
    except Exception as exc:  # noqa: BLE001 - a broken exercise is a failed koan
        logger.debug(f"Koan '{koan.call}' raised", exc_info=True)
        return KoanResult(
            koan=koan,
            passed=False,
            actual=actual,
            error=f"{type(exc).__name__}: {exc}",
        )

    return KoanResult(koan=koan, passed=passed, actual=actual)


def check_koans(
    koans: tp.Optional[tp.Sequence[Koan]] = None,
    show_progress: bool = False,
) -> tp.List[KoanResult]:
    """Run koans in order.

    Args:
        koans: Koans to check. Defaults to the full array catalog.
        show_progress: Render a rich progress bar while checking.

    Returns:
        One result per koan, in the same order.
    """
    koans = ARRAY_KOANS if koans is None else koans
    results: tp.List[KoanResult] = []

    if show_progress:
        with Progress() as progress:
            task = progress.add_task("[cyan]Checking koans...", total=len(koans))
            for koan in koans:
                results.append(check_koan(koan))
                progress.advance(task)
    else:
        results = [check_koan(koan) for koan in koans]

    counts = summarize(results)
    logger.info(
        f"Checked {counts['total']} koans: "
        f"{counts['passed']} passed, {counts['failed']} failed"
    )
    return results


def summarize(results: tp.Sequence[KoanResult]) -> tp.Dict[str, int]:
    """Count passed and failed results."""
    passed = sum(1 for result in results if result.passed)
    return {"total": len(results), "passed": passed, "failed": len(results) - passed}
