"""Command line entry point: ``python -m arraykoans``."""

import sys

from arraykoans.core.config import Settings
from arraykoans.koans import check_koans, summarize
from arraykoans.logger.logger import setup_logger


def main() -> int:
    """Check every koan and return a process exit code."""
    settings = Settings.load()
    logger = setup_logger(level=settings.LOG_LEVEL, format_string=settings.LOG_FORMAT)

    results = check_koans(show_progress=settings.SHOW_PROGRESS)
    for result in results:
        if result.passed:
            continue
        if result.error is not None:
            logger.warning(f"{result.label} raised {result.error}")
        else:
            logger.warning(
                f"{result.label} returned {result.actual!r}, "
                f"expected {result.koan.expected!r}"
            )

    counts = summarize(results)
    if counts["failed"]:
        logger.warning(f"{counts['failed']} of {counts['total']} koans still to go")
        return 1

    logger.info("All koans pass")
    return 0


if __name__ == "__main__":
    sys.exit(main())
