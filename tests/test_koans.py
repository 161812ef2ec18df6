import logging

import numpy as np
import pytest

from arraykoans.koans import (
    ARRAY_KOANS,
    Koan,
    check_koan,
    check_koans,
    koans_for,
    summarize,
)


@pytest.fixture
def failing_koan():
    return Koan(name="head", call="head([1])", run=lambda: 2, expected=1)


@pytest.fixture
def raising_koan():
    def boom():
        raise IndexError("list index out of range")

    return Koan(name="nth", call="nth([], 0)", run=boom, expected=None)


def test_every_array_koan_passes():
    results = check_koans()
    failed = [result.label for result in results if not result.passed]
    assert failed == []
    assert len(results) == len(ARRAY_KOANS)


def test_catalog_covers_every_utility():
    names = {koan.name for koan in ARRAY_KOANS}
    assert names == {
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
    }


def test_koans_for():
    koans = koans_for("zip")
    assert koans
    assert all(koan.name == "zip" for koan in koans)
    assert koans_for("flatten") == []


def test_check_koan_failure(failing_koan):
    result = check_koan(failing_koan)
    assert not result.passed
    assert result.actual == 2
    assert result.error is None
    assert result.label == "head: head([1])"


def test_check_koan_records_exception(raising_koan):
    result = check_koan(raising_koan)
    assert not result.passed
    assert result.actual is None
    assert result.error == "IndexError: list index out of range"


def test_check_koans_keeps_order(failing_koan, raising_koan):
    koans = [ARRAY_KOANS[0], failing_koan, raising_koan]
    results = check_koans(koans)
    assert [result.koan for result in results] == koans
    assert summarize(results) == {"total": 3, "passed": 1, "failed": 2}


def test_check_koans_with_progress(failing_koan):
    results = check_koans([failing_koan, ARRAY_KOANS[0]], show_progress=True)
    assert [result.passed for result in results] == [False, True]


def test_check_koans_logs_summary(monkeypatch, failing_koan):
    messages = []
    logger = logging.getLogger("arraykoans")
    monkeypatch.setattr(logger, "info", lambda msg, *args, **kwargs: messages.append(msg))

    check_koans([failing_koan])

    assert messages == ["Checked 1 koans: 0 passed, 1 failed"]


def test_summarize_empty():
    assert summarize([]) == {"total": 0, "passed": 0, "failed": 0}


def test_koan_requires_callable():
    with pytest.raises(ValueError):
        Koan(name="head", call="head([])", run="not callable", expected=None)


def test_check_koan_ambiguous_comparison_fails():
    actual = np.array([1, 2])
    koan = Koan(name="chunk", call="chunk([1, 2])", run=lambda: actual, expected=[1, 2])

    result = check_koan(koan)

    assert not result.passed
    assert result.actual is actual
    assert result.error.startswith("ValueError:")
