import numpy as np
import pytest
from pydantic import ValidationError

from arraykoans.core.types import as_list, validate_chunk_size, validate_count


def test_validate_chunk_size():
    assert validate_chunk_size(1) == 1
    assert validate_chunk_size(3) == 3

    with pytest.raises(ValidationError, match="greater than 0"):
        validate_chunk_size(0)


def test_validate_chunk_size_rejects_fractional():
    with pytest.raises(ValidationError):
        validate_chunk_size(1.5)


def test_validate_count():
    assert validate_count(0) == 0
    assert validate_count(7) == 7

    with pytest.raises(ValidationError, match="greater than or equal to 0"):
        validate_count(-1)


def test_as_list_copies():
    source = [1, 2, 3]
    result = as_list(source)
    assert result == source
    assert result is not source


def test_as_list_converts_numpy_scalars():
    result = as_list(np.array([1, 2]))
    assert result == [1, 2]
    assert all(type(item) is int for item in result)


def test_as_list_accepts_strings_and_ranges():
    assert as_list("abc") == ["a", "b", "c"]
    assert as_list(range(3)) == [0, 1, 2]


def test_validators_reject_non_int_values():
    for value in ("2", True, 2.0):
        with pytest.raises(ValidationError):
            validate_chunk_size(value)
        with pytest.raises(ValidationError):
            validate_count(value)


def test_validators_accept_numpy_integers():
    result = validate_chunk_size(np.int64(2))
    assert result == 2
    assert type(result) is int
    assert validate_count(np.int32(0)) == 0
