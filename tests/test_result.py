import pytest

from argdeck.exceptions import ConfigurationError
from argdeck.result import Err, Ok


def test_ok():
    result = Ok(3)
    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == 3
    assert result.unwrap_or(5) == 3


def test_err():
    error = ConfigurationError("bad")
    result = Err(error)
    assert result.is_err()
    assert not result.is_ok()
    assert result.unwrap_or(5) == 5
    with pytest.raises(ConfigurationError, match="bad"):
        result.unwrap()
