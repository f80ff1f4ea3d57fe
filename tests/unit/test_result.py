r"""Unit tests for Ok, Err and catching."""

from __future__ import annotations

import dataclasses

import pytest

from aretry import Err, Ok, catching
from aretry.exceptions import UnwrapError

########################
#     Tests for Ok     #
########################


def test_ok_accessors() -> None:
    result = Ok(5)
    assert result.value == 5
    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == 5
    assert result.unwrap_or(0) == 5


def test_ok_equality() -> None:
    assert Ok(1) == Ok(1)
    assert Ok(1) != Ok(2)
    assert Ok(1) != Err(1)


def test_ok_repr() -> None:
    assert repr(Ok("x")) == "Ok(value='x')"


def test_ok_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        Ok(1).value = 2  # type: ignore[misc]


#########################
#     Tests for Err     #
#########################


def test_err_accessors() -> None:
    result = Err("bad")
    assert result.error == "bad"
    assert result.is_err()
    assert not result.is_ok()
    assert result.unwrap_or("default") == "default"


def test_err_unwrap_raises_exception_error() -> None:
    error = ConnectionError("refused")
    with pytest.raises(ConnectionError, match=r"refused") as exc_info:
        Err(error).unwrap()
    assert exc_info.value is error


def test_err_unwrap_non_exception() -> None:
    with pytest.raises(UnwrapError, match=r"called unwrap\(\) on Err\('bad'\)") as exc_info:
        Err("bad").unwrap()
    assert exc_info.value.error == "bad"


def test_err_equality() -> None:
    assert Err("a") == Err("a")
    assert Err("a") != Err("b")


##############################
#     Tests for catching     #
##############################


def parse(text: str) -> int:
    """Parse an integer."""
    return int(text)


def test_catching_success() -> None:
    assert catching(parse, ValueError)("12") == Ok(12)


def test_catching_listed_exception() -> None:
    result = catching(parse, ValueError)("twelve")
    assert result.is_err()
    assert isinstance(result.error, ValueError)


def test_catching_other_exception_propagates() -> None:
    with pytest.raises(TypeError):
        catching(parse, ValueError)(None)


def test_catching_defaults_to_exception() -> None:
    assert catching(parse)(None).is_err()


def test_catching_does_not_catch_base_exceptions_by_default() -> None:
    def interrupt() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        catching(interrupt)()


def test_catching_preserves_metadata() -> None:
    wrapped = catching(parse, ValueError)
    assert wrapped.__name__ == "parse"
    assert wrapped.__doc__ == "Parse an integer."


def test_catching_forwards_keyword_arguments() -> None:
    def parse_base(text: str, *, base: int = 10) -> int:
        return int(text, base)

    assert catching(parse_base, ValueError)("ff", base=16) == Ok(255)
