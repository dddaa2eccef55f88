"""Tests for ghrelease.core.result."""

import pytest

from ghrelease.core.result import Err, Ok, Result


class TestOk:
    def test_value_access(self) -> None:
        assert Ok(42).value == 42

    def test_map_err_is_noop(self) -> None:
        result = Ok(2)
        assert result.map_err(lambda e: f"wrapped {e}") is result

    def test_is_frozen(self) -> None:
        result = Ok(1)
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(Ok("v1")) == "Ok('v1')"


class TestErr:
    def test_error_access(self) -> None:
        assert Err("boom").error == "boom"

    def test_map_err_transforms_error(self) -> None:
        assert Err("boom").map_err(lambda e: e.upper()) == Err("BOOM")

    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"


class TestMatching:
    def test_isinstance_narrowing(self) -> None:
        result: Result[int, str] = Ok(1)
        assert isinstance(result, Ok)
        assert not isinstance(result, Err)

    def test_pattern_matching(self) -> None:
        result: Result[int, str] = Err("nope")
        match result:
            case Ok(value):
                pytest.fail(f"unexpected value {value}")
            case Err(error):
                assert error == "nope"
