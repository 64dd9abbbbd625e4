"""Tests for the binary Result and Option types."""

import pytest

import resultish as rs


def test_result_accessors() -> None:
    """Test Ok and Err expose their payloads."""
    assert rs.Ok(1).is_ok()
    assert rs.Err("bad").is_err()
    assert rs.Ok(1).unwrap() == 1
    assert rs.Err("bad").unwrap_err() == "bad"
    assert rs.Err("bad").unwrap_or(0) == 0


def test_result_unwrap_errors() -> None:
    """Test unwrapping the wrong side raises ResultUnwrapError."""
    with pytest.raises(rs.ResultUnwrapError, match="called `unwrap` on Err: 'bad'"):
        rs.Err("bad").unwrap()
    with pytest.raises(rs.ResultUnwrapError, match="called `unwrap_err` on Ok: 1"):
        rs.Ok(1).unwrap_err()
    with pytest.raises(rs.ResultUnwrapError, match="loading config: 'bad'"):
        rs.Err("bad").expect("loading config")


def test_result_maps() -> None:
    """Test map and map_err only touch their own side."""
    assert rs.Ok(2).map(lambda x: x + 1) == rs.Ok(3)
    assert rs.Err("bad").map(lambda x: x + 1) == rs.Err("bad")
    assert rs.Err("bad").map_err(len) == rs.Err(3)
    assert rs.Ok(2).map_err(len) == rs.Ok(2)


def test_result_to_option() -> None:
    """Test ok and err project a Result onto an Option."""
    assert rs.Ok(2).ok() == rs.Some(2)
    assert rs.Ok(2).err() == rs.NONE
    assert rs.Err("bad").ok() == rs.NONE
    assert rs.Err("bad").err() == rs.Some("bad")


def test_option_accessors() -> None:
    """Test Some and NONE behave as optional values."""
    assert rs.Some(1).is_some()
    assert rs.NONE.is_none()
    assert rs.Some(1).unwrap_or(0) == 1
    assert rs.NONE.unwrap_or(0) == 0
    assert rs.Some(2).map(str) == rs.Some("2")
    assert rs.NONE.map(str) == rs.NONE
    assert repr(rs.NONE) == "NONE"


def test_option_unwrap_errors() -> None:
    """Test unwrapping NONE raises OptionUnwrapError."""
    with pytest.raises(rs.OptionUnwrapError, match="called `unwrap` on `NONE`"):
        rs.NONE.unwrap()
    with pytest.raises(rs.OptionUnwrapError, match="row count"):
        rs.NONE.expect("row count")


def test_unwrap_errors_are_runtime_errors() -> None:
    """Test both unwrap errors can be caught as RuntimeError."""
    assert issubclass(rs.ResultUnwrapError, RuntimeError)
    assert issubclass(rs.OptionUnwrapError, RuntimeError)
