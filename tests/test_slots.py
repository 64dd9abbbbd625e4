"""Tests for slot usage in resultish classes."""

import resultish as rs


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(rs.Success[int, str](42))
    assert _check_slots(rs.Failure[int, str]("bad"))
    assert _check_slots(rs.Partial(42, "bad"))
    assert _check_slots(rs.Success(42).as_mut().resolve_lenient().unwrap())
    assert _check_slots(rs.Some(42))
    assert _check_slots(rs.NoneOption())
    assert _check_slots(rs.Err[int, object](42))
    assert _check_slots(rs.Ok[int, object](42))
