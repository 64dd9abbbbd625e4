"""Tests for presence checks, resolution policies and conversions of Outcome."""

import pytest

import resultish as rs

VARIANTS: list[rs.Outcome[int, str]] = [
    rs.Success(3),
    rs.Failure("bad"),
    rs.Partial(3, "bad"),
]


def test_success_presence() -> None:
    """Test Success only reports a success value."""
    outcome = rs.Success(3)
    assert outcome.has_success() is True
    assert outcome.has_failure() is False


def test_failure_presence() -> None:
    """Test Failure only reports an error value."""
    outcome = rs.Failure("bad")
    assert outcome.has_success() is False
    assert outcome.has_failure() is True


def test_partial_presence() -> None:
    """Test Partial reports both values."""
    outcome = rs.Partial(3, "bad")
    assert outcome.has_success() is True
    assert outcome.has_failure() is True


def test_success_scenario() -> None:
    """Test every accessor on a plain success."""
    outcome = rs.Success(3)
    assert outcome.resolve_lenient() == rs.Ok(3)
    assert outcome.resolve_strict() == rs.Ok(3)
    assert outcome.to_tuple() == (rs.Some(3), rs.NONE)
    assert outcome.resolve_lenient_success() == rs.Some(3)
    assert outcome.resolve_lenient_failure() == rs.NONE
    assert outcome.resolve_strict_success() == rs.Some(3)
    assert outcome.resolve_strict_failure() == rs.NONE


def test_failure_scenario() -> None:
    """Test every accessor on a plain failure."""
    outcome = rs.Failure("bad")
    assert outcome.resolve_lenient() == rs.Err("bad")
    assert outcome.resolve_strict() == rs.Err("bad")
    assert outcome.to_tuple() == (rs.NONE, rs.Some("bad"))
    assert outcome.resolve_lenient_success() == rs.NONE
    assert outcome.resolve_lenient_failure() == rs.Some("bad")
    assert outcome.resolve_strict_success() == rs.NONE
    assert outcome.resolve_strict_failure() == rs.Some("bad")


def test_partial_scenario() -> None:
    """Test the two policies disagree on a partial success."""
    outcome = rs.Partial(3, "bad")
    assert outcome.resolve_lenient() == rs.Ok(3)
    assert outcome.resolve_strict() == rs.Err("bad")
    assert outcome.to_tuple() == (rs.Some(3), rs.Some("bad"))
    assert outcome.resolve_lenient_success() == rs.Some(3)
    assert outcome.resolve_lenient_failure() == rs.NONE
    assert outcome.resolve_strict_success() == rs.NONE
    assert outcome.resolve_strict_failure() == rs.Some("bad")


@pytest.mark.parametrize("outcome", VARIANTS, ids=repr)
def test_option_accessors_match_resolution(outcome: rs.Outcome[int, str]) -> None:
    """Test the Option accessors agree with the Result each policy produces."""
    assert outcome.resolve_lenient_success() == outcome.resolve_lenient().ok()
    assert outcome.resolve_lenient_failure() == outcome.resolve_lenient().err()
    assert outcome.resolve_strict_success() == outcome.resolve_strict().ok()
    assert outcome.resolve_strict_failure() == outcome.resolve_strict().err()


def test_from_result_ok_resolves_to_ok() -> None:
    """Test an Ok converts to Success and resolves back to the same Ok."""
    outcome = rs.Outcome.from_result(rs.Ok(3))
    assert outcome == rs.Success(3)
    assert outcome.resolve_lenient() == rs.Ok(3)
    assert outcome.resolve_strict() == rs.Ok(3)


def test_from_result_err_resolves_to_err() -> None:
    """Test an Err converts to Failure and resolves back to the same Err."""
    outcome = rs.Outcome.from_result(rs.Err("bad"))
    assert outcome == rs.Failure("bad")
    assert outcome.resolve_lenient() == rs.Err("bad")
    assert outcome.resolve_strict() == rs.Err("bad")


@pytest.mark.parametrize("outcome", VARIANTS, ids=repr)
def test_from_parts_inverts_to_tuple(outcome: rs.Outcome[int, str]) -> None:
    """Test to_tuple loses nothing: from_parts rebuilds the same outcome."""
    assert rs.Outcome.from_parts(*outcome.to_tuple()) == rs.Some(outcome)


def test_from_parts_without_parts() -> None:
    """Test from_parts returns NONE when neither part is present."""
    assert rs.Outcome.from_parts(rs.NONE, rs.NONE).is_none()


def test_resolution_leaves_original_untouched() -> None:
    """Test consuming operations return new values without altering self."""
    outcome = rs.Partial([1], "bad")
    outcome.resolve_lenient().unwrap()
    outcome.map_success(len)
    outcome.map_failure(str.upper)
    assert outcome == rs.Partial([1], "bad")


def test_outcome_base_is_not_instantiable() -> None:
    """Test only the three variants can be built."""
    with pytest.raises(TypeError, match="Outcome cannot be instantiated"):
        rs.Outcome()


def test_into_and_inspect() -> None:
    """Test outcomes chain through into and inspect."""
    seen: list[rs.Outcome[int, str]] = []
    resolved = (
        rs.Partial(3, "bad")
        .inspect(seen.append)
        .into(rs.Outcome.resolve_strict)
    )
    assert seen == [rs.Partial(3, "bad")]
    assert resolved == rs.Err("bad")


def test_from_result_rejects_other_types() -> None:
    """Test from_result names the type it cannot convert."""
    with pytest.raises(TypeError, match="got Some"):
        rs.Outcome.from_result(rs.Some(3))  # type: ignore[arg-type]
