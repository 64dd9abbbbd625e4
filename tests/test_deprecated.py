"""Tests for the deprecated Rust-style aliases of Outcome."""

from collections.abc import Callable

import pytest

import resultish as rs

ALIASES: list[tuple[str, Callable[[rs.Outcome[int, str]], object]]] = [
    ("has_ok", rs.Outcome.has_success),
    ("has_err", rs.Outcome.has_failure),
    ("lenient", rs.Outcome.resolve_lenient),
    ("strict", rs.Outcome.resolve_strict),
]


@pytest.mark.parametrize(("name", "replacement"), ALIASES)
@pytest.mark.parametrize(
    "outcome", [rs.Success(3), rs.Failure("bad"), rs.Partial(3, "bad")], ids=repr
)
def test_alias_matches_replacement(
    name: str,
    replacement: Callable[[rs.Outcome[int, str]], object],
    outcome: rs.Outcome[int, str],
) -> None:
    """Test each alias warns and returns what its replacement returns."""
    with pytest.warns(DeprecationWarning, match=f"`{name}` is deprecated"):
        got = getattr(outcome, name)()
    assert got == replacement(outcome)


def test_map_aliases() -> None:
    """Test map and map_err forward to map_success and map_failure."""
    outcome = rs.Partial(3, "bad")
    with pytest.warns(DeprecationWarning, match="use `map_success` instead"):
        assert outcome.map(str) == rs.Partial("3", "bad")
    with pytest.warns(DeprecationWarning, match="use `map_failure` instead"):
        assert outcome.map_err(len) == rs.Partial(3, 3)


@pytest.mark.parametrize(
    ("name", "replacement"),
    [
        ("has_ok", "has_success"),
        ("has_err", "has_failure"),
        ("lenient", "resolve_lenient"),
        ("strict", "resolve_strict"),
        ("map", "map_success"),
        ("map_err", "map_failure"),
    ],
)
def test_alias_docstring_names_replacement(name: str, replacement: str) -> None:
    """Test each alias documents the method it stands for."""
    doc = getattr(rs.Outcome, name).__doc__
    assert doc is not None
    assert f"`{replacement}`" in doc
