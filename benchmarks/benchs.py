"""Benchmarks for resultish - outcome operations over mixed variant lists."""

import resultish as rs

from ._registery import Outcomes, bench


class Presence:
    """Benchmark the presence checks."""

    @bench()
    @staticmethod
    def has_success(data: Outcomes) -> object:
        """Count outcomes carrying a success value."""
        return sum(o.has_success() for o in data)

    @bench()
    @staticmethod
    def has_failure(data: Outcomes) -> object:
        """Count outcomes carrying an error value."""
        return sum(o.has_failure() for o in data)


class Resolve:
    """Benchmark the two resolution policies."""

    @bench()
    @staticmethod
    def lenient(data: Outcomes) -> object:
        """Resolve every outcome leniently."""
        return [o.resolve_lenient() for o in data]

    @bench()
    @staticmethod
    def strict(data: Outcomes) -> object:
        """Resolve every outcome strictly."""
        return [o.resolve_strict() for o in data]

    @bench()
    @staticmethod
    def strict_failure(data: Outcomes) -> object:
        """Collect the errors a strict resolution would report."""
        return [o.resolve_strict_failure() for o in data]


class Convert:
    """Benchmark conversions and mapping."""

    @bench()
    @staticmethod
    def to_tuple(data: Outcomes) -> object:
        """Split every outcome into its optional parts."""
        return [o.to_tuple() for o in data]

    @bench(
        gen=lambda size: [
            rs.Ok(i) if i % 2 else rs.Err(str(i)) for i in range(size)
        ]
    )
    @staticmethod
    def from_result(data: list[rs.Result[int, str]]) -> object:
        """Lift binary results into outcomes."""
        return [rs.Outcome.from_result(r) for r in data]

    @bench()
    @staticmethod
    def map_success(data: Outcomes) -> object:
        """Map the success payload of every outcome."""
        return [o.map_success(lambda x: x + 1) for o in data]

    @bench()
    @staticmethod
    def as_mut(data: Outcomes) -> object:
        """Build a mutable view of every outcome."""
        return [o.as_mut() for o in data]


class Order:
    """Benchmark the fixed variant ordering."""

    @bench()
    @staticmethod
    def sort(data: Outcomes) -> object:
        """Sort a mixed list of outcomes."""
        return sorted(data)
