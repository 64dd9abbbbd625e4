from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Self, final

from .._core import Pipeable, deprecated
from ._option import NONE, Option, Some
from ._refs import MutRef
from ._result import Err, Ok, Result


class Outcome[T, E](Pipeable):
    """A result that can be a success, a failure, or both at once.

    Exactly one of three variants is ever built:

    - `Success(value)`: only a success value.
    - `Failure(error)`: only an error value.
    - `Partial(value, error)`: a usable value produced alongside an error,
      e.g. a parse that recovered from a malformed record.

    An `Outcome` collapses into a binary `Result` under one of two policies:
    `resolve_lenient` keeps the value of a `Partial`, `resolve_strict` keeps its error.

    Every method returns a new object and leaves `self` untouched, except writes made through
    the `MutRef` handles of `as_mut`.

    Outcomes compare structurally. Across variants, `Success < Partial < Failure`;
    within a variant, payloads are compared in field order.

    Example:
    ```python
    >>> import resultish as rs
    >>> def parse_port(raw: str) -> rs.Outcome[int, str]:
    ...     port = int(raw)
    ...     if port > 65535:
    ...         return rs.Partial(65535, f"port {port} clamped")
    ...     return rs.Success(port)
    >>> parse_port("8080").resolve_strict()
    Ok(value=8080)
    >>> parse_port("70000").resolve_lenient()
    Ok(value=65535)
    >>> parse_port("70000").resolve_strict()
    Err(error='port 70000 clamped')

    ```
    """

    __slots__ = ()

    def __new__(cls, *args: object, **kwargs: object) -> Self:
        if cls is Outcome:
            msg = "Outcome cannot be instantiated, build a Success, Failure or Partial"
            raise TypeError(msg)
        return super().__new__(cls)

    @staticmethod
    def from_result(result: Result[T, E]) -> Outcome[T, E]:
        """
        Build an outcome from a binary `Result`.

        `Ok(value)` becomes `Success(value)` and `Err(error)` becomes `Failure(error)`.

        Args:
            result: The result to convert.

        Returns:
            Outcome[T, E]: The equivalent outcome, never a `Partial`.

        Raises:
            TypeError: If `result` is neither an `Ok` nor an `Err`.

        Example:
            ```python
            >>> import resultish as rs
            >>> rs.Outcome.from_result(rs.Ok(3))
            Success(value=3)
            >>> rs.Outcome.from_result(rs.Err("bad"))
            Failure(error='bad')

            ```
        """
        match result:
            case Ok(value):
                return Success(value)
            case Err(error):
                return Failure(error)
            case _:
                msg = f"expected an Ok or an Err, got {type(result).__name__}"
                raise TypeError(msg)

    @staticmethod
    def from_parts(value: Option[T], error: Option[E]) -> Option[Outcome[T, E]]:
        """
        Rebuild an outcome from the optional parts returned by `to_tuple`.

        Args:
            value: The success value, if any.
            error: The error value, if any.

        Returns:
            Option[Outcome[T, E]]: The outcome holding whichever parts are present,
            or `NONE` when both are missing.

        Example:
            ```python
            >>> import resultish as rs
            >>> rs.Outcome.from_parts(rs.Some(3), rs.Some("bad"))
            Some(value=Partial(value=3, error='bad'))
            >>> rs.Outcome.from_parts(rs.NONE, rs.Some("bad"))
            Some(value=Failure(error='bad'))
            >>> rs.Outcome.from_parts(rs.NONE, rs.NONE)
            NONE

            ```
        """
        match (value, error):
            case (Some(v), Some(e)):
                return Some(Partial(v, e))
            case (Some(v), _):
                return Some(Success(v))
            case (_, Some(e)):
                return Some(Failure(e))
            case _:
                return NONE

    def has_success(self) -> bool:
        """
        Returns `True` if a success value is present (`Success` or `Partial`).

        Example:
            ```python
            >>> import resultish as rs
            >>> rs.Success(3).has_success()
            True
            >>> rs.Failure("bad").has_success()
            False
            >>> rs.Partial(3, "bad").has_success()
            True

            ```
        """
        match self:
            case Success() | Partial():
                return True
            case _:
                return False

    def has_failure(self) -> bool:
        """
        Returns `True` if an error value is present (`Failure` or `Partial`).

        Example:
            ```python
            >>> import resultish as rs
            >>> rs.Success(3).has_failure()
            False
            >>> rs.Failure("bad").has_failure()
            True
            >>> rs.Partial(3, "bad").has_failure()
            True

            ```
        """
        match self:
            case Failure() | Partial():
                return True
            case _:
                return False

    def as_ref(self) -> Outcome[T, E]:
        """
        Returns a view of `self` with the same variant and the same payload objects.

        Nothing is copied: mutating a mutable payload through the view is visible
        through `self`, and consuming the view leaves `self` intact.

        Example:
            ```python
            >>> import resultish as rs
            >>> warnings = ["row 3 skipped"]
            >>> outcome = rs.Partial(10, warnings)
            >>> outcome.as_ref().resolve_strict_failure().unwrap().append("row 7 skipped")
            >>> outcome
            Partial(value=10, error=['row 3 skipped', 'row 7 skipped'])

            ```
        """
        match self:
            case Success(value):
                return Success(value)
            case Failure(error):
                return Failure(error)
            case Partial(value, error):
                return Partial(value, error)
            case _:
                raise RuntimeError("unreachable")

    def as_mut(self) -> Outcome[MutRef[T], MutRef[E]]:
        """
        Returns a view of `self` whose payloads are `MutRef` handles into `self`.

        The variant shape is preserved. Setting a handle replaces the payload in `self`.

        Example:
            ```python
            >>> import resultish as rs
            >>> outcome = rs.Success(3)
            >>> view = outcome.as_mut()
            >>> view
            Success(value=MutRef(3))
            >>> view.resolve_lenient_success().unwrap().set(4)
            >>> outcome
            Success(value=4)

            ```
        """
        match self:
            case Success():
                return Success(MutRef(self, "value"))
            case Failure():
                return Failure(MutRef(self, "error"))
            case Partial():
                return Partial(MutRef(self, "value"), MutRef(self, "error"))
            case _:
                raise RuntimeError("unreachable")

    def to_tuple(self) -> tuple[Option[T], Option[E]]:
        """
        Splits the outcome into its optional success and error values.

        The decomposition is lossless, see `Outcome.from_parts` for the inverse.

        Returns:
            tuple[Option[T], Option[E]]: The success value and the error value.

        Example:
            ```python
            >>> import resultish as rs
            >>> rs.Success(3).to_tuple()
            (Some(value=3), NONE)
            >>> rs.Failure("bad").to_tuple()
            (NONE, Some(value='bad'))
            >>> rs.Partial(3, "bad").to_tuple()
            (Some(value=3), Some(value='bad'))

            ```
        """
        match self:
            case Success(value):
                return (Some(value), NONE)
            case Failure(error):
                return (NONE, Some(error))
            case Partial(value, error):
                return (Some(value), Some(error))
            case _:
                raise RuntimeError("unreachable")

    def resolve_lenient(self) -> Result[T, E]:
        """
        Collapses to a `Result`, favouring success.

        A `Partial` becomes `Ok` and its error is discarded.

        Example:
            ```python
            >>> import resultish as rs
            >>> rs.Success(3).resolve_lenient()
            Ok(value=3)
            >>> rs.Failure("bad").resolve_lenient()
            Err(error='bad')
            >>> rs.Partial(3, "bad").resolve_lenient()
            Ok(value=3)

            ```
        """
        match self:
            case Success(value) | Partial(value, _):
                return Ok(value)
            case Failure(error):
                return Err(error)
            case _:
                raise RuntimeError("unreachable")

    def resolve_lenient_success(self) -> Option[T]:
        """
        Success value of `resolve_lenient`, if it would be `Ok`.

        Example:
            ```python
            >>> import resultish as rs
            >>> rs.Partial(3, "bad").resolve_lenient_success()
            Some(value=3)
            >>> rs.Failure("bad").resolve_lenient_success()
            NONE

            ```
        """
        match self:
            case Success(value) | Partial(value, _):
                return Some(value)
            case _:
                return NONE

    def resolve_lenient_failure(self) -> Option[E]:
        """
        Error value of `resolve_lenient`, if it would be `Err`.

        Only a `Failure` yields an error here.

        Example:
            ```python
            >>> import resultish as rs
            >>> rs.Failure("bad").resolve_lenient_failure()
            Some(value='bad')
            >>> rs.Partial(3, "bad").resolve_lenient_failure()
            NONE

            ```
        """
        match self:
            case Failure(error):
                return Some(error)
            case _:
                return NONE

    def resolve_strict(self) -> Result[T, E]:
        """
        Collapses to a `Result`, favouring failure.

        A `Partial` becomes `Err` and its success value is discarded.

        Example:
            ```python
            >>> import resultish as rs
            >>> rs.Success(3).resolve_strict()
            Ok(value=3)
            >>> rs.Failure("bad").resolve_strict()
            Err(error='bad')
            >>> rs.Partial(3, "bad").resolve_strict()
            Err(error='bad')

            ```
        """
        match self:
            case Success(value):
                return Ok(value)
            case Failure(error) | Partial(_, error):
                return Err(error)
            case _:
                raise RuntimeError("unreachable")

    def resolve_strict_success(self) -> Option[T]:
        """
        Success value of `resolve_strict`, if it would be `Ok`.

        Only a `Success` yields a value here.

        Example:
            ```python
            >>> import resultish as rs
            >>> rs.Success(3).resolve_strict_success()
            Some(value=3)
            >>> rs.Partial(3, "bad").resolve_strict_success()
            NONE

            ```
        """
        match self:
            case Success(value):
                return Some(value)
            case _:
                return NONE

    def resolve_strict_failure(self) -> Option[E]:
        """
        Error value of `resolve_strict`, if it would be `Err`.

        Example:
            ```python
            >>> import resultish as rs
            >>> rs.Partial(3, "bad").resolve_strict_failure()
            Some(value='bad')
            >>> rs.Success(3).resolve_strict_failure()
            NONE

            ```
        """
        match self:
            case Failure(error) | Partial(_, error):
                return Some(error)
            case _:
                return NONE

    def map_success[U](self, f: Callable[[T], U]) -> Outcome[U, E]:
        """
        Applies `f` to the success value if there is one, keeping the variant and the error.

        Args:
            f: Callable to apply to the success value.

        Returns:
            Outcome[U, E]: A new outcome of the same variant.

        Example:
            ```python
            >>> import resultish as rs
            >>> rs.Partial(3, "bad").map_success(str)
            Partial(value='3', error='bad')
            >>> rs.Failure("bad").map_success(str)
            Failure(error='bad')

            ```
        """
        match self:
            case Success(value):
                return Success(f(value))
            case Failure(error):
                return Failure(error)
            case Partial(value, error):
                return Partial(f(value), error)
            case _:
                raise RuntimeError("unreachable")

    def map_failure[F](self, f: Callable[[E], F]) -> Outcome[T, F]:
        """
        Applies `f` to the error value if there is one, keeping the variant and the success value.

        Args:
            f: Callable to apply to the error value.

        Returns:
            Outcome[T, F]: A new outcome of the same variant.

        Example:
            ```python
            >>> import resultish as rs
            >>> rs.Partial(3, "bad").map_failure(str.upper)
            Partial(value=3, error='BAD')
            >>> rs.Success(3).map_failure(str.upper)
            Success(value=3)

            ```
        """
        match self:
            case Success(value):
                return Success(value)
            case Failure(error):
                return Failure(f(error))
            case Partial(value, error):
                return Partial(value, f(error))
            case _:
                raise RuntimeError("unreachable")

    @deprecated("has_success")
    def has_ok(self) -> bool:
        """Rust-style alias of `has_success`."""
        return self.has_success()

    @deprecated("has_failure")
    def has_err(self) -> bool:
        """Rust-style alias of `has_failure`."""
        return self.has_failure()

    @deprecated("resolve_lenient")
    def lenient(self) -> Result[T, E]:
        """Rust-style alias of `resolve_lenient`."""
        return self.resolve_lenient()

    @deprecated("resolve_strict")
    def strict(self) -> Result[T, E]:
        """Rust-style alias of `resolve_strict`."""
        return self.resolve_strict()

    @deprecated("map_success")
    def map[U](self, f: Callable[[T], U]) -> Outcome[U, E]:
        """Rust-style alias of `map_success`."""
        return self.map_success(f)

    @deprecated("map_failure")
    def map_err[F](self, f: Callable[[E], F]) -> Outcome[T, F]:
        """Rust-style alias of `map_failure`."""
        return self.map_failure(f)

    def _sort_key(self) -> tuple[int, tuple[object, ...]]:
        # Success < Partial < Failure, then payloads in field order
        match self:
            case Success(value):
                return (0, (value,))
            case Partial(value, error):
                return (1, (value, error))
            case Failure(error):
                return (2, (error,))
            case _:
                raise RuntimeError("unreachable")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return self._sort_key() >= other._sort_key()


@final
@dataclass(slots=True)
class Success[T, E](Outcome[T, E]):
    """Outcome variant holding only a success value."""

    value: T


@final
@dataclass(slots=True)
class Failure[T, E](Outcome[T, E]):
    """Outcome variant holding only an error value."""

    error: E


@final
@dataclass(slots=True)
class Partial[T, E](Outcome[T, E]):
    """Outcome variant holding a success value and an error value together."""

    value: T
    error: E
