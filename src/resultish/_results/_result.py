from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Never, TypeIs, cast, final

from .._core import Pipeable
from ._option import NONE, Option, Some


class ResultUnwrapError(RuntimeError): ...


class Result[T, E](ABC, Pipeable):
    """The conventional binary result: `Ok(value)` or `Err(error)`.

    This is what an `Outcome` collapses to once a resolution policy has been chosen.
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """
        Returns `True` if the result is `Ok`.

        Example:
            ```python
            >>> from resultish import Ok, Err
            >>> Ok(1).is_ok()
            True
            >>> Err("bad").is_ok()
            False

            ```
        """
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """
        Returns `True` if the result is `Err`.

        Example:
            ```python
            >>> from resultish import Ok, Err
            >>> Ok(1).is_err()
            False
            >>> Err("bad").is_err()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the `Ok` value.

        Raises:
            ResultUnwrapError: If the result is `Err`.

        Example:
            ```python
            >>> from resultish import Ok, Err
            >>> Ok(3).unwrap()
            3
            >>> Err("bad").unwrap()
            Traceback (most recent call last):
                ...
            resultish._results._result.ResultUnwrapError: called `unwrap` on Err: 'bad'

            ```
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """
        Returns the `Err` value.

        Raises:
            ResultUnwrapError: If the result is `Ok`.

        Example:
            ```python
            >>> from resultish import Ok, Err
            >>> Err("bad").unwrap_err()
            'bad'
            >>> Ok(3).unwrap_err()
            Traceback (most recent call last):
                ...
            resultish._results._result.ResultUnwrapError: called `unwrap_err` on Ok: 3

            ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the `Ok` value, or raises with `msg` and the error if the result is `Err`.

        Args:
            msg: Context included in the exception message.

        Raises:
            ResultUnwrapError: If the result is `Err`.

        Example:
            ```python
            >>> from resultish import Ok, Err
            >>> Ok(3).expect("parsed header")
            3
            >>> Err("truncated").expect("parsed header")
            Traceback (most recent call last):
                ...
            resultish._results._result.ResultUnwrapError: parsed header: 'truncated'

            ```
        """
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()!r}")

    def unwrap_or(self, default: T) -> T:
        """
        Returns the `Ok` value, or `default` if the result is `Err`.

        Example:
            ```python
            >>> from resultish import Ok, Err
            >>> Ok(3).unwrap_or(0)
            3
            >>> Err("bad").unwrap_or(0)
            0

            ```
        """
        return self.unwrap() if self.is_ok() else default

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """
        Applies `f` to the `Ok` value, leaving `Err` untouched.

        Args:
            f: Callable to apply to the `Ok` value.

        Returns:
            Result[U, E]: `Ok(f(value))` if `Ok`, otherwise the same `Err`.

        Example:
            ```python
            >>> from resultish import Ok, Err
            >>> Ok(3).map(lambda x: x * 2)
            Ok(value=6)
            >>> Err("bad").map(lambda x: x * 2)
            Err(error='bad')

            ```
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """
        Applies `f` to the `Err` value, leaving `Ok` untouched.

        Args:
            f: Callable to apply to the `Err` value.

        Returns:
            Result[T, F]: `Err(f(error))` if `Err`, otherwise the same `Ok`.

        Example:
            ```python
            >>> from resultish import Ok, Err
            >>> Err("bad").map_err(str.upper)
            Err(error='BAD')
            >>> Ok(3).map_err(str.upper)
            Ok(value=3)

            ```
        """
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return cast(Result[T, F], self)

    def ok(self) -> Option[T]:
        """
        Converts to an `Option` of the `Ok` value, discarding any error.

        Example:
            ```python
            >>> from resultish import Ok, Err
            >>> Ok(3).ok()
            Some(value=3)
            >>> Err("bad").ok()
            NONE

            ```
        """
        if self.is_ok():
            return Some(self.unwrap())
        return NONE

    def err(self) -> Option[E]:
        """
        Converts to an `Option` of the `Err` value, discarding any success value.

        Example:
            ```python
            >>> from resultish import Ok, Err
            >>> Ok(3).err()
            NONE
            >>> Err("bad").err()
            Some(value='bad')

            ```
        """
        if self.is_err():
            return Some(self.unwrap_err())
        return NONE


@final
@dataclass(slots=True)
class Ok[T, E](Result[T, E]):
    """Result variant holding a success value."""

    value: T

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap_err` on Ok: {self.value!r}")


@final
@dataclass(slots=True)
class Err[T, E](Result[T, E]):
    """Result variant holding an error value."""

    error: E

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap` on Err: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error
