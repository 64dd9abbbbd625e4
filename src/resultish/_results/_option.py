from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs, final

from .._core import Pipeable


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC, Pipeable):
    """An optional value: either `Some(value)` or `NONE`.

    Returned by the accessors of `Outcome` and `Result` wherever a payload may be missing.
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option holds a value.

        Example:
            ```python
            >>> from resultish import Some, NONE
            >>> Some(2).is_some()
            True
            >>> NONE.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        Returns `True` if the option is `NONE`.

        Example:
            ```python
            >>> from resultish import Some, NONE
            >>> Some(2).is_none()
            False
            >>> NONE.is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the held value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> from resultish import Some, NONE
            >>> Some("warning").unwrap()
            'warning'
            >>> NONE.unwrap()
            Traceback (most recent call last):
                ...
            resultish._results._option.OptionUnwrapError: called `unwrap` on `NONE`

            ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the held value, or raises with `msg` if the option is `NONE`.

        Args:
            msg: Context included in the exception message.

        Returns:
            The held value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> from resultish import Some, NONE
            >>> Some(1).expect("a row count")
            1
            >>> NONE.expect("a row count")
            Traceback (most recent call last):
                ...
            resultish._results._option.OptionUnwrapError: a row count (called `expect` on `NONE`)

            ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on `NONE`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the held value, or `default` if the option is `NONE`.

        Example:
            ```python
            >>> from resultish import Some, NONE
            >>> Some(4).unwrap_or(0)
            4
            >>> NONE.unwrap_or(0)
            0

            ```
        """
        return self.unwrap() if self.is_some() else default

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Applies `f` to the held value, leaving `NONE` untouched.

        Args:
            f: The function to apply.

        Returns:
            `Some(f(value))` if a value is held, otherwise `NONE`.

        Example:
            ```python
            >>> from resultish import Some, NONE
            >>> Some("disk almost full").map(len)
            Some(value=16)
            >>> NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE


@final
@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant holding a value."""

    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@final
@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant for a missing value. Use the `NONE` singleton."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on `NONE`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
