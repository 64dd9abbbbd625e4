from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    """Mixin giving every resultish type a fluent `into`/`inspect` pair."""

    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Pass `Self` to `func` and return whatever it returns.

        `x.into(f, *args)` reads left to right where `f(x, *args)` would not,
        which keeps long conversion chains flat.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function receiving the instance first.
            *args (P.args): Extra positional arguments for `func`.
            **kwargs (P.kwargs): Extra keyword arguments for `func`.

        Returns:
            R: The return value of `func`.

        Example:
        ```python
        >>> import resultish as rs
        >>> def describe(outcome: rs.Outcome[int, str]) -> str:
        ...     match outcome:
        ...         case rs.Partial(value, error):
        ...             return f"{value} with warning {error!r}"
        ...         case _:
        ...             return "plain"
        >>> rs.Partial(3, "clipped").into(describe)
        "3 with warning 'clipped'"

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Call `func` on the instance for its side effects, then return the instance.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to call; its return value is ignored.
            *args (P.args): Extra positional arguments for `func`.
            **kwargs (P.kwargs): Extra keyword arguments for `func`.

        Returns:
            Self: The instance itself, unchanged.

        Example:
        ```python
        >>> import resultish as rs
        >>> rs.Success(3).inspect(print).has_success()
        Success(value=3)
        True

        ```
        """
        func(self, *args, **kwargs)
        return self
