from __future__ import annotations

from typing import final


@final
class MutRef[T]:
    """Write-through handle to one payload field of an `Outcome`.

    Handed out by `Outcome.as_mut`. Reads and writes go straight to the owning instance,
    so a `set` is visible through the original outcome.

    Example:
    ```python
    >>> import resultish as rs
    >>> outcome = rs.Partial(3, "clipped")
    >>> match outcome.as_mut():
    ...     case rs.Partial(value, _):
    ...         value.set(value.get() + 1)
    >>> outcome
    Partial(value=4, error='clipped')

    ```
    """

    __slots__ = ("_field", "_owner")

    def __init__(self, owner: object, field: str) -> None:
        self._owner = owner
        self._field = field

    def __repr__(self) -> str:
        return f"MutRef({self.get()!r})"

    def get(self) -> T:
        """Current value of the referenced field."""
        return getattr(self._owner, self._field)

    def set(self, value: T) -> None:
        """Overwrite the referenced field in the owning outcome."""
        setattr(self._owner, self._field, value)

    def replace(self, value: T) -> T:
        """Overwrite the referenced field and return its previous value.

        Example:
        ```python
        >>> import resultish as rs
        >>> outcome = rs.Failure("timeout")
        >>> match outcome.as_mut():
        ...     case rs.Failure(error):
        ...         error.replace("retry exhausted")
        'timeout'
        >>> outcome
        Failure(error='retry exhausted')

        ```
        """
        old = self.get()
        self.set(value)
        return old
