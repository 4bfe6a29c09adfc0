from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """Explicit presence or absence of a value.

    `Some(value)` holds a value, `NONE` holds nothing.

    Unlike Python's `None`, `NONE` never collides with a legitimate element, so an `Iter` can carry `None` values.
    """

    __slots__ = ()

    @staticmethod
    def from_[U](value: U | None) -> Option[U]:
        """Convert a value that uses Python's `None` for absence into an `Option`.

        Args:
            value (U | None): The value to convert.

        Returns:
            Option[U]: `NONE` if **value** is `None`, `Some(value)` otherwise.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Option.from_(42)
        Some(42)
        >>> sc.Option.from_(None)
        NONE

        ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Example:
            ```python
            >>> import seqchain as sc
            >>> sc.Some(2).is_some()
            True
            >>> sc.NONE.is_some()
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
            >>> import seqchain as sc
            >>> sc.Some(2).is_none()
            False
            >>> sc.NONE.is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> import seqchain as sc
            >>> sc.Some("car").unwrap()
            'car'
            >>> sc.NONE.unwrap()
            Traceback (most recent call last):
                ...
            seqchain._results._option.OptionUnwrapError: called `unwrap` on a `None`

            ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value, or raises with a provided message.

        Args:
            msg: The message to include in the exception if the option is `NONE`.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> import seqchain as sc
            >>> sc.Some("value").expect("fruits are healthy")
            'value'
            >>> sc.NONE.expect("fruits are healthy")
            Traceback (most recent call last):
                ...
            seqchain._results._option.OptionUnwrapError: fruits are healthy (called `expect` on a `None`)

            ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Example:
            ```python
            >>> import seqchain as sc
            >>> sc.Some("car").unwrap_or("bike")
            'car'
            >>> sc.NONE.unwrap_or("bike")
            'bike'

            ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """
        Returns the contained `Some` value or computes it from a function.

        Example:
            ```python
            >>> import seqchain as sc
            >>> k = 10
            >>> sc.Some(4).unwrap_or_else(lambda: 2 * k)
            4
            >>> sc.NONE.unwrap_or_else(lambda: 2 * k)
            20

            ```
        """
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value.

        Example:
            ```python
            >>> import seqchain as sc
            >>> sc.Some("Hello, World!").map(len)
            Some(13)
            >>> sc.NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """
        Calls a function if the option is `Some`, otherwise returns `NONE`.

        Example:
            ```python
            >>> import seqchain as sc
            >>> def sq(x: int) -> sc.Option[int]:
            ...     return sc.Some(x * x)
            >>> def nope(x: int) -> sc.Option[int]:
            ...     return sc.NONE
            >>> sc.Some(2).and_then(sq).and_then(sq)
            Some(16)
            >>> sc.Some(2).and_then(nope).and_then(sq)
            NONE

            ```
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise calls a function and returns the result.

        Example:
            ```python
            >>> import seqchain as sc
            >>> sc.Some("barbarians").or_else(lambda: sc.Some("vikings"))
            Some('barbarians')
            >>> sc.NONE.or_else(lambda: sc.Some("vikings"))
            Some('vikings')

            ```
        """
        return self if self.is_some() else f()

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """
        Returns `NONE` unless the option is `Some` and **predicate** holds for its value.

        Example:
            ```python
            >>> import seqchain as sc
            >>> sc.Some(4).filter(lambda x: x % 2 == 0)
            Some(4)
            >>> sc.Some(3).filter(lambda x: x % 2 == 0)
            NONE

            ```
        """
        if self.is_some() and predicate(self.unwrap()):
            return self
        return NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
