from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from typing import TYPE_CHECKING, overload

from ._iter import CommonMethods

if TYPE_CHECKING:
    from ._lazy import Iter


class Seq[T](CommonMethods[T], Sequence[T]):
    """An immutable, in-memory **ordered** collection, backed by a `tuple`.

    Implements the `Sequence` Protocol from `collections.abc`.

    Returned by `Iter.collect(tuple)`. Provides the consuming methods of `Iter` with eager evaluation, and can be read again as many times as needed.

    Args:
        data (tuple[T, ...]): The data to wrap.
    """

    _inner: tuple[T, ...]

    __slots__ = ("_inner",)

    def __init__(self, data: tuple[T, ...]) -> None:
        self._inner = data  # pyright: ignore[reportIncompatibleVariableOverride]

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        return self._inner[index]

    def __len__(self) -> int:
        return len(self._inner)

    def iter(self) -> Iter[T]:
        """Get a lazy `Iter` over the elements.

        Returns:
            Iter[T]: An iterator over the collection, from first to last.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq((1, 2, 3)).iter().map(lambda x: x * 2).collect(tuple)
        Seq(2, 4, 6)

        ```
        """
        from ._lazy import Iter

        return Iter(self._inner)


class Vec[T](Seq[T], MutableSequence[T]):
    """A mutable, in-memory **ordered** collection, backed by a `list`.

    Implements the `MutableSequence` Protocol from `collections.abc`, so it can be the target of `Iter.extend()`.

    This is what `Iter.collect()` returns by default.

    Args:
        data (list[T]): The data to wrap. It is not copied.
    """

    _inner: list[T]

    __slots__ = ("_inner",)

    def __init__(self, data: list[T]) -> None:
        self._inner = data  # pyright: ignore[reportIncompatibleVariableOverride]

    @overload
    def __setitem__(self, index: int, value: T) -> None: ...
    @overload
    def __setitem__(self, index: slice, value: Iterable[T]) -> None: ...
    def __setitem__(self, index: int | slice, value: T | Iterable[T]) -> None:
        self._inner[index] = value  # type: ignore[index]

    def __delitem__(self, index: int | slice) -> None:
        del self._inner[index]

    def insert(self, index: int, value: T) -> None:
        """Insert **value** before **index**.

        Example:
        ```python
        >>> import seqchain as sc
        >>> v = sc.Vec([1, 3])
        >>> v.insert(1, 2)
        >>> v
        Vec(1, 2, 3)
        >>> sc.Iter([4, 5]).extend(v)
        Vec(1, 2, 3, 4, 5)

        ```
        """
        self._inner.insert(index, value)
