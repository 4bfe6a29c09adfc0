from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, Concatenate

from ._core import CommonBase, ensure_callable, get_config
from ._results import NONE, NoneOption, Option, Some

if TYPE_CHECKING:
    from ._lazy import Iter
    from ._types import SupportsRichComparison


def _compare_min[U: SupportsRichComparison[Any]](acc: Option[U], item: U) -> Option[U]:
    if acc.is_some() and not item < acc.unwrap():
        return acc
    return Some(item)


def _compare_max[U: SupportsRichComparison[Any]](acc: Option[U], item: U) -> Option[U]:
    if acc.is_some() and not item > acc.unwrap():
        return acc
    return Some(item)


def fold[T, U](data: Iterable[T], func: Callable[[U, T], U | NoneOption], initial: U) -> U:
    acc = initial
    for item in data:
        res = func(acc, item)
        if isinstance(res, NoneOption):
            break
        acc = res
    return acc


class CommonMethods[T](CommonBase[Iterable[T]]):
    """Consumers shared by the lazy `Iter` and the eager `Seq`/`Vec`."""

    _inner: Iterable[T]

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def _iter[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], Iterator[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[U]:
        from ._lazy import Iter

        def _(data: Iterable[T]) -> Iter[U]:
            return Iter(factory(data, *args, **kwargs))

        return self.into(_)

    def reduce[U](self, func: Callable[[U, T], U | NoneOption], initial: U) -> U:
        """Fold every element into an accumulator, from left to right.

        The accumulator starts at **initial** and is replaced by `func(accumulator, item)` for each item.

        If **func** returns `NONE`, folding stops immediately and the last accumulator is returned.

        The remaining elements are left unconsumed.

        Args:
            func (Callable[[U, T], U | NoneOption]): Reducing function, or `NONE` to stop.
            initial (U): Starting accumulator, returned as is for an empty input.

        Returns:
            U: The final accumulator.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Vec([1, 2, 3]).reduce(lambda acc, x: acc + x, 0)
        6
        >>> sc.Iter(()).reduce(lambda acc, x: acc + x, 0)
        0
        >>> def add_below_five(acc: int, x: int) -> int | sc.NoneOption:
        ...     return sc.NONE if acc + x > 5 else acc + x
        >>> sc.Iter([1, 2, 3, 4]).reduce(add_below_five, 0)
        3

        ```
        """
        ensure_callable(func, "func")
        return fold(self._inner, func, initial)

    def sum(self, start: Any = 0) -> Any:
        """Add up the elements, seeded at **start**.

        Args:
            start (Any): Value the sum starts from, returned for an empty input. Defaults to 0.

        Returns:
            Any: The total.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Vec([1, 2, 3]).sum()
        6
        >>> sc.Iter([1, 2, 3]).sum(10)
        16
        >>> sc.Iter([[1], [2]]).sum([])
        [1, 2]

        ```
        """
        return fold(self._inner, operator.add, start)

    def min[U: SupportsRichComparison[Any]](self: CommonMethods[U]) -> Option[U]:
        """Return the smallest element.

        Returns:
            Option[U]: `Some` of the minimum, or `NONE` if there are no elements.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Vec([3, 1, 2]).min()
        Some(1)
        >>> sc.Iter(()).min()
        NONE

        ```
        """
        return fold(self._inner, _compare_min, NONE)

    def max[U: SupportsRichComparison[Any]](self: CommonMethods[U]) -> Option[U]:
        """Return the largest element.

        Returns:
            Option[U]: `Some` of the maximum, or `NONE` if there are no elements.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Vec([3, 1, 2]).max()
        Some(3)
        >>> sc.Iter(()).max()
        NONE

        ```
        """
        return fold(self._inner, _compare_max, NONE)

    def find(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Searches for an element that satisfies a `predicate`.

        Note:
            On an `Iter`, every element up to the match is consumed, and the whole iterator is consumed when nothing matches.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each item.

        Returns:
            Option[T]: `Some(value)` for the first element satisfying the predicate, `NONE` otherwise.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Vec(list(range(10))).find(lambda x: x > 5)
        Some(6)
        >>> sc.Vec(list(range(10))).find(lambda x: x > 9).unwrap_or("missing")
        'missing'

        ```
        """
        ensure_callable(predicate, "predicate")
        for item in self._inner:
            if predicate(item):
                return Some(item)
        return NONE
