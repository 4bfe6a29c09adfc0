from __future__ import annotations

import itertools
from collections.abc import (
    Callable,
    Iterable,
    Iterator,
    Mapping,
    MutableSequence,
    Sequence,
)
from functools import partial
from typing import TYPE_CHECKING, Any, overload

import cytoolz as cz
import more_itertools as mit

from ._core import deprecated, ensure_callable, ensure_mapping, ensure_positive
from ._iter import CommonMethods, fold
from ._results import NONE, NoneOption, Option, Some
from ._types import Item

if TYPE_CHECKING:
    from ._eager import Seq, Vec


def _prev[U](data: Sequence[U], idx: int) -> Option[tuple[U, int]]:
    if idx > 0:
        return Some((data[idx - 1], idx - 1))
    return NONE


def _append[T](target: MutableSequence[T], item: T) -> MutableSequence[T]:
    target.append(item)
    return target


class Iter[T](CommonMethods[T], Iterator[T]):
    """A lazy, pull-based sequence of values, wrapping a Python `Iterator`.

    Implements the `Iterator` Protocol from `collections.abc`, so it can be used as a standard iterator.

    Every transformation returns a new `Iter` wrapping the previous one. Nothing is computed until a value is pulled,
    either with `Iter.next()`, a `for` loop, or a consuming method such as `collect()`, `reduce()` or `sum()`.

    Each pull travels from the outermost combinator down to the source and back, one element at a time.

    Keep in mind that `Iter` instances are single-use; once exhausted, they stay exhausted.

    Args:
        data (Iterable[T]): Any object that can be iterated over.
    """

    _inner: Iterator[T]

    __slots__ = ("_inner",)

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)  # pyright: ignore[reportIncompatibleVariableOverride]

    def __next__(self) -> T:
        return next(self._inner)

    def next(self) -> Option[T]:
        """Pull the next element.

        `None` is an ordinary element here: exhaustion is the only thing reported as `NONE`.

        Returns:
            Option[T]: `Some[T]` holding the next element, or `NONE` if the iterator is exhausted.

        Example:
        ```python
        >>> import seqchain as sc
        >>> it = sc.Iter([1, None])
        >>> it.next()
        Some(1)
        >>> it.next()
        Some(None)
        >>> it.next()
        NONE
        >>> it.next()
        NONE

        ```
        """
        try:
            return Some(next(self._inner))
        except StopIteration:
            return NONE

    # constructors ------------------------------------------------------------
    @staticmethod
    def from_indexed[U](data: Sequence[U]) -> Iter[U]:
        """Iterate over the elements of an ordered container, from the first index to the last.

        Args:
            data (Sequence[U]): The container to read from. It is never copied nor modified.

        Returns:
            Iter[U]: An iterator over the elements.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter.from_indexed(["a", "b", "c"]).collect()
        Vec('a', 'b', 'c')

        ```
        """
        return Iter(data)

    @staticmethod
    def from_indexed_reversed[U](data: Sequence[U]) -> Iter[U]:
        """Iterate over the elements of an ordered container, from the last index to the first.

        The index is stepped down one at a time, the container is never reversed nor copied.

        Args:
            data (Sequence[U]): The container to read from.

        Returns:
            Iter[U]: An iterator over the elements, in reverse order.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter.from_indexed_reversed(["a", "b", "c"]).collect()
        Vec('c', 'b', 'a')

        ```
        """
        return Iter.from_fn(len(data), partial(_prev, data))

    @staticmethod
    def from_keyed[K, V](data: Mapping[K, V]) -> Iter[V]:
        """Iterate over the values of a mapping, in the mapping's own iteration order.

        Args:
            data (Mapping[K, V]): The mapping to read from.

        Returns:
            Iter[V]: An iterator over the values.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter.from_keyed({"a": 1, "b": 2}).collect()
        Vec(1, 2)

        ```
        """
        ensure_mapping(data, "data")
        return Iter(data.values())

    @staticmethod
    def entries[K, V](data: Mapping[K, V]) -> Iter[Item[K, V]]:
        """Iterate over the key-value pairs of a mapping.

        Args:
            data (Mapping[K, V]): The mapping to read from.

        Returns:
            Iter[Item[K, V]]: An iterator of `Item(key, value)` named tuples.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter.entries({"a": 1, "b": 2}).collect()
        Vec(('a', 1), ('b', 2))
        >>> sc.Iter.entries({"a": 1}).map(lambda item: item.key).collect()
        Vec('a')

        ```
        """
        ensure_mapping(data, "data")
        return Iter(itertools.starmap(Item, data.items()))

    @staticmethod
    def from_fn[S, V](
        state: S, generator: Callable[[S], Option[tuple[V, S]]]
    ) -> Iter[V]:
        """Create an `Iter` by repeatedly applying a **generator** function to an initial **state**.

        The **generator** function takes the current state and must return:

        - `Some((value, new_state))` to emit the value `V` and continue with the new **state** `S`.
        - `NONE` to stop the generation.

        Once `NONE` has been returned, the **generator** is never called again.

        **Warning** ⚠️
            If the **generator** function never returns `NONE`, it creates an infinite iterator.

        Args:
            state (S): Initial state for the generator.
            generator (Callable[[S], Option[tuple[V, S]]]): Function that generates the next value and state.

        Returns:
            Iter[V]: An iterator generating values produced by the generator function.

        Example:
        ```python
        >>> import seqchain as sc
        >>> def counter_generator(state: int) -> sc.Option[tuple[int, int]]:
        ...     if state < 5:
        ...         return sc.Some((state * 10, state + 1))
        ...     return sc.NONE
        >>> sc.Iter.from_fn(0, counter_generator).collect()
        Vec(0, 10, 20, 30, 40)
        >>> sc.Iter.from_fn(1, lambda s: sc.Some((s, s * 2))).take(5).collect()
        Vec(1, 2, 4, 8, 16)

        ```
        """
        ensure_callable(generator, "generator")

        def _from_fn() -> Iterator[V]:
            current_state: S = state
            while True:
                result: Option[tuple[V, S]] = generator(current_state)
                if result.is_none():
                    break
                value, next_state = result.unwrap()
                yield value
                current_state = next_state

        return Iter(_from_fn())

    @staticmethod
    def from_count(start: int = 0, step: int = 1) -> Iter[int]:
        """Create an infinite `Iterator` of evenly spaced values.

        **Warning** ⚠️
            This creates an infinite iterator.
            Be sure to use `Iter.take()` or `Iter.take_while()` to limit the number of items taken.

        Args:
            start (int): Starting value of the sequence. Defaults to 0.
            step (int): Difference between consecutive values. Defaults to 1.

        Returns:
            Iter[int]: An iterator generating the sequence.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter.from_count(10, 2).take(3).collect()
        Vec(10, 12, 14)

        ```
        """
        return Iter(itertools.count(start, step))

    # consumers ------------------------------------------------------------
    @overload
    def collect(self) -> Vec[T]: ...
    @overload
    def collect(self, collector: Callable[[Iterable[T]], list[T]]) -> Vec[T]: ...
    @overload
    def collect(
        self, collector: Callable[[Iterable[T]], tuple[T, ...]]
    ) -> Seq[T]: ...
    def collect(
        self,
        collector: Callable[[Iterable[T]], list[T] | tuple[T, ...]] = list,
    ) -> Vec[T] | Seq[T]:
        """Drain the `Iter` into an eager collection.

        Args:
            collector (Callable[[Iterable[T]], list[T] | tuple[T, ...]]): `list` (the default) to get a `Vec`, `tuple` to get a `Seq`.

        Returns:
            Vec[T] | Seq[T]: A materialized collection containing the elements, in order. Empty if the `Iter` was.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter(range(5)).collect()
        Vec(0, 1, 2, 3, 4)
        >>> sc.Iter(range(3)).collect(tuple)
        Seq(0, 1, 2)
        >>> sc.Iter(()).collect()
        Vec()

        ```
        """
        from ._eager import Seq, Vec

        data = collector(self._inner)
        match data:
            case list():
                return Vec(data)
            case tuple():
                return Seq(data)
            case _:
                msg = f"collector must produce a list or a tuple, got {type(data).__name__}"
                raise TypeError(msg)

    def extend[S: MutableSequence[Any]](self, target: S) -> S:
        """Append every element to **target**, in place.

        Args:
            target (S): A mutable ordered sequence, such as a `list` or a `Vec`.

        Returns:
            S: **target** itself, after mutation.

        Example:
        ```python
        >>> import seqchain as sc
        >>> data = [0]
        >>> sc.Iter([1, 2]).extend(data)
        [0, 1, 2]
        >>> data
        [0, 1, 2]

        ```
        """
        return fold(self._inner, _append, target)

    # maps ------------------------------------------------------------
    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Map each element through func.

        **func** is called exactly once per element pulled from upstream.

        Args:
            func (Callable[[T], R]): Function to apply to each element.

        Returns:
            Iter[R]: An iterable of transformed elements.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter([1, 2]).map(lambda x: x + 1).collect()
        Vec(2, 3)

        ```
        """
        ensure_callable(func, "func")
        return self._iter(partial(map, func))

    def filter_map[R](self, func: Callable[[T], Option[R]]) -> Iter[R]:
        """Creates an iterator that both filters and maps.

        The returned iterator yields only the values for which the supplied closure returns `Some(value)`.

        Upstream is pulled as many times as needed to find the next `Some`.

        Args:
            func (Callable[[T], Option[R]]): Function to apply to each item.

        Returns:
            Iter[R]: An iterable of the results where func returned `Some`.

        Example:
        ```python
        >>> import seqchain as sc
        >>> def _parse(s: str) -> sc.Option[int]:
        ...     return sc.Some(int(s)) if s.isdigit() else sc.NONE
        >>>
        >>> sc.Iter(["1", "two", "NaN", "four", "5"]).filter_map(_parse).collect()
        Vec(1, 5)

        ```
        """
        ensure_callable(func, "func")

        def _filter_map(data: Iterable[T]) -> Iterator[R]:
            for item in data:
                res = func(item)
                if res.is_some():
                    yield res.unwrap()

        return self._iter(_filter_map)

    def reductions[U](
        self, func: Callable[[U, T], U | NoneOption], initial: U
    ) -> Iter[U]:
        """Lazily fold the elements, yielding the accumulator after each step.

        **initial** itself is not yielded. If **func** returns `NONE`, the iterator stops.

        Args:
            func (Callable[[U, T], U | NoneOption]): Reducing function, or `NONE` to stop.
            initial (U): Starting accumulator.

        Returns:
            Iter[U]: An iterator of the running accumulators.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter([1, 2, 3, 4]).reductions(lambda acc, x: acc + x, 0).collect()
        Vec(1, 3, 6, 10)
        >>> def add_until_ten(acc: int, x: int) -> int | sc.NoneOption:
        ...     return sc.NONE if acc + x > 10 else acc + x
        >>> sc.Iter([1, 2, 3, 4, 5]).reductions(add_until_ten, 0).collect()
        Vec(1, 3, 6, 10)

        ```
        """
        ensure_callable(func, "func")

        def _reductions(data: Iterable[T]) -> Iterator[U]:
            current: U = initial
            for item in data:
                res = func(current, item)
                if isinstance(res, NoneOption):
                    break
                current = res
                yield current

        return self._iter(_reductions)

    # filters ------------------------------------------------------------
    def filter(self, func: Callable[[T], bool]) -> Iter[T]:
        """Yield only the elements for which **func** returns true.

        Each pull may pull upstream several times, until an element is accepted or upstream is exhausted.

        Args:
            func (Callable[[T], bool]): Function to evaluate each item.

        Returns:
            Iter[T]: An iterable of the items that satisfy the predicate.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter((1, 2, 3)).filter(lambda x: x > 1).collect()
        Vec(2, 3)
        >>> sc.Iter((1, 2, 3)).filter(lambda x: x > 1).next()
        Some(2)

        ```
        """
        ensure_callable(func, "func")
        return self._iter(partial(filter, func))

    def remove(self, func: Callable[[T], bool]) -> Iter[T]:
        """Yield only the elements for which **func** returns false.

        This is the complement of `Iter.filter()`.

        Args:
            func (Callable[[T], bool]): Function to evaluate each item.

        Returns:
            Iter[T]: An iterable of the items that do not satisfy the predicate.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter([1, 2, 3, 4]).remove(lambda x: x % 2 == 1).collect()
        Vec(2, 4)

        ```
        """
        ensure_callable(func, "func")
        return self._iter(partial(itertools.filterfalse, func))

    def take(self, n: int) -> Iter[T]:
        """Yield the first **n** elements, or fewer if the underlying iterator ends sooner.

        Once **n** elements have been yielded, upstream is never pulled again.

        Args:
            n (int): Number of elements to take. Zero or negative values give an empty iterator.

        Returns:
            Iter[T]: An iterable of the first n items.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter([1, 2, 3]).take(2).collect()
        Vec(1, 2)
        >>> sc.Iter([1, 2, 3]).take(5).collect()
        Vec(1, 2, 3)
        >>> sc.Iter([1, 2, 3]).take(-1).collect()
        Vec()

        ```
        """
        return self._iter(partial(cz.itertoolz.take, max(n, 0)))

    def take_while(self, predicate: Callable[[T], bool]) -> Iter[T]:
        """Take items while predicate holds.

        The first rejected element is consumed but not yielded, and the iterator is exhausted from then on.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each item.

        Returns:
            Iter[T]: An iterable of the items taken while the predicate is true.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter((1, 2, 0, 3)).take_while(lambda x: x > 0).collect()
        Vec(1, 2)

        ```
        """
        ensure_callable(predicate, "predicate")
        return self._iter(partial(itertools.takewhile, predicate))

    def skip(self, n: int) -> Iter[T]:
        """Drop the first **n** elements.

        Args:
            n (int): Number of elements to skip. Zero or negative values skip nothing.

        Returns:
            Iter[T]: An iterable of the items after skipping the first n items.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter((1, 2, 3)).skip(1).collect()
        Vec(2, 3)

        ```
        """
        return self._iter(partial(cz.itertoolz.drop, max(n, 0)))

    def skip_while(self, predicate: Callable[[T], bool]) -> Iter[T]:
        """Drop items while predicate holds.

        Once the predicate fails, that element and all following ones are yielded, without testing them.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each item.

        Returns:
            Iter[T]: An iterable of the items after skipping those for which the predicate is true.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter((1, 2, 0, 5)).skip_while(lambda x: x > 0).collect()
        Vec(0, 5)

        ```
        """
        ensure_callable(predicate, "predicate")
        return self._iter(partial(itertools.dropwhile, predicate))

    def partition(self, chunk_size: int) -> Iter[tuple[T, ...]]:
        """Group consecutive elements into tuples of **chunk_size** elements.

        - The last tuple may be shorter than **chunk_size**.
        - The data is consumed lazily, just enough to fill a chunk.

        Args:
            chunk_size (int): Number of elements in each chunk. Must be positive.

        Returns:
            Iter[tuple[T, ...]]: An iterable of chunks.

        Raises:
            ValueError: If **chunk_size** is zero or negative.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter("ABCDEFG").partition(3).collect()
        Vec(('A', 'B', 'C'), ('D', 'E', 'F'), ('G',))
        >>> sc.Iter("ABCD").partition(0)
        Traceback (most recent call last):
            ...
        ValueError: `chunk_size` must be a positive integer, got 0

        ```
        """
        ensure_positive(chunk_size, "chunk_size")
        return self._iter(itertools.batched, chunk_size)

    def dedupe(self) -> Iter[T]:
        """Collapse runs of adjacent equal elements into their first element.

        Only adjacent duplicates are removed.

        Returns:
            Iter[T]: An iterable without consecutive duplicates.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter([1, 2, 2, 2, 3, 3, 4, 4, 3, 3]).dedupe().collect()
        Vec(1, 2, 3, 4, 3)

        ```
        """
        return self._iter(mit.unique_justseen)

    def dedupe_by(self, key: Callable[[T], Any]) -> Iter[T]:
        """Collapse runs of adjacent elements sharing the same **key**, keeping the first of each run.

        Args:
            key (Callable[[T], Any]): Function computing the value used for comparison.

        Returns:
            Iter[T]: An iterable without consecutive duplicates by key.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter("AaBbAa").dedupe_by(str.lower).collect()
        Vec('A', 'B', 'A')

        ```
        """
        ensure_callable(key, "key")
        return self._iter(mit.unique_justseen, key=key)

    @deprecated("Iter.dedupe_by")
    def dedupe_with(self, key: Callable[[T], Any]) -> Iter[T]:
        """Alias of `Iter.dedupe_by()`.

        Args:
            key (Callable[[T], Any]): Function computing the value used for comparison.

        Returns:
            Iter[T]: An iterable without consecutive duplicates by key.
        """
        return self.dedupe_by(key)

    # zips ------------------------------------------------------------
    def zip[U](self, other: Iterable[U]) -> Iter[tuple[T, U]]:
        """Pair each element with the element at the same position in **other**.

        Stops as soon as either side is exhausted.

        Args:
            other (Iterable[U]): The right-hand side.

        Returns:
            Iter[tuple[T, U]]: An iterator of pairs.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter([1, 2]).zip([10, 20]).collect()
        Vec((1, 10), (2, 20))
        >>> sc.Iter(["a", "b"]).zip([1, 2, 3]).collect()
        Vec(('a', 1), ('b', 2))

        ```
        """
        return self._iter(zip, other, strict=False)

    def zip_with[U, R](self, func: Callable[[T, U], R], other: Iterable[U]) -> Iter[R]:
        """Combine each element with the element at the same position in **other**.

        Stops as soon as either side is exhausted. Nothing is buffered from the longer side.

        Args:
            func (Callable[[T, U], R]): Function receiving one element from each side.
            other (Iterable[U]): The right-hand side.

        Returns:
            Iter[R]: An iterator of combined values.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter([1, 2, 3]).zip_with(lambda a, b: a * b, [10, 20]).collect()
        Vec(10, 40)

        ```
        """
        ensure_callable(func, "func")
        return self._iter(partial(map, func), other)
