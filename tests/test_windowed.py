"""Tests for stateful and windowed combinators."""

import warnings
from collections.abc import Iterator

import pytest

import seqchain as sc

TEN = list(range(1, 11))


class _Counting(Iterator[int]):
    """Iterator recording how many times it was pulled."""

    def __init__(self, data: list[int]) -> None:
        self._data = iter(data)
        self.pulls = 0

    def __next__(self) -> int:
        self.pulls += 1
        return next(self._data)


def test_take() -> None:
    """Test that take limits the number of values."""
    assert len(sc.Iter(TEN).take(3).collect()) == 3
    assert len(sc.Iter(TEN).take(30).collect()) == 10


@pytest.mark.parametrize("n", [0, -3])
def test_take_non_positive_is_empty(n: int) -> None:
    """Test that take with n <= 0 is immediately exhausted."""
    source = _Counting(TEN)
    assert sc.Iter(source).take(n).next() == sc.NONE
    assert source.pulls == 0


def test_take_never_pulls_past_limit() -> None:
    """Test that take stops pulling upstream once the limit is reached."""
    source = _Counting(TEN)
    it = sc.Iter(source).take(2)
    assert it.collect().inner() == [1, 2]
    assert it.next() == sc.NONE
    assert it.next() == sc.NONE
    assert source.pulls == 2


def test_take_on_infinite_iter() -> None:
    """Test that take terminates an infinite iterator."""
    assert sc.Iter.from_count().take(4).collect().inner() == [0, 1, 2, 3]


def test_take_while() -> None:
    """Test that take_while stops at the first rejected value."""
    source = _Counting([1, 2, 5, 1, 2])
    it = sc.Iter(source).take_while(lambda x: x < 3)
    assert it.collect().inner() == [1, 2]
    assert source.pulls == 3
    assert it.next() == sc.NONE
    assert source.pulls == 3


def test_skip() -> None:
    """Test that skip drops the right number of values."""
    assert len(sc.Iter(TEN).skip(3).collect()) == 7
    assert sc.Iter(TEN).skip(0).collect().inner() == TEN
    assert sc.Iter(TEN).skip(-2).collect().inner() == TEN
    assert sc.Iter(TEN).skip(20).collect().inner() == []


def test_skip_while() -> None:
    """Test that skip_while yields everything after the first rejection."""
    result = sc.Iter(TEN).skip_while(lambda x: x < 4).collect().inner()
    assert result == [4, 5, 6, 7, 8, 9, 10]


def test_skip_while_does_not_retest() -> None:
    """Test that the predicate is not evaluated after the first rejection."""
    seen: list[int] = []

    def _small(x: int) -> bool:
        seen.append(x)
        return x < 2

    result = sc.Iter([1, 2, 1, 0]).skip_while(_small).collect().inner()
    assert result == [2, 1, 0]
    assert seen == [1, 2]


def test_partition() -> None:
    """Test that partition yields full chunks then one partial chunk."""
    chunks = sc.Iter(TEN).partition(3).collect().inner()
    assert chunks == [(1, 2, 3), (4, 5, 6), (7, 8, 9), (10,)]


def test_partition_exact_and_empty() -> None:
    """Test partition when the size divides the input, and on empty input."""
    assert sc.Iter(range(4)).partition(2).collect().inner() == [(0, 1), (2, 3)]
    assert sc.Iter(()).partition(2).collect().inner() == []


def test_partition_is_lazy_per_chunk() -> None:
    """Test that partition pulls only what one chunk needs."""
    source = _Counting(TEN)
    it = sc.Iter(source).partition(4)
    assert it.next() == sc.Some((1, 2, 3, 4))
    assert source.pulls == 4


@pytest.mark.parametrize("size", [0, -1])
def test_partition_rejects_non_positive_size(size: int) -> None:
    """Test that a non-positive chunk size is a contract violation."""
    with pytest.raises(ValueError, match="chunk_size"):
        sc.Iter(TEN).partition(size)


def test_dedupe() -> None:
    """Test that dedupe collapses adjacent duplicates only."""
    data = [1, 2, 2, 2, 3, 3, 4, 4, 4, 4, 4, 3, 3]
    assert sc.Iter(data).dedupe().collect().inner() == [1, 2, 3, 4, 3]


def test_dedupe_keeps_first_value() -> None:
    """Test that the first value is always yielded, even when it is None."""
    assert sc.Iter([None, None, 1]).dedupe().collect().inner() == [None, 1]


def test_dedupe_by() -> None:
    """Test that dedupe_by compares keys instead of values."""
    words = ["apple", "avocado", "banana", "blueberry", "apricot"]
    result = sc.Iter(words).dedupe_by(lambda w: w[0]).collect().inner()
    assert result == ["apple", "banana", "apricot"]


def test_dedupe_with_is_deprecated() -> None:
    """Test that the old dedupe_with name warns and still works."""
    with pytest.warns(DeprecationWarning, match="dedupe_by"):
        result = sc.Iter([1, -1, 2]).dedupe_with(abs).collect().inner()
    assert result == [1, 2]


def test_dedupe_with_warning_points_at_caller() -> None:
    """Test that the warning names the replacement and blames the calling line."""
    with pytest.warns(DeprecationWarning) as record:
        sc.Iter([1]).dedupe_with(abs)
    assert len(record) == 1
    assert str(record[0].message) == (
        "`Iter.dedupe_with` is deprecated, use `Iter.dedupe_by` instead."
    )
    assert record[0].filename == __file__


def test_dedupe_with_carries_deprecated_attribute() -> None:
    """Test that the deprecation message is exposed on the method."""
    assert sc.Iter.dedupe_with.__deprecated__ == (
        "`Iter.dedupe_with` is deprecated, use `Iter.dedupe_by` instead."
    )
    assert sc.Iter.dedupe_with.__name__ == "dedupe_with"


def test_dedupe_by_no_warning() -> None:
    """Test that dedupe_by does not emit the deprecation warning."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        sc.Iter([1, 1]).dedupe_by(abs).collect()


@pytest.mark.parametrize(
    "build",
    [
        lambda it: it.take_while(3),
        lambda it: it.skip_while(3),
        lambda it: it.dedupe_by(3),
    ],
)
def test_non_callables_fail_fast(build) -> None:  # noqa: ANN001
    """Test that a non-callable argument raises at the call site."""
    with pytest.raises(TypeError, match="must be callable"):
        build(sc.Iter(TEN))
