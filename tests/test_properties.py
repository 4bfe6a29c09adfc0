"""Tests for properties that must hold for any input."""

import math
import operator

import pytest

import seqchain as sc

INPUTS = [
    [],
    [7],
    [1, 2, 3, 4, 5, 6, 7, 8, 9, 10],
    [1, 2, 2, 2, 3, 3, 4, 4, 4, 4, 4, 3, 3],
    ["a", "b", "b", None, None, "a"],
]
COUNTS = [0, 1, 3, 10, 20]


@pytest.mark.parametrize("data", INPUTS)
def test_collect_round_trips(data: list[object]) -> None:
    """Test that collecting an indexed container reproduces it."""
    assert sc.Iter.from_indexed(data).collect().inner() == data


@pytest.mark.parametrize("data", INPUTS)
@pytest.mark.parametrize("n", COUNTS)
def test_take_and_skip_split(data: list[object], n: int) -> None:
    """Test that take(n) and skip(n) cover the input exactly once."""
    head = sc.Iter(data).take(n).collect().inner()
    tail = sc.Iter(data).skip(n).collect().inner()
    assert len(head) == min(n, len(data))
    assert head + tail == data


@pytest.mark.parametrize("data", INPUTS[:4])
def test_filter_and_remove_partition(data: list[int]) -> None:
    """Test that filter and remove split the input without loss."""

    def _pred(x: int) -> bool:
        return x % 3 == 0

    kept = sc.Iter(data).filter(_pred).collect().inner()
    dropped = sc.Iter(data).remove(_pred).collect().inner()
    assert len(kept) + len(dropped) == len(data)
    assert kept == [x for x in data if _pred(x)]
    assert dropped == [x for x in data if not _pred(x)]


@pytest.mark.parametrize("data", INPUTS)
def test_dedupe_idempotent(data: list[object]) -> None:
    """Test that deduping twice equals deduping once."""
    once = sc.Iter(data).dedupe().collect().inner()
    twice = sc.Iter(data).dedupe().dedupe().collect().inner()
    assert once == twice
    assert all(a != b for a, b in zip(once, once[1:], strict=False))


@pytest.mark.parametrize("left", INPUTS)
@pytest.mark.parametrize("right", INPUTS)
def test_zip_length_and_pairs(left: list[object], right: list[object]) -> None:
    """Test zip length and pair content."""
    pairs = sc.Iter(left).zip(right).collect().inner()
    assert len(pairs) == min(len(left), len(right))
    assert all(pair == (left[i], right[i]) for i, pair in enumerate(pairs))


@pytest.mark.parametrize("data", INPUTS)
@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_partition_shape(data: list[object], k: int) -> None:
    """Test partition chunk count, sizes and concatenation."""
    chunks = sc.Iter(data).partition(k).collect().inner()
    assert len(chunks) == math.ceil(len(data) / k)
    assert all(len(chunk) == k for chunk in chunks[:-1])
    if chunks:
        assert len(chunks[-1]) == (len(data) % k or k)
    assert [x for chunk in chunks for x in chunk] == data


def test_scenarios() -> None:
    """Test the reference scenarios on small inputs."""
    ten = list(range(1, 11))
    assert sc.Iter.from_keyed(dict(enumerate(ten))).filter(
        lambda x: x % 2 == 1
    ).collect().inner() == [1, 3, 5, 7, 9]
    assert sc.Iter(ten).skip_while(lambda x: x < 4).collect().inner() == [
        4,
        5,
        6,
        7,
        8,
        9,
        10,
    ]
    assert sc.Iter.from_keyed({}).min() == sc.NONE
    assert sc.Iter.from_keyed({}).max() == sc.NONE
    assert sc.Iter(INPUTS[3]).dedupe().collect().inner() == [1, 2, 3, 4, 3]
    assert sc.Iter([1, 2, 3, 4]).reductions(operator.add, 0).collect().inner() == [
        1,
        3,
        6,
        10,
    ]


def test_chain_pulls_one_layer_at_a_time() -> None:
    """Test that a composed chain only does the work needed for one output."""
    seen: list[int] = []

    def _track(x: int) -> int:
        seen.append(x)
        return x

    chain = (
        sc.Iter.from_count(1)
        .map(_track)
        .filter(lambda x: x % 3 == 0)
        .map(lambda x: x * 10)
        .take(2)
    )
    assert seen == []
    assert chain.next() == sc.Some(30)
    assert seen == [1, 2, 3]
    assert chain.collect().inner() == [60]
    assert seen == [1, 2, 3, 4, 5, 6]
