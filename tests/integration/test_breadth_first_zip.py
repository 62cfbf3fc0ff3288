from __future__ import annotations

from collections import Counter
from itertools import count, islice

import pytest

from bfzip import BreadthFirstZip, breadth_first_zip


class CountingSource:
    """
    Instrumented dimension: counts how often each position is pulled
    and how often the iterator is polled after it ran dry.
    """

    def __init__(self, length: int | None) -> None:
        self.length = length
        self.reads: Counter[int] = Counter()
        self.polls_after_end = 0
        self._pos = 0

    def __iter__(self) -> "CountingSource":
        return self

    def __next__(self) -> int:
        if self.length is not None and self._pos >= self.length:
            self.polls_after_end += 1
            raise StopIteration
        pos = self._pos
        self.reads[pos] += 1
        self._pos += 1
        return pos


def test_triples_in_breadth_first_order() -> None:
    out = list(breadth_first_zip(range(3), range(3), range(3)))

    assert out == [
        # index sum = 0
        (0, 0, 0),
        # index sum = 1
        (0, 0, 1), (0, 1, 0), (1, 0, 0),
        # index sum = 2
        (0, 0, 2), (0, 1, 1), (0, 2, 0), (1, 0, 1), (1, 1, 0), (2, 0, 0),
        # index sum = 3
        (0, 1, 2), (0, 2, 1), (1, 0, 2), (1, 1, 1), (1, 2, 0), (2, 0, 1), (2, 1, 0),
        # index sum = 4
        (0, 2, 2), (1, 1, 2), (1, 2, 1), (2, 0, 2), (2, 1, 1), (2, 2, 0),
        # index sum = 5
        (1, 2, 2), (2, 1, 2), (2, 2, 1),
        # index sum = 6
        (2, 2, 2),
    ]


def test_empty_dimension_emits_nothing() -> None:
    engine = breadth_first_zip([], range(5))

    assert list(engine) == []
    assert engine.state.terminated
    assert engine.state.emitted == 0
    assert engine.bounds[0] == -1


def test_mixed_lengths() -> None:
    engine = breadth_first_zip("ab", range(5))
    pairs = list(engine.indexed())

    assert len(pairs) == 10
    assert [indices for indices, _ in pairs] == [
        (0, 0),
        (0, 1), (1, 0),
        (0, 2), (1, 1),
        (0, 3), (1, 2),
        (0, 4), (1, 3),
        (1, 4),
    ]
    assert pairs[-1] == ((1, 4), ("b", 4))
    assert engine.bounds == (1, 4)


def test_single_dimension_is_plain_iteration() -> None:
    assert list(breadth_first_zip("abc")) == [("a",), ("b",), ("c",)]


def test_zero_dimensions_rejected() -> None:
    with pytest.raises(ValueError):
        BreadthFirstZip()


def test_exhaustion_is_idempotent() -> None:
    engine = breadth_first_zip([1], [2])

    assert next(engine) == (1, 2)
    for _ in range(3):
        with pytest.raises(StopIteration):
            next(engine)
    assert engine.state.terminated
    assert engine.state.emitted == 1


def test_infinite_dimensions() -> None:
    out = list(islice(breadth_first_zip(count(), count()), 6))
    assert out == [(0, 0), (0, 1), (1, 0), (0, 2), (1, 1), (2, 0)]


def test_infinite_with_finite_dimension() -> None:
    engine = breadth_first_zip(count(), "xy")
    out = list(islice(engine, 7))

    assert out == [
        (0, "x"),
        (0, "y"), (1, "x"),
        (1, "y"), (2, "x"),
        (2, "y"), (3, "x"),
    ]
    assert engine.bounds == (None, 1)
    assert not engine.state.terminated


def test_each_position_pulled_at_most_once() -> None:
    sources = [CountingSource(3), CountingSource(4), CountingSource(2)]
    out = list(breadth_first_zip(*sources))

    assert len(out) == 3 * 4 * 2
    for src in sources:
        assert set(src.reads) == set(range(src.length))
        assert all(n == 1 for n in src.reads.values())
        assert src.polls_after_end <= 1


def test_single_pull_with_infinite_dimension() -> None:
    finite = CountingSource(3)
    infinite = CountingSource(None)
    list(islice(breadth_first_zip(infinite, finite), 50))

    assert all(n == 1 for n in infinite.reads.values())
    assert all(n == 1 for n in finite.reads.values())
    assert finite.polls_after_end == 1


def test_engines_are_deterministic() -> None:
    def build() -> BreadthFirstZip:
        return breadth_first_zip(iter("abcd"), (x * x for x in range(3)), iter([True, False]))

    assert list(build()) == list(build())


def test_indexed_shares_progress_with_next() -> None:
    engine = breadth_first_zip(range(2), range(2))

    assert next(engine) == (0, 0)
    assert list(engine.indexed()) == [
        ((0, 1), (0, 1)),
        ((1, 0), (1, 0)),
        ((1, 1), (1, 1)),
    ]
    assert list(engine) == []


def test_source_errors_propagate() -> None:
    def broken():
        yield "ok"
        raise RuntimeError("source failed")

    engine = breadth_first_zip(broken(), range(3))
    assert next(engine) == ("ok", 0)
    assert next(engine) == ("ok", 1)
    with pytest.raises(RuntimeError, match="source failed"):
        next(engine)
