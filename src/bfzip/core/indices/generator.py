from __future__ import annotations

from typing import Iterator, Sequence

from bfzip.core.indices.bounds import Bound, suffix_capacity

IndexTuple = tuple[int, ...]


def index_tuples(total: int, bounds: Sequence[Bound]) -> Iterator[IndexTuple]:
    """
    Lazily yield every index tuple summing to `total`, in lexicographic order.

    `bounds` holds one entry per dimension: the max valid index, or None when
    unknown. It is read live rather than copied, so a bound tightened while
    this generator is suspended applies to every tuple produced afterwards.

    Candidates whose remaining sum cannot fit into the later dimensions are
    skipped without descending into them.
    """
    if total < 0 or len(bounds) == 0:
        return
    yield from _compose(bounds, 0, total, ())


def _compose(
    bounds: Sequence[Bound],
    dim: int,
    remaining: int,
    prefix: IndexTuple,
) -> Iterator[IndexTuple]:
    last = len(bounds) - 1

    if dim == last:
        b = bounds[dim]
        if b is None or remaining <= b:
            yield prefix + (remaining,)
        return

    value = 0
    while value <= remaining:
        b = bounds[dim]
        if b is not None and value > b:
            break

        rest = remaining - value
        capacity = suffix_capacity(bounds, dim + 1)
        if capacity is None or rest <= capacity:
            yield from _compose(bounds, dim + 1, rest, prefix + (value,))

        value += 1

