from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

import structlog

from bfzip.core.cursor.cached import CachedCursor
from bfzip.core.engine.state import EngineState
from bfzip.core.indices.bounds import Bound, BoundTable
from bfzip.core.indices.generator import IndexTuple, index_tuples

log = structlog.get_logger()


class BreadthFirstZip:
    """
    Lazy breadth-first exhaustive zip over N forward-only iterables.

    Yields every combination exactly once, ordered by the sum of the
    per-dimension positions, ties broken lexicographically by position.
    Each source is pulled at most once per position; lengths are learned
    as sources run dry and prune all later candidates.
    """

    def __init__(self, *iterables: Iterable[Any]) -> None:
        if not iterables:
            raise ValueError("breadth-first zip requires at least one iterable")

        self._cursors = [CachedCursor(it, dimension=d) for d, it in enumerate(iterables)]
        self._bounds = BoundTable(len(self._cursors))
        self._state = EngineState(dimensions=len(self._cursors))
        self._candidates: Optional[Iterator[IndexTuple]] = index_tuples(0, self._bounds)

        log.debug("engine.created", dimensions=self._state.dimensions)

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def bounds(self) -> tuple[Bound, ...]:
        return self._bounds.as_tuple()

    def __iter__(self) -> BreadthFirstZip:
        return self

    def __next__(self) -> tuple[Any, ...]:
        _, values = self._advance()
        return values

    def indexed(self) -> Iterator[tuple[IndexTuple, tuple[Any, ...]]]:
        """
        Iterate (index tuple, value tuple) pairs.

        Shares progress with the engine itself: a combination taken through
        one view is not seen again through the other.
        """
        while True:
            try:
                yield self._advance()
            except StopIteration:
                return

    # ----------------------------------------------------------------

    def _advance(self) -> tuple[IndexTuple, tuple[Any, ...]]:
        while not self._state.terminated:
            assert self._candidates is not None

            for indices in self._candidates:
                values = self._resolve(indices)
                if values is not None:
                    self._state.record_emission()
                    return indices, values
                if self._state.terminated:
                    raise StopIteration

            if self._level_is_final():
                self._terminate()
                break

            level = self._state.next_level()
            self._candidates = index_tuples(level, self._bounds)
            log.debug("engine.level_advanced", level=level, bounds=self._bounds.as_tuple())

        raise StopIteration

    def _resolve(self, indices: IndexTuple) -> Optional[tuple[Any, ...]]:
        values = []
        for cursor, index in zip(self._cursors, indices):
            try:
                values.append(cursor.get(index))
            except IndexError:
                self._on_short_dimension(cursor)
                return None
        return tuple(values)

    def _on_short_dimension(self, cursor: CachedCursor[Any]) -> None:
        length = cursor.known_length()
        assert length is not None

        self._state.record_rejection()
        if self._bounds.tighten(cursor.dimension, length - 1):
            log.debug(
                "engine.bound_discovered",
                dimension=cursor.dimension,
                length=length,
                level=self._state.level,
            )

        if length == 0:
            self._terminate()

    def _level_is_final(self) -> bool:
        if self._bounds.has_empty_dimension():
            return True
        max_total = self._bounds.max_total()
        return max_total is not None and self._state.level >= max_total

    def _terminate(self) -> None:
        self._state.terminated = True
        self._candidates = None
        log.info(
            "engine.exhausted",
            dimensions=self._state.dimensions,
            emitted=self._state.emitted,
            rejected=self._state.rejected,
            level=self._state.level,
        )


def breadth_first_zip(*iterables: Iterable[Any]) -> BreadthFirstZip:
    """Breadth-first exhaustive zip of `iterables` (see BreadthFirstZip)."""
    return BreadthFirstZip(*iterables)
