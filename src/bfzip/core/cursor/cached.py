from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

import structlog

log = structlog.get_logger()

T = TypeVar("T")


class CachedCursor(Generic[T]):
    """
    Index-addressable view over a forward-only iterator.

    - values are pulled strictly in order and cached by position
    - each position is pulled from the source at most once
    - once the source runs dry the length is final and the source
      is never touched again
    """

    def __init__(self, source: Iterable[T], *, dimension: int = 0) -> None:
        self._it: Iterator[T] = iter(source)
        self._cache: list[T] = []
        self._exhausted = False
        self._dimension = dimension

    def __len__(self) -> int:
        # number of values cached so far (not the source length)
        return len(self._cache)

    @property
    def dimension(self) -> int:
        return self._dimension

    def is_exhausted(self) -> bool:
        return self._exhausted

    def known_length(self) -> Optional[int]:
        """Exact source length, or None while the source may still produce values."""
        return len(self._cache) if self._exhausted else None

    def get(self, index: int) -> T:
        """
        Return the value at `index`, pulling from the source as needed.

        Raises IndexError if the source ends before `index`.
        """
        if index < 0:
            raise ValueError("index must be >= 0")

        if index < len(self._cache):
            return self._cache[index]

        if self._exhausted:
            raise IndexError(f"dimension {self._dimension} has only {len(self._cache)} values")

        while len(self._cache) <= index:
            try:
                value = next(self._it)
            except StopIteration:
                self._exhausted = True
                log.debug(
                    "cursor.exhausted",
                    dimension=self._dimension,
                    length=len(self._cache),
                )
                raise IndexError(
                    f"dimension {self._dimension} has only {len(self._cache)} values"
                ) from None
            self._cache.append(value)

        return self._cache[index]
