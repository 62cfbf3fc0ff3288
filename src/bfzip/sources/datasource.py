from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Protocol, Sequence


class DimensionSource(Protocol):
    """
    A forward-only stream of values for one dimension of a zip.

    The engine calls iter() exactly once and never rewinds.
    """

    def __iter__(self) -> Iterator[Any]:
        ...


@dataclass(frozen=True)
class InMemoryDimensionSource:
    """
    Simple in-memory source for tests and the HTTP surface.
    """

    items: Sequence[Any]

    def __iter__(self) -> Iterator[Any]:
        yield from self.items
