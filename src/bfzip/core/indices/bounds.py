from __future__ import annotations

from typing import Optional, Sequence

# A bound is the max valid index of a dimension, or None while unknown.
Bound = Optional[int]

UNBOUNDED: Bound = None

# Max index recorded for a dimension whose source produced nothing.
EMPTY = -1


class BoundTable:
    """
    Per-dimension upper bounds discovered during enumeration.

    Guardrails:
      - every entry starts UNBOUNDED
      - an entry is tightened at most once and is final afterwards
    """

    def __init__(self, dimensions: int) -> None:
        if dimensions <= 0:
            raise ValueError("dimensions must be > 0")
        self._bounds: list[Bound] = [UNBOUNDED] * dimensions

    def __len__(self) -> int:
        return len(self._bounds)

    def __getitem__(self, dim: int) -> Bound:
        return self._bounds[dim]

    def bound(self, dim: int) -> Bound:
        return self._bounds[dim]

    def is_bounded(self, dim: int) -> bool:
        return self._bounds[dim] is not None

    def tighten(self, dim: int, max_index: int) -> bool:
        """
        Record the final max index of `dim`.

        Returns True if the entry changed, False if it was already set to
        the same value.
        """
        if max_index < EMPTY:
            raise ValueError("max_index must be >= -1")

        current = self._bounds[dim]
        if current is not None:
            if current != max_index:
                raise RuntimeError(
                    f"bound of dimension {dim} already fixed at {current}, got {max_index}"
                )
            return False

        self._bounds[dim] = max_index
        return True

    def all_bounded(self) -> bool:
        return all(b is not None for b in self._bounds)

    def has_empty_dimension(self) -> bool:
        return any(b == EMPTY for b in self._bounds)

    def max_total(self) -> Optional[int]:
        """Largest reachable index sum, once every bound is known."""
        if not self.all_bounded():
            return None
        return sum(self._bounds)  # type: ignore[arg-type]

    def as_tuple(self) -> tuple[Bound, ...]:
        return tuple(self._bounds)


def suffix_capacity(bounds: Sequence[Bound], start: int) -> Optional[int]:
    """Sum of bounds from `start` onwards, or None if any of them is unbounded."""
    total = 0
    for b in bounds[start:]:
        if b is None:
            return None
        total += b
    return total
