from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class EngineState:
    """
    Progress of a breadth-first zip.

    - level: index sum currently being enumerated
    - emitted: combinations returned so far
    - rejected: candidates dropped because a dimension ran out
    - terminated: no combination will ever be returned again

    Guardrails:
      - counters only move while the engine is not terminated
        (prevents "emission after exhaustion" bugs)
    """

    dimensions: int
    level: int = 0
    emitted: int = 0
    rejected: int = 0
    terminated: bool = False

    def next_level(self) -> int:
        if self.terminated:
            raise RuntimeError("cannot advance level after termination")
        self.level += 1
        return self.level

    def record_emission(self) -> int:
        if self.terminated:
            raise RuntimeError("cannot emit after termination")
        self.emitted += 1
        return self.emitted

    def record_rejection(self) -> int:
        if self.terminated:
            raise RuntimeError("cannot reject after termination")
        self.rejected += 1
        return self.rejected
