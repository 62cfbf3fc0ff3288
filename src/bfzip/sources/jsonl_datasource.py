from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator


@dataclass(frozen=True, slots=True)
class JsonlDimensionSource:
    """
    Streams one JSON value per line.

    Each non-blank line is any JSON document, e.g.:
      1
      "red"
      {"size": "L"}

    Order preserved. Blank lines ignored. The file is read lazily, so only
    as much of it is parsed as the enumeration actually needs.
    """
    path: Path

    def __iter__(self) -> Iterator[Any]:
        with self.path.open("r", encoding="utf-8") as f:
            for line_no, line in enumerate(f, start=1):
                s = line.strip()
                if not s:
                    continue

                try:
                    value = json.loads(s)
                except json.JSONDecodeError as e:
                    raise ValueError(f"invalid JSON on line {line_no} of {self.path}: {e}") from e

                yield value
