from __future__ import annotations

from bfzip.core.engine.engine import BreadthFirstZip, breadth_first_zip

__all__ = ["BreadthFirstZip", "breadth_first_zip"]
