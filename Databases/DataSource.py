# Databases/DataSource.py
# =====================================================================
# What the core needs from a crosswalk backend: per scale id, a map
# {index: raw cell} whose keys are 1..N and whose row numbers line up
# across every scale of the same source.
# =====================================================================

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class GradeScaleDataSource(Protocol):
    def index_to_grade_map(self, system: str) -> dict[int, str]:
        ...
