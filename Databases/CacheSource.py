# Databases/CacheSource.py
# =====================================================================
# Memoizes index_to_grade_map() per scale id on top of another source,
# so building every scale reads the backing file/table once per scale.
# =====================================================================

from __future__ import annotations

import logging

from Databases.DataSource import GradeScaleDataSource
from Grades.values import canonical_system

logger = logging.getLogger(__name__)


class CachedGradeScaleDataSource:
    def __init__(self, inner: GradeScaleDataSource) -> None:
        self.inner = inner
        self._cache: dict[str, dict[int, str]] = {}

    def __repr__(self) -> str:
        return f"CachedGradeScaleDataSource({self.inner!r})"

    def index_to_grade_map(self, system: str) -> dict[int, str]:
        key = canonical_system(system)
        if key in self._cache:
            logger.debug("[Cache] hit %s", key)
        else:
            self._cache[key] = self.inner.index_to_grade_map(key)
        return dict(self._cache[key])

    def clear(self, system: str | None = None) -> None:
        """Forget one scale, or everything when ``system`` is None."""
        if system is None:
            self._cache.clear()
        else:
            self._cache.pop(canonical_system(system), None)
