from __future__ import annotations

import pytest

from Bootstrap.GradeServices import build_conversion_service
from Databases.CsvSource import CsvGradeScaleDataSource
from Grades.conversion import GradeConversionService
from Grades.scale import GradeScale
from Parameters.scales import DEFAULT_GRADES_CSV

# Small aligned crosswalk: row i means the same difficulty in every scale.
CROSSWALK = {
    "AA": {1: "1", 2: "2", 3: "3/3+", 4: "4", 5: "5"},
    "BB": {1: "a", 2: "b/B", 3: "c", 4: "c", 5: "d"},
    "CC": {1: "x/y", 2: "y/z", 3: "w"},
    "DD": {1: "low", 2: "low", 3: "mid", 4: "high", 5: "high"},
}


class DictSource:
    """In-memory data source that counts how often each scale is read."""

    def __init__(self, data: dict[str, dict[int, str]]) -> None:
        self.data = data
        self.calls: dict[str, int] = {}

    def index_to_grade_map(self, system: str) -> dict[int, str]:
        self.calls[system] = self.calls.get(system, 0) + 1
        return dict(self.data.get(system, {}))


@pytest.fixture
def dict_source() -> DictSource:
    return DictSource(CROSSWALK)


@pytest.fixture
def small_service() -> GradeConversionService:
    return GradeConversionService(
        GradeScale(system, cells) for system, cells in CROSSWALK.items()
    )


@pytest.fixture(scope="session")
def bundled_service() -> GradeConversionService:
    return build_conversion_service(CsvGradeScaleDataSource(DEFAULT_GRADES_CSV))


@pytest.fixture
def source_factory() -> type[DictSource]:
    return DictSource
