# Grades/scale.py
# =====================================================================
# One grading scale's crosswalk column, indexed both ways:
#
#   index → raw cell      ("7/7+" at row 14)
#   grade key → indexes   ("v4" → (15, 16))
#
# A cell may hold several "/"-delimited variants and the same variant
# may sit on several rows; both structures are built once in __init__
# and never mutated afterwards.
# =====================================================================

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Iterable, Mapping

from Grades.errors import GradeNotFound, IndexOutOfRange, InvalidScaleData
from Grades.policies import PrimaryIndexPolicy
from Grades.values import DifficultyIndex, Grade, canonical_system, normalize_label

DEFAULT_DELIMITER = "/"

CellSplitter = Callable[[str], Iterable[str]]


class GradeScale:
    """
    Bidirectional index ↔ grade lookup for a single scale.

    ``splitter`` replaces the delimiter split when a scale needs its own
    parsing rule; its output is still trimmed and filtered for blanks.
    """

    def __init__(
        self,
        system: str,
        index_to_cell: Mapping[int, str],
        *,
        delimiter: str = DEFAULT_DELIMITER,
        splitter: CellSplitter | None = None,
    ) -> None:
        if not delimiter and splitter is None:
            raise ValueError("delimiter must be a non-empty string")

        self._system = canonical_system(system)
        self._delimiter = delimiter
        self._splitter = splitter

        _guard_continuous_indexing(self._system, index_to_cell)
        cells = {i: index_to_cell[i] for i in range(1, len(index_to_cell) + 1)}

        grade_to_indexes: dict[str, list[int]] = {}
        for index, cell in cells.items():
            variants = self._parse_cell(cell)
            if not variants:
                raise InvalidScaleData(
                    f"{self._system}: cell at index {index} has no grade variant ({cell!r})"
                )
            for variant in variants:
                bucket = grade_to_indexes.setdefault(normalize_label(variant), [])
                if index not in bucket:
                    bucket.append(index)

        self._index_to_cell = MappingProxyType(cells)
        self._grade_to_indexes = MappingProxyType(
            {key: tuple(sorted(idx)) for key, idx in grade_to_indexes.items()}
        )

    # ------------------------------------------------------------------
    @property
    def system(self) -> str:
        return self._system

    def __len__(self) -> int:
        return len(self._index_to_cell)

    def __repr__(self) -> str:
        return f"GradeScale({self._system!r}, {len(self)} indexes)"

    # ------------------------------------------------------------------
    # grade → index
    def index_for(
        self, grade: Grade, policy: PrimaryIndexPolicy = PrimaryIndexPolicy.LOWEST
    ) -> DifficultyIndex:
        """Single index for ``grade``; ``policy`` breaks ties between rows."""
        return DifficultyIndex(policy.pick(self._indexes_of(grade)))

    def to_index(self, grade: Grade) -> DifficultyIndex:
        return self.index_for(grade, PrimaryIndexPolicy.LOWEST)

    def all_indexes_for(self, grade: Grade) -> tuple[DifficultyIndex, ...]:
        """Every row carrying ``grade``, ascending."""
        return tuple(DifficultyIndex(i) for i in self._indexes_of(grade))

    def knows(self, grade: Grade | str) -> bool:
        label = grade.value if isinstance(grade, Grade) else grade
        return normalize_label(label) in self._grade_to_indexes

    # ------------------------------------------------------------------
    # index → grade
    def variants_at(self, index: DifficultyIndex | int) -> tuple[str, ...]:
        """
        Textual variants stored at ``index`` in cell order
        (e.g. "7/7+" → ("7", "7+")). Empty when the scale has no cell there.
        """
        cell = self._index_to_cell.get(int(index))
        return () if cell is None else self._parse_cell(cell)

    def first_grade_at(self, index: DifficultyIndex | int) -> Grade:
        variants = self.variants_at(index)
        if not variants:
            raise IndexOutOfRange(f"{self._system}: index out of range: {int(index)}")
        return Grade(variants[0], self._system)

    def grades(self) -> tuple[str, ...]:
        """Distinct variants in ascending index order, first spelling wins."""
        seen: set[str] = set()
        out: list[str] = []
        for index in self._index_to_cell:
            for variant in self.variants_at(index):
                key = normalize_label(variant)
                if key not in seen:
                    seen.add(key)
                    out.append(variant)
        return tuple(out)

    # ------------------------------------------------------------------
    def _indexes_of(self, grade: Grade) -> tuple[int, ...]:
        indexes = self._grade_to_indexes.get(normalize_label(grade.value))
        if indexes is None:
            raise GradeNotFound(f"Unknown grade in {self._system}: {grade.value}")
        return indexes

    def _parse_cell(self, cell: str) -> tuple[str, ...]:
        raw = self._splitter(cell) if self._splitter else cell.split(self._delimiter)
        parts = (part.strip() for part in raw)
        return tuple(part for part in parts if part)


# ---------------------------------------------------------------------
def _guard_continuous_indexing(system: str, index_to_cell: Mapping[int, str]) -> None:
    """Keys must be the integers 1..N (an empty map is fine)."""
    for key, cell in index_to_cell.items():
        if isinstance(key, bool) or not isinstance(key, int):
            raise InvalidScaleData(
                f"{system}: scale map must use integer keys starting from 1 (got {key!r})"
            )
        if not isinstance(cell, str):
            raise InvalidScaleData(f"{system}: cell at index {key} is not a string")

    for i in range(1, len(index_to_cell) + 1):
        if i not in index_to_cell:
            raise InvalidScaleData(f"{system}: scale map must be continuous (missing index {i})")
