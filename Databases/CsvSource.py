# Databases/CsvSource.py
# =====================================================================
# Crosswalk stored as one CSV file:
#
#   INDEX,UIAA,FR,YDS,…
#   1,I,1,5.2,…
#   14,VIII-,6c/6c+,5.11b/5.11c,…
#
# Blank cells are skipped, so a scale that stops early simply has
# fewer indexes than the others.
# =====================================================================

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from Grades.errors import InvalidScaleData, ScaleDataUnavailable
from Grades.values import canonical_system
from Parameters.scales import INDEX_COLUMN

logger = logging.getLogger(__name__)


class CsvGradeScaleDataSource:
    def __init__(self, path: str | Path, delimiter: str = ",") -> None:
        self.path = Path(path)
        self.delimiter = delimiter

    def __repr__(self) -> str:
        return f"CsvGradeScaleDataSource({str(self.path)!r})"

    # ------------------------------------------------------------------
    def _read(self) -> pd.DataFrame:
        if not self.path.is_file():
            raise ScaleDataUnavailable(f"Grades CSV file not found: {self.path}")
        df = pd.read_csv(
            self.path,
            sep=self.delimiter,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8-sig",
        )
        df.columns = [str(c).strip() for c in df.columns]
        return df

    def systems(self) -> list[str]:
        """Scale columns of the file, in file order."""
        return [c for c in self._read().columns if c != INDEX_COLUMN]

    def index_to_grade_map(self, system: str) -> dict[int, str]:
        key = canonical_system(system)
        df = self._read()

        if INDEX_COLUMN not in df.columns or key not in df.columns:
            raise ScaleDataUnavailable(
                f"Missing '{INDEX_COLUMN}' or '{key}' column in {self.path}"
            )

        out: dict[int, str] = {}
        for raw_idx, raw_val in zip(df[INDEX_COLUMN], df[key]):
            val = raw_val.strip()
            if not val:
                continue
            try:
                idx = int(raw_idx.strip())
            except ValueError:
                raise InvalidScaleData(
                    f"{key}: non-integer index {raw_idx!r} in {self.path}"
                ) from None
            out[idx] = val

        logger.info("[CsvSource] %s → %d indexes from %s", key, len(out), self.path)
        return dict(sorted(out.items()))
