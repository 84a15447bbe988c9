# Bootstrap/GradeServices.py
# =====================================================================
# Composition root: configuration → data source → scales → service.
#
# Nothing here is memoized globally; build the service once at start-up
# and hand it to whoever needs it.
# =====================================================================

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Mapping

from dotenv import load_dotenv

from Databases.CacheSource import CachedGradeScaleDataSource
from Databases.CsvSource import CsvGradeScaleDataSource
from Databases.DataSource import GradeScaleDataSource
from Databases.PgSource import PostgresGradeScaleDataSource
from Grades.conversion import GradeConversionService
from Grades.scale import DEFAULT_DELIMITER, GradeScale
from Parameters.scales import DEFAULT_GRADES_CSV, SCALE_DELIMITERS, SCALES

logger = logging.getLogger(__name__)

BACKENDS = ("csv", "postgres")


def default_data_source(csv_path: str | Path | None = None) -> GradeScaleDataSource:
    """
    Data source chosen by GRADES_BACKEND (csv | postgres).  The CSV path
    comes from ``csv_path``, then GRADES_CSV, then the bundled file.
    """
    load_dotenv()
    backend = (os.getenv("GRADES_BACKEND") or "csv").strip().lower()

    if backend == "csv":
        path = csv_path or os.getenv("GRADES_CSV") or DEFAULT_GRADES_CSV
        inner: GradeScaleDataSource = CsvGradeScaleDataSource(path)
    elif backend == "postgres":
        inner = PostgresGradeScaleDataSource()
    else:
        raise ValueError(f"Unknown GRADES_BACKEND {backend!r} (expected one of {BACKENDS})")

    return CachedGradeScaleDataSource(inner)


def build_scales(
    source: GradeScaleDataSource,
    systems: Iterable[str] = SCALES,
    delimiters: Mapping[str, str] = SCALE_DELIMITERS,
) -> list[GradeScale]:
    return [
        GradeScale(
            system,
            source.index_to_grade_map(system),
            delimiter=delimiters.get(system, DEFAULT_DELIMITER),
        )
        for system in systems
    ]


def build_conversion_service(
    source: GradeScaleDataSource | None = None,
    systems: Iterable[str] = SCALES,
) -> GradeConversionService:
    source = source if source is not None else default_data_source()
    scales = build_scales(source, systems)
    logger.info("[GradeServices] %d scales registered from %r", len(scales), source)
    return GradeConversionService(scales)
