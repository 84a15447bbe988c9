# Grades/errors.py
# =====================================================================
# Exceptions raised by the grade-conversion core and its data sources.
# All of them derive from GradeError so callers (the CLI) can catch the
# whole family in one place.
# =====================================================================

from __future__ import annotations


class GradeError(Exception):
    """Base class for every grade-conversion failure."""


class InvalidScaleData(GradeError, ValueError):
    """Scale map is not indexed 1..N, or a cell cannot be parsed."""


class GradeNotFound(GradeError, LookupError):
    """Normalized grade label is unknown in the scale it claims."""


class IndexOutOfRange(GradeError, IndexError):
    """Reverse lookup on an index that has no cell in the scale."""


class ScaleNotRegistered(GradeError, LookupError):
    """Scale identifier is absent from the conversion registry."""


class ScaleDataUnavailable(GradeError, RuntimeError):
    """Data source cannot supply the crosswalk (missing file/column)."""
