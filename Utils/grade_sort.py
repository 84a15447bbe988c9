# Utils/grade_sort.py
# =====================================================================
# Ordering and flattening helpers for display / JSON output.
#
# Public helpers:
#   sort_grades(labels, scale)  -> list[str]
#   as_records(result)          -> list[dict]
# =====================================================================

from __future__ import annotations

from typing import Iterable, Mapping

from Grades.scale import GradeScale
from Grades.values import Grade
from Parameters.scales import SCALE_NAMES


# ---------------------------------------------------------------------
def sort_grades(labels: Iterable[str], scale: GradeScale) -> list[str]:
    """
    Return labels in ascending difficulty for ``scale`` (lowest row a
    label sits on).  Labels the scale does not know are appended *after*
    all known ones, keeping their original relative order.
    """
    labels = list(labels)
    known   = [g for g in labels if scale.knows(g)]
    unknown = [g for g in labels if not scale.knows(g)]

    rank = {g: scale.to_index(Grade(g, scale.system)).value for g in known}
    return [*sorted(known, key=rank.__getitem__), *unknown]


def as_records(result: Mapping[str, list[Grade]]) -> list[dict[str, object]]:
    """
    Convert a scale→grades mapping into an **ordered list** of
    {"system": <id>, "name": <display name>, "grades": [<label>, …]}.
    """
    return [
        {
            "system": system,
            "name": SCALE_NAMES.get(system, system),
            "grades": [g.value for g in grades],
        }
        for system, grades in result.items()
    ]
