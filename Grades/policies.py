# Grades/policies.py
# =====================================================================
# Tie-break rules for ambiguous many-to-many mappings.
#
#   PrimaryIndexPolicy  – which index, when a label covers several rows
#   TargetVariantPolicy – which variant, when a cell lists several labels
#
# MIDDLE is the lower-middle element on even counts.
# =====================================================================

from __future__ import annotations

from enum import Enum
from typing import Sequence, TypeVar

T = TypeVar("T")


class PrimaryIndexPolicy(str, Enum):
    LOWEST = "lowest"
    MIDDLE = "middle"
    HIGHEST = "highest"

    def pick(self, sorted_items: Sequence[T]) -> T:
        if not sorted_items:
            raise ValueError("Cannot pick an index from an empty list")
        if self is PrimaryIndexPolicy.LOWEST:
            return sorted_items[0]
        if self is PrimaryIndexPolicy.HIGHEST:
            return sorted_items[-1]
        return sorted_items[(len(sorted_items) - 1) // 2]


class TargetVariantPolicy(str, Enum):
    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"

    def pick(self, variants: Sequence[T]) -> T:
        if not variants:
            raise ValueError("Cannot pick a variant from an empty list")
        if self is TargetVariantPolicy.FIRST:
            return variants[0]
        if self is TargetVariantPolicy.LAST:
            return variants[-1]
        return variants[(len(variants) - 1) // 2]
