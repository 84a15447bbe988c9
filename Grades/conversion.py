# Grades/conversion.py
# =====================================================================
# Conversion between registered scales through their shared index
# space.  Row i of every scale denotes the same difficulty, so a grade
# is converted by looking up its row(s) in the source scale and reading
# the same row(s) back in the target scale.
#
#   convert        – every equivalent (all source rows, all variants)
#   convert_one    – exactly one equivalent, chosen by two policies
#   convert_to_all – convert() fanned out to every registered scale
# =====================================================================

from __future__ import annotations

from typing import Iterable

from Grades.errors import InvalidScaleData, ScaleNotRegistered
from Grades.policies import PrimaryIndexPolicy, TargetVariantPolicy
from Grades.scale import GradeScale
from Grades.values import Grade, canonical_system, normalize_label


class GradeConversionService:
    """Registry of GradeScale instances keyed by canonical scale id."""

    def __init__(self, scales: Iterable[GradeScale]) -> None:
        registry: dict[str, GradeScale] = {}
        for scale in scales:
            if scale.system in registry:
                raise InvalidScaleData(f"Scale registered twice: {scale.system}")
            registry[scale.system] = scale
        self._scales = registry

    def systems(self) -> tuple[str, ...]:
        """Registered scale ids, in registration order."""
        return tuple(self._scales)

    def scale_of(self, system: str) -> GradeScale:
        key = canonical_system(system)
        try:
            return self._scales[key]
        except KeyError:
            raise ScaleNotRegistered(f"Scale not registered: {key}") from None

    # ------------------------------------------------------------------
    def convert(self, from_grade: Grade, to_system: str) -> list[Grade]:
        """
        All equivalents of ``from_grade`` in ``to_system``, ascending by
        row, cell order within a row, without case-insensitive repeats.
        """
        source = self.scale_of(from_grade.system)
        target = self.scale_of(to_system)

        seen: set[str] = set()
        out: list[Grade] = []
        for index in source.all_indexes_for(from_grade):
            for variant in target.variants_at(index):
                key = normalize_label(variant)
                if key in seen:
                    continue
                seen.add(key)
                out.append(Grade(variant, target.system))
        return out

    def convert_one(
        self,
        from_grade: Grade,
        to_system: str,
        source_policy: PrimaryIndexPolicy = PrimaryIndexPolicy.LOWEST,
        target_policy: TargetVariantPolicy = TargetVariantPolicy.FIRST,
    ) -> Grade | None:
        """
        One equivalent: ``source_policy`` picks the row in the source
        scale, ``target_policy`` picks the variant in the target cell.
        Returns None when the target scale is undefined at that row.
        """
        source = self.scale_of(from_grade.system)
        target = self.scale_of(to_system)

        index = source.index_for(from_grade, source_policy)
        variants = target.variants_at(index)
        if not variants:
            return None
        return Grade(target_policy.pick(variants), target.system)

    def convert_to_all(
        self, from_grade: Grade, include_source: bool = False
    ) -> dict[str, list[Grade]]:
        """
        ``convert`` for every other registered scale.  With
        ``include_source`` the source scale maps to the caller's grade
        itself, untouched.
        """
        source = self.scale_of(from_grade.system)

        result: dict[str, list[Grade]] = {}
        for system in self._scales:
            if system == source.system:
                if include_source:
                    result[system] = [from_grade]
                continue
            result[system] = self.convert(from_grade, system)
        return result
