# Bootstrap/GradeConversion.py
# =====================================================================
# Fluent wrapper over an explicit GradeConversionService:
#
#   conv = GradeConversion(service)
#   conv.start("6c+", "fr").to("YDS")                     → [Grade, …]
#   conv.start("6c+", "fr").to_all(include_source=True)   → {scale: [...]}
#   conv.start("7a", "fr").towards("BR").single(
#       PrimaryIndexPolicy.LOWEST, TargetVariantPolicy.LAST)  → Grade | None
# =====================================================================

from __future__ import annotations

from typing import Iterator

from Grades.conversion import GradeConversionService
from Grades.policies import PrimaryIndexPolicy, TargetVariantPolicy
from Grades.values import Grade


class GradeConversion:
    def __init__(self, service: GradeConversionService) -> None:
        self.service = service

    def start(self, value: str, system: str) -> GradeConversionChain:
        return GradeConversionChain(self.service, Grade(value, system))


class GradeConversionChain:
    """Conversions of one grade; iterating walks ``to_all(True)``."""

    def __init__(self, service: GradeConversionService, grade: Grade) -> None:
        self.service = service
        self.grade = grade

    def to(self, target: str) -> list[Grade]:
        return self.service.convert(self.grade, target)

    def to_all(self, include_source: bool = False) -> dict[str, list[Grade]]:
        return self.service.convert_to_all(self.grade, include_source)

    def towards(self, target: str) -> ConversionChain:
        return ConversionChain(self.service, self.grade, target)

    def __iter__(self) -> Iterator[Grade]:
        for grades in self.to_all(True).values():
            yield from grades

    def as_dict(self) -> dict[str, list[str]]:
        return {system: [g.value for g in grades] for system, grades in self.to_all(True).items()}


class ConversionChain:
    def __init__(self, service: GradeConversionService, grade: Grade, target: str) -> None:
        self.service = service
        self.grade = grade
        self.target = target

    def all(self) -> list[Grade]:
        return self.service.convert(self.grade, self.target)

    def single(
        self,
        source_policy: PrimaryIndexPolicy = PrimaryIndexPolicy.LOWEST,
        target_policy: TargetVariantPolicy = TargetVariantPolicy.FIRST,
    ) -> Grade | None:
        return self.service.convert_one(self.grade, self.target, source_policy, target_policy)
