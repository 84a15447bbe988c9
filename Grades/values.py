# Grades/values.py
# =====================================================================
# Immutable value objects shared by scales and the conversion service.
#
#   Grade            – textual label + canonical (uppercase) scale id
#   DifficultyIndex  – positive rung on a scale's ordinal ladder
# =====================================================================

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field


# ---------------------------------------------------------------------
def normalize_label(label: str) -> str:
    """
    Lookup key for a grade label: trim, Unicode NFC, lowercase.
    Idempotent – normalizing a key again returns the same key.
    """
    return unicodedata.normalize("NFC", label.strip()).lower()


def canonical_system(system: str) -> str:
    """Scale identifiers are compared trimmed and upper-cased ("fr" → "FR")."""
    return system.strip().upper()


# ---------------------------------------------------------------------
@dataclass(frozen=True)
class Grade:
    """
    A grade label in one scale, e.g. ``Grade("6c+", "fr")``.

    ``value`` is kept verbatim for display; equality for lookups goes
    through ``key`` (normalized label) and the canonical ``system``.
    """

    value: str
    system: str
    key: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "system", canonical_system(self.system))
        object.__setattr__(self, "key", normalize_label(self.value))

    def same_grade(self, other: Grade) -> bool:
        return self.system == other.system and self.key == other.key

    def __str__(self) -> str:
        return f"{self.value} ({self.system})"


@dataclass(frozen=True, order=True)
class DifficultyIndex:
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Difficulty index must be an int, got {self.value!r}")
        if self.value < 1:
            raise ValueError(f"Difficulty index must be positive, got {self.value}")

    def __int__(self) -> int:
        return self.value
