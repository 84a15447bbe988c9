# Parameters/scales.py
# =====================================================================
# Scale identifiers known to the bundled crosswalk, in registration
# order (this is also the column order of convert_to_all results).
# =====================================================================

from __future__ import annotations

from pathlib import Path

SCALES: tuple[str, ...] = (
    "UIAA",
    "FR",
    "YDS",
    "UK_TECH",
    "UK_ADJ",
    "SAXON",
    "EWBANK_AU",
    "EWBANK_ZA",
    "FIN",
    "NOR",
    "BR",
    "POL",
    "V",
    "FONT",
)

SCALE_NAMES: dict[str, str] = {
    "UIAA":      "UIAA",
    "FR":        "French sport",
    "YDS":       "Yosemite Decimal System",
    "UK_TECH":   "British technical",
    "UK_ADJ":    "British adjectival",
    "SAXON":     "Saxon",
    "EWBANK_AU": "Ewbank (Australia / New Zealand)",
    "EWBANK_ZA": "Ewbank (South Africa)",
    "FIN":       "Finnish",
    "NOR":       "Norwegian",
    "BR":        "Brazilian technical",
    "POL":       "Polish (Kurtyka)",
    "V":         "Hueco V-scale",
    "FONT":      "Fontainebleau",
}

# per-scale cell delimiter; anything not listed uses "/"
SCALE_DELIMITERS: dict[str, str] = {}

# ── default crosswalk location ─────────────────────────────────────
DATA_DIR = Path(__file__).resolve().parents[1] / "data"
DEFAULT_GRADES_CSV = DATA_DIR / "grades.csv"
INDEX_COLUMN = "INDEX"
DEFAULT_TABLE = "grade_crosswalk"
