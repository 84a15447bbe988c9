#!/usr/bin/env python3
# main.py ────────────────────────────────────────────────────────────────
# Command-line front end for climbing grade conversion.
#
#   ┌─────────────── General help ────────────────┐
#   │  python3 main.py -h                         │
#   │                                             │
#   │  python3 main.py <sub-cmd> -h               │
#   │      → help for a particular sub-command    │
#   └─────────────────────────────────────────────┘
#
# -----------------------------------------------------------------------
# positional arguments (sub-commands)
#   convert      every equivalent of a grade in one target scale
#   one          a single equivalent, chosen by index/variant policies
#   all          equivalents in every registered scale
#   scales       list registered scales
#   sort         order grade labels by difficulty within one scale
#
# global options
#   --csv PATH   crosswalk CSV (overrides GRADES_CSV)
#   --json       machine-readable output
#   -v           log data loading
# -----------------------------------------------------------------------
# Example
#   python3 main.py one 7a FR BR --target-policy last
# -----------------------------------------------------------------------

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# ── internal modules ────────────────────────────────────────────────
from Bootstrap.GradeConversion import GradeConversion
from Bootstrap.GradeServices import build_conversion_service, default_data_source
from Grades.conversion import GradeConversionService
from Grades.errors import GradeError
from Grades.policies import PrimaryIndexPolicy, TargetVariantPolicy
from Parameters.scales import SCALE_NAMES
from Utils.grade_sort import as_records, sort_grades


# ===================================================================
# helpers
def _service(ns: argparse.Namespace) -> GradeConversionService:
    return build_conversion_service(default_data_source(ns.csv))


def _emit(ns: argparse.Namespace, payload: object, text: str) -> None:
    if ns.json:
        print(json.dumps(payload, ensure_ascii=False))
    else:
        print(text)


# ===================================================================
# sub-command functions
# -------------------------------------------------------------------
def cmd_convert(ns: argparse.Namespace) -> None:
    chain = GradeConversion(_service(ns)).start(ns.value, ns.source)
    grades = chain.to(ns.target)
    _emit(ns, [g.value for g in grades], " / ".join(g.value for g in grades))


def cmd_one(ns: argparse.Namespace) -> None:
    chain = GradeConversion(_service(ns)).start(ns.value, ns.source)
    grade = chain.towards(ns.target).single(
        PrimaryIndexPolicy(ns.source_policy),
        TargetVariantPolicy(ns.target_policy),
    )
    value = grade.value if grade is not None else None
    _emit(ns, value, value if value is not None else "-")


def cmd_all(ns: argparse.Namespace) -> None:
    chain = GradeConversion(_service(ns)).start(ns.value, ns.source)
    records = as_records(chain.to_all(ns.include_source))
    lines = [
        f"{r['system']:<10} {' / '.join(r['grades']) or '-'}"
        for r in records
    ]
    _emit(ns, records, "\n".join(lines))


def cmd_scales(ns: argparse.Namespace) -> None:
    service = _service(ns)
    records = [
        {
            "system": system,
            "name": SCALE_NAMES.get(system, system),
            "indexes": len(service.scale_of(system)),
        }
        for system in service.systems()
    ]
    lines = [f"{r['system']:<10} {r['indexes']:>3}  {r['name']}" for r in records]
    _emit(ns, records, "\n".join(lines))


def cmd_sort(ns: argparse.Namespace) -> None:
    scale = _service(ns).scale_of(ns.system)
    ordered = sort_grades(ns.labels, scale)
    _emit(ns, ordered, " ".join(ordered))


# ===================================================================
# build the argparse tree
# -------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Climbing grade conversion – master CLI",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("--csv", type=Path, default=None,
                   help="crosswalk CSV (default: GRADES_CSV or bundled file)")
    p.add_argument("--json", action="store_true", help="print JSON")
    p.add_argument("-v", "--verbose", action="store_true", help="log data loading")
    sub = p.add_subparsers(dest="cmd", required=True)

    # --- convert ---------------------------------------------------
    sp = sub.add_parser("convert", help="all equivalents in one scale")
    sp.add_argument("value",  help='grade label, e.g. "6c+"')
    sp.add_argument("source", help="scale of VALUE, e.g. FR")
    sp.add_argument("target", help="target scale, e.g. YDS")
    sp.set_defaults(func=cmd_convert)

    # --- one -------------------------------------------------------
    sp = sub.add_parser("one", help="a single equivalent chosen by policy")
    sp.add_argument("value")
    sp.add_argument("source")
    sp.add_argument("target")
    sp.add_argument("--source-policy", choices=[x.value for x in PrimaryIndexPolicy],
                    default=PrimaryIndexPolicy.LOWEST.value,
                    help="which index when the grade spans several rows")
    sp.add_argument("--target-policy", choices=[x.value for x in TargetVariantPolicy],
                    default=TargetVariantPolicy.FIRST.value,
                    help="which variant when the target cell lists several")
    sp.set_defaults(func=cmd_one)

    # --- all -------------------------------------------------------
    sp = sub.add_parser("all", help="equivalents in every registered scale")
    sp.add_argument("value")
    sp.add_argument("source")
    sp.add_argument("--include-source", action="store_true",
                    help="also list the input grade under its own scale")
    sp.set_defaults(func=cmd_all)

    # --- scales ----------------------------------------------------
    sp = sub.add_parser("scales", help="list registered scales")
    sp.set_defaults(func=cmd_scales)

    # --- sort ------------------------------------------------------
    sp = sub.add_parser("sort", help="order labels by difficulty")
    sp.add_argument("system")
    sp.add_argument("labels", nargs="+")
    sp.set_defaults(func=cmd_sort)

    return p


# ===================================================================
def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns     = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        ns.func(ns)
    except GradeError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    return 0


# ===================================================================
if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
