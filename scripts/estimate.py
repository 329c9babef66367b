"""
scripts/estimate.py
────────────────────────────────────────────────────────────────────────
One validation + estimation pass from the command line:

    python -m scripts.estimate --weight 70 --height-cm 175 --age 30 \
        --gender male --activity 1.55

    python -m scripts.estimate --unit-system imperial --weight 154 \
        --height-ft 5 --height-in 9 --age 30 --gender female \
        --activity 1.2 --body-fat 22

Exit status 1 when any field is rejected.
"""
from __future__ import annotations

import sys
from argparse import ArgumentParser
from typing import Any, Dict, List

from config import settings
from core.energy_calc import calculate
from core.validation import validate


def _parser() -> ArgumentParser:
    ap = ArgumentParser(description="Estimate BMR and TDEE")
    ap.add_argument(
        "--unit-system",
        default=settings.default_unit_system,
        help="metric (kg, cm) or imperial (lb, ft + in)",
    )
    ap.add_argument("--weight", help="kg, or lb for imperial")
    ap.add_argument("--height-cm")
    ap.add_argument("--height-ft")
    ap.add_argument("--height-in")
    ap.add_argument("--age")
    ap.add_argument("--gender", help="male | female")
    ap.add_argument("--body-fat", help="percent; switches to Katch–McArdle")
    ap.add_argument("--activity", help="1.2 | 1.375 | 1.55 | 1.725 | 1.9")
    return ap


def _raw_fields(args: Any) -> Dict[str, Any]:
    # flags stay strings, same as form input
    return {
        "weight": args.weight,
        "heightCm": args.height_cm,
        "heightFt": args.height_ft,
        "heightIn": args.height_in,
        "age": args.age,
        "gender": args.gender,
        "bodyFat": args.body_fat,
        "activityLevel": args.activity,
    }


def main(argv: List[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    check = validate(_raw_fields(args), args.unit_system)

    if not check.valid:
        for name, message in check.errors.items():
            print(f"  ! {name}: {message}")
        return 1

    result = calculate(check.record)
    print(f"BMR:  {result.bmr:.2f} kcal/day ({result.formula.value})")
    print(f"TDEE: {result.tdee:.2f} kcal/day (x{result.activity_level.value})")
    print("Calories per activity level:")
    for lvl, kcal in result.per_level_table.items():
        mark = "✓" if lvl is result.activity_level else "·"
        print(f"  {mark} {lvl.label}: {kcal:.2f} kcal/day")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
