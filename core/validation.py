"""
core/validation.py
────────────────────────────────────────────────────────────────────────
Turns raw form fields into a validated `InputRecord`, or a dict of
per-field messages keyed by the raw field name.

Pure and cheap: callers re-run it on every field change and only allow
the compute action while `ValidationResult.valid` is true.  Which height
fields count depends on the unit system passed in; the others are ignored.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, TypeVar

from core.models.anthro import (
    ACTIVITY_MULTIPLIERS,
    Gender,
    ImperialHeight,
    InputRecord,
    MetricHeight,
    UnitSystem,
)

_LOG = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# raw field names, in the order errors are reported
FIELDS = (
    "unitSystem",
    "weight",
    "heightCm",
    "heightFt",
    "heightIn",
    "age",
    "gender",
    "bodyFat",
    "activityLevel",
)


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: dict[str, str] = field(default_factory=dict)
    record: InputRecord | None = None


# ──────────────────────────────────────────────────────────────────────
#  Raw value helpers
# ──────────────────────────────────────────────────────────────────────
def _is_blank(raw: Any) -> bool:
    return raw is None or (isinstance(raw, str) and not raw.strip())


def _to_number(raw: Any) -> float | None:
    """Finite float from a number or numeric string; None otherwise."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, numbers.Real):
        candidate: Any = raw
    elif isinstance(raw, str):
        candidate = raw.strip()
    else:
        return None
    try:
        value = float(candidate)
    except (ValueError, OverflowError):
        return None
    return value if math.isfinite(value) else None


# Keeps every Mifflin/Katch term, their sum and the ×1.9 product finite.
MAX_MAGNITUDE = 1e300


def _not_huge(v: float) -> bool:
    return v <= MAX_MAGNITUDE


# ──────────────────────────────────────────────────────────────────────
#  Rules
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class _NumberRule:
    required: str | None                  # None → optional, blank means absent
    not_numeric: str
    checks: tuple[tuple[Callable[[float], bool], str], ...] = ()

    def apply(self, raw: Any) -> tuple[float | None, str | None]:
        if _is_blank(raw):
            return None, self.required
        value = _to_number(raw)
        if value is None:
            return None, self.not_numeric
        for ok, message in self.checks:
            if not ok(value):
                return None, message
        return value, None


_RULES: dict[str, _NumberRule] = {
    "weight": _NumberRule(
        "Weight is required",
        "Enter a number",
        (
            (lambda v: v > 0, "Weight must be greater than 0"),
            (_not_huge, "Weight is too large"),
        ),
    ),
    "heightCm": _NumberRule(
        "Height is required",
        "Enter height in cm",
        (
            (lambda v: v >= 30, "Minimum height is 30 cm"),
            (_not_huge, "Height is too large"),
        ),
    ),
    "heightFt": _NumberRule(
        "Height (ft) is required",
        "Enter height in ft",
        (
            (lambda v: v >= 1, "Minimum 1 ft"),
            (_not_huge, "Height is too large"),
        ),
    ),
    "heightIn": _NumberRule(
        "Height (in) is required",
        "Enter height in in",
        (
            (lambda v: v >= 0, "Minimum 0 in"),
            (lambda v: v <= 11, "Maximum 11 in"),
        ),
    ),
    "age": _NumberRule(
        "Age is required",
        "Enter a number",
        (
            (lambda v: v > 0, "Age must be greater than 0"),
            (_not_huge, "Age is too large"),
        ),
    ),
    "bodyFat": _NumberRule(
        None,
        "Enter a number",
        (
            (lambda v: v >= 0, "Body fat cannot be negative"),
            (lambda v: v <= 100, "Body fat cannot exceed 100%"),
        ),
    ),
    "activityLevel": _NumberRule(
        "Select an activity level",
        "Select an activity level",
        # value equality only, no nearest-level snapping
        ((lambda v: v in ACTIVITY_MULTIPLIERS, "Select one of the listed activity levels"),),
    ),
}

_HEIGHT_FIELDS = {
    UnitSystem.metric: ("heightCm",),
    UnitSystem.imperial: ("heightFt", "heightIn"),
}


def _parse_choice(raw: Any, enum_cls: type[E]) -> E | None:
    if isinstance(raw, enum_cls):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return enum_cls(raw.strip().lower())
    except ValueError:
        return None


# ──────────────────────────────────────────────────────────────────────
#  Entry point
# ──────────────────────────────────────────────────────────────────────
def validate(
    raw_fields: Mapping[str, Any],
    unit_system: UnitSystem | str | None = None,
) -> ValidationResult:
    """
    Check every field that matters for `unit_system` (falls back to
    `raw_fields["unitSystem"]` when not given).  One message per bad
    field; the first failing rule wins.
    """
    if unit_system is None:
        unit_system = raw_fields.get("unitSystem")

    errors: dict[str, str] = {}
    values: dict[str, float | None] = {}

    units = _parse_choice(unit_system, UnitSystem)
    if units is None:
        errors["unitSystem"] = "Choose metric or imperial units"

    checked = ["weight", "age", "bodyFat", "activityLevel"]
    if units is not None:
        checked += _HEIGHT_FIELDS[units]

    for name in checked:
        value, message = _RULES[name].apply(raw_fields.get(name))
        if message:
            errors[name] = message
        else:
            values[name] = value

    raw_gender = raw_fields.get("gender")
    gender = _parse_choice(raw_gender, Gender)
    if gender is None:
        errors["gender"] = (
            "Gender is required" if _is_blank(raw_gender) else "Gender must be male or female"
        )

    if errors:
        errors = {k: errors[k] for k in FIELDS if k in errors}
        _LOG.debug("validation failed for %s", sorted(errors))
        return ValidationResult(valid=False, errors=errors)

    if units is UnitSystem.metric:
        height: MetricHeight | ImperialHeight = MetricHeight(cm=values["heightCm"])
    else:
        height = ImperialHeight(ft=values["heightFt"], inches=values["heightIn"])

    record = InputRecord(
        unit_system=units,
        weight=values["weight"],
        height=height,
        age=values["age"],
        gender=gender,
        body_fat=values["bodyFat"],
        activity_level=values["activityLevel"],
    )
    return ValidationResult(valid=True, record=record)
