"""
core/energy_calc.py
────────────────────────────────────────────────────────────────────────
Energy-expenditure engine:

1. Unit normalisation (lb → kg, ft+in → cm)
2. BMR  (Katch–McArdle when body fat is known, else Mifflin–St Jeor)
3. TDEE (BMR × activity multiplier)
4. BMR × every multiplier, for the comparison table

Only ever fed records that already passed `core.validation.validate`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import NoReturn

from core.models.anthro import (
    ACTIVITY_MULTIPLIERS,
    ActivityLevel,
    Gender,
    ImperialHeight,
    InputRecord,
)
from core.models.result import EnergyResult, Formula

_LOG = logging.getLogger(__name__)

LB_TO_KG = 0.45359237
IN_TO_CM = 2.54


# ──────────────────────────────────────────────────────────────────────
#  Normalised input
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class NormalizedInput:
    weight_kg: float
    height_cm: float
    age: float
    gender: Gender
    activity_level: ActivityLevel
    body_fat: float | None = None   # percent; 0 is a real value


# ──────────────────────────────────────────────────────────────────────
#  Calculator
# ──────────────────────────────────────────────────────────────────────
class EnergyCalculator:
    """Stateless BMR/TDEE source of truth; one shared instance is enough."""

    # --------------- public entrypoints ------------------------------
    def normalize(self, record: InputRecord) -> NormalizedInput:
        # InputRecord guarantees the height tag matches unit_system
        height = record.height
        if isinstance(height, ImperialHeight):
            weight_kg = record.weight * LB_TO_KG
            height_cm = (height.ft * 12 + height.inches) * IN_TO_CM
        else:
            weight_kg = record.weight
            height_cm = height.cm

        return NormalizedInput(
            weight_kg=weight_kg,
            height_cm=height_cm,
            age=record.age,
            gender=record.gender,
            activity_level=record.activity_level,
            body_fat=record.body_fat,
        )

    def estimate(self, n: NormalizedInput) -> EnergyResult:
        self._require_sane(n)

        formula, bmr = self.bmr(n)
        tdee = self.tdee(bmr, n.activity_level)
        table = self.per_level_table(bmr)
        if not all(math.isfinite(v) for v in (bmr, tdee, *table.values())):
            self._violation(f"non-finite result (BMR {bmr!r}, TDEE {tdee!r}) from {n!r}")

        _LOG.debug("BMR %.2f via %s", bmr, formula.value)
        return EnergyResult(
            bmr=bmr,
            tdee=tdee,
            formula=formula,
            activity_level=ActivityLevel(n.activity_level),
            per_level_table=table,
        )

    def calculate(self, record: InputRecord) -> EnergyResult:
        return self.estimate(self.normalize(record))

    # --------------- BMR ---------------------------------------------
    def bmr(self, n: NormalizedInput) -> tuple[Formula, float]:
        # body fat wins over gender/age whenever it was supplied
        if n.body_fat is not None:
            return Formula.katch_mcardle, self.katch_mcardle(n.weight_kg, n.body_fat)
        return Formula.mifflin_st_jeor, self.mifflin_st_jeor(n)

    @staticmethod
    def lean_mass(weight_kg: float, body_fat: float) -> float:
        return weight_kg * (1 - body_fat / 100)

    def katch_mcardle(self, weight_kg: float, body_fat: float) -> float:
        return 370 + 21.6 * self.lean_mass(weight_kg, body_fat)

    @staticmethod
    def mifflin_st_jeor(n: NormalizedInput) -> float:
        base = 10 * n.weight_kg + 6.25 * n.height_cm - 5 * n.age
        return base + (5 if n.gender == Gender.male else -161)

    # --------------- TDEE --------------------------------------------
    @staticmethod
    def tdee(bmr: float, activity_level: float) -> float:
        return bmr * activity_level

    @staticmethod
    def per_level_table(bmr: float) -> dict[ActivityLevel, float]:
        return {lvl: bmr * lvl.value for lvl in ActivityLevel}

    # --------------- contract ----------------------------------------
    def _require_sane(self, n: NormalizedInput) -> None:
        """Reject anything the validator would never have let through."""
        if not isinstance(n, NormalizedInput):
            self._violation(f"expected NormalizedInput, got {type(n).__name__}")

        for name in ("weight_kg", "height_cm", "age"):
            val = getattr(n, name)
            if not (isinstance(val, (int, float)) and math.isfinite(val) and val > 0):
                self._violation(f"{name}={val!r} is not a positive finite number")

        if n.gender not in (Gender.male, Gender.female):
            self._violation(f"unknown gender {n.gender!r}")

        if n.activity_level not in ACTIVITY_MULTIPLIERS:
            self._violation(f"activity level {n.activity_level!r} is not a fixed multiplier")

        if n.body_fat is not None and not (
            math.isfinite(n.body_fat) and 0 <= n.body_fat <= 100
        ):
            self._violation(f"body fat {n.body_fat!r} outside 0-100")

    @staticmethod
    def _violation(msg: str) -> NoReturn:
        _LOG.error("Estimator called with invalid input: %s", msg)
        raise RuntimeError(f"Estimator precondition violated: {msg}")


# module-level shortcuts around one shared calculator
_calc = EnergyCalculator()

normalize = _calc.normalize
estimate = _calc.estimate
calculate = _calc.calculate
