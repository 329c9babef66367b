# tests/test_energy_calc.py
from __future__ import annotations

import math
import pytest

from core.energy_calc import (
    LB_TO_KG,
    EnergyCalculator,
    NormalizedInput,
    calculate,
    estimate,
    normalize,
)
from core.models.anthro import (
    ActivityLevel,
    Gender,
    ImperialHeight,
    InputRecord,
    MetricHeight,
    UnitSystem,
)
from core.models.result import Formula

calc = EnergyCalculator()

MALE_70KG = InputRecord(
    unit_system=UnitSystem.metric,
    weight=70,
    height=MetricHeight(cm=175),
    age=30,
    gender=Gender.male,
    activity_level=1.55,
)


def _with(**changes) -> InputRecord:
    return MALE_70KG.model_copy(update=changes)


# ── worked examples ─────────────────────────────────────────────────
def test_mifflin_male_example():
    res = calculate(MALE_70KG)
    assert res.formula is Formula.mifflin_st_jeor
    assert math.isclose(res.bmr, 1648.75, rel_tol=1e-12)   # 700 + 1093.75 - 150 + 5
    assert math.isclose(res.tdee, 2555.5625, rel_tol=1e-12)


def test_mifflin_female_offset():
    male = calculate(MALE_70KG).bmr
    female = calculate(_with(gender=Gender.female)).bmr
    assert math.isclose(male - female, 166, rel_tol=1e-12)


def test_katch_mcardle_example():
    res = calculate(_with(body_fat=20))
    assert res.formula is Formula.katch_mcardle
    assert math.isclose(calc.lean_mass(70, 20), 56, rel_tol=1e-12)
    assert math.isclose(res.bmr, 1579.6, rel_tol=1e-12)     # 370 + 21.6 * 56


# ── formula selection ───────────────────────────────────────────────
def test_zero_body_fat_is_present():
    res = calculate(_with(body_fat=0))
    assert res.formula is Formula.katch_mcardle
    assert math.isclose(res.bmr, 370 + 21.6 * 70, rel_tol=1e-12)


@pytest.mark.parametrize("gender", [Gender.male, Gender.female])
@pytest.mark.parametrize("age", [18, 45, 90])
def test_body_fat_ignores_gender_and_age(gender, age):
    res = calculate(_with(body_fat=15, gender=gender, age=age))
    assert res.formula is Formula.katch_mcardle
    assert res.bmr == calculate(_with(body_fat=15)).bmr


def test_no_body_fat_uses_mifflin():
    n = normalize(MALE_70KG)
    assert n.body_fat is None
    assert calc.bmr(n)[0] is Formula.mifflin_st_jeor


# ── TDEE / per-level table ──────────────────────────────────────────
@pytest.mark.parametrize("level", list(ActivityLevel))
def test_tdee_is_exact_product(level):
    res = calculate(_with(activity_level=level))
    assert res.tdee == res.bmr * level.value
    assert res.activity_level is level


def test_per_level_table_covers_all_five():
    res = calculate(_with(activity_level=ActivityLevel.sedentary))
    assert list(res.per_level_table) == list(ActivityLevel)
    for m in (1.2, 1.375, 1.55, 1.725, 1.9):
        assert res.per_level_table[m] == res.bmr * m


def test_deterministic():
    a, b = calculate(MALE_70KG), calculate(MALE_70KG)
    assert a == b
    assert a.bmr.hex() == b.bmr.hex()


# ── unit normalisation ──────────────────────────────────────────────
def test_metric_passes_through():
    n = normalize(MALE_70KG)
    assert (n.weight_kg, n.height_cm) == (70, 175)


def test_imperial_conversion():
    rec = InputRecord(
        unit_system=UnitSystem.imperial,
        weight=154,
        height=ImperialHeight(ft=5, inches=9),
        age=30,
        gender=Gender.male,
        activity_level=1.2,
    )
    n = normalize(rec)
    assert n.weight_kg == 154 * 0.45359237
    assert math.isclose(n.height_cm, 69 * 2.54, rel_tol=1e-12)


@pytest.mark.parametrize("body_fat", [None, 25.0])
@pytest.mark.parametrize("gender", [Gender.male, Gender.female])
def test_imperial_matches_metric_equivalent(body_fat, gender):
    metric = InputRecord(
        unit_system=UnitSystem.metric,
        weight=70,
        height=MetricHeight(cm=(5 * 12 + 9) * 2.54),
        age=40,
        gender=gender,
        body_fat=body_fat,
        activity_level=1.725,
    )
    imperial = InputRecord(
        unit_system=UnitSystem.imperial,
        weight=70 / LB_TO_KG,
        height=ImperialHeight(ft=5, inches=9),
        age=40,
        gender=gender,
        body_fat=body_fat,
        activity_level=1.725,
    )
    a, b = calculate(metric), calculate(imperial)
    assert math.isclose(a.bmr, b.bmr, rel_tol=1e-9)
    assert math.isclose(a.tdee, b.tdee, rel_tol=1e-9)


# ── contract ────────────────────────────────────────────────────────
def _normalized(**kw) -> NormalizedInput:
    base = dict(
        weight_kg=70.0,
        height_cm=175.0,
        age=30.0,
        gender=Gender.male,
        activity_level=ActivityLevel.moderate,
    )
    base.update(kw)
    return NormalizedInput(**base)


def test_estimate_accepts_normalized_input():
    assert math.isclose(estimate(_normalized()).bmr, 1648.75, rel_tol=1e-12)


@pytest.mark.parametrize(
    "bad",
    [
        dict(weight_kg=0.0),
        dict(height_cm=float("nan")),
        dict(age=float("inf")),
        dict(activity_level=1.5),
        dict(body_fat=101.0),
        dict(body_fat=-1.0),
        dict(gender="other"),
    ],
)
def test_estimate_rejects_invalid_input_loudly(bad):
    with pytest.raises(RuntimeError):
        estimate(_normalized(**bad))


def test_estimate_rejects_raw_record():
    with pytest.raises(RuntimeError):
        estimate(MALE_70KG)  # type: ignore[arg-type]


def test_estimate_rejects_overflowing_tdee():
    # BMR stays finite (~1e308) but ×1.9 does not
    with pytest.raises(RuntimeError):
        estimate(_normalized(weight_kg=1e307, activity_level=ActivityLevel.athlete))
