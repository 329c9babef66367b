# api/v1/energy.py
from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from config import settings
from core.energy_calc import calculate
from core.models.anthro import FORM_DEFAULTS, ActivityLevel
from core.validation import validate
from api.v1.schemas import (
    EnergyFieldsIn,
    EstimateOut,
    FormDefaultsOut,
    LevelKcal,
    LevelOut,
    ValidationOut,
)

router = APIRouter()


# ───────────────────────── helpers ──────────────────────────
def _units(body: EnergyFieldsIn) -> str:
    """Explicit unitSystem from the body, else the configured default."""
    if body.unit_system is None or body.unit_system == "":
        return settings.default_unit_system
    return body.unit_system


# ───────────────────────── lookups ──────────────────────────
@router.get("/levels", response_model=list[LevelOut])
def list_levels() -> list[LevelOut]:
    return [
        LevelOut(key=lvl.name, multiplier=lvl.value, label=lvl.label)
        for lvl in ActivityLevel
    ]


@router.get("/defaults", response_model=FormDefaultsOut)
def form_defaults() -> FormDefaultsOut:
    return FormDefaultsOut.model_validate(
        {**FORM_DEFAULTS, "unitSystem": settings.default_unit_system}
    )


# ───────────────────────── validate ─────────────────────────
@router.post(
    "/validate",
    response_model=ValidationOut,
    status_code=status.HTTP_200_OK,
    summary="Check raw form fields; drives the enabled state of Compute",
)
def validate_fields(body: EnergyFieldsIn) -> ValidationOut:
    check = validate(body.raw_fields(), _units(body))
    return ValidationOut(valid=check.valid, errors=check.errors)


# ───────────────────────── estimate ─────────────────────────
@router.post(
    "/estimate",
    response_model=EstimateOut,
    status_code=status.HTTP_200_OK,
    summary="Validate, then compute BMR, TDEE and the per-level table",
)
def estimate_energy(body: EnergyFieldsIn) -> EstimateOut:
    check = validate(body.raw_fields(), _units(body))
    if not check.valid:
        raise HTTPException(
            status_code=422,
            detail={"errors": check.errors},
        )

    result = calculate(check.record)
    return EstimateOut(
        bmr=result.bmr,
        tdee=result.tdee,
        formula=result.formula.value,
        activity_level=result.activity_level.value,
        per_level_table=[
            LevelKcal(key=lvl.name, multiplier=lvl.value, label=lvl.label, kcal=kcal)
            for lvl, kcal in result.per_level_table.items()
        ],
    )
