from __future__ import annotations
from enum import Enum

from pydantic import BaseModel, ConfigDict

from core.models.anthro import ActivityLevel


class Formula(str, Enum):
    katch_mcardle = "katch_mcardle"        # lean-mass based, needs body fat
    mifflin_st_jeor = "mifflin_st_jeor"    # gender / age based


class EnergyResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    bmr: float
    tdee: float
    formula: Formula
    activity_level: ActivityLevel
    # kcal/day for every multiplier, whichever one was selected
    per_level_table: dict[ActivityLevel, float]
