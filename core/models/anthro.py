from __future__ import annotations
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class UnitSystem(str, Enum):
    metric = "metric"        # kg / cm
    imperial = "imperial"    # lb / ft + in


class Gender(str, Enum):
    male = "male"
    female = "female"


class ActivityLevel(float, Enum):
    """The five fixed PAL multipliers. Members compare equal to their float."""

    sedentary = 1.2
    light = 1.375
    moderate = 1.55
    intense = 1.725
    athlete = 1.9

    @property
    def label(self) -> str:
        return _LEVEL_LABELS[self]


_LEVEL_LABELS = {
    ActivityLevel.sedentary: "Sedentary (office work)",
    ActivityLevel.light: "Light exercise (1-2x/week)",
    ActivityLevel.moderate: "Moderate exercise (3-5x/week)",
    ActivityLevel.intense: "Intense exercise (6-7x/week)",
    ActivityLevel.athlete: "Athlete (2x/day)",
}

ACTIVITY_MULTIPLIERS: tuple[float, ...] = tuple(lvl.value for lvl in ActivityLevel)


# ──────────────────────────────────────────────────────────────────────
#  Height: tagged by unit system
# ──────────────────────────────────────────────────────────────────────
class MetricHeight(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    unit_system: Literal[UnitSystem.metric] = UnitSystem.metric
    cm: float = Field(..., ge=30)


class ImperialHeight(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    unit_system: Literal[UnitSystem.imperial] = UnitSystem.imperial
    ft: float = Field(..., ge=1)
    inches: float = Field(..., ge=0, le=11)


HeightSpec = Annotated[
    Union[MetricHeight, ImperialHeight],
    Field(discriminator="unit_system"),
]


class InputRecord(BaseModel):
    """A fully validated submission; weight is in kg or lb per `unit_system`."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    unit_system: UnitSystem
    weight: float = Field(..., gt=0)
    height: HeightSpec
    age: float = Field(..., gt=0)
    gender: Gender
    body_fat: float | None = Field(None, ge=0, le=100)
    activity_level: ActivityLevel

    @model_validator(mode="after")
    def _height_matches_units(self) -> "InputRecord":
        if self.height.unit_system != self.unit_system:
            raise ValueError(
                f"{self.height.unit_system.value} height given for "
                f"{self.unit_system.value} units"
            )
        return self


# what a fresh form shows before the user types anything (not valid input)
FORM_DEFAULTS: dict[str, Any] = {
    "unitSystem": UnitSystem.metric.value,
    "weight": 0,
    "heightCm": 0,
    "heightFt": 5,
    "heightIn": 9,
    "age": 0,
    "gender": Gender.male.value,
    "bodyFat": None,
    "activityLevel": ActivityLevel.sedentary.value,
}
