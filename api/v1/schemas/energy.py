# api/v1/schemas/energy.py
from __future__ import annotations
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# JSON uses the same camelCase names as the form fields
_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EnergyFieldsIn(BaseModel):
    """Raw, possibly half-filled form. Types are checked by core.validation."""

    unit_system:    Any = None
    weight:         Any = None
    height_cm:      Any = None
    height_ft:      Any = None
    height_in:      Any = None
    age:            Any = None
    gender:         Any = None
    body_fat:       Any = None
    activity_level: Any = None

    model_config = _CAMEL

    def raw_fields(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ValidationOut(BaseModel):
    valid:  bool
    errors: dict[str, str]


class LevelOut(BaseModel):
    key:        str
    multiplier: float
    label:      str


class LevelKcal(LevelOut):
    kcal: float


class EstimateOut(BaseModel):
    bmr:             float
    tdee:            float
    formula:         str
    activity_level:  float
    per_level_table: list[LevelKcal]

    model_config = _CAMEL


class FormDefaultsOut(BaseModel):
    unit_system:    str
    weight:         float
    height_cm:      float
    height_ft:      float
    height_in:      float
    age:            float
    gender:         str
    body_fat:       float | None
    activity_level: float

    model_config = _CAMEL
