"""Re-export individual schema modules for easy imports."""

from .energy import (
    EnergyFieldsIn,
    EstimateOut,
    FormDefaultsOut,
    LevelKcal,
    LevelOut,
    ValidationOut,
)

__all__ = [
    "EnergyFieldsIn",
    "EstimateOut",
    "FormDefaultsOut",
    "LevelKcal",
    "LevelOut",
    "ValidationOut",
]
