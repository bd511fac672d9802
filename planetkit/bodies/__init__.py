"""Validated planet and atmosphere models."""

from .atmosphere import Atmosphere
from .planet import Planet
from .planet_type import PlanetType
from .rules import BuildResult, CheckResult, FieldViolation

__all__ = [
    "Atmosphere",
    "Planet",
    "PlanetType",
    "BuildResult",
    "CheckResult",
    "FieldViolation",
]
