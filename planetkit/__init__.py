"""planetkit: validated planet and atmosphere records."""

from .bodies import (
    Atmosphere,
    BuildResult,
    CheckResult,
    FieldViolation,
    Planet,
    PlanetType,
)

__version__ = "0.1.0"

__all__ = [
    "Atmosphere",
    "BuildResult",
    "CheckResult",
    "FieldViolation",
    "Planet",
    "PlanetType",
]
