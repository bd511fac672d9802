"""Field rules for planets and atmospheres.

Every rule is a plain function that returns a ``CheckResult`` instead of
raising, so callers can inspect a failure without exception handling. The
models in this package turn failed results into validation errors.
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional

from .planet_type import PlanetType

# Error messages
INVALID_COMPOSITION = "[ERROR] Composition cannot be null or empty"
INVALID_LAST_OBSERVATION = "[ERROR] Last observation cannot be null or in the future"
INVALID_PRESSURE = "[ERROR] Pressure cannot be negative"
INVALID_DENSITY = "[ERROR] Density cannot be negative"

INVALID_NAME = "[ERROR] Name cannot be null or empty"
INVALID_NUMBER_OF_MOONS = "[ERROR] Number of moons cannot be negative"
# Threshold actually enforced is MIN_MASS_KG (5.97e22)
INVALID_MASS = "[ERROR] Mass cannot be less than 10e23 kg"
INVALID_RADIUS = "[ERROR] Radius cannot be less than 500 km"
INVALID_GRAVITY = "[ERROR] Gravity cannot be negative or zero"
INVALID_LAST_ALBEDO_MEASUREMENT = (
    "[ERROR] Last albedo measurement cannot be null or in the future"
)
INVALID_PLANET_TYPE = "[ERROR] Invalid planet type"

COMPOSITION_PATTERN = re.compile(r"[a-zA-Z0-9, ]+")

# Limits
MIN_MASS_KG = 5.97e22
MIN_RADIUS_KM = 500.0
MIN_AIR_QUALITY = 0
MAX_AIR_QUALITY = 100

# Trimmed before the blank checks: space and control characters only
TRIMMED_CHARS = "".join(map(chr, range(33)))


@dataclass
class CheckResult:
    """Outcome of a single field rule."""

    value: Any
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the checked value or raise ``ValueError`` with the rule message."""
        if self.error is not None:
            raise ValueError(self.error)
        return self.value


def _passed(value: Any) -> CheckResult:
    return CheckResult(value=value)


def _failed(value: Any, message: str) -> CheckResult:
    return CheckResult(value=value, error=message)


def today() -> date:
    """Current date used by the observation date rules."""
    return date.today()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _not_in_future(value: Any, message: str) -> CheckResult:
    # Today itself is a valid observation date
    if not isinstance(value, date):
        return _failed(value, message)
    day = value.date() if isinstance(value, datetime) else value
    if day > today():
        return _failed(value, message)
    return _passed(value)


def check_composition(value: Any) -> CheckResult:
    """Composition must be non-blank and use only letters, digits, commas and spaces."""
    if (
        not isinstance(value, str)
        or not value.strip(TRIMMED_CHARS)
        or COMPOSITION_PATTERN.fullmatch(value) is None
    ):
        return _failed(value, INVALID_COMPOSITION)
    return _passed(value)


def check_observation_date(value: Any) -> CheckResult:
    return _not_in_future(value, INVALID_LAST_OBSERVATION)


def clamp_air_quality(value: int) -> CheckResult:
    """Clamp air quality into [0, 100]. Never fails.

    Non-numeric input is passed through untouched and left to type validation.
    """
    if not _is_number(value):
        return _passed(value)
    if value < MIN_AIR_QUALITY:
        return _passed(MIN_AIR_QUALITY)
    if value > MAX_AIR_QUALITY:
        return _passed(MAX_AIR_QUALITY)
    return _passed(value)


def check_pressure(value: Any) -> CheckResult:
    if not _is_number(value) or value < 0:
        return _failed(value, INVALID_PRESSURE)
    return _passed(value)


def check_density(value: Any) -> CheckResult:
    if not _is_number(value) or value < 0:
        return _failed(value, INVALID_DENSITY)
    return _passed(value)


def check_name(value: Any) -> CheckResult:
    if not isinstance(value, str) or not value.strip(TRIMMED_CHARS):
        return _failed(value, INVALID_NAME)
    return _passed(value)


def check_number_of_moons(value: Any) -> CheckResult:
    if not _is_number(value) or value < 0:
        return _failed(value, INVALID_NUMBER_OF_MOONS)
    return _passed(value)


def check_mass(value: Any) -> CheckResult:
    if not _is_number(value) or value < MIN_MASS_KG:
        return _failed(value, INVALID_MASS)
    return _passed(value)


def check_radius(value: Any) -> CheckResult:
    if not _is_number(value) or value < MIN_RADIUS_KM:
        return _failed(value, INVALID_RADIUS)
    return _passed(value)


def check_gravity(value: Any) -> CheckResult:
    if not _is_number(value) or value <= 0:
        return _failed(value, INVALID_GRAVITY)
    return _passed(value)


def check_albedo_date(value: Any) -> CheckResult:
    return _not_in_future(value, INVALID_LAST_ALBEDO_MEASUREMENT)


def check_planet_type(value: Any) -> CheckResult:
    if not isinstance(value, PlanetType):
        return _failed(value, INVALID_PLANET_TYPE)
    return _passed(value)


Rule = Callable[[Any], CheckResult]

ATMOSPHERE_RULES: Dict[str, Rule] = {
    "composition": check_composition,
    "last_observation": check_observation_date,
    "air_quality": clamp_air_quality,
    "pressure": check_pressure,
    "density": check_density,
}

PLANET_RULES: Dict[str, Rule] = {
    "name": check_name,
    "number_of_moons": check_number_of_moons,
    "mass": check_mass,
    "radius": check_radius,
    "gravity": check_gravity,
    "last_albedo_measurement": check_albedo_date,
    "type": check_planet_type,
}


@dataclass
class FieldViolation:
    """Represents a field that failed its rule."""

    field: str
    message: str
    value: Any = None


@dataclass
class BuildResult:
    """Either a fully valid body or the violations that prevented it."""

    value: Optional[Any] = None
    violations: List[FieldViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.violations

    def report(self) -> Dict[str, Any]:
        """Summarize the build outcome."""
        return {
            "status": "PASS" if self.ok else "FAIL",
            "error_count": len(self.violations),
            "violations": [
                {"field": v.field, "message": v.message, "value": v.value}
                for v in self.violations
            ],
        }
