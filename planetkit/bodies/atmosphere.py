from datetime import date
from typing import Any

from pydantic import (
    Field,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from .base import BodyModel, enforce_rule
from .rules import ATMOSPHERE_RULES


class Atmosphere(BodyModel):
    """Gas envelope of a planet.

    Air quality is clamped into range rather than rejected; every other
    constrained field raises on invalid input.
    """

    composition: str = Field(
        description="Comma separated gases, letters/digits/commas/spaces only"
    )
    last_observation: date = Field(description="Date of the last observation")
    air_quality: int = Field(description="Air quality index, clamped to 0-100")
    pressure: float = Field(description="Surface pressure, non-negative")
    density: float = Field(description="Atmospheric density, non-negative")
    has_clouds: bool = Field(description="Whether clouds are present")

    @field_validator("*", mode="wrap")
    @classmethod
    def enforce_field_rules(
        cls,
        value: Any,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> Any:
        return enforce_rule(ATMOSPHERE_RULES, value, handler, info)
