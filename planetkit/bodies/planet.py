from datetime import date
from typing import Any, Optional

from loguru import logger
from pydantic import (
    Field,
    PrivateAttr,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from .atmosphere import Atmosphere
from .base import BodyModel, enforce_rule
from .planet_type import PlanetType
from .rules import PLANET_RULES


class Planet(BodyModel):
    """A planet, optionally owning one atmosphere.

    The atmosphere is not a constructor argument. It is only ever created by
    ``set_atmosphere`` or ``with_atmosphere``, so no two planets share one.
    """

    name: str = Field(description="Planet name, non-blank")
    number_of_moons: int = Field(description="Number of known moons")
    mass: float = Field(description="Mass in kg")
    radius: float = Field(description="Mean radius in km")
    gravity: float = Field(description="Surface gravity, strictly positive")
    last_albedo_measurement: date = Field(
        description="Date of the last albedo measurement"
    )
    has_rings: bool = Field(description="Whether the planet has rings")
    type: PlanetType = Field(description="Planet category")
    _atmosphere: Optional[Atmosphere] = PrivateAttr(default=None)

    @field_validator("*", mode="wrap")
    @classmethod
    def enforce_field_rules(
        cls,
        value: Any,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> Any:
        return enforce_rule(PLANET_RULES, value, handler, info)

    @property
    def atmosphere(self) -> Optional[Atmosphere]:
        """Owned atmosphere, or None when absent."""
        return self._atmosphere

    @classmethod
    def with_atmosphere(
        cls,
        name: str,
        number_of_moons: int,
        mass: float,
        radius: float,
        gravity: float,
        last_albedo_measurement: date,
        has_rings: bool,
        type: PlanetType,
        composition: str,
        last_observation: date,
        air_quality: int,
        pressure: float,
        density: float,
        has_clouds: bool,
    ) -> "Planet":
        """Build a planet together with its atmosphere.

        Invalid planet fields raise as usual. An invalid atmosphere does not:
        the planet is returned without one.
        """
        planet = cls(
            name=name,
            number_of_moons=number_of_moons,
            mass=mass,
            radius=radius,
            gravity=gravity,
            last_albedo_measurement=last_albedo_measurement,
            has_rings=has_rings,
            type=type,
        )
        try:
            planet.set_atmosphere(
                composition, last_observation, air_quality, pressure, density, has_clouds
            )
        except ValidationError as e:
            logger.debug(
                f"Planet {planet.name} built without atmosphere: "
                f"{e.error_count()} invalid field(s)"
            )
            planet._atmosphere = None
        return planet

    def set_atmosphere(
        self,
        composition: str,
        last_observation: date,
        air_quality: int,
        pressure: float,
        density: float,
        has_clouds: bool,
    ) -> None:
        """Replace the atmosphere with a new one built from the given fields.

        Raises:
            ValidationError: if any atmosphere field is invalid; the current
                atmosphere is left untouched
        """
        self._atmosphere = Atmosphere(
            composition=composition,
            last_observation=last_observation,
            air_quality=air_quality,
            pressure=pressure,
            density=density,
            has_clouds=has_clouds,
        )
        logger.debug(f"Atmosphere assigned to planet {self.name}")
