"""Shared fixtures for body tests."""

from datetime import date

import pytest

from planetkit.bodies import PlanetType


@pytest.fixture
def atmosphere_fields():
    """Valid keyword arguments for an Atmosphere."""
    return {
        "composition": "Nitrogen, Oxygen",
        "last_observation": date(2020, 3, 1),
        "air_quality": 80,
        "pressure": 101.325,
        "density": 1.225,
        "has_clouds": True,
    }


@pytest.fixture
def planet_fields():
    """Valid keyword arguments for an Earth-like Planet."""
    return {
        "name": "Earth",
        "number_of_moons": 1,
        "mass": 5.972e24,
        "radius": 6371.0,
        "gravity": 9.81,
        "last_albedo_measurement": date(2021, 7, 4),
        "has_rings": False,
        "type": PlanetType.TERRESTRIAL,
    }
