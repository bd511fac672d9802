from enum import Enum


class PlanetType(str, Enum):
    """Closed set of planet categories."""

    TERRESTRIAL = "terrestrial"  # Rocky inner planets
    GAS_GIANT = "gas_giant"
    ICE_GIANT = "ice_giant"
    DWARF = "dwarf"
