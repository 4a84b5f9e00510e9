"""Engine type value object."""

from enum import Enum


class EngineType(str, Enum):
    """Propulsion category of a car."""

    GASOLINE = "GASOLINE"
    DIESEL = "DIESEL"
    ELECTRIC = "ELECTRIC"
    HYBRID = "HYBRID"

    @classmethod
    def names(cls) -> list[str]:
        """Get all engine type names in declaration order."""
        return [engine_type.name for engine_type in cls]
