"""License plate value object."""

import re
from dataclasses import dataclass

# Spanish format since 2000: four digits and three consonants (no vowels, no Ñ or Q)
_PLATE_PATTERN = re.compile(r"^[0-9]{4}[BCDFGHJKLMNPRSTVWXYZ]{3}$")


@dataclass(frozen=True)
class LicensePlate:
    """License plate value object."""

    value: str

    def __post_init__(self) -> None:
        """Validate plate format."""
        if not _PLATE_PATTERN.match(self.value):
            raise ValueError(
                f"License plate '{self.value}' must be four digits followed by three consonants"
            )

    @staticmethod
    def normalize(raw: str) -> str:
        """
        Normalize raw user input into plate form.

        Args:
            raw: Plate as typed (e.g., " 1234-bcd ")

        Returns:
            Upper-cased plate without spaces or dashes
        """
        return re.sub(r"[\s-]", "", raw).upper()
