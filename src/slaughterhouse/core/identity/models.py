"""Hook identity models.

Usage:
    address = HookAddress(location="Farm", unit="Barn", index=0)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HookAddress:
    """Coordinates of a single hook: location name, unit name, hook index."""

    location: str
    unit: str
    index: int

    def __str__(self) -> str:
        return f"{self.location}/{self.unit}[{self.index}]"
