"""Slaughterhouse: a three-level registry of locations, units, and hook halls.

Usage:
    from dataclasses import dataclass

    from slaughterhouse import Slaughterhouse

    @dataclass
    class Cow:
        name: str

        def race(self) -> str:
            return "Cow"

        def get_name(self) -> str:
            return self.name

    house = Slaughterhouse()
    house.add_location("Farm")
    house.add_unit("Farm", "Barn", 5)
    index = house.add_animal("Farm", "Barn", Cow("Bessie"))
    print(house.get_animal("Farm", "Barn", index))
"""

__version__ = "0.1.0"

# Core primitives
from slaughterhouse.core import (
    Animal,
    Cloneable,
    HookAddress,
    clone_animal,
    describe_animal,
)

# Configuration
from slaughterhouse.config import SlaughterhouseSettings

# Registry
from slaughterhouse.registry import (
    HookView,
    NoCapacityError,
    NotFoundError,
    Slaughterhouse,
    SlaughterhouseError,
    new,
)

# Storage
from slaughterhouse.storage import (
    AllocationScope,
    Hall,
    HookAllocator,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Animal",
    "Cloneable",
    "HookAddress",
    "clone_animal",
    "describe_animal",
    # Config
    "SlaughterhouseSettings",
    # Registry
    "Slaughterhouse",
    "new",
    "HookView",
    "SlaughterhouseError",
    "NotFoundError",
    "NoCapacityError",
    # Storage
    "Hall",
    "HookAllocator",
    "AllocationScope",
]
