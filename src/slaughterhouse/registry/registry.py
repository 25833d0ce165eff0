"""Slaughterhouse: the location → unit → hall registry.

Usage:
    house = Slaughterhouse()
    house.add_location("Farm")
    house.add_unit("Farm", "Barn", 2)

    index = house.add_animal("Farm", "Barn", cow)
    copy = house.get_animal("Farm", "Barn", index)

    for hook in house.iter_hooks():
        ...
"""

from __future__ import annotations

import warnings
from collections.abc import Iterator

from slaughterhouse.config import SlaughterhouseSettings
from slaughterhouse.core.animal import Animal, clone_animal, describe_animal, ensure_animal
from slaughterhouse.core.identity import HookAddress
from slaughterhouse.registry.errors import NoCapacityError, NotFoundError
from slaughterhouse.registry.views import HookView
from slaughterhouse.storage.allocator import AllocationScope, HookAllocator, iter_halls
from slaughterhouse.storage.hall import Hall


class Slaughterhouse:
    """Three-level registry of locations, units, and fixed-capacity halls.

    Locations and units are kept in insertion order, which defines the scan order
    for free-hook search and for traversal. Animals are cloned on the way in and
    on the way out, so the registry exclusively owns what hangs on its hooks.

    Args:
        settings: Registry configuration (loaded from environment if None).
    """

    def __init__(self, settings: SlaughterhouseSettings | None = None):
        self._settings = settings or SlaughterhouseSettings()
        self._allocator = HookAllocator(scope=self._settings.allocation_scope)
        self._locations: dict[str, dict[str, Hall]] = {}

    @property
    def settings(self) -> SlaughterhouseSettings:
        return self._settings

    @property
    def allocation_scope(self) -> AllocationScope:
        return self._allocator.scope

    # Read-only mapping access

    def __contains__(self, location: object) -> bool:
        return location in self._locations

    def __len__(self) -> int:
        return len(self._locations)

    def __iter__(self) -> Iterator[str]:
        return iter(self._locations)

    def units(self, location: str) -> list[str]:
        """List unit names of a location in insertion order.

        Raises:
            NotFoundError: If location does not exist.
        """
        return list(self._units(location))

    def capacity(self, location: str, unit: str) -> int:
        """Number of hooks in a unit's hall.

        Raises:
            NotFoundError: If location or unit does not exist.
        """
        return self._hall(location, unit).capacity

    def _units(self, location: str) -> dict[str, Hall]:
        units = self._locations.get(location)
        if units is None:
            raise NotFoundError(f"Location {location!r} not found")
        return units

    def _hall(self, location: str, unit: str) -> Hall:
        hall = self._units(location).get(unit)
        if hall is None:
            raise NotFoundError(f"Unit {unit!r} not found in location {location!r}")
        return hall

    # Building the tree

    def add_location(self, name: str) -> None:
        """Create a location, replacing any existing one of the same name.

        A replaced location starts over with no units.

        Args:
            name: Location name.
        """
        if name in self._locations and self._settings.warn_on_overwrite:
            warnings.warn(
                f"add_location() replaced existing location {name!r} and all its units.",
                stacklevel=2,
            )
        self._locations[name] = {}

    def add_unit(self, location: str, name: str, capacity: int | None = None) -> None:
        """Create a unit with an empty hall, replacing any existing unit of the same name.

        Args:
            location: Existing location name.
            name: Unit name.
            capacity: Number of hooks (settings.default_capacity if None).

        Raises:
            NotFoundError: If location does not exist.
            ValueError: If capacity is negative.
        """
        units = self._units(location)
        if capacity is None:
            capacity = self._settings.default_capacity
        hall = Hall(capacity)
        if name in units and self._settings.warn_on_overwrite:
            warnings.warn(
                f"add_unit() replaced existing unit {name!r} in location {location!r}.",
                stacklevel=2,
            )
        units[name] = hall

    # Hooks

    def has_free_hook(self) -> bool:
        """Check if at least one hook anywhere in the registry is empty."""
        return self._allocator.has_free(self._locations)

    def free_hook_count(self) -> int:
        """Count empty hooks across the whole registry."""
        return sum(hall.free_count() for _, _, hall in iter_halls(self._locations))

    def place_animal(self, location: str, unit: str, animal: Animal) -> HookAddress:
        """Hang an animal on the first free hook and report where it went.

        The free hook is searched once; the address found is the one written to.
        With the default "unit" scope only the named unit's hooks are eligible.
        With "registry" scope the first free hook in global scan order is used,
        which may lie outside the named unit.

        Args:
            location: Requested location name.
            unit: Requested unit name.
            animal: Animal to store (a clone is kept).

        Returns:
            Address of the hook that received the animal.

        Raises:
            TypeError: If animal does not implement the Animal protocol.
            NotFoundError: If location or unit does not exist.
            NoCapacityError: If no eligible hook is free. Nothing is modified.
        """
        ensure_animal(animal)
        self._hall(location, unit)

        address = self._allocator.find_free(self._locations, location, unit)
        if address is None:
            if self._allocator.scope is AllocationScope.UNIT:
                raise NoCapacityError(f"No free hooks in unit {unit!r} of location {location!r}")
            raise NoCapacityError("No free hooks")

        self._locations[address.location][address.unit].hang(address.index, clone_animal(animal))
        return address

    def add_animal(self, location: str, unit: str, animal: Animal) -> int:
        """Hang an animal on the first free hook.

        Args:
            location: Requested location name.
            unit: Requested unit name.
            animal: Animal to store (a clone is kept).

        Returns:
            Zero-based index of the hook that received the animal.

        Raises:
            NotFoundError: If location or unit does not exist.
            NoCapacityError: If no eligible hook is free.
        """
        return self.place_animal(location, unit, animal).index

    def get_animal(self, location: str, unit: str, index: int) -> Animal:
        """Get a clone of the animal on a hook.

        Raises:
            NotFoundError: If location, unit, or index is invalid, or the hook is empty.
        """
        hall = self._hall(location, unit)
        animal = hall.get(index)
        if animal is None:
            if not hall.in_range(index):
                raise NotFoundError(
                    f"Hook {index} out of range in {location!r}/{unit!r} "
                    f"(capacity {hall.capacity})"
                )
            raise NotFoundError(f"Hook {index} in {location!r}/{unit!r} is empty")
        return clone_animal(animal)

    def iter_hooks(self, copy: bool = True) -> HookView:
        """Lazy, restartable view of every hook's content in scan order.

        Args:
            copy: Whether to yield clones of animals (default True).
        """
        return HookView(self._locations, copy=copy)

    def iter_addresses(self, copy: bool = True) -> Iterator[tuple[HookAddress, Animal | None]]:
        """Iterate (address, animal or None) pairs in scan order."""
        return HookView(self._locations, copy=copy).with_addresses()

    # Diagnostics

    def render(self) -> str:
        """Render the tree as indented text: location, unit, then `index: content`."""
        lines: list[str] = []
        for location_name, units in self._locations.items():
            lines.append(location_name)
            for unit_name, hall in units.items():
                lines.append(f"  {unit_name}")
                for index, animal in enumerate(hall):
                    lines.append(f"    {index}: {describe_animal(animal)}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Slaughterhouse(locations={len(self._locations)}, "
            f"free_hooks={self.free_hook_count()}, scope={self.allocation_scope.value!r})"
        )


def new(settings: SlaughterhouseSettings | None = None) -> Slaughterhouse:
    """Create an empty registry."""
    return Slaughterhouse(settings=settings)
