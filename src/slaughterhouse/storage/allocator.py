"""Hook allocation service.

HookAllocator decides which hook receives the next animal. It scans the
location tree once and returns the full address it found, so the caller
writes to exactly the hook that was checked.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import StrEnum

from slaughterhouse.core.identity import HookAddress
from slaughterhouse.storage.hall import Hall

Units = Mapping[str, Hall]
Locations = Mapping[str, Units]


class AllocationScope(StrEnum):
    """Which hooks are eligible when placing an animal."""

    UNIT = "unit"  # Only hooks of the requested unit
    REGISTRY = "registry"  # Any hook, in global scan order


def iter_halls(locations: Locations) -> Iterator[tuple[str, str, Hall]]:
    """Walk every hall in scan order: locations, then units, in insertion order.

    Yields:
        Tuples of (location name, unit name, hall).
    """
    for location_name, units in locations.items():
        for unit_name, hall in units.items():
            yield location_name, unit_name, hall


class HookAllocator:
    """Finds the first free hook for a placement request.

    Args:
        scope: Which hooks are eligible (default: the requested unit only).
    """

    def __init__(self, scope: AllocationScope = AllocationScope.UNIT):
        self._scope = AllocationScope(scope)

    @property
    def scope(self) -> AllocationScope:
        return self._scope

    def find_free(self, locations: Locations, location: str, unit: str) -> HookAddress | None:
        """Find the hook that should receive the next animal.

        The requested (location, unit) must already have been validated by the caller.

        Args:
            locations: Location tree to scan.
            location: Requested location name.
            unit: Requested unit name.

        Returns:
            Address of the first eligible free hook, or None if none is free.
        """
        if self._scope is AllocationScope.UNIT:
            index = locations[location][unit].first_free()
            if index is None:
                return None
            return HookAddress(location=location, unit=unit, index=index)

        for location_name, unit_name, hall in iter_halls(locations):
            index = hall.first_free()
            if index is not None:
                return HookAddress(location=location_name, unit=unit_name, index=index)
        return None

    @staticmethod
    def has_free(locations: Locations) -> bool:
        """Check if any hook anywhere in the tree is empty."""
        return any(hall.first_free() is not None for _, _, hall in iter_halls(locations))
