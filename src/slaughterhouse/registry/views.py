"""Lazy read-only traversals over the location tree."""

from __future__ import annotations

from collections.abc import Iterator

from slaughterhouse.core.animal import Animal, clone_animal
from slaughterhouse.core.identity import HookAddress
from slaughterhouse.storage.allocator import Locations, iter_halls


class HookView:
    """Lazy, restartable view of every hook in global scan order.

    Each iteration walks the live tree again, so a view taken before an insert
    reflects the insert on its next pass.

    Args:
        locations: Location tree to traverse.
        copy: Whether to yield clones of animals (default True).
    """

    def __init__(self, locations: Locations, copy: bool = True):
        self._locations = locations
        self._copy = copy

    def __iter__(self) -> Iterator[Animal | None]:
        """Iterate hook contents: an animal, or None for an empty hook."""
        for _, animal in self.with_addresses():
            yield animal

    def __len__(self) -> int:
        return sum(len(hall) for _, _, hall in iter_halls(self._locations))

    def with_addresses(self) -> Iterator[tuple[HookAddress, Animal | None]]:
        """Iterate hooks together with their coordinates.

        Yields:
            Tuples of (address, animal or None) in scan order.
        """
        for location_name, unit_name, hall in iter_halls(self._locations):
            for index, animal in enumerate(hall):
                if animal is not None and self._copy:
                    animal = clone_animal(animal)
                yield HookAddress(location=location_name, unit=unit_name, index=index), animal
