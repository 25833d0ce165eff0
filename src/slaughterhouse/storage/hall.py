"""Fixed-capacity hook array.

A Hall is created with N empty hooks and never grows or shrinks. Hooks fill
monotonically: there is no operation that takes an animal back off a hook.
"""

from __future__ import annotations

from collections.abc import Iterator

from slaughterhouse.core.animal import Animal


class Hall:
    """Ordered, fixed-length sequence of hooks, each empty or holding one animal.

    Args:
        capacity: Number of hooks (must be >= 0).
    """

    __slots__ = ("_hooks",)

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"Hall capacity must be >= 0, got {capacity}")
        self._hooks: list[Animal | None] = [None] * capacity

    @property
    def capacity(self) -> int:
        return len(self._hooks)

    def __len__(self) -> int:
        return len(self._hooks)

    def __iter__(self) -> Iterator[Animal | None]:
        return iter(self._hooks)

    def __repr__(self) -> str:
        return f"Hall(capacity={self.capacity}, free={self.free_count()})"

    def in_range(self, index: int) -> bool:
        """Check if index addresses a hook (negative indices never do)."""
        return 0 <= index < len(self._hooks)

    def get(self, index: int) -> Animal | None:
        """Get the animal on a hook without copying.

        Returns:
            Animal on the hook, or None if the hook is empty or index is out of range.
        """
        if not self.in_range(index):
            return None
        return self._hooks[index]

    def first_free(self) -> int | None:
        """Index of the first empty hook, or None if the hall is full."""
        for index, hook in enumerate(self._hooks):
            if hook is None:
                return index
        return None

    def free_count(self) -> int:
        return sum(1 for hook in self._hooks if hook is None)

    def hang(self, index: int, animal: Animal) -> None:
        """Put an animal on an empty hook.

        Args:
            index: Hook index.
            animal: Animal to store (ownership passes to the hall).

        Raises:
            IndexError: If index is out of range.
            ValueError: If the hook is already occupied.
        """
        if not self.in_range(index):
            raise IndexError(f"Hook index {index} out of range for capacity {self.capacity}")
        if self._hooks[index] is not None:
            raise ValueError(f"Hook {index} is already occupied")
        self._hooks[index] = animal
