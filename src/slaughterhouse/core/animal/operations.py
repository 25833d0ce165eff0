"""Pure functions over animals: validation, cloning, and description."""

from __future__ import annotations

import copy
from typing import TypeVar

from slaughterhouse.core.animal.models import Animal, Cloneable

A = TypeVar("A", bound=Animal)


def ensure_animal(value: object) -> Animal:
    """Check that a value satisfies the Animal protocol.

    Args:
        value: Candidate occupant.

    Returns:
        The same value, typed as Animal.

    Raises:
        TypeError: If value lacks race() or get_name().
    """
    if not isinstance(value, Animal):
        raise TypeError(f"{type(value).__name__} does not implement Animal protocol")
    return value


def clone_animal(animal: A) -> A:
    """Produce an independent copy of an animal.

    Uses the __clone__ hook when the animal provides one, otherwise a deep copy.
    The result never shares mutable state with the original.

    Args:
        animal: Animal to clone.

    Returns:
        Copy of the animal with its own lifetime.
    """
    if isinstance(animal, Cloneable):
        return animal.__clone__()  # type: ignore[return-value]
    return copy.deepcopy(animal)


def describe_animal(animal: Animal | None) -> str:
    """One-line diagnostic text for a hook's content."""
    if animal is None:
        return "None"
    return repr(animal)
