"""Tests for the animal protocol and cloning.

Critical Invariants:
- Clones never share mutable state with the original
- __clone__ hook takes precedence over deep copy
- Objects without race()/get_name() are rejected
"""

from dataclasses import dataclass, field

import pytest

from slaughterhouse.core.animal import (
    Animal,
    Cloneable,
    clone_animal,
    describe_animal,
    ensure_animal,
)


@dataclass
class Sheep:
    name: str
    wool: list[str] = field(default_factory=list)

    def race(self) -> str:
        return "Sheep"

    def get_name(self) -> str:
        return self.name


@dataclass
class CountingGoat:
    name: str
    clones: int = 0

    def race(self) -> str:
        return "Goat"

    def get_name(self) -> str:
        return self.name

    def __clone__(self) -> "CountingGoat":
        return CountingGoat(name=self.name, clones=self.clones + 1)


class Rock:
    pass


def test_dataclass_with_race_and_name_is_animal():
    assert isinstance(Sheep("Dolly"), Animal)
    assert not isinstance(Sheep("Dolly"), Cloneable)


def test_clone_hook_is_detected():
    assert isinstance(CountingGoat("Billy"), Cloneable)


def test_ensure_animal_rejects_non_animal():
    with pytest.raises(TypeError, match="Rock does not implement Animal"):
        ensure_animal(Rock())


def test_ensure_animal_returns_same_object():
    sheep = Sheep("Dolly")
    assert ensure_animal(sheep) is sheep


def test_clone_is_independent_of_original():
    """CRITICAL: mutating a clone must not leak into the original."""
    original = Sheep("Dolly", wool=["white"])

    clone = clone_animal(original)
    clone.wool.append("black")
    clone.name = "Shaun"

    assert original == Sheep("Dolly", wool=["white"])
    assert clone.wool is not original.wool


def test_clone_uses_clone_hook():
    goat = CountingGoat("Billy")

    clone = clone_animal(goat)

    assert clone.clones == 1
    assert goat.clones == 0


def test_describe_animal():
    assert describe_animal(None) == "None"
    assert describe_animal(Sheep("Dolly")) == "Sheep(name='Dolly', wool=[])"
