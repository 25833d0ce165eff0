"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from slaughterhouse import Slaughterhouse, SlaughterhouseSettings


@dataclass(slots=True)
class FixtureCow:
    name: str

    def race(self) -> str:
        return "Cow"

    def get_name(self) -> str:
        return self.name


@pytest.fixture
def cow_cls():
    return FixtureCow


@pytest.fixture
def house():
    """Fresh registry with default unit-scoped allocation."""
    return Slaughterhouse(SlaughterhouseSettings())


@pytest.fixture
def farm(house):
    """Registry with one location "Farm" holding a two-hook "Barn"."""
    house.add_location("Farm")
    house.add_unit("Farm", "Barn", 2)
    return house
