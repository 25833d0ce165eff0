"""Tests for hook allocation.

Critical Invariants:
- Scan order is location, then unit, then hook, in insertion order
- Unit scope never returns a hook outside the requested unit
"""

import pytest

from slaughterhouse.core.identity import HookAddress
from slaughterhouse.storage.allocator import AllocationScope, HookAllocator, iter_halls
from slaughterhouse.storage.hall import Hall


@pytest.fixture
def tree(cow_cls):
    """Two locations; the first unit scanned is already full."""
    full = Hall(1)
    full.hang(0, cow_cls("A"))
    partly = Hall(3)
    partly.hang(0, cow_cls("B"))
    return {
        "North": {"Full": full},
        "South": {"Empty": Hall(2), "Partly": partly},
    }


def test_iter_halls_follows_insertion_order(tree):
    assert [(loc, unit) for loc, unit, _ in iter_halls(tree)] == [
        ("North", "Full"),
        ("South", "Empty"),
        ("South", "Partly"),
    ]


def test_unit_scope_stays_in_requested_unit(tree):
    allocator = HookAllocator(AllocationScope.UNIT)

    assert allocator.find_free(tree, "South", "Partly") == HookAddress("South", "Partly", 1)
    assert allocator.find_free(tree, "North", "Full") is None


def test_registry_scope_returns_first_free_in_scan_order(tree):
    allocator = HookAllocator(AllocationScope.REGISTRY)

    address = allocator.find_free(tree, "South", "Partly")

    assert address == HookAddress("South", "Empty", 0)


def test_registry_scope_with_no_free_hooks(cow_cls):
    hall = Hall(1)
    hall.hang(0, cow_cls("A"))

    allocator = HookAllocator("registry")

    assert allocator.scope is AllocationScope.REGISTRY
    assert allocator.find_free({"Farm": {"Barn": hall}}, "Farm", "Barn") is None


def test_has_free(tree):
    assert HookAllocator.has_free(tree)
    assert not HookAllocator.has_free({})
    assert not HookAllocator.has_free({"Farm": {}})
    assert not HookAllocator.has_free({"Farm": {"Shed": Hall(0)}})
