"""Storage primitives: hook halls and hook allocation."""

from slaughterhouse.storage.allocator import AllocationScope, HookAllocator, iter_halls
from slaughterhouse.storage.hall import Hall

__all__ = [
    "Hall",
    "HookAllocator",
    "AllocationScope",
    "iter_halls",
]
