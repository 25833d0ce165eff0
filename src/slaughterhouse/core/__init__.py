"""Core functionalities: stateless protocols and primitives.

Architecture Note:
    core/ contains pure, stateless building blocks with no runtime state mutation.
    For stateful services, see storage/ and registry/.
"""

from slaughterhouse.core.animal import (
    Animal,
    Cloneable,
    clone_animal,
    describe_animal,
    ensure_animal,
)
from slaughterhouse.core.identity import HookAddress

__all__ = [
    # Animal
    "Animal",
    "Cloneable",
    "clone_animal",
    "describe_animal",
    "ensure_animal",
    # Identity
    "HookAddress",
]
