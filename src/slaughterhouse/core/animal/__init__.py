"""Animal functionality: occupant protocol and pure operations."""

from slaughterhouse.core.animal.models import Animal, Cloneable
from slaughterhouse.core.animal.operations import clone_animal, describe_animal, ensure_animal

__all__ = [
    # Models
    "Animal",
    "Cloneable",
    # Operations
    "clone_animal",
    "describe_animal",
    "ensure_animal",
]
