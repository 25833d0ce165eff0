"""Hook identity: lightweight coordinates into the registry."""

from slaughterhouse.core.identity.models import HookAddress

__all__ = [
    "HookAddress",
]
