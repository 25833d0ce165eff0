"""Registry: the stateful location → unit → hall container and its errors."""

from slaughterhouse.registry.errors import NoCapacityError, NotFoundError, SlaughterhouseError
from slaughterhouse.registry.registry import Slaughterhouse, new
from slaughterhouse.registry.views import HookView

__all__ = [
    "Slaughterhouse",
    "new",
    "HookView",
    "SlaughterhouseError",
    "NotFoundError",
    "NoCapacityError",
]
