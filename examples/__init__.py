"""Example animals and demo for the slaughterhouse registry.

This package demonstrates library usage but is not part of the core API.
"""

from .components import Cow, Pig

__all__ = [
    "Cow",
    "Pig",
]
