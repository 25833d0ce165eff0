"""Animal models: the occupant protocol and its optional clone hook.

Any object exposing ``race()`` and ``get_name()`` can hang on a hook. Cloning
is handled by ``clone_animal`` so concrete animal types never need to know
about the registry.
"""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Animal(Protocol):
    """Occupant of a hook: a category plus a display name."""

    def race(self) -> str: ...

    def get_name(self) -> str: ...


@runtime_checkable
class Cloneable(Protocol):
    """Animal that knows how to produce an independent copy of itself."""

    def __clone__(self) -> Self: ...
