"""Example animal implementations for the slaughterhouse registry."""

from dataclasses import dataclass, field


@dataclass(slots=True)
class Cow:
    """Example: plain animal, cloned by deep copy."""

    name: str = "Cow"

    def race(self) -> str:
        return "Cow"

    def get_name(self) -> str:
        return self.name


@dataclass
class Pig:
    """Example: animal with its own __clone__ hook."""

    name: str
    tags: list[str] = field(default_factory=list)

    def race(self) -> str:
        return "Pig"

    def get_name(self) -> str:
        return self.name

    def __clone__(self) -> "Pig":
        return Pig(name=self.name, tags=list(self.tags))
