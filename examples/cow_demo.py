"""Demo: fill a barn with cows and print the registry.

Run with:
    python -m examples.cow_demo
"""

from examples.components import Cow, Pig
from slaughterhouse import NoCapacityError, Slaughterhouse, SlaughterhouseSettings


def main() -> None:
    house = Slaughterhouse(SlaughterhouseSettings())
    house.add_location("Farm")
    house.add_unit("Farm", "Barn")
    house.add_unit("Farm", "Sty", 1)

    hook_index = house.add_animal("Farm", "Barn", Cow("Bessie"))
    house.add_animal("Farm", "Barn", Cow("Daisy"))
    house.add_animal("Farm", "Sty", Pig("Wilbur", tags=["prize"]))

    animal = house.get_animal("Farm", "Barn", 0)
    print(f"{animal!r} was added to hook {hook_index + 1}")

    try:
        house.add_animal("Farm", "Sty", Pig("Babe"))
    except NoCapacityError as e:
        print(f"Could not add Babe: {e}")

    print(" ".join(repr(hook) for hook in house.iter_hooks()))
    print(house.render())


if __name__ == "__main__":
    main()
