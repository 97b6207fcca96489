"""
Builder pattern.
"""

# pylint: disable=too-few-public-methods

from typing import List

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class Building:
    def __init__(self) -> None:
        self.floors = ""
        self.size = ""

    def __str__(self) -> str:
        return f"Floor: {self.floors} | Size: {self.size}"


class HouseBuilder:
    def __init__(self) -> None:
        self.building = Building()

    def build_floors(self) -> None:
        self.building.floors = "One"

    def build_size(self) -> None:
        self.building.size = "Big"


class FlatBuilder:
    def __init__(self) -> None:
        self.building = Building()

    def build_floors(self) -> None:
        self.building.floors = "More than One"

    def build_size(self) -> None:
        self.building.size = "Small"


class Director:
    """Knows the construction steps, not what they produce."""

    def construct(self, builder) -> Building:
        builder.build_floors()
        builder.build_size()
        return builder.building


@pattern()
class BuilderDemo(PatternDemo):
    name = "Builder"
    category = PatternCategory.CREATIONAL
    intent = (
        "Separate the construction of a complex object from its "
        "representation so the same process can create different representations."
    )
    summary = """
        A director runs a fixed sequence of construction steps against a
        builder interface. Each concrete builder decides what a step means
        and accumulates the product, which the client collects at the end.
        The director's sequence is written once and reused for every product.
    """
    applicability = (
        "the algorithm for assembling an object should not depend on its parts",
        "construction must allow different representations of the product",
    )
    consequences = (
        "the product's internal representation can vary freely",
        "construction code is isolated from representation code",
        "the client gets finer control over the construction process",
    )
    participants = (Building, HouseBuilder, FlatBuilder, Director)

    def run(self) -> None:
        director = Director()
        buildings: List[Building] = [
            director.construct(HouseBuilder()),
            director.construct(FlatBuilder()),
        ]
        for building in buildings:
            self.emit(building)
