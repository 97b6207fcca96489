"""
Flyweight pattern.
"""

# pylint: disable=too-few-public-methods

from typing import Dict, Tuple

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class TreeType:
    """Intrinsic state: shared by every tree of the same species."""

    def __init__(self, species: str, color: str) -> None:
        self.species = species
        self.color = color

    def draw(self, x: int, y: int) -> str:
        return f"{self.color} {self.species} at ({x}, {y})"


class TreeTypeFactory:
    def __init__(self) -> None:
        self._types: Dict[Tuple[str, str], TreeType] = {}

    def get(self, species: str, color: str) -> TreeType:
        key = (species, color)
        if key not in self._types:
            self._types[key] = TreeType(species, color)
        return self._types[key]

    def __len__(self) -> int:
        return len(self._types)


@pattern()
class FlyweightDemo(PatternDemo):
    name = "Flyweight"
    category = PatternCategory.STRUCTURAL
    intent = "Use sharing to support large numbers of fine-grained objects efficiently."
    summary = """
        A forest has thousands of trees but only a handful of species. The
        part of a tree that doesn't depend on where it stands (species,
        colour: its intrinsic state) is stored once per species in a shared
        flyweight. The position (extrinsic state) is kept by the caller and
        passed in each time the flyweight is used.
    """
    applicability = (
        "an application uses a large number of objects",
        "most object state can be made extrinsic",
        "many groups of objects can be replaced by few shared ones once extrinsic state is removed",
        "the application doesn't depend on object identity",
    )
    consequences = (
        "storage drops with the number of shared instances",
        "callers must carry and pass the extrinsic state",
        "shared flyweights must be immutable",
    )
    participants = (TreeType, TreeTypeFactory)

    def run(self) -> None:
        factory = TreeTypeFactory()
        forest = [
            (factory.get("oak", "green"), 1, 2),
            (factory.get("oak", "green"), 4, 8),
            (factory.get("birch", "white"), 3, 3),
            (factory.get("oak", "green"), 9, 1),
        ]
        for tree_type, x, y in forest:
            self.emit(tree_type.draw(x, y))
        self.emit(f"{len(forest)} trees share {len(factory)} tree types")
