"""
Abstract Factory pattern.
"""

# pylint: disable=too-few-public-methods

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class Dog:
    def speak(self) -> str:
        return "woof"

    def __str__(self) -> str:
        return "Dog"


class Cat:
    def speak(self) -> str:
        return "meow"

    def __str__(self) -> str:
        return "Cat"


class DogFactory:
    def get_pet(self) -> Dog:
        return Dog()

    def get_food(self) -> str:
        return "dog food"


class CatFactory:
    def get_pet(self) -> Cat:
        return Cat()

    def get_food(self) -> str:
        return "cat food"


class PetShop:
    """Sells whatever family of products its factory makes."""

    def __init__(self, factory):
        self.factory = factory

    def show_pet(self) -> str:
        pet = self.factory.get_pet()
        return f"We have a lovely {pet}. It says {pet.speak()}. We also have {self.factory.get_food()}."


@pattern()
class AbstractFactoryDemo(PatternDemo):
    """Two pet shops, each stocked by a different family factory."""

    name = "Abstract Factory"
    category = PatternCategory.CREATIONAL
    intent = (
        "Provide an interface for creating families of related objects "
        "without naming their concrete classes."
    )
    summary = """
        A client that builds several objects which must belong together (a
        pet and the food that pet eats, a widget set for one look and feel)
        asks a factory object for each of them. Swapping the factory swaps
        the whole family at once, and the client never mentions a concrete
        product class.
    """
    applicability = (
        "a system should be independent of how its products are created",
        "a family of related products is designed to be used together",
        "you want to expose products through interfaces, not implementations",
    )
    consequences = (
        "concrete classes are isolated behind the factory",
        "exchanging product families is a one-line change",
        "adding a new kind of product means changing every factory",
    )
    participants = (Dog, Cat, DogFactory, CatFactory, PetShop)

    def run(self) -> None:
        for factory in (DogFactory(), CatFactory()):
            shop = PetShop(factory)
            self.emit(shop.show_pet())
