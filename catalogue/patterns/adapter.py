"""
Adapter pattern.
"""

# pylint: disable=too-few-public-methods

from typing import Any, Callable

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class Dog:
    name = "Dog"

    def bark(self) -> str:
        return "woof!"


class Human:
    name = "Human"

    def speak(self) -> str:
        return "'hello'"


class Car:
    name = "Car"

    def make_noise(self, octane_level: int) -> str:
        return f"vroom{'!' * octane_level}"


class Adapter:
    """Exposes ``make_noise`` under whatever method the adaptee really has."""

    def __init__(self, obj: Any, make_noise: Callable[[], str]) -> None:
        self.obj = obj
        self.make_noise = make_noise

    def __getattr__(self, attr: str) -> Any:
        return getattr(self.obj, attr)


@pattern()
class AdapterDemo(PatternDemo):
    name = "Adapter"
    category = PatternCategory.STRUCTURAL
    intent = (
        "Convert the interface of a class into another interface clients "
        "expect, letting classes work together that couldn't otherwise."
    )
    summary = """
        The client loop below only knows ``make_noise()``. None of the three
        objects offers exactly that, so each is wrapped in an adapter that
        maps the expected call onto the one the object does provide and
        forwards every other attribute untouched.
    """
    applicability = (
        "you want to use an existing class whose interface doesn't match the one you need",
        "you need to reuse several classes that lack a common interface",
    )
    consequences = (
        "the adaptee stays unchanged and unaware of the client",
        "one adapter can serve many adaptees if the mapping is passed in",
        "an extra indirection sits in every adapted call",
    )
    participants = (Dog, Human, Car, Adapter)

    def run(self) -> None:
        objects = [
            Adapter(Dog(), make_noise=Dog().bark),
            Adapter(Human(), make_noise=Human().speak),
            Adapter(Car(), make_noise=lambda: Car().make_noise(3)),
        ]
        for obj in objects:
            self.emit(f"A {obj.name} goes {obj.make_noise()}")
