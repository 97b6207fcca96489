"""
Visitor pattern.

Each visitor is a table from element type to handler, so the dispatch
on (element, visitor) is two dictionary lookups rather than a chain of
type checks or an ``accept`` method on every element.
"""

# pylint: disable=too-few-public-methods

from dataclasses import dataclass
from typing import Any, Callable, Dict

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


@dataclass(frozen=True)
class Circle:
    radius: float


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float


class Visitor:
    handlers: Dict[type, Callable[[Any], Any]] = {}

    def visit(self, element: Any) -> Any:
        handler = self.handlers.get(type(element))
        if handler is None:
            raise TypeError(f"{type(self).__name__} cannot visit {type(element).__name__}")
        return handler(element)


class AreaVisitor(Visitor):
    handlers = {
        Circle: lambda c: round(3.14159 * c.radius**2, 2),
        Rectangle: lambda r: r.width * r.height,
    }


class SvgVisitor(Visitor):
    handlers = {
        Circle: lambda c: f'<circle r="{c.radius}"/>',
        Rectangle: lambda r: f'<rect width="{r.width}" height="{r.height}"/>',
    }


@pattern()
class VisitorDemo(PatternDemo):
    name = "Visitor"
    category = PatternCategory.BEHAVIORAL
    intent = (
        "Represent an operation to be performed on the elements of an object "
        "structure, letting you define a new operation without changing the "
        "classes of the elements."
    )
    summary = """
        Operations on shapes (computing area, exporting SVG) live in visitor
        classes rather than in the shapes. Which code runs depends on two
        types at once, the visitor's and the element's: double dispatch.
        Here each visitor carries a table from element type to handler, so
        adding an operation means adding one visitor, and an element type a
        visitor doesn't know fails loudly instead of falling through.
    """
    applicability = (
        "an object structure holds many classes and you need operations that depend on their types",
        "many unrelated operations would otherwise pollute the element classes",
        "the element classes rarely change but new operations are added often",
    )
    consequences = (
        "adding new operations is easy",
        "related behaviour is gathered in one visitor",
        "adding a new element type means updating every visitor",
    )
    participants = (Circle, Rectangle, Visitor, AreaVisitor, SvgVisitor)

    def run(self) -> None:
        shapes = [Circle(1.0), Rectangle(2.0, 3.0)]
        for visitor in (AreaVisitor(), SvgVisitor()):
            for shape in shapes:
                self.emit(f"{type(visitor).__name__} {shape}: {visitor.visit(shape)}")
