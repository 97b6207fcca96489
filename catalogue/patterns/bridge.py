"""
Bridge pattern.
"""

# pylint: disable=too-few-public-methods

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class VectorRenderer:
    def render_circle(self, x: float, y: float, radius: float) -> str:
        return f"vector circle at {x}:{y} radius {radius}"


class RasterRenderer:
    def render_circle(self, x: float, y: float, radius: float) -> str:
        return f"raster circle at {x}:{y} radius {radius}"


class Circle:
    """The abstraction; drawing is delegated to whichever renderer it holds."""

    def __init__(self, x: float, y: float, radius: float, renderer) -> None:
        self.x = x
        self.y = y
        self.radius = radius
        self.renderer = renderer

    def draw(self) -> str:
        return self.renderer.render_circle(self.x, self.y, self.radius)

    def scale(self, factor: float) -> None:
        self.radius *= factor


@pattern()
class BridgeDemo(PatternDemo):
    name = "Bridge"
    category = PatternCategory.STRUCTURAL
    intent = "Decouple an abstraction from its implementation so that the two can vary independently."
    summary = """
        Shapes and the ways of drawing them are two separate hierarchies.
        A shape holds a reference to a renderer and delegates the low-level
        drawing to it, so new shapes and new renderers can be added without
        a class for every combination.
    """
    applicability = (
        "both the abstraction and its implementation should be extensible by subclassing",
        "the implementation should be selectable or switchable at run time",
        "a class hierarchy would otherwise grow one subclass per combination",
    )
    consequences = (
        "interface and implementation are decoupled",
        "each hierarchy can be extended on its own",
        "implementation details are hidden from clients",
    )
    participants = (VectorRenderer, RasterRenderer, Circle)

    def run(self) -> None:
        shapes = [Circle(1, 2, 3, VectorRenderer()), Circle(5, 7, 11, RasterRenderer())]
        for shape in shapes:
            shape.scale(2.5)
            self.emit(shape.draw())
