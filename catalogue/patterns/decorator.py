"""
Decorator pattern.
"""

# pylint: disable=too-few-public-methods

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class TextTag:
    def __init__(self, text: str) -> None:
        self._text = text

    def render(self) -> str:
        return self._text


class BoldWrapper:
    def __init__(self, wrapped) -> None:
        self._wrapped = wrapped

    def render(self) -> str:
        return f"<b>{self._wrapped.render()}</b>"


class ItalicWrapper:
    def __init__(self, wrapped) -> None:
        self._wrapped = wrapped

    def render(self) -> str:
        return f"<i>{self._wrapped.render()}</i>"


@pattern()
class DecoratorDemo(PatternDemo):
    name = "Decorator"
    category = PatternCategory.STRUCTURAL
    intent = (
        "Attach additional responsibilities to an object dynamically, as a "
        "flexible alternative to subclassing."
    )
    summary = """
        A wrapper offers the same interface as the object it wraps, does its
        own bit of work and delegates the rest. Wrappers stack in any order
        and any number, so behaviour is composed per object at run time
        instead of baked into subclasses. (Python's ``@decorator`` syntax
        is a related idea applied to functions.)
    """
    applicability = (
        "responsibilities should be added to individual objects transparently",
        "extension by subclassing would explode into every combination of features",
        "responsibilities may later be withdrawn",
    )
    consequences = (
        "more flexible than static inheritance",
        "features are paid for only when used",
        "many small look-alike objects can make a design harder to follow",
    )
    participants = (TextTag, BoldWrapper, ItalicWrapper)

    def run(self) -> None:
        plain = TextTag("hello, world")
        self.emit("before:", plain.render())
        self.emit("after:", ItalicWrapper(BoldWrapper(plain)).render())
