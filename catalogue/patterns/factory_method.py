"""
Factory Method pattern.
"""

# pylint: disable=too-few-public-methods

from abc import ABC, abstractmethod

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class Document:
    def __init__(self, kind: str) -> None:
        self.kind = kind


class Application(ABC):
    def new_document(self, title: str) -> str:
        document = self.create_document()
        return f"Opened {document.kind} document '{title}'"

    @abstractmethod
    def create_document(self) -> Document:
        """The factory method subclasses override."""


class TextEditor(Application):
    def create_document(self) -> Document:
        return Document("text")


class Spreadsheet(Application):
    def create_document(self) -> Document:
        return Document("spreadsheet")


@pattern()
class FactoryMethodDemo(PatternDemo):
    name = "Factory Method"
    category = PatternCategory.CREATIONAL
    intent = (
        "Define an interface for creating an object, but let subclasses "
        "decide which class to instantiate."
    )
    summary = """
        The base class implements everything about working with a product
        except the line that creates it. That line is a method subclasses
        override, so the shared workflow stays in one place while each
        subclass picks its own product.
    """
    applicability = (
        "a class can't anticipate the class of objects it must create",
        "a class wants its subclasses to specify the objects it creates",
    )
    consequences = (
        "application code works with the product interface only",
        "subclassing the creator just to change the product can be heavy",
    )
    participants = (Document, Application, TextEditor, Spreadsheet)

    def run(self) -> None:
        for app in (TextEditor(), Spreadsheet()):
            self.emit(app.new_document("notes"))
