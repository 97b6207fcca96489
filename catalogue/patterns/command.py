"""
Command pattern.
"""

# pylint: disable=too-few-public-methods

from typing import List

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class Document:
    def __init__(self) -> None:
        self.text = ""


class AppendCommand:
    def __init__(self, document: Document, text: str) -> None:
        self.document = document
        self.text = text

    def execute(self) -> None:
        self.document.text += self.text

    def undo(self) -> None:
        self.document.text = self.document.text[: -len(self.text)]


class Editor:
    """The invoker: runs commands and remembers them for undo."""

    def __init__(self) -> None:
        self.history: List[AppendCommand] = []

    def run(self, command: AppendCommand) -> None:
        command.execute()
        self.history.append(command)

    def undo(self) -> None:
        if self.history:
            self.history.pop().undo()


@pattern()
class CommandDemo(PatternDemo):
    name = "Command"
    category = PatternCategory.BEHAVIORAL
    intent = (
        "Encapsulate a request as an object, letting you parameterize "
        "clients with requests, queue or log them, and support undo."
    )
    summary = """
        A command object bundles a receiver with an action and knows how to
        reverse it. The invoker executes commands without knowing what they
        do and keeps a history, which is all it needs to offer undo.
    """
    applicability = (
        "you want to parameterize objects by an action to perform",
        "requests should be queued, logged or executed at a different time",
        "operations must be undoable",
    )
    consequences = (
        "the object invoking an operation is decoupled from the one performing it",
        "commands are first-class objects that can be stored and composed",
        "every undoable operation needs its own inverse",
    )
    participants = (Document, AppendCommand, Editor)

    def run(self) -> None:
        document = Document()
        editor = Editor()
        for text in ("Hello", ", ", "world"):
            editor.run(AppendCommand(document, text))
            self.emit(f"after append: {document.text!r}")
        editor.undo()
        self.emit(f"after undo: {document.text!r}")
        editor.undo()
        self.emit(f"after undo: {document.text!r}")
