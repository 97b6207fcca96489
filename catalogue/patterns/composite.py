"""
Composite pattern.
"""

# pylint: disable=too-few-public-methods

from typing import List

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class File:
    def __init__(self, name: str, size: int) -> None:
        self.name = name
        self.size = size

    def total_size(self) -> int:
        return self.size

    def describe(self, indent: int = 0) -> List[str]:
        return [f"{'  ' * indent}{self.name} ({self.size})"]


class Folder:
    def __init__(self, name: str) -> None:
        self.name = name
        self.children: List = []

    def add(self, child) -> "Folder":
        self.children.append(child)
        return self

    def total_size(self) -> int:
        return sum(child.total_size() for child in self.children)

    def describe(self, indent: int = 0) -> List[str]:
        lines = [f"{'  ' * indent}{self.name}/ ({self.total_size()})"]
        for child in self.children:
            lines += child.describe(indent + 1)
        return lines


@pattern()
class CompositeDemo(PatternDemo):
    name = "Composite"
    category = PatternCategory.STRUCTURAL
    intent = (
        "Compose objects into tree structures to represent part-whole "
        "hierarchies, and let clients treat individual objects and "
        "compositions uniformly."
    )
    summary = """
        Files and folders answer the same two questions: how big are you,
        and how do you describe yourself. A folder answers by asking its
        children, which may themselves be folders, so the client never
        needs to know whether it holds a leaf or a whole subtree.
    """
    applicability = (
        "you want to represent part-whole hierarchies of objects",
        "clients should ignore the difference between compositions and individual objects",
    )
    consequences = (
        "client code is simple because it treats every node alike",
        "new kinds of component fit in without changing clients",
        "the design can be overly general, since any component accepts children",
    )
    participants = (File, Folder)

    def run(self) -> None:
        root = Folder("project").add(File("README.md", 4)).add(
            Folder("src").add(File("main.py", 12)).add(File("util.py", 6))
        )
        for line in root.describe():
            self.emit(line)
