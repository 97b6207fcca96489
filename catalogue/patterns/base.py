"""
Base class for pattern demonstrations.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, List, Tuple


class PatternCategory(Enum):
    """The three families of the classic catalogue."""

    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"

    @property
    def title(self) -> str:
        """Heading used for the category in rendered documents."""
        return f"{self.value.capitalize()} Patterns"


class PatternDemo(ABC):
    """Prose and a runnable demonstration for one design pattern.

    Subclasses describe the pattern in class attributes and implement
    ``run()``, which exercises the pattern's participants and reports
    what happened through ``emit()``. Participants return values rather
    than printing so that a demo's output can be captured and rendered.
    """

    # pylint: disable=too-few-public-methods

    name: str = ""
    slug: str = ""
    category: PatternCategory = PatternCategory.BEHAVIORAL
    intent: str = ""
    summary: str = ""
    applicability: Tuple[str, ...] = ()
    consequences: Tuple[str, ...] = ()
    # Classes and functions shown as the illustrative snippet
    participants: Tuple[Any, ...] = ()

    def __init__(self) -> None:
        self._lines: List[str] = []

    def emit(self, *values: Any, sep: str = " ") -> None:
        """Record one line of demo output."""
        self._lines.append(sep.join(str(value) for value in values))

    def execute(self) -> List[str]:
        """Run the demonstration and return the lines it emitted."""
        self._lines = []
        self.run()
        return list(self._lines)

    @abstractmethod
    def run(self) -> None:
        """Exercise the pattern's participants."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(slug={self.slug!r})"
