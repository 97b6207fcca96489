"""
Template Method pattern.
"""

# pylint: disable=too-few-public-methods

from abc import ABC, abstractmethod
from typing import List

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class Report(ABC):
    def render(self, rows: List[str]) -> List[str]:
        """The template: fixed skeleton, variable steps."""
        return [self.header(), *(self.row(r) for r in rows), self.footer(len(rows))]

    @abstractmethod
    def header(self) -> str:
        ...

    @abstractmethod
    def row(self, value: str) -> str:
        ...

    def footer(self, count: int) -> str:
        return f"{count} rows"


class CsvReport(Report):
    def header(self) -> str:
        return "name"

    def row(self, value: str) -> str:
        return value


class MarkdownReport(Report):
    def header(self) -> str:
        return "| name |\n| ---- |"

    def row(self, value: str) -> str:
        return f"| {value} |"

    def footer(self, count: int) -> str:
        return f"_{count} rows_"


@pattern()
class TemplateMethodDemo(PatternDemo):
    name = "Template Method"
    category = PatternCategory.BEHAVIORAL
    intent = (
        "Define the skeleton of an algorithm in an operation, deferring "
        "some steps to subclasses."
    )
    summary = """
        ``render`` fixes the order of the steps once, in the base class.
        Subclasses fill in the steps marked abstract and may override the
        optional ones (``footer`` here has a default), but they cannot
        reorder the algorithm.
    """
    applicability = (
        "the invariant parts of an algorithm should be implemented once",
        "common behaviour among subclasses should be factored to avoid duplication",
        "subclass extensions should be limited to specific hook points",
    )
    consequences = (
        "a fundamental technique for code reuse in class libraries",
        "the parent calls the child, an inverted control structure",
        "the more steps there are, the harder the template is to follow",
    )
    participants = (Report, CsvReport, MarkdownReport)

    def run(self) -> None:
        rows = ["ada", "grace"]
        for report in (CsvReport(), MarkdownReport()):
            self.emit(f"{type(report).__name__}:")
            for line in report.render(rows):
                self.emit(line)
