"""
Chain of Responsibility pattern.
"""

# pylint: disable=too-few-public-methods

from typing import Optional

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class Handler:
    def __init__(self, successor: Optional["Handler"] = None) -> None:
        self.successor = successor

    def handle(self, request: int) -> str:
        result = self.check(request)
        if result is not None:
            return result
        if self.successor is not None:
            return self.successor.handle(request)
        return f"end of chain, no handler for {request}"

    def check(self, request: int) -> Optional[str]:
        return None


class RangeHandler(Handler):
    def __init__(self, low: int, high: int, successor: Optional[Handler] = None) -> None:
        super().__init__(successor)
        self.low = low
        self.high = high

    def check(self, request: int) -> Optional[str]:
        if self.low <= request < self.high:
            return f"request {request} handled by [{self.low}, {self.high})"
        return None


@pattern()
class ChainOfResponsibilityDemo(PatternDemo):
    name = "Chain of Responsibility"
    category = PatternCategory.BEHAVIORAL
    intent = (
        "Avoid coupling the sender of a request to its receiver by giving "
        "more than one object a chance to handle it; chain the receivers "
        "and pass the request along until one handles it."
    )
    summary = """
        Each handler either deals with a request or forwards it to its
        successor. The sender only knows the head of the chain; which
        handler answers, or whether any does, is decided by the chain.
    """
    applicability = (
        "more than one object may handle a request and the handler isn't known in advance",
        "you want to issue a request without naming the receiver",
        "the set of handlers should be configurable at run time",
    )
    consequences = (
        "reduced coupling between sender and receivers",
        "responsibilities can be reassigned by relinking the chain",
        "a request can fall off the end of the chain unhandled",
    )
    participants = (Handler, RangeHandler)

    def run(self) -> None:
        chain = RangeHandler(0, 10, RangeHandler(10, 20, RangeHandler(20, 30)))
        for request in (2, 14, 22, 35):
            self.emit(chain.handle(request))
