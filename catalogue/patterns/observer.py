"""
Observer pattern.
"""

# pylint: disable=too-few-public-methods

from typing import Callable, List

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class Subject:
    def __init__(self) -> None:
        self._observers: List[Callable[["Subject"], None]] = []

    def attach(self, observer: Callable[["Subject"], None]) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Callable[["Subject"], None]) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self) -> None:
        for observer in self._observers:
            observer(self)


class Data(Subject):
    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name
        self._value = 0

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = value
        self.notify()


class HexViewer:
    def __init__(self, log: List[str]) -> None:
        self.log = log

    def __call__(self, subject: Data) -> None:
        self.log.append(f"HexViewer: {subject.name} has value {subject.value:#x}")


class DecimalViewer:
    def __init__(self, log: List[str]) -> None:
        self.log = log

    def __call__(self, subject: Data) -> None:
        self.log.append(f"DecimalViewer: {subject.name} has value {subject.value}")


@pattern()
class ObserverDemo(PatternDemo):
    name = "Observer"
    category = PatternCategory.BEHAVIORAL
    intent = (
        "Define a one-to-many dependency so that when one object changes "
        "state, all its dependents are notified and updated automatically."
    )
    summary = """
        The subject keeps a list of callables and calls each of them when
        its value changes. It knows nothing else about its observers, which
        can be attached and detached at any time.
    """
    applicability = (
        "a change to one object requires changing others, and you don't know how many",
        "an object should notify others without making assumptions about who they are",
    )
    consequences = (
        "subject and observers are loosely coupled",
        "broadcast communication comes for free",
        "a cheap-looking assignment can trigger a cascade of updates",
    )
    participants = (Subject, Data, HexViewer, DecimalViewer)

    def run(self) -> None:
        log: List[str] = []
        data = Data("Data 1")
        hex_viewer, decimal_viewer = HexViewer(log), DecimalViewer(log)
        data.attach(hex_viewer)
        data.attach(decimal_viewer)

        data.value = 10
        data.value = 15
        data.detach(hex_viewer)
        data.value = 3

        for line in log:
            self.emit(line)
