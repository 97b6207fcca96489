"""
Memento pattern.
"""

# pylint: disable=too-few-public-methods

from dataclasses import dataclass
from typing import List

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


@dataclass(frozen=True)
class Memento:
    balance: int
    history: tuple


class Account:
    def __init__(self) -> None:
        self.balance = 0
        self.history: List[str] = []

    def deposit(self, amount: int) -> None:
        self.balance += amount
        self.history.append(f"+{amount}")

    def withdraw(self, amount: int) -> None:
        self.balance -= amount
        self.history.append(f"-{amount}")

    def save(self) -> Memento:
        return Memento(self.balance, tuple(self.history))

    def restore(self, memento: Memento) -> None:
        self.balance = memento.balance
        self.history = list(memento.history)


@pattern()
class MementoDemo(PatternDemo):
    name = "Memento"
    category = PatternCategory.BEHAVIORAL
    intent = (
        "Without violating encapsulation, capture and externalize an "
        "object's internal state so it can be restored later."
    )
    summary = """
        The account produces an opaque, immutable snapshot of itself and can
        later roll back to it. The caller keeps snapshots but never looks
        inside them, so the account stays free to change what state it
        holds. Used here as a simple transaction: save, attempt, roll back
        on failure.
    """
    applicability = (
        "a snapshot of an object's state must be saved for later restoration",
        "a direct interface to that state would expose implementation details",
    )
    consequences = (
        "encapsulation boundaries are preserved",
        "the originator is simpler, since callers manage the snapshots",
        "snapshots can be expensive if the state is large",
    )
    participants = (Memento, Account)

    def run(self) -> None:
        account = Account()
        account.deposit(100)
        checkpoint = account.save()
        self.emit(f"balance {account.balance}, history {account.history}")

        account.withdraw(30)
        account.withdraw(120)
        self.emit(f"balance {account.balance}, history {account.history}")
        if account.balance < 0:
            account.restore(checkpoint)
            self.emit("overdrawn, rolled back")
        self.emit(f"balance {account.balance}, history {account.history}")
