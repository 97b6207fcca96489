"""
Strategy pattern.
"""

# pylint: disable=too-few-public-methods

from typing import Callable, Optional

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern

Discount = Callable[[float], float]


def no_discount(price: float) -> float:
    return price


def ten_percent_off(price: float) -> float:
    return price * 0.9


def on_sale(price: float) -> float:
    return price * 0.5


class Order:
    def __init__(self, price: float, discount: Optional[Discount] = None) -> None:
        self.price = price
        self.discount = discount or no_discount

    def total(self) -> float:
        return round(self.discount(self.price), 2)


@pattern()
class StrategyDemo(PatternDemo):
    name = "Strategy"
    category = PatternCategory.BEHAVIORAL
    intent = (
        "Define a family of algorithms, encapsulate each one, and make them "
        "interchangeable independently of the clients that use them."
    )
    summary = """
        An order delegates its pricing rule to a strategy supplied from
        outside. In Python a strategy with a single method is just a
        function, so the family of algorithms is a handful of plain
        functions with the same signature.
    """
    applicability = (
        "many related classes differ only in their behaviour",
        "you need different variants of an algorithm",
        "a class defines many behaviours as multiple conditional statements",
    )
    consequences = (
        "conditionals are replaced by delegation",
        "strategies can be swapped at run time",
        "clients must know enough to pick a strategy",
    )
    participants = (no_discount, ten_percent_off, on_sale, Order)

    def run(self) -> None:
        for discount in (None, ten_percent_off, on_sale):
            order = Order(80.0, discount)
            self.emit(f"{order.discount.__name__}: {order.total()}")
