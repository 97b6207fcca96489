"""
Expression tree nodes.

Nodes are immutable and built bottom-up. ``str()`` renders a node back
to the postfix notation the tree builder accepts.
"""

from dataclasses import dataclass
from typing import Mapping, Union

Number = Union[int, float]


@dataclass(frozen=True)
class NumberLiteral:
    """A terminal holding a numeric value."""

    value: Number

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class VariableReference:
    """A terminal naming a value supplied by the context."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Sum:
    """A nonterminal adding its two operands."""

    left: "Node"
    right: "Node"

    def __str__(self) -> str:
        tokens = []
        pending: list = [self]
        while pending:
            item = pending.pop()
            if isinstance(item, Sum):
                pending.extend(("+", item.right, item.left))
            else:
                tokens.append(str(item))
        return " ".join(tokens)


Node = Union[NumberLiteral, VariableReference, Sum]

# Variable name -> bound node, looked up at evaluation time
Context = Mapping[str, Node]
