"""
Toy expression interpreter.

Expressions are whitespace-separated postfix tokens whose only operator
is ``+``; every other token is a variable name resolved at evaluation
time:

    >>> interpret("a b + c +", {"a": 1, "b": 2, "c": 3})
    6
"""

from typing import Dict, Mapping, Optional, Union

from catalogue.interpreter.builder import build_tree
from catalogue.interpreter.errors import MalformedExpression, UnboundVariable
from catalogue.interpreter.evaluator import evaluate
from catalogue.interpreter.nodes import (
    Context,
    Node,
    Number,
    NumberLiteral,
    Sum,
    VariableReference,
)
from catalogue.interpreter.tokenizer import OPERATOR, tokenize

Binding = Union[Node, Number]


def parse(expression: str) -> Node:
    """Tokenize and build an expression tree."""
    return build_tree(tokenize(expression))


def bind(bindings: Optional[Mapping[str, Binding]] = None) -> Dict[str, Node]:
    """Build a context, wrapping plain numbers in ``NumberLiteral``."""
    context: Dict[str, Node] = {}
    for name, value in (bindings or {}).items():
        if isinstance(value, (NumberLiteral, VariableReference, Sum)):
            context[name] = value
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            context[name] = NumberLiteral(value)
        else:
            raise MalformedExpression(
                f"Binding for '{name}' must be a node or a number, got {value!r}"
            )
    return context


def interpret(expression: str, bindings: Optional[Mapping[str, Binding]] = None) -> Number:
    """Parse an expression and evaluate it against the given bindings.

    Args:
        expression: Whitespace-delimited postfix expression
        bindings: Variable name -> node or plain number

    Returns:
        The numeric result

    Raises:
        MalformedExpression: If the expression or a binding is malformed
        UnboundVariable: If a variable has no binding
    """
    return evaluate(parse(expression), bind(bindings))


__all__ = [
    "Binding",
    "Context",
    "MalformedExpression",
    "Node",
    "Number",
    "NumberLiteral",
    "OPERATOR",
    "Sum",
    "UnboundVariable",
    "VariableReference",
    "bind",
    "build_tree",
    "evaluate",
    "interpret",
    "parse",
    "tokenize",
]
