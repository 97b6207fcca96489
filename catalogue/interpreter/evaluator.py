"""
Evaluator for expression trees.

Each node type maps to a handler in ``_EVALUATORS``; adding a node type
means adding one entry there. Handlers never call back into the
evaluator; they push values or further work onto explicit stacks.
"""

from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Tuple

from catalogue.interpreter.errors import MalformedExpression, UnboundVariable
from catalogue.interpreter.nodes import (
    Context,
    Node,
    Number,
    NumberLiteral,
    Sum,
    VariableReference,
)

# (node, names being resolved on the path to it)
_Frame = Tuple[Any, FrozenSet[str]]
_Handler = Callable[[Any, Context, FrozenSet[str], List[_Frame], List[Number]], None]


class _Add:
    """Work item that adds the two topmost values."""


_ADD = _Add()


def _evaluate_literal(
    node: NumberLiteral,
    context: Context,
    resolving: FrozenSet[str],
    work: List[_Frame],
    values: List[Number],
) -> None:
    values.append(node.value)


def _evaluate_variable(
    node: VariableReference,
    context: Context,
    resolving: FrozenSet[str],
    work: List[_Frame],
    values: List[Number],
) -> None:
    if node.name in resolving:
        raise MalformedExpression(f"Variable '{node.name}' is bound to itself")
    if node.name not in context:
        raise UnboundVariable(node.name)
    work.append((context[node.name], resolving | {node.name}))


def _evaluate_sum(
    node: Sum,
    context: Context,
    resolving: FrozenSet[str],
    work: List[_Frame],
    values: List[Number],
) -> None:
    # Popped in reverse: left first, then right, then the addition
    work.append((_ADD, resolving))
    work.append((node.right, resolving))
    work.append((node.left, resolving))


def _apply_add(
    item: _Add,
    context: Context,
    resolving: FrozenSet[str],
    work: List[_Frame],
    values: List[Number],
) -> None:
    right = values.pop()
    left = values.pop()
    values.append(left + right)


_EVALUATORS: Dict[type, _Handler] = {
    NumberLiteral: _evaluate_literal,
    VariableReference: _evaluate_variable,
    Sum: _evaluate_sum,
    _Add: _apply_add,
}


def evaluate(node: Node, context: Optional[Mapping[str, Node]] = None) -> Number:
    """Evaluate an expression tree against a context.

    Args:
        node: Root of the expression tree
        context: Variable name -> bound node

    Returns:
        The numeric value of the expression

    Raises:
        UnboundVariable: If a referenced name has no binding
        MalformedExpression: If a binding refers back to itself
    """
    context = context or {}
    work: List[_Frame] = [(node, frozenset())]
    values: List[Number] = []

    while work:
        item, resolving = work.pop()
        handler = _EVALUATORS.get(type(item))
        if handler is None:
            raise MalformedExpression(f"Unsupported node: {item!r}")
        handler(item, context, resolving, work, values)

    return values.pop()
