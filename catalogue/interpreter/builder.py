"""
Stack-based expression tree builder.
"""

from typing import Iterable, List

from catalogue.interpreter.errors import MalformedExpression
from catalogue.interpreter.nodes import Node, Sum, VariableReference
from catalogue.interpreter.tokenizer import OPERATOR


def build_tree(tokens: Iterable[str]) -> Node:
    """Build an expression tree from postfix tokens.

    Operand tokens are pushed as variable references. The operator pops
    the right operand first, then the left, and pushes their sum, so
    ``a b + c +`` nests as ``(a + b) + c``.

    Args:
        tokens: Tokens in postfix order

    Returns:
        Root node of the expression tree

    Raises:
        MalformedExpression: If the operator finds fewer than two operands,
            or if anything other than exactly one node remains at the end
    """
    stack: List[Node] = []

    for position, token in enumerate(tokens):
        if token == OPERATOR:
            if len(stack) < 2:
                raise MalformedExpression(
                    f"Operator '{OPERATOR}' at position {position} needs two operands, "
                    f"found {len(stack)}"
                )
            right = stack.pop()
            left = stack.pop()
            stack.append(Sum(left, right))
        else:
            stack.append(VariableReference(token))

    if not stack:
        raise MalformedExpression("Empty expression")
    if len(stack) > 1:
        raise MalformedExpression(
            f"Expression leaves {len(stack)} operands without an operator"
        )

    return stack[0]
