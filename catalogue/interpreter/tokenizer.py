"""
Whitespace tokenizer for the toy expression grammar.
"""

from typing import List

OPERATOR = "+"


def tokenize(expression: str) -> List[str]:
    """Split an expression into tokens on whitespace.

    There is no quoting, escaping or multi-character operator support:
    ``"a b +"`` yields ``["a", "b", "+"]`` and ``"a+b"`` is a single token.

    Args:
        expression: Whitespace-delimited expression

    Returns:
        Ordered list of tokens, empty for blank input
    """
    return expression.split()
