"""
Errors raised by the toy expression interpreter.
"""


class MalformedExpression(ValueError):
    """Raised when an expression cannot be built into a single tree or evaluated."""


class UnboundVariable(MalformedExpression):
    """Raised when a variable reference has no binding in the context."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unbound variable: '{name}'")
        self.name = name
