"""
Interpreter pattern, illustrated with the toy expression interpreter.
"""

from catalogue.interpreter import MalformedExpression, evaluate, tokenize
from catalogue.interpreter.builder import build_tree
from catalogue.interpreter.nodes import NumberLiteral, Sum, VariableReference
from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


@pattern()
class InterpreterDemo(PatternDemo):
    name = "Interpreter"
    category = PatternCategory.BEHAVIORAL
    intent = (
        "Given a language, define a representation for its grammar along "
        "with an interpreter that uses the representation to interpret "
        "sentences in the language."
    )
    summary = """
        Each grammar rule becomes a node class: terminals (a number, a
        variable name) and nonterminals (a sum of two expressions). A
        sentence is parsed into a tree of those nodes and interpreted by
        walking the tree against a context that supplies variable values.

        The grammar here is deliberately tiny: postfix tokens separated by
        whitespace, with ``+`` as the only operator. Malformed input (an
        operator without two operands, leftover operands, an unbound
        variable) raises ``MalformedExpression`` instead of guessing.
    """
    applicability = (
        "the grammar is simple; large grammars want a parser generator instead",
        "efficiency is not critical; direct tree walking is slow compared to compiling",
    )
    consequences = (
        "the grammar is easy to change and extend, one class per rule",
        "adding a new way to interpret sentences means touching every node class",
        "complex grammars become hard to maintain",
    )
    participants = (
        NumberLiteral,
        VariableReference,
        Sum,
        build_tree,
        evaluate,
    )

    def run(self) -> None:
        context = {"w": NumberLiteral(5), "x": NumberLiteral(10), "z": NumberLiteral(42)}
        for expression in ("w x +", "w x z + +", "w x + z +"):
            tree = build_tree(tokenize(expression))
            self.emit(f"{expression} = {evaluate(tree, context)}")

        for expression in ("+", "w x", "w y +"):
            try:
                evaluate(build_tree(tokenize(expression)), context)
            except MalformedExpression as e:
                self.emit(f"{expression!r} rejected: {e}")
