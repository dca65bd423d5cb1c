"""Pest grammar parser built on parsimonious.

Parses pest grammar source into the Pair tree from syntax.types. Only rules
whose name is a PairKind value become pairs; all other rules (whitespace,
comments, grouping rules) are flattened into their parent.
"""

from __future__ import annotations

from parsimonious.exceptions import ParseError
from parsimonious.grammar import Grammar
from parsimonious.nodes import Node, NodeVisitor

from pest_railroad.errors import GrammarSyntaxError
from pest_railroad.grammar import GRAMMAR
from pest_railroad.syntax.types import Pair, PairKind

_GRAMMAR = Grammar(GRAMMAR)

_SNIPPET_LEN = 20


class _PairVisitor(NodeVisitor):
    """Collapse a parsimonious tree into a list of top-level pairs."""

    def generic_visit(self, node: Node, visited_children: list[list[Pair]]) -> list[Pair]:
        pairs = [pair for child in visited_children for pair in child]
        kind = PairKind.from_rule_name(node.expr_name)
        if kind is None:
            return pairs
        return [Pair(kind, node.text, tuple(pairs))]


def _syntax_error(err: ParseError) -> GrammarSyntaxError:
    snippet = err.text[err.pos : err.pos + _SNIPPET_LEN]
    if not snippet:
        message = "unexpected end of input"
    else:
        message = f"unexpected input {snippet.splitlines()[0]!r}"
    if err.expr is not None and err.expr.name:
        message += f" while parsing {err.expr.name}"
    return GrammarSyntaxError(message, err.line(), err.column())


class PestParser:
    """Pest grammar (.pest) parser."""

    def parse(self, src: str) -> list[Pair]:
        try:
            tree = _GRAMMAR.parse(src)
        except ParseError as e:
            raise _syntax_error(e) from e
        pairs: list[Pair] = _PairVisitor().visit(tree)
        pairs.append(Pair(PairKind.EOI, ""))
        return pairs
