"""Diagram assembly: every rule and doc comment of a grammar, top to bottom."""

from __future__ import annotations

from collections.abc import Iterable

from pest_railroad.config import DiagramConfig
from pest_railroad.errors import InvariantViolation
from pest_railroad.ir.diagram import Comment, DiagramNode, VerticalGrid
from pest_railroad.parsers import parse
from pest_railroad.syntax.types import Pair, PairKind
from pest_railroad.transform.rule import build_rule

_DOC_PREFIX = "///"


def doc_text(pair: Pair) -> str:
    """Text of a `///` line doc without the marker and one leading space."""
    text = pair.text[len(_DOC_PREFIX) :]
    return text[1:] if text.startswith(" ") else text


def assemble(pairs: Iterable[Pair], config: DiagramConfig | None = None) -> tuple[VerticalGrid, list[str]]:
    """Stack the diagrams of all top-level grammar pairs in source order."""
    if config is None:
        config = DiagramConfig()
    warnings: list[str] = []
    nodes: list[DiagramNode] = []

    for pair in pairs:
        if pair.kind is PairKind.GrammarRule:
            first = pair.children[0] if pair.children else None
            if first is None:
                raise InvariantViolation("empty grammar rule")
            if first.kind is PairKind.LineDoc:
                nodes.append(Comment(doc_text(first)))
            elif first.kind is PairKind.Identifier:
                rule, rule_warnings = build_rule(first.text, pair.children[1:], config)
                warnings.extend(rule_warnings)
                nodes.append(rule)
            else:
                raise InvariantViolation(f"unexpected {first.kind.value} at start of grammar rule")
        elif pair.kind is PairKind.GrammarDoc or pair.kind is PairKind.EOI:
            continue
        else:
            raise InvariantViolation(f"unexpected {pair.kind.value} at top level")

    return VerticalGrid(tuple(nodes)), warnings


def generate_diagram(src: str, config: DiagramConfig | None = None) -> tuple[VerticalGrid, list[str]]:
    """Parse pest grammar source and build its railroad diagram tree.

    Returns:
        The diagram root and the warnings for every construct that was skipped.

    Raises:
        GrammarSyntaxError: If the source is not a valid pest grammar.
    """
    return assemble(parse(src), config)
