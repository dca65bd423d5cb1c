"""Grammar rules: a captioned start-to-end track per rule."""

from __future__ import annotations

from collections.abc import Iterable

from pest_railroad.config import DiagramConfig
from pest_railroad.errors import InvariantViolation
from pest_railroad.ir.diagram import (
    Comment,
    DiagramNode,
    Sequence,
    SimpleEnd,
    SimpleStart,
    VerticalGrid,
)
from pest_railroad.syntax.types import Pair, PairKind
from pest_railroad.transform.expression import build_expression

_MODIFIER_TAGS: dict[PairKind, str] = {
    PairKind.SilentModifier: " (silent)",
    PairKind.AtomicModifier: " (atomic)",
    PairKind.CompoundAtomicModifier: " (compound atomic)",
    PairKind.NonAtomicModifier: " (non-atomic)",
}


def build_rule(identifier: str, pairs: Iterable[Pair], config: DiagramConfig) -> tuple[VerticalGrid, list[str]]:
    """Build the diagram for one rule from the pairs following its identifier.

    The rule name (with any modifier tag) is stacked above a
    `SimpleStart -> body -> SimpleEnd` track.
    """
    warnings: list[str] = []
    display_name = identifier
    body: list[DiagramNode] = []

    for pair in pairs:
        if pair.kind is PairKind.AssignmentOperator:
            continue
        if pair.kind in _MODIFIER_TAGS:
            display_name += _MODIFIER_TAGS[pair.kind]
        elif pair.kind is PairKind.OpeningBrace:
            body.append(SimpleStart())
        elif pair.kind is PairKind.Expression:
            expression, expression_warnings = build_expression(pair.children, config)
            warnings.extend(expression_warnings)
            body.append(expression)
        elif pair.kind is PairKind.ClosingBrace:
            body.append(SimpleEnd())
        else:
            raise InvariantViolation(f"unexpected {pair.kind.value} in rule {identifier!r}")

    return VerticalGrid((Comment(display_name), Sequence(tuple(body)))), warnings
