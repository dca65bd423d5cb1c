"""Terms and expressions: the recursive core of the grammar transform.

A term is one primary (identifier, literal, range or parenthesized
expression) with its prefix and postfix operators. An expression is a run of
terms joined by `~` and split into alternatives by `|`. The two builders call
each other for parenthesized sub-expressions.
"""

from __future__ import annotations

from collections.abc import Iterable

from pest_railroad.config import DiagramConfig
from pest_railroad.errors import InvariantViolation
from pest_railroad.ir.diagram import (
    Choice,
    Comment,
    DiagramNode,
    Empty,
    LabeledBox,
    NonTerminal,
    Optional,
    Sequence,
    Terminal,
    one_or_more,
    zero_or_more,
)
from pest_railroad.syntax.types import Pair, PairKind
from pest_railroad.transform.repeat import build_repeat

_LITERALS = frozenset({PairKind.String, PairKind.InsensitiveString, PairKind.Range})

_POSTFIX = frozenset(
    {
        PairKind.OptionalOperator,
        PairKind.RepeatOperator,
        PairKind.RepeatOnceOperator,
        PairKind.RepeatExact,
        PairKind.RepeatMin,
        PairKind.RepeatMax,
        PairKind.RepeatMinMax,
    }
)

LOOKAHEAD_CANT_MATCH = "Lookahead: Can't match"
LOOKAHEAD_MUST_MATCH = "Lookahead: Must match"


def unsupported_warning(pair: Pair) -> str:
    return f"Unsupported rule in term: {pair.kind.value}"


# ─── Literals ────────────────────────────────────────────────────────────────


def _unquote(text: str) -> str:
    return text.strip()[1:-1]


def literal_label(pair: Pair, config: DiagramConfig) -> str:
    """Display text of a string, case-insensitive string or range.

    Quotes are dropped: `"hi"` becomes `hi` and `'0'..'9'` becomes `0..9`.
    """
    if pair.kind is PairKind.Range:
        low, _, high = pair.text.partition("..")
        return f"{_unquote(low)}..{_unquote(high)}"
    if pair.kind is PairKind.InsensitiveString:
        inner = pair.children[0].text if pair.children else pair.text.lstrip("^")
        label = _unquote(inner)
        return f"^{label}" if config.mark_case_insensitive else label
    return _unquote(pair.text)


# ─── Term ────────────────────────────────────────────────────────────────────


def _apply_postfix(pair: Pair, term: DiagramNode) -> DiagramNode:
    if pair.kind is PairKind.RepeatOperator:
        return zero_or_more(term)
    if pair.kind is PairKind.RepeatOnceOperator:
        return one_or_more(term)
    if pair.kind is PairKind.OptionalOperator:
        return Optional(term)
    return build_repeat(pair.children, term)


def build_term(pair: Pair, config: DiagramConfig) -> tuple[DiagramNode | None, list[str]]:
    """Build the diagram node for one `term` pair.

    Returns None in place of the node when the term's primary is not
    supported; a warning naming it is returned instead.
    """
    warnings: list[str] = []
    term: DiagramNode | None = None
    skipped = False
    positive_lookahead = 0
    negative_lookahead = 0

    for child in pair.children:
        kind = child.kind
        if kind is PairKind.Identifier:
            term = NonTerminal(child.text)
        elif kind in _LITERALS:
            term = Terminal(literal_label(child, config))
        elif kind is PairKind.OpeningParen or kind is PairKind.ClosingParen:
            continue
        elif kind is PairKind.Expression:
            term, inner_warnings = build_expression(child.children, config)
            warnings.extend(inner_warnings)
        elif kind is PairKind.PositivePredicateOperator:
            positive_lookahead += 1
        elif kind is PairKind.NegativePredicateOperator:
            negative_lookahead += 1
        elif kind in _POSTFIX:
            # Nothing to wrap when the primary was skipped
            if term is not None:
                term = _apply_postfix(child, term)
        else:
            warnings.append(unsupported_warning(child))
            skipped = True

    if term is None:
        if not skipped:
            raise InvariantViolation(f"term without a primary: {pair.text!r}")
        return None, warnings

    # Even counts cancel out (`!!a` asserts the same as `a`)
    if negative_lookahead % 2 == 1:
        term = LabeledBox(term, Comment(LOOKAHEAD_CANT_MATCH))
    elif positive_lookahead % 2 == 1:
        term = LabeledBox(term, Comment(LOOKAHEAD_MUST_MATCH))
    return term, warnings


# ─── Expression ──────────────────────────────────────────────────────────────


def _flatten(alternative: list[DiagramNode]) -> DiagramNode:
    if not alternative:
        # Leading or trailing `|`
        return Empty()
    if len(alternative) == 1:
        return alternative[0]
    return Sequence(tuple(alternative))


def build_expression(pairs: Iterable[Pair], config: DiagramConfig) -> tuple[DiagramNode, list[str]]:
    """Build a sequence/choice node from the children of an `expression` pair."""
    warnings: list[str] = []
    alternatives: list[list[DiagramNode]] = []
    current: list[DiagramNode] = []

    for pair in pairs:
        if pair.kind is PairKind.Term:
            node, term_warnings = build_term(pair, config)
            warnings.extend(term_warnings)
            if node is not None:
                current.append(node)
        elif pair.kind is PairKind.SequenceOperator:
            continue
        elif pair.kind is PairKind.ChoiceOperator:
            alternatives.append(current)
            current = []
        else:
            raise InvariantViolation(f"unexpected {pair.kind.value} in expression")
    alternatives.append(current)

    flattened = [_flatten(alternative) for alternative in alternatives]
    if len(flattened) == 1:
        return flattened[0], warnings
    return Choice(tuple(flattened)), warnings
