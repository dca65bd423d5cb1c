"""Bounded repetition: `{n}`, `{n,}`, `{,m}` and `{n,m}`."""

from __future__ import annotations

from collections.abc import Iterable

from pest_railroad.errors import InvariantViolation
from pest_railroad.ir.diagram import Comment, DiagramNode, LabeledBox, one_or_more, zero_or_more
from pest_railroad.syntax.types import Pair, PairKind

# Largest count pest accepts; stands in for "no upper bound".
UNBOUNDED = 2**32 - 1


def resolve_repeat_range(pairs: Iterable[Pair]) -> tuple[int, int]:
    """Resolve the (min, max) bounds of a bounded-repeat specifier.

    `pairs` are the specifier's tokens in source order: opening brace,
    optional number, optional comma, optional number, closing brace.
    """
    comma_seen = False
    min_repeat: int | None = None
    max_repeat: int | None = None

    for pair in pairs:
        if pair.kind is PairKind.OpeningBrace:
            continue
        if pair.kind is PairKind.Number:
            if comma_seen:
                max_repeat = int(pair.text)
            else:
                min_repeat = int(pair.text)
        elif pair.kind is PairKind.Comma:
            comma_seen = True
        elif pair.kind is PairKind.ClosingBrace:
            if not comma_seen:
                max_repeat = min_repeat
            else:
                if min_repeat is None:
                    min_repeat = 0
                if max_repeat is None:
                    max_repeat = UNBOUNDED
        else:
            raise InvariantViolation(f"unexpected {pair.kind.value} in repeat")

    if min_repeat is None or max_repeat is None:
        raise InvariantViolation("repeat bounds not resolved")
    return min_repeat, max_repeat


def repeat_label(min_repeat: int, max_repeat: int) -> str:
    if min_repeat == max_repeat:
        return f"Repeat {min_repeat} time(s)"
    if max_repeat == UNBOUNDED:
        return f"Repeat {min_repeat} or more times"
    if min_repeat == 0:
        return f"Repeat at most {max_repeat} time(s)"
    return f"Repeat between {min_repeat} and {max_repeat} time(s)"


def build_repeat(pairs: Iterable[Pair], inner: DiagramNode) -> LabeledBox:
    """Wrap `inner` in a repeat shape captioned with its count."""
    min_repeat, max_repeat = resolve_repeat_range(pairs)
    # A bypass path exists only when zero traversals are allowed
    shape: DiagramNode = one_or_more(inner) if min_repeat > 0 else zero_or_more(inner)
    return LabeledBox(shape, Comment(repeat_label(min_repeat, max_repeat)))
