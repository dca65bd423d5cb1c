"""Parse tree data structures for pest grammar syntax.

These types represent the parsed form of the input grammar: the PairKind enum
(one member per non-transparent rule in grammar.py) and the Pair dataclass
(kind tag, matched source text, ordered children).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PairKind(Enum):
    # Top level
    GrammarRule = "grammar_rule"
    GrammarDoc = "grammar_doc"
    LineDoc = "line_doc"
    EOI = "EOI"

    # Rule definition
    Identifier = "identifier"
    AssignmentOperator = "assignment_operator"
    SilentModifier = "silent_modifier"  # _
    AtomicModifier = "atomic_modifier"  # @
    CompoundAtomicModifier = "compound_atomic_modifier"  # $
    NonAtomicModifier = "non_atomic_modifier"  # !
    OpeningBrace = "opening_brace"
    ClosingBrace = "closing_brace"
    OpeningParen = "opening_paren"
    ClosingParen = "closing_paren"

    # Expressions
    Expression = "expression"
    Term = "term"
    NodeTag = "node_tag"  # #tag =
    String = "string"
    InsensitiveString = "insensitive_string"  # ^"..."
    Range = "range"  # 'a'..'z'
    Push = "push"  # PUSH(...)
    PeekSlice = "peek_slice"  # PEEK[..]

    # Operators
    SequenceOperator = "sequence_operator"  # ~
    ChoiceOperator = "choice_operator"  # |
    PositivePredicateOperator = "positive_predicate_operator"  # &
    NegativePredicateOperator = "negative_predicate_operator"  # !
    OptionalOperator = "optional_operator"  # ?
    RepeatOperator = "repeat_operator"  # *
    RepeatOnceOperator = "repeat_once_operator"  # +
    RepeatExact = "repeat_exact"  # {n}
    RepeatMin = "repeat_min"  # {n,}
    RepeatMax = "repeat_max"  # {,m}
    RepeatMinMax = "repeat_min_max"  # {n,m}
    Number = "number"
    Comma = "comma"

    @classmethod
    def from_rule_name(cls, name: str) -> PairKind | None:
        """Map a grammar rule name to its kind; None for transparent rules."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class Pair:
    """One tagged node of the parse tree."""

    kind: PairKind
    text: str
    children: tuple[Pair, ...] = ()
