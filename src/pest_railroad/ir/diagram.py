"""Diagram IR — the railroad diagram node tree handed to renderers.

A closed set of immutable node types. Children are held in tuples so every
node is hashable and compares by value; a tree never shares a node between
two parents.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# ─── Leaves ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Terminal:
    """A literal box: strings, case-insensitive strings and ranges."""

    text: str


@dataclass(frozen=True)
class NonTerminal:
    """A reference to another rule."""

    text: str


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class SimpleStart:
    pass


@dataclass(frozen=True)
class SimpleEnd:
    pass


# ─── Containers ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Sequence:
    children: tuple[DiagramNode, ...]


@dataclass(frozen=True)
class Choice:
    """Exactly one child is traversed."""

    children: tuple[DiagramNode, ...]


@dataclass(frozen=True)
class Optional:
    child: DiagramNode


@dataclass(frozen=True)
class Repeat:
    """`forward` is traversed first, `backward` on every loop back."""

    forward: DiagramNode
    backward: DiagramNode


@dataclass(frozen=True)
class LabeledBox:
    child: DiagramNode
    caption: Comment


@dataclass(frozen=True)
class VerticalGrid:
    """Children stacked top to bottom: a rule (name over body) or a whole grammar."""

    children: tuple[DiagramNode, ...]


DiagramNode = Union[
    Terminal,
    NonTerminal,
    Comment,
    Empty,
    SimpleStart,
    SimpleEnd,
    Sequence,
    Choice,
    Optional,
    Repeat,
    LabeledBox,
    VerticalGrid,
]


# ─── Shape helpers ───────────────────────────────────────────────────────────


def zero_or_more(inner: DiagramNode) -> Choice:
    """Bypass path plus a loop: the node may be skipped entirely."""
    return Choice((Empty(), Repeat(inner, Empty())))


def one_or_more(inner: DiagramNode) -> Repeat:
    return Repeat(inner, Empty())
