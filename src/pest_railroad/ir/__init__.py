"""Intermediate representation: the railroad diagram node tree."""

from pest_railroad.ir.diagram import (
    Choice,
    Comment,
    DiagramNode,
    Empty,
    LabeledBox,
    NonTerminal,
    Optional,
    Repeat,
    Sequence,
    SimpleEnd,
    SimpleStart,
    Terminal,
    VerticalGrid,
)

__all__ = [
    "Choice",
    "Comment",
    "DiagramNode",
    "Empty",
    "LabeledBox",
    "NonTerminal",
    "Optional",
    "Repeat",
    "Sequence",
    "SimpleEnd",
    "SimpleStart",
    "Terminal",
    "VerticalGrid",
]
