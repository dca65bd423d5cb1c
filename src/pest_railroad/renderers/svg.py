"""SVG renderer backed by railroad-diagrams."""

from __future__ import annotations

import railroad

from pest_railroad.config import OUTPUT_FORMATS
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


def to_railroad(node: DiagramNode) -> railroad.DiagramItem:
    """Convert one diagram node (and its subtree) to a railroad-diagrams item."""
    if isinstance(node, Terminal):
        return railroad.Terminal(node.text)
    if isinstance(node, NonTerminal):
        return railroad.NonTerminal(node.text)
    if isinstance(node, Comment):
        return railroad.Comment(node.text)
    if isinstance(node, Empty):
        return railroad.Skip()
    if isinstance(node, SimpleStart):
        return railroad.Start("simple")
    if isinstance(node, SimpleEnd):
        return railroad.End("simple")
    if isinstance(node, Sequence):
        return railroad.Sequence(*(to_railroad(c) for c in node.children))
    if isinstance(node, Choice):
        return railroad.Choice(0, *(to_railroad(c) for c in node.children))
    if isinstance(node, Optional):
        return railroad.Optional(to_railroad(node.child))
    if isinstance(node, Repeat):
        return railroad.OneOrMore(to_railroad(node.forward), to_railroad(node.backward))
    if isinstance(node, LabeledBox):
        return railroad.Group(to_railroad(node.child), to_railroad(node.caption))
    if isinstance(node, VerticalGrid):
        if not node.children:
            return railroad.Skip()
        return railroad.Stack(*(to_railroad(c) for c in node.children))
    raise TypeError(f"not a diagram node: {node!r}")


class RailroadRenderer:
    """Renders a diagram tree as standalone SVG or bare SVG."""

    def __init__(self, output_format: str = "svg") -> None:
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format '{output_format}'; use {', '.join(OUTPUT_FORMATS)}")
        self.output_format = output_format

    def render(self, root: VerticalGrid) -> str:
        diagram = railroad.Diagram(to_railroad(root))
        parts: list[str] = []
        if self.output_format == "svg":
            diagram.writeStandalone(parts.append)
        else:
            diagram.writeSvg(parts.append)
        return "".join(parts)
