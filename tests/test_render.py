"""Tests for pest_railroad.renderers — diagram trees to railroad-diagrams."""

import pytest
import railroad

from pest_railroad import DiagramConfig, render, render_svg
from pest_railroad.ir.diagram import (
    Choice,
    Comment,
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
from pest_railroad.renderers.svg import RailroadRenderer, to_railroad


class TestToRailroad:
    def test_leaves(self):
        assert isinstance(to_railroad(Terminal("x")), railroad.Terminal)
        assert isinstance(to_railroad(NonTerminal("x")), railroad.NonTerminal)
        assert isinstance(to_railroad(Comment("x")), railroad.Comment)
        assert isinstance(to_railroad(Empty()), railroad.Skip)

    def test_markers(self):
        assert isinstance(to_railroad(SimpleStart()), railroad.Start)
        assert isinstance(to_railroad(SimpleEnd()), railroad.End)

    def test_containers(self):
        assert isinstance(to_railroad(Sequence((Terminal("a"), Terminal("b")))), railroad.Sequence)
        assert isinstance(to_railroad(Choice((Terminal("a"), Terminal("b")))), railroad.Choice)
        assert isinstance(to_railroad(Repeat(Terminal("a"), Empty())), railroad.OneOrMore)
        assert isinstance(to_railroad(LabeledBox(Terminal("a"), Comment("c"))), railroad.Group)
        assert isinstance(to_railroad(VerticalGrid((Comment("a"), Comment("b")))), railroad.Stack)

    def test_optional_is_choice(self):
        # railroad.Optional is a factory that builds a Choice
        assert isinstance(to_railroad(Optional(Terminal("a"))), railroad.Choice)

    def test_empty_grid_is_skip(self):
        assert isinstance(to_railroad(VerticalGrid(())), railroad.Skip)

    def test_rejects_foreign_objects(self):
        with pytest.raises(TypeError):
            to_railroad("not a node")  # type: ignore[arg-type]


class TestRailroadRenderer:
    def test_unknown_format(self):
        with pytest.raises(ValueError):
            RailroadRenderer("png")

    def test_text_format_not_offered(self):
        with pytest.raises(ValueError):
            RailroadRenderer("text")

    def test_bare_svg(self):
        root = VerticalGrid((Comment("rule"), Sequence((SimpleStart(), Terminal("kw"), SimpleEnd()))))
        out = RailroadRenderer("svg-bare").render(root)
        assert out.startswith("<svg")
        assert "kw" in out
        assert "<style" not in out


def test_render_svg_standalone():
    svg, warnings = render_svg('greeting = { "hi" | "hello" }')
    assert "<svg" in svg
    assert "<style" in svg
    assert "greeting" in svg
    assert "hello" in svg
    assert warnings == []


def test_render_optional_svg():
    svg, _ = render_svg('a = { "x"? }')
    assert "<svg" in svg
    assert "x" in svg


class _RecordingRenderer:
    def __init__(self) -> None:
        self.roots: list[VerticalGrid] = []

    def render(self, root: VerticalGrid) -> str:
        self.roots.append(root)
        return "rendered"


def test_render_with_custom_renderer():
    renderer = _RecordingRenderer()
    out, warnings = render('a = { "x" }', renderer=renderer)
    assert out == "rendered"
    assert warnings == []
    assert renderer.roots[0].children[0].children[0] == Comment("a")


def test_render_uses_configured_format():
    out, _ = render('a = { "x" }', DiagramConfig(output_format="svg-bare"))
    assert out.startswith("<svg")


def test_render_returns_warnings():
    _, warnings = render_svg('a = { PUSH("x") ~ "y" }')
    assert warnings == ["Unsupported rule in term: push"]


def test_render_empty_grammar():
    svg, warnings = render_svg("")
    assert "<svg" in svg
    assert warnings == []
