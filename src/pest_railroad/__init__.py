"""pest-railroad: pest grammars to railroad (syntax) diagrams."""

from __future__ import annotations

from pest_railroad.config import DiagramConfig
from pest_railroad.errors import GrammarSyntaxError, InvariantViolation
from pest_railroad.renderers.base import Renderer
from pest_railroad.renderers.svg import RailroadRenderer
from pest_railroad.transform.engine import generate_diagram

__all__ = [
    "DiagramConfig",
    "GrammarSyntaxError",
    "InvariantViolation",
    "generate_diagram",
    "render",
    "render_svg",
]


def render(
    src: str, config: DiagramConfig | None = None, renderer: Renderer | None = None
) -> tuple[str, list[str]]:
    """Parse a pest grammar and render it.

    Args:
        src: Pest grammar source string.
        config: Diagram options; defaults to standalone SVG.
        renderer: Renderer to use; defaults to a RailroadRenderer for the
            configured output format.

    Returns:
        The rendered diagram and the warnings for skipped constructs.

    Raises:
        GrammarSyntaxError: If the input cannot be parsed.
        ValueError: If the configured output format is unknown.
    """
    if config is None:
        config = DiagramConfig()
    if renderer is None:
        renderer = RailroadRenderer(config.output_format)
    root, warnings = generate_diagram(src, config)
    return renderer.render(root), warnings


def render_svg(src: str, config: DiagramConfig | None = None) -> tuple[str, list[str]]:
    """Parse a pest grammar and render it as a standalone SVG document."""
    mark = config.mark_case_insensitive if config is not None else False
    return render(src, DiagramConfig(mark_case_insensitive=mark, output_format="svg"))
