"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from pest_railroad.ir.diagram import VerticalGrid


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, root: VerticalGrid) -> str:
        """Render a finished diagram tree to an output string."""
        ...
