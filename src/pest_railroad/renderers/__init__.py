"""Renderers: diagram trees to output text."""

from pest_railroad.renderers.base import Renderer
from pest_railroad.renderers.svg import RailroadRenderer, to_railroad

__all__ = ["RailroadRenderer", "Renderer", "to_railroad"]
