"""Centralized configuration for pest-railroad."""

from __future__ import annotations

from dataclasses import dataclass

OUTPUT_FORMATS = ("svg", "svg-bare")


@dataclass
class DiagramConfig:
    """Configuration for the diagram pipeline."""

    mark_case_insensitive: bool = False
    output_format: str = "svg"
