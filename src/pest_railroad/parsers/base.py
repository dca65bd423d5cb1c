"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol

from pest_railroad.syntax.types import Pair


class Parser(Protocol):
    """Protocol that all grammar parsers must implement."""

    def parse(self, src: str) -> list[Pair]:
        """Parse grammar source text into top-level pairs."""
        ...
