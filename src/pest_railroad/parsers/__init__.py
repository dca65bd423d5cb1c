"""Grammar parsers: source text to tagged Pair trees."""

from __future__ import annotations

from pest_railroad.parsers.base import Parser
from pest_railroad.parsers.pest import PestParser
from pest_railroad.syntax.types import Pair

__all__ = ["Parser", "PestParser", "parse"]


def parse(src: str, parser: Parser | None = None) -> list[Pair]:
    """Parse grammar source into top-level pairs, ending with an EOI pair.

    Raises:
        GrammarSyntaxError: If the source is not a valid pest grammar.
    """
    if parser is None:
        parser = PestParser()
    return parser.parse(src)
