"""Grammar-to-diagram transform: Pair trees in, diagram trees and warnings out."""

from pest_railroad.transform.engine import assemble, generate_diagram
from pest_railroad.transform.expression import build_expression, build_term
from pest_railroad.transform.repeat import UNBOUNDED, build_repeat, resolve_repeat_range
from pest_railroad.transform.rule import build_rule

__all__ = [
    "UNBOUNDED",
    "assemble",
    "build_expression",
    "build_repeat",
    "build_rule",
    "build_term",
    "generate_diagram",
    "resolve_repeat_range",
]
