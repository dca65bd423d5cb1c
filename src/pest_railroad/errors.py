"""Exception types raised by pest-railroad."""

from __future__ import annotations


class GrammarSyntaxError(ValueError):
    """The grammar source does not match the pest meta-syntax."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"{line}:{column}: {message}")
        self.line = line
        self.column = column


class InvariantViolation(RuntimeError):
    """A parse tree shape the grammar itself rules out was encountered."""
