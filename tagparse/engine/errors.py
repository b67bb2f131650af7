"""
tagparse Parse Errors
=====================

Every parse failure is a ``TagSyntaxError`` naming the grammar rule that
failed and where in the source it failed.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Dict


class Rule(Enum):
    """Grammar rules that can fail."""

    OPEN_BRACKET = auto()     # <
    TAG_NAME = auto()         # div
    SEPARATOR = auto()        # single space after the name
    KEY = auto()              # width
    EQUALS = auto()           # =
    OPEN_QUOTE = auto()       # "
    VALUE = auto()            # 40
    CLOSE_QUOTE = auto()      # "
    CLOSE_BRACKET = auto()    # >
    END_OF_INPUT = auto()

    @property
    def message(self) -> str:
        """Diagnostic text for this rule."""
        return _MESSAGES[self]


_MESSAGES = {
    Rule.OPEN_BRACKET: "expected '<'",
    Rule.TAG_NAME: "expected one or more letters",
    Rule.SEPARATOR: "expected ' '",
    Rule.KEY: "expected one or more letters",
    Rule.EQUALS: "expected '='",
    Rule.OPEN_QUOTE: "expected '\"'",
    Rule.VALUE: "expected one or more of alphanumeric, '.', '/', ':'",
    Rule.CLOSE_QUOTE: "expected '\"'",
    Rule.CLOSE_BRACKET: "expected '>'",
    Rule.END_OF_INPUT: "expected end of input",
}


class TagSyntaxError(SyntaxError):
    """
    Raised when the source is not a well-formed open tag.

    Attributes:
        rule: Grammar rule that failed
        position: 0-based offset into the source
        line: 1-based line number
        column: 1-based column number
    """

    def __init__(self, rule: Rule, position: int, line: int, column: int) -> None:
        super().__init__(f"{rule.message} at line {line}:{column}")
        self.rule = rule
        self.position = position
        self.line = line
        self.column = column

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "rule": self.rule.name,
            "message": self.rule.message,
            "position": self.position,
            "line": self.line,
            "column": self.column,
        }
