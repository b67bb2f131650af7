"""
tagparse Scanner
================

Primitive scanners for the open-tag grammar. A ``Scanner`` is a cursor over
the source string; each scan either consumes a lexical unit and returns the
matched slice, or raises ``TagSyntaxError`` without consuming anything.

Lexical units:
    - key: one or more ASCII letters (also used for the tag name)
    - value: a double-quoted run of alphanumerics, '.', '/' and ':'
    - whitespace: spaces, tabs, carriage returns and newlines
    - literal: a single expected character such as '<', '=' or ','
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import regex

from tagparse.engine.errors import Rule, TagSyntaxError

Mark = Tuple[int, int, int]


class Scanner:
    """
    Position-tracking cursor over a source string.

    Example:
        scanner = Scanner('width = "40"')
        scanner.scan_key()         # 'width'
        scanner.skip_whitespace()
        scanner.expect("=", Rule.EQUALS)
        scanner.skip_whitespace()
        scanner.scan_value()       # '40'
    """

    PATTERNS: Dict[str, regex.Pattern] = {
        "key": regex.compile(r"[A-Za-z]+"),
        # Alphabetic or Numeric, including combining vowel signs
        "value": regex.compile(r"[\p{Alphabetic}\p{N}./:]+"),
        "whitespace": regex.compile(r"[ \t\r\n]+"),
    }

    def __init__(self, source: str, pos: int = 0) -> None:
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self._advance(pos)

    def at_end(self) -> bool:
        """Check if the whole source has been consumed."""
        return self.pos >= len(self.source)

    def peek(self) -> str:
        """Current character, or an empty string at the end."""
        return self.source[self.pos:self.pos + 1]

    def remaining(self) -> str:
        """Unconsumed part of the source."""
        return self.source[self.pos:]

    def mark(self) -> Mark:
        """Remember the current position for a later ``reset``."""
        return (self.pos, self.line, self.column)

    def reset(self, mark: Mark) -> None:
        """Return to a position saved with ``mark``."""
        self.pos, self.line, self.column = mark

    def error(self, rule: Rule) -> TagSyntaxError:
        """Build an error for ``rule`` at the current position."""
        return TagSyntaxError(rule, self.pos, self.line, self.column)

    def _advance(self, count: int = 1) -> None:
        """Advance position in source."""
        for _ in range(count):
            if self.pos < len(self.source):
                if self.source[self.pos] == "\n":
                    self.line += 1
                    self.column = 1
                else:
                    self.column += 1
                self.pos += 1

    def match_pattern(self, name: str) -> bool:
        """Check if pattern matches at current position."""
        return self.PATTERNS[name].match(self.source, self.pos) is not None

    def _consume_pattern(self, name: str) -> Optional[str]:
        """Consume pattern if it matches, return matched text."""
        match = self.PATTERNS[name].match(self.source, self.pos)
        if match:
            text = match.group()
            self._advance(len(text))
            return text
        return None

    def check(self, char: str) -> bool:
        """Check if the current character is ``char``."""
        return self.source.startswith(char, self.pos)

    def expect(self, char: str, rule: Rule) -> str:
        """Consume the literal ``char`` or fail with ``rule``."""
        if not self.check(char):
            raise self.error(rule)
        self._advance(len(char))
        return char

    def skip_whitespace(self) -> str:
        """Consume zero or more whitespace characters."""
        return self._consume_pattern("whitespace") or ""

    def scan_key(self, rule: Rule = Rule.KEY) -> str:
        """Consume the longest run of one or more letters."""
        key = self._consume_pattern("key")
        if key is None:
            raise self.error(rule)
        return key

    def scan_value(self) -> str:
        """Consume a double-quoted value and return it without quotes."""
        start = self.mark()
        self.expect('"', Rule.OPEN_QUOTE)

        value = self._consume_pattern("value")
        if value is None:
            error = self.error(Rule.VALUE)
            self.reset(start)
            raise error

        if not self.check('"'):
            error = self.error(Rule.CLOSE_QUOTE)
            self.reset(start)
            raise error
        self._advance()

        return value
