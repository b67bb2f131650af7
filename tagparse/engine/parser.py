"""
tagparse Tag Parser
===================

Recursive-descent parser for a single HTML-like open tag.

Grammar:
    tag        := '<' name ' ' attr_list WS* '>'
    name       := ALPHA+
    attr_list  := (attr (',' WS* attr)*)?
    attr       := name WS* '=' WS* '"' value '"'
    value      := (ALNUM | '.' | '/' | ':')+

Note the single mandatory space after the tag name: a tag without
attributes is written ``<div >``, and ``<div>`` is rejected. Whitespace
before the closing '>' is allowed, as in ``<a href="example.com" >``.

Example:
    tag = parse_tag('<div width="40", height="30">')
    tag.name                  # 'div'
    tag.attributes["width"]   # '40'
"""

from __future__ import annotations

from typing import List, Tuple

from tagparse.engine.errors import Rule
from tagparse.engine.models import Attributes, MappingFactory, Tag
from tagparse.engine.scanner import Scanner


class TagParser:
    """
    Parser for one open tag.

    Each instance owns its cursor, so an instance must not be shared
    between threads; separate instances (and ``parse_tag`` calls) are
    independent.
    """

    def __init__(
        self,
        source: str,
        mapping_factory: MappingFactory = dict,
    ) -> None:
        self.source = source
        self.mapping_factory = mapping_factory
        self.scanner = Scanner(source)

    def parse_attribute(self) -> Tuple[str, str]:
        """Parse ``key = "value"``."""
        scanner = self.scanner
        key = scanner.scan_key()
        scanner.skip_whitespace()
        scanner.expect("=", Rule.EQUALS)
        scanner.skip_whitespace()
        value = scanner.scan_value()
        return key, value

    def parse_attributes(self) -> Attributes:
        """
        Parse a comma-separated attribute list, possibly empty.

        Stops before anything that does not start another attribute. An
        attribute whose key was read but which is otherwise malformed
        raises.
        """
        scanner = self.scanner
        pairs: List[Tuple[str, str]] = []

        if not scanner.match_pattern("key"):
            return Attributes(pairs, self.mapping_factory)
        pairs.append(self.parse_attribute())

        while scanner.check(","):
            before_separator = scanner.mark()
            scanner.expect(",", Rule.SEPARATOR)
            scanner.skip_whitespace()
            if not scanner.match_pattern("key"):
                scanner.reset(before_separator)
                break
            pairs.append(self.parse_attribute())

        return Attributes(pairs, self.mapping_factory)

    def parse_next(self, pos: int = 0) -> Tuple[Tag, int]:
        """
        Parse one tag starting at ``pos``.

        Returns:
            The tag and the offset just past its closing '>'
        """
        if pos != self.scanner.pos:
            self.scanner = Scanner(self.source, pos)
        scanner = self.scanner

        line, column = scanner.line, scanner.column
        scanner.expect("<", Rule.OPEN_BRACKET)
        name = scanner.scan_key(Rule.TAG_NAME)
        scanner.expect(" ", Rule.SEPARATOR)
        attributes = self.parse_attributes()
        scanner.skip_whitespace()
        scanner.expect(">", Rule.CLOSE_BRACKET)

        tag = Tag(name=name, attributes=attributes, line=line, column=column)
        return tag, scanner.pos

    def parse_tag(self) -> Tag:
        """Parse the whole source as exactly one tag."""
        tag, _ = self.parse_next(0)
        if not self.scanner.at_end():
            raise self.scanner.error(Rule.END_OF_INPUT)
        return tag


def parse_tag(source: str, mapping_factory: MappingFactory = dict) -> Tag:
    """
    Parse ``source`` as a single open tag.

    Args:
        source: Complete tag text, e.g. ``<a href="example.com" >``
        mapping_factory: Container factory for the attributes

    Returns:
        The parsed Tag

    Raises:
        TagSyntaxError: If the source is not exactly one well-formed tag
    """
    return TagParser(source, mapping_factory).parse_tag()
