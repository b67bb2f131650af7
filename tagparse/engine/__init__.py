"""
tagparse Engine Module
======================

The open-tag parser.

Components:
- Scanner: Primitive scanners (key, quoted value, whitespace, literals)
- TagParser: Attribute, attribute-list and tag rules
- Tag / Attributes: Parse results
- TagSyntaxError: The single parse failure
"""

from tagparse.engine.errors import Rule, TagSyntaxError
from tagparse.engine.models import (
    MAPPING_STRATEGIES,
    Attributes,
    Tag,
    get_mapping_strategy,
)
from tagparse.engine.parser import TagParser, parse_tag
from tagparse.engine.scanner import Scanner

__all__ = [
    "Rule",
    "TagSyntaxError",
    "MAPPING_STRATEGIES",
    "Attributes",
    "Tag",
    "get_mapping_strategy",
    "TagParser",
    "parse_tag",
    "Scanner",
]
