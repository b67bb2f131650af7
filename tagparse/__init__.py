"""
tagparse - HTML Open Tag Parser
===============================

Parses a single HTML-like open tag such as ``<div width="40", height="30">``
into a tag name and a mapping of attributes.

Quick Start:
    >>> from tagparse import parse_tag
    >>> tag = parse_tag('<a href="https://adamchalmers.com" >')
    >>> tag.name
    'a'
    >>> tag.attributes["href"]
    'https://adamchalmers.com'

Command line:
    $ tagparse parse '<div width="40", height="30">'
    $ tagparse bench
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

from tagparse.engine.errors import Rule, TagSyntaxError
from tagparse.engine.models import Attributes, Tag, get_mapping_strategy
from tagparse.engine.parser import TagParser, parse_tag

__all__ = [
    "__version__",
    "__license__",
    "Rule",
    "TagSyntaxError",
    "Attributes",
    "Tag",
    "get_mapping_strategy",
    "TagParser",
    "parse_tag",
]
