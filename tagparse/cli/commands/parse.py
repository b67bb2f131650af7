"""
tagparse CLI Parse Command
==========================

Parse one tag and print it.
"""

from __future__ import annotations

import json
import sys
from typing import Optional

from tagparse.engine.errors import TagSyntaxError
from tagparse.engine.models import Tag, get_mapping_strategy
from tagparse.engine.parser import parse_tag
from tagparse.utils.logger import get_logger

SAMPLE_INPUT = '<div width="40", height="30">'


def parse_input(
    source: Optional[str] = None,
    output_format: str = "text",
    mapping: str = "dict",
) -> int:
    """
    Parse a tag and print it to stdout.

    Args:
        source: Tag text, "-" for stdin, or None for the sample tag
        output_format: "text" or "json"
        mapping: Mapping strategy name

    Returns:
        Exit code
    """
    logger = get_logger().with_context(command="parse")

    if source is None:
        source = SAMPLE_INPUT
    elif source == "-":
        source = sys.stdin.read().rstrip("\r\n")

    mapping_factory = get_mapping_strategy(mapping)

    try:
        tag = parse_tag(source, mapping_factory)
    except TagSyntaxError as e:
        logger.debug("Parse failed", rule=e.rule.name, position=e.position)
        raise

    logger.info("Parsed tag", name=tag.name, attributes=len(tag.attributes))

    if output_format == "json":
        print(json.dumps(tag.to_dict(), indent=2, sort_keys=True))
    else:
        print(format_tag(tag))

    return 0


def format_tag(tag: Tag) -> str:
    """Render a tag as indented text, one attribute per line."""
    lines = [tag.name]
    for key in sorted(tag.attributes):
        lines.append(f"  {key} = {tag.attributes[key]}")
    return "\n".join(lines)
