"""
tagparse CLI
============

Command-line interface for tagparse.

Commands:
- parse: Parse a tag and print it
- bench: Measure parse throughput
"""

from tagparse.cli.main import main, cli

__all__ = ["main", "cli"]
