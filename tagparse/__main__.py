"""
tagparse CLI Entry Point
========================

Allows running tagparse as a module: python -m tagparse
"""

import sys

from tagparse.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
