"""
tagparse CLI Main Module
========================

Argument parsing and dispatch for the ``parse`` and ``bench`` commands.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from tagparse import __version__
from tagparse.core.config import Config, load_config
from tagparse.engine.models import MAPPING_STRATEGIES
from tagparse.utils.logger import configure_logging

EPILOG = """
Examples:
  tagparse parse '<div width="40", height="30">'
  echo '<a href="x.com" >' | tagparse parse -
  tagparse parse --format json '<div >'
  tagparse bench --sizes 2 16 256 --iterations 500
"""


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tagparse",
        description="Parse a single HTML-like open tag",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument("-v", "--version", action="version", version=f"tagparse {__version__}")
    parser.add_argument("--config", metavar="PATH", help="Python settings file")

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    parse_cmd = commands.add_parser("parse", help="Parse a tag and print it")
    parse_cmd.add_argument(
        "input",
        nargs="?",
        help="Tag text; '-' reads stdin, omitted uses a sample tag",
    )
    parse_cmd.add_argument("--format", choices=["text", "json"], default="text")
    parse_cmd.add_argument(
        "--mapping",
        choices=sorted(MAPPING_STRATEGIES),
        help="Attribute container (default: parser.mapping setting)",
    )
    parse_cmd.set_defaults(handler=handle_parse)

    bench_cmd = commands.add_parser("bench", help="Measure parse throughput")
    bench_cmd.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        metavar="N",
        help="Attribute counts (default: bench.sizes setting)",
    )
    bench_cmd.add_argument(
        "--iterations",
        type=int,
        metavar="N",
        help="Parses per size (default: bench.iterations setting)",
    )
    bench_cmd.set_defaults(handler=handle_bench)

    return parser


def setup(config_path: Optional[str] = None) -> Config:
    """Load settings and configure logging from them."""
    config = load_config(config_path)
    configure_logging(
        level=config.get("log.level", "warning"),
        format=config.get("log.format", "text"),
        colors=config.get_bool("log.colors", True),
    )
    return config


def cli(args: Optional[List[str]] = None) -> int:
    """
    Run the command line and return an exit code.

    Args:
        args: Arguments (``sys.argv[1:]`` if None)
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    handler = getattr(parsed, "handler", None)
    if handler is None:
        parser.print_help()
        return 0

    try:
        return handler(parsed, setup(parsed.config))
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def handle_parse(args: argparse.Namespace, config: Config) -> int:
    from tagparse.cli.commands.parse import parse_input
    mapping = args.mapping or config.get("parser.mapping", "dict")
    return parse_input(args.input, args.format, mapping)


def handle_bench(args: argparse.Namespace, config: Config) -> int:
    from tagparse.cli.commands.bench import run_bench
    if args.sizes is not None:
        sizes = args.sizes
    else:
        sizes = [int(size) for size in config.get_list("bench.sizes")]
    if args.iterations is not None:
        iterations = args.iterations
    else:
        iterations = config.get_int("bench.iterations", 1000)
    return run_bench(sizes, iterations, config.get("parser.mapping", "dict"))


def main() -> None:
    sys.exit(cli())


if __name__ == "__main__":
    main()
