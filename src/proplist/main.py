"""Command-line entry point: build a property list and print it as JSON."""

from __future__ import annotations

import argparse
import logging
import sys

from proplist import __version__
from proplist.config import get_settings
from proplist.domain.entities import PropertyList
from proplist.domain.exceptions import InvalidPropertyArgument, ProplistError
from proplist.logging_config import configure_logging

logger = logging.getLogger(__name__)


def parse_pair(arg: str) -> tuple[str, str]:
    """Split KEY=VALUE on the first '='. The value may itself contain '='."""
    key, sep, value = arg.partition("=")
    if not sep:
        raise InvalidPropertyArgument(f"Expected KEY=VALUE, got {arg!r}")
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="proplist",
        description="Collect KEY=VALUE properties and print them as a JSON object",
    )
    parser.add_argument("pairs", nargs="*", metavar="KEY=VALUE", help="Property to set")
    parser.add_argument("--indent", type=int, default=None, help="JSON indent (default from settings)")
    parser.add_argument("--version", action="version", version=f"proplist v{__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)
    args = build_parser().parse_args(argv)

    properties = PropertyList()
    try:
        for arg in args.pairs:
            key, value = parse_pair(arg)
            properties.set_property(key, value)
        indent = args.indent if args.indent is not None else settings.json_indent
        output = properties.to_json().dumps(indent=indent)
    except ProplistError as ex:
        logger.debug("Rejected arguments", exc_info=ex)
        print(f"proplist: error: {ex}", file=sys.stderr)
        return 2

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
