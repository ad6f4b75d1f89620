"""``scrollkeeper snippet`` — print the browser scroll-reset script.

Builds a ``ScrollConfig`` from the command-line overrides and writes the
snippet to stdout. Exits with code 2 if the overrides are invalid.
"""

import argparse
import logging
import sys
from typing import Any

from scrollkeeper.client import scroll_reset_js, scroll_reset_snippet
from scrollkeeper.config import ScrollConfig
from scrollkeeper.errors import ConfigurationError

logger = logging.getLogger("scrollkeeper.cli")


def build_config(args: argparse.Namespace) -> ScrollConfig:
    """Apply only the flags that were given; the rest keep their defaults."""
    overrides: dict[str, Any] = {}
    if args.delays is not None:
        overrides["reset_delays"] = tuple(args.delays)
    if args.click_delay is not None:
        overrides["click_reset_delay"] = args.click_delay
    if args.behavior is not None:
        overrides["behavior"] = args.behavior
    if args.tags is not None:
        overrides["link_tags"] = tuple(args.tags)
    return ScrollConfig(**overrides)


def print_snippet(args: argparse.Namespace) -> None:
    try:
        config = build_config(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    logger.debug("rendering snippet with %s", config)
    print(scroll_reset_js(config) if args.js else scroll_reset_snippet(config))
