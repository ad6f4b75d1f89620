"""Scrollkeeper CLI — print the browser snippet for pages not served over ASGI.

Entry point registered as ``scrollkeeper`` in ``pyproject.toml``::

    [project.scripts]
    scrollkeeper = "scrollkeeper.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``scrollkeeper`` command."""
    parser = argparse.ArgumentParser(
        prog="scrollkeeper",
        description="Scrollkeeper — reset the viewport on client-side navigation.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- scrollkeeper snippet -----------------------------------------------
    snippet_parser = subparsers.add_parser("snippet", help="Print the scroll-reset snippet")
    snippet_parser.add_argument(
        "--delay",
        type=float,
        action="append",
        dest="delays",
        default=None,
        help="Delayed reset after a route change, in seconds (repeatable)",
    )
    snippet_parser.add_argument(
        "--click-delay",
        type=float,
        default=None,
        help="Reset delay after an internal link click, in seconds",
    )
    snippet_parser.add_argument(
        "--behavior",
        default=None,
        choices=["auto", "instant", "smooth"],
        help="Scroll behavior passed to window.scrollTo",
    )
    snippet_parser.add_argument(
        "--tag",
        action="append",
        dest="tags",
        default=None,
        help="Tag treated as a link (repeatable, default: a)",
    )
    snippet_parser.add_argument(
        "--js",
        action="store_true",
        help="Print bare JavaScript instead of a <script> tag",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "snippet":
        from scrollkeeper.cli._snippet import print_snippet

        print_snippet(args)
