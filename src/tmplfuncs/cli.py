"""
tmplfuncs Command-Line Interface.

Provides commands to inspect and try out the template function set.

Usage:
    tmplfuncs list                          # List function names
    tmplfuncs list --filter trim            # Names containing "trim"
    tmplfuncs call substr 0 3 foobar        # Call a function
    tmplfuncs call join - '[1, null, 2]'    # Arguments are JSON when they parse
    tmplfuncs render '{{ "a b" | initials }}'
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Optional

from jinja2 import TemplateError

from tmplfuncs import __version__
from tmplfuncs.jinja import create_environment
from tmplfuncs.registry import FUNCTIONS, get_function
from tmplfuncs.runtime.coerce import is_sequence, to_string
from tmplfuncs.utils.errors import TmplFuncsError, UnknownFunctionError

logger = logging.getLogger("tmplfuncs")

LOG_LEVEL_ENV = "TMPLFUNCS_LOG_LEVEL"


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.GREEN = ""
        cls.YELLOW = ""
        cls.CYAN = ""
        cls.GRAY = ""
        cls.BOLD = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


_init_colors()


def configure_logging(level: Optional[str] = None) -> None:
    """Set the package log level from the flag or ``TMPLFUNCS_LOG_LEVEL``."""
    name = level or os.environ.get(LOG_LEVEL_ENV, "warning")
    log_level = getattr(logging, name.upper(), logging.WARNING)
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logger.setLevel(log_level)


def parse_argument(raw: str) -> Any:
    """Read a command-line argument as JSON, falling back to plain text."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def format_result(result: Any) -> str:
    """Render a function result for printing."""
    if isinstance(result, bool):
        return "true" if result else "false"
    if is_sequence(result):
        return json.dumps(list(result), ensure_ascii=False)
    return to_string(result)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="tmplfuncs",
        description="tmplfuncs - string functions for template pipelines",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default=None,
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or warning)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # List command
    list_parser = subparsers.add_parser(
        "list",
        aliases=["ls"],
        help="List registered function names",
    )
    list_parser.add_argument(
        "--filter",
        default=None,
        help="Only show names containing this text (case-insensitive)",
    )

    # Call command
    call_parser = subparsers.add_parser(
        "call",
        aliases=["c"],
        help="Call a function with the given arguments",
    )
    call_parser.add_argument("name", help="Function name, e.g. substr")
    call_parser.add_argument(
        "args",
        nargs="*",
        help="Arguments; JSON literals (3, null, [1,2]) are decoded, anything else is text",
    )
    call_parser.add_argument(
        "--raw",
        action="store_true",
        help="Pass every argument as text without JSON decoding",
    )

    # Render command
    render_parser = subparsers.add_parser(
        "render",
        aliases=["r"],
        help="Render a Jinja template string with the functions installed",
    )
    render_parser.add_argument("template", help="Template source")
    render_parser.add_argument(
        "-D",
        "--define",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Template variable (VALUE is decoded as JSON when possible)",
    )

    return parser


def cmd_list(args: argparse.Namespace) -> int:
    """List registered function names."""
    names = sorted(FUNCTIONS, key=str.lower)
    if args.filter:
        needle = args.filter.lower()
        names = [n for n in names if needle in n.lower()]
    for name in names:
        print(name)
    return 0


def cmd_call(args: argparse.Namespace) -> int:
    """Call a registered function and print its result."""
    try:
        func = get_function(args.name)
    except UnknownFunctionError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    values = list(args.args) if args.raw else [parse_argument(a) for a in args.args]
    logger.debug("calling %s with %r", args.name, values)

    try:
        result = func(*values)
    except TmplFuncsError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1
    except (TypeError, ValueError) as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {args.name}: {e}", file=sys.stderr)
        return 1

    print(format_result(result))
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    """Render a template string."""
    context = {}
    for definition in args.define:
        key, sep, value = definition.partition("=")
        if not sep:
            print(
                f"{Colors.RED}Error:{Colors.RESET} expected KEY=VALUE, got {definition!r}",
                file=sys.stderr,
            )
            return 1
        context[key] = parse_argument(value)

    try:
        output = create_environment().from_string(args.template).render(**context)
    except TmplFuncsError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1
    except TemplateError as e:
        print(f"{Colors.RED}Template error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "list": cmd_list,
        "ls": cmd_list,
        "call": cmd_call,
        "c": cmd_call,
        "render": cmd_render,
        "r": cmd_render,
    }

    handler = command_handlers.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
