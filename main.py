"""
pq_async utilities – command-line entry point.

Small front end for poking at the utility primitives from a shell, e.g. to
check what a wire value looks like after a byte swap or how the configured
numeric locale renders a row count.

**Usage**:
    ```bash
    python main.py hex 00ff1a
    python main.py swap 258 --width 2
    python main.py swap 513 --width 2 --to-host
    python main.py num 1234567
    python main.py num 1234567 --no-grouping
    python main.py parse " 42abc"
    python main.py parse 2.5e3 --kind float
    python main.py trim "  ab c  "
    ```

Settings (numeric locale, log level) are read from PQ_ASYNC_* environment
variables or a .env file at the project root.
"""

import argparse
import logging
import sys
from typing import List, Optional

from pq_async.config.settings import Settings
from pq_async.utils.byteorder import swap
from pq_async.utils.hexenc import hex_to_str
from pq_async.utils.log import configure_logging
from pq_async.utils.numeric import NumericLocale, num_to_str, parse_num
from pq_async.utils.text import trim_copy
from pq_async.utils.time import Stopwatch

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per primitive."""
    parser = argparse.ArgumentParser(
        prog="pq-async-utils",
        description="Inspect pq_async utility primitives from the command line.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    hex_cmd = sub.add_parser("hex", help="Normalise hex bytes to lowercase wire rendering")
    hex_cmd.add_argument("data", help="Bytes as hex digits (e.g. 00FF1A)")

    swap_cmd = sub.add_parser("swap", help="Convert a signed integer between host and network order")
    swap_cmd.add_argument("value", type=int)
    swap_cmd.add_argument("--width", type=int, choices=(2, 4, 8), default=4)
    swap_cmd.add_argument(
        "--to-host",
        action="store_true",
        help="Convert network -> host (default is host -> network)",
    )

    num_cmd = sub.add_parser("num", help="Format a number with the configured numeric locale")
    num_cmd.add_argument("value")
    num_cmd.add_argument("--no-grouping", action="store_true")

    parse_cmd = sub.add_parser("parse", help="Parse the numeric prefix of some text")
    parse_cmd.add_argument("text")
    parse_cmd.add_argument("--kind", choices=("int", "float"), default="int")

    trim_cmd = sub.add_parser("trim", help="Trim surrounding whitespace")
    trim_cmd.add_argument("text")

    return parser


def run(args: argparse.Namespace, settings: Settings) -> str:
    """
    Execute one parsed command and return its output line.

    Raises:
        ValueError: For invalid input (bad hex, out-of-range value, ...).
    """
    if args.command == "hex":
        return hex_to_str(bytes.fromhex(args.data))

    if args.command == "swap":
        return str(swap(args.value, args.width, to_network=not args.to_host))

    if args.command == "num":
        text = args.value.strip()
        result = parse_num(text, int)
        if result.consumed != len(text):
            result = parse_num(text, float)
        if not result.ok or result.consumed != len(text):
            raise ValueError(f"not a number: {args.value!r}")
        numeric_locale = NumericLocale.from_settings(settings.formatting)
        grouping = settings.formatting.grouping and not args.no_grouping
        return num_to_str(result.value, grouping=grouping, numeric_locale=numeric_locale)

    if args.command == "parse":
        result = parse_num(args.text, float if args.kind == "float" else int)
        status = "ok" if result.ok else "failed"
        return f"{result.value} ({status}, consumed {result.consumed} chars)"

    if args.command == "trim":
        return repr(trim_copy(args.text))

    raise ValueError(f"unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entrypoint.

    Steps:
      1. Parse arguments
      2. Load settings and configure logging
      3. Run the command and print its output

    Returns:
        Process exit status (0 success, 1 invalid input).
    """
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    configure_logging(settings.logging)

    stopwatch = Stopwatch()
    try:
        output = run(args, settings)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(output)
    logger.debug("%s finished in %.6fs", args.command, stopwatch.elapsed())
    return 0


if __name__ == "__main__":
    sys.exit(main())
