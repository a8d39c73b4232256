"""Command-line front end: quote, escape or hex-encode arguments.

Each argument is rendered with the chosen formatter and followed by the
separator (newline by default, so every rendered item ends its own line):

    $ quotable "it's"
    'it'\\''s'
    $ quotable -f hex hello
    68656c6c6f
    $ printf 'a\\nb' | quotable -f c --stdin
    a\\nb

With no arguments, prints a demonstration of shell quoting.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from quotable.core.ascii import AsciiQuote
from quotable.core.cescape import CSourceEscape
from quotable.core.config import FORMATS, configure_logging, load_config, log_event, unescape_separator
from quotable.core.hexenc import HexEncode
from quotable.core.join import JoinWithSeparator
from quotable.core.render import WriteError, write_chunks
from quotable.core.shell import ShellSingleQuote

DEMO = "hi'there'yall"

FORMATTERS: dict[str, Callable[[Any], Any]] = {
    "c": CSourceEscape,
    "hex": HexEncode,
    "ascii": AsciiQuote,
}


def make_formatter(fmt: str, item: str | bytes) -> Any:
    """Wrap item in the formatter for fmt.

    Arguments are turned back into the bytes the OS passed in, so
    undecodable argv bytes render as themselves.
    """
    data = os.fsencode(item)
    if fmt == "shell":
        # Shell quoting works on text; undecodable bytes become \xNN.
        return ShellSingleQuote(data.decode("utf-8", errors="backslashreplace"))
    return FORMATTERS[fmt](data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quotable",
        description="Quote, escape or hex-encode arguments for display.",
    )
    parser.add_argument("-f", "--format", choices=FORMATS, help="output format (default from config, else shell)")
    parser.add_argument("-s", "--separator", help="written after every item; \\n, \\t, \\s escapes allowed")
    parser.add_argument("--stdin", action="store_true", help="render standard input as a single item")
    parser.add_argument("items", nargs="*", metavar="ARG")
    return parser


def run(argv: Sequence[str] | None = None, stdin: Any = None, stdout: Any = None, cwd: Path | None = None) -> int:
    """Run the command line. Returns the exit code."""
    args = build_parser().parse_args(argv)
    stdout = stdout if stdout is not None else sys.stdout

    try:
        config = load_config(cwd or Path.cwd())
    except (ValueError, OSError) as e:
        print(f"quotable: invalid config: {e}", file=sys.stderr)
        return 1
    try:
        configure_logging(config)
    except OSError as e:
        print(f"quotable: cannot open log {config.log}: {e}", file=sys.stderr)
        return 1

    if not args.items and not args.stdin:
        try:
            ShellSingleQuote(DEMO).write_to(stdout)
            write_chunks(stdout, ["\n"])
        except WriteError as e:
            print(f"quotable: {e}", file=sys.stderr)
            return 1
        return 0

    fmt = args.format or config.format
    separator = config.separator if args.separator is None else unescape_separator(args.separator)
    items: list[str | bytes] = list(args.items)
    if args.stdin:
        items.append((stdin if stdin is not None else sys.stdin.buffer).read())

    output = JoinWithSeparator(separator, lambda: (make_formatter(fmt, item) for item in items))
    try:
        output.write_to(stdout)
    except WriteError as e:
        log_event("render_failed", format=fmt, error=str(e))
        print(f"quotable: {e}", file=sys.stderr)
        return 1

    log_event("rendered", format=fmt, items=len(items))
    if config.verbose:
        print(f"quotable: rendered {len(items)} item(s) as {fmt}", file=sys.stderr)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
