"""Command-line interface for wavdump.

WHY: Users apply an effect to a hex-dumped WAV from the terminal, usually
as a filter: ``wavdump -fin 500 < in.txt > out.txt``. The CLI wires the
argument contract to the pipeline and turns each failure class into a
message and a non-zero exit status.

HOW: Uses argparse with one mutually exclusive group for the three effect
selectors and a positional duration parsed like C strtol. Argument
errors raise UsageError before any input is read. Input defaults to
stdin and output to stdout; --input / --output take file paths. Input
is decoded byte for byte, so stray bytes in a character column are
harmless. Log and error output goes to stderr so stdout stays a clean
dump.

RULES:
- Exactly one selector: -fin, -fout or -pan
- Duration: leading integer, optional sign, trailing text ignored;
  missing digits or a negative value is a usage error
- Usage errors → "Error: Invalid command-line arguments." exit 1
- Format errors → "Error processing WAV file." exit 1
- Allocation errors → "Error: Malloc error." exit 1
- Header lines written before a format error stay in the output
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import List, Optional

from wavdump.config import INPUT_ENCODING, load_log_level
from wavdump.core.pipeline import process_dump
from wavdump.effects import EFFECTS, SELECTORS
from wavdump.errors import FormatError, ResourceError, UsageError

logger = logging.getLogger(__name__)

_DURATION_RE = re.compile(r"\s*([+-]?\d+)")


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr, flush=True)


def parse_duration(text: str) -> int:
    """Parse the effect duration argument.

    WHY: The tool has always accepted anything strtol accepts, e.g.
    "500ms" reads as 500. Scripts in the wild rely on that.

    HOW: Matches optional whitespace, an optional sign, and digits at the
    start of the string; the rest is ignored.

    RULES:
    - No leading digits → UsageError
    - Negative values → UsageError
    """
    match = _DURATION_RE.match(text)
    if match is None:
        raise UsageError("Duration '{}' is not a number".format(text))
    value = int(match.group(1))
    if value < 0:
        raise UsageError("Duration must be non-negative, got {}".format(value))
    return value


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without reading any input.

    RULES:
    - Selectors come from SELECTORS; each stores its effect key in ``effect``
    - Positional: milliseconds
    - Optional: --input, --output, --verbose
    """
    parser = _ArgumentParser(
        prog="wavdump",
        description="Apply a fade-in, fade-out or pan effect to a hex-dumped WAV file.",
        allow_abbrev=False,
    )

    group = parser.add_mutually_exclusive_group(required=True)
    for selector, key in SELECTORS.items():
        group.add_argument(
            selector,
            dest="effect",
            action="store_const",
            const=key,
            help="{} effect.".format(EFFECTS[key]().name),
        )

    parser.add_argument(
        "milliseconds",
        type=str,
        help="Effect duration in milliseconds.",
    )

    parser.add_argument(
        "-i", "--input",
        default=None,
        help="Input hex dump (default: stdin).",
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output hex dump (default: stdout).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log header and buffer details to stderr.",
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else load_log_level()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def _run(args: argparse.Namespace, milliseconds: int) -> None:
    if args.input:
        source = open(args.input, encoding=INPUT_ENCODING)
    else:
        source = sys.stdin
        source.reconfigure(encoding=INPUT_ENCODING)
    try:
        out = open(args.output, "w", encoding="utf-8") if args.output else sys.stdout
        try:
            process_dump(source, out, args.effect, milliseconds)
        finally:
            if out is not sys.stdout:
                out.close()
    finally:
        if source is not sys.stdin:
            source.close()


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        milliseconds = parse_duration(args.milliseconds)
    except UsageError as e:
        _status("Error: Invalid command-line arguments. {}".format(e))
        sys.exit(1)

    try:
        _configure_logging(args.verbose)
    except ValueError as e:
        _status("Error: {}".format(e))
        sys.exit(1)

    try:
        _run(args, milliseconds)
    except FormatError as e:
        _status("Error processing WAV file. {}".format(e))
        sys.exit(1)
    except ResourceError as e:
        _status("Error: Malloc error. {}".format(e))
        sys.exit(1)
    except OSError as e:
        _status("Error: {}".format(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
