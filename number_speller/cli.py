"""Command-line interface for the number speller.

WHY: The most common way to use the speller is as a filter: feed it a
stream of integers, get the spelled numbers back, one line per language
per value. The CLI wires input reading, the cached grammars and the
pluggable formatters behind a single command.

HOW: Uses argparse to accept input files ("-" for stdin), the language
list, the output format and an optional output file. Tokens are read
lazily line by line and spelled as they arrive, so the CLI works on
unbounded pipes. Diagnostics go through logging on stderr; spelled
output goes to stdout (or --output).

RULES:
- Tokens are whitespace separated and must match [+-]?digits
- Values must fit the signed 64-bit range
- Invalid tokens stop processing with exit code 1, unless --skip-invalid
  is given, in which case they are logged and skipped
- Unknown languages or formats are rejected before any input is read
- Output is always UTF-8
- Python 3.9 compatible: no match/case, no X | Y unions at runtime
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import IO, Iterable, Iterator, List, Optional, Tuple

from number_speller.config import (
    DEFAULT_FORMAT,
    DEFAULT_LANGUAGES,
    LOG_LEVEL,
    LOG_LEVELS,
    parse_language_list,
)
from number_speller.core.context import INT64_MAX, INT64_MIN
from number_speller.formatters import FORMATTERS
from number_speller.grammars import GRAMMARS, get_grammar, spell_in_languages

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"^[+-]?[0-9]+$")


def _error(msg: str) -> None:
    """Print an error message to stderr and exit with status 1."""
    print("Error: {}".format(msg), file=sys.stderr, flush=True)
    sys.exit(1)


def parse_value(token: str) -> int:
    """Parse one input token into a signed 64-bit integer.

    WHY: int() alone is too lenient for a number stream: it accepts
    "1_000" and surrounding whitespace, and Python ints have no upper
    bound. The speller's domain is exactly the signed 64-bit range.

    RULES:
    - Optional sign, then ASCII digits only
    - Leading zeros are allowed ("007" is 7)
    - Result must lie in [-2**63, 2**63 - 1]

    Raises:
        ValueError: If the token is malformed or out of range.
    """
    if not _TOKEN_RE.match(token):
        raise ValueError("Invalid integer '{}'".format(token))
    value = int(token)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError("Value {} is outside the signed 64-bit range".format(token))
    return value


def _iter_tokens(streams: Iterable[Tuple[str, IO[str]]]) -> Iterator[Tuple[str, int, str]]:
    """Yield (source name, line number, token) for every token in the streams."""
    for source, stream in streams:
        for line_number, line in enumerate(stream, start=1):
            for token in line.split():
                yield source, line_number, token


def _open_inputs(paths: List[str]) -> Iterator[Tuple[str, IO[str]]]:
    """Yield (name, stream) pairs, opening files lazily and closing them after use."""
    for path in paths:
        if path == "-":
            yield "<stdin>", sys.stdin
            continue
        try:
            stream = open(path, "r", encoding="utf-8")
        except OSError as exc:
            _error("Cannot read input '{}': {}".format(path, exc.strerror or exc))
        with stream:
            yield path, stream


def _prepare_stdout() -> IO[str]:
    """Return stdout switched to UTF-8 where the platform default differs."""
    stdout = sys.stdout
    encoding = (getattr(stdout, "encoding", None) or "").lower().replace("-", "")
    if encoding != "utf8" and hasattr(stdout, "reconfigure"):
        stdout.reconfigure(encoding="utf-8")
    return stdout


def run(args: argparse.Namespace) -> None:
    """Spell every integer in the configured inputs.

    WHY: Separated from main() so tests can drive the pipeline with a
    ready-made namespace.

    HOW: Validates languages and format, warms the grammar cache, then
    streams tokens through spell_in_languages() and the formatter,
    flushing after each value so pipes see output immediately.

    RULES:
    - Languages are validated before reading input
    - Each value produces one formatter block
    - On a bad token: exit 1, or log a warning and continue with --skip-invalid
    """
    languages = parse_language_list(args.languages)
    if not languages:
        _error("No languages given")
    for language in languages:
        if language not in GRAMMARS:
            _error(
                "Unsupported language '{}'. Available: {}".format(
                    language, ", ".join(sorted(GRAMMARS))
                )
            )
        get_grammar(language)

    if args.format not in FORMATTERS:
        _error(
            "Unknown format '{}'. Available formats: {}".format(
                args.format, ", ".join(sorted(FORMATTERS))
            )
        )
    formatter = FORMATTERS[args.format]()

    inputs = args.inputs or ["-"]
    if args.output:
        try:
            out = open(args.output, "w", encoding="utf-8")
        except OSError as exc:
            _error("Cannot write output '{}': {}".format(args.output, exc.strerror or exc))
    else:
        out = _prepare_stdout()

    spelled = 0
    skipped = 0
    try:
        for source, line_number, token in _iter_tokens(_open_inputs(inputs)):
            try:
                value = parse_value(token)
            except ValueError as exc:
                if not args.skip_invalid:
                    _error("{} ({}:{})".format(exc, source, line_number))
                logger.warning("Skipping %s (%s:%d)", exc, source, line_number)
                skipped += 1
                continue

            out.write(formatter.format(spell_in_languages(value, languages)))
            out.flush()
            spelled += 1
    finally:
        if args.output:
            out.close()

    logger.info(
        "Spelled %d value(s) in %s; skipped %d invalid token(s)",
        spelled, ", ".join(languages), skipped,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - Positional: zero or more input paths ("-" = stdin, the default)
    - Optional: --languages, --format, --output, --skip-invalid, --log-level
    """
    parser = argparse.ArgumentParser(
        prog="number_speller",
        description="Spell integers as words in one or more languages "
                    "(reads whitespace-separated integers, writes one line per language).",
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        help="Input files with whitespace-separated integers. Use '-' or omit for stdin.",
    )

    parser.add_argument(
        "--languages",
        default=",".join(DEFAULT_LANGUAGES),
        help="Comma-separated language tags. Available: {}. Default: %(default)s.".format(
            ", ".join(sorted(GRAMMARS))
        ),
    )

    parser.add_argument(
        "--format",
        default=DEFAULT_FORMAT,
        help="Output format. Available: {}. Default: %(default)s.".format(
            ", ".join(sorted(FORMATTERS))
        ),
    )

    parser.add_argument(
        "--output",
        default=None,
        help="Write output to this file instead of stdout.",
    )

    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip malformed or out-of-range tokens instead of stopping.",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=LOG_LEVELS,
        type=str.upper,
        help="Diagnostic log level on stderr (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    run(args)


if __name__ == "__main__":
    main()
