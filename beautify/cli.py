"""CLI argument parser for beautify."""

from __future__ import annotations

import argparse

from beautify.config import DEFAULT_INDENT, MAX_INDENT, Mode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="beautify",
        description="Format JSON, HTML and CSS, or extract a string field from JSON.",
        epilog=(
            "examples:\n"
            "  echo '{\"a\":1}' | beautify --json\n"
            "  beautify --css styles.css\n"
            "  beautify --extract-field explanation response.json\n"
            "  llm-client | beautify --stream-field explanation"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    modes = parser.add_mutually_exclusive_group()
    for mode in Mode:
        modes.add_argument(
            f"--{mode.value}",
            dest="mode",
            action="store_const",
            const=mode,
            help=f"Format input as {mode.value.upper()}" if mode is not Mode.AUTO
            else "Detect the input format from its content",
        )
    modes.add_argument(
        "--extract-field",
        type=str,
        default=None,
        metavar="KEY",
        help="Print the string value of top-level field KEY",
    )
    modes.add_argument(
        "--stream-field",
        type=str,
        default=None,
        metavar="KEY",
        help="Print the value of field KEY incrementally while input arrives",
    )
    parser.set_defaults(mode=Mode.JSON)

    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        metavar="N",
        help=f"Indent width, 0-{MAX_INDENT} (default: $BEAUTIFY_INDENT or {DEFAULT_INDENT})",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        default=False,
        help="Minify JSON instead of beautifying it",
    )
    parser.add_argument(
        "--color",
        action="store_true",
        default=False,
        help="Syntax-highlight formatted output",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print debug information to stderr",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Input file, or - for stdin (default)",
    )
    return parser
