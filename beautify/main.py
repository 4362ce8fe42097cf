"""Entry point for beautify."""

from __future__ import annotations

import io
import sys
from typing import NoReturn, TextIO

from beautify.cli import build_parser
from beautify.config import (
    MODE_LEXER,
    FormatOptions,
    Mode,
    resolve_chunk_size,
    resolve_indent,
)
from beautify.detect import detect_mode, format_text
from beautify.extractor import extract
from beautify.highlight import highlight_terminal
from beautify.stream import StreamFieldExtractor


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _debug(enabled: bool, message: str) -> None:
    if enabled:
        print(f"[debug] {message}", file=sys.stderr)


def _open_input(path: str) -> TextIO:
    if path == "-":
        if isinstance(sys.stdin, io.TextIOWrapper):
            # undecodable bytes read as U+FFFD
            sys.stdin.reconfigure(encoding="utf-8", errors="replace")
        return sys.stdin
    try:
        return open(path, encoding="utf-8", errors="replace")
    except OSError:
        _fail(f"cannot open '{path}'")


def _read_input(path: str) -> str:
    source = _open_input(path)
    try:
        return source.read()
    finally:
        if source is not sys.stdin:
            source.close()


def _run_stream(path: str, field: str, debug: bool) -> None:
    """Feed the input to a StreamFieldExtractor chunk by chunk, echoing the field live."""

    def on_content(ch: str) -> None:
        sys.stdout.write(ch)
        sys.stdout.flush()

    def on_other(name: str) -> None:
        _debug(debug, f"skipping field {name!r}")

    extractor = StreamFieldExtractor(field, on_content=on_content, on_other=on_other)
    chunk_size = resolve_chunk_size()
    source = _open_input(path)
    try:
        for chunk in iter(lambda: source.read(chunk_size), ""):
            extractor.feed(chunk)
    finally:
        if source is not sys.stdin:
            source.close()
    extractor.end()
    _debug(debug, f"final state {extractor.state.value}")

    if not extractor.found:
        _fail(f"field '{field}' not found or not a string")
    sys.stdout.write("\n")
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        indent = resolve_indent(args.indent)
    except ValueError as exc:
        _fail(str(exc))

    # ── Streaming extraction ────────────────────────────────────
    if args.stream_field is not None:
        _run_stream(args.file, args.stream_field, args.debug)
        return

    text = _read_input(args.file)

    # ── One-shot extraction ─────────────────────────────────────
    if args.extract_field is not None:
        value = extract(text, args.extract_field)
        if value is None:
            _fail(f"field '{args.extract_field}' not found or not a string")
        print(value)
        return

    # ── Formatting ──────────────────────────────────────────────
    mode = args.mode
    if mode is Mode.AUTO:
        mode = detect_mode(text) or Mode.AUTO
    options = FormatOptions(
        mode=mode,
        indent=indent,
        compact=args.compact,
        color=args.color,
        debug=args.debug,
    )
    _debug(options.debug, f"mode={options.mode.value} indent={options.indent} compact={options.compact}")
    if options.compact and options.mode is not Mode.JSON:
        _debug(options.debug, "--compact only applies to JSON; ignored")

    output = format_text(text, options.mode, options.indent, options.compact)
    if options.color and options.mode in MODE_LEXER:
        output = highlight_terminal(output, MODE_LEXER[options.mode])
    sys.stdout.write(output)
    if not output.endswith("\n"):
        sys.stdout.write("\n")


if __name__ == "__main__":
    main()
