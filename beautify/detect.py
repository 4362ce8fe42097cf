"""Guess the format of a text buffer and route it to the matching formatter."""

from __future__ import annotations

import re

from beautify import css_formatter, html_formatter, json_formatter
from beautify.config import DEFAULT_INDENT, Mode

_CSS_HINT = re.compile(r"[{};]")


def detect_mode(text: str) -> Mode | None:
    """Return JSON, HTML or CSS based on the leading character, or None."""
    trimmed = text.strip()
    if not trimmed:
        return None
    if trimmed[0] in "{[":
        return Mode.JSON
    if trimmed[0] == "<":
        return Mode.HTML
    if _CSS_HINT.search(trimmed):
        return Mode.CSS
    return None


def format_text(text: str, mode: Mode, indent_width: int = DEFAULT_INDENT, compact: bool = False) -> str:
    """Format *text* as *mode*; AUTO detects first and passes unknown text through."""
    if mode is Mode.AUTO:
        detected = detect_mode(text)
        if detected is None:
            return text
        mode = detected
    if mode is Mode.JSON:
        if compact:
            return json_formatter.compact(text)
        return json_formatter.pretty(text, indent_width)
    if mode is Mode.HTML:
        return html_formatter.pretty(text, indent_width)
    if mode is Mode.CSS:
        return css_formatter.pretty(text, indent_width)
    raise ValueError(f"Unsupported mode: {mode}")


def auto(text: str, indent_width: int = DEFAULT_INDENT) -> str:
    """Pretty-print *text* with whichever formatter its content suggests."""
    return format_text(text, Mode.AUTO, indent_width)
