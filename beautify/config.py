"""Configuration constants and mode definitions for beautify."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet


# ── Modes ───────────────────────────────────────────────────────────

class Mode(str, Enum):
    JSON = "json"
    HTML = "html"
    CSS = "css"
    AUTO = "auto"


# pygments lexer alias per formatted mode
MODE_LEXER: dict[Mode, str] = {
    Mode.JSON: "json",
    Mode.HTML: "html",
    Mode.CSS: "css",
}


# ── Character classes ───────────────────────────────────────────────

WHITESPACE: FrozenSet[str] = frozenset(" \t\n\r")
INLINE_SPACE: FrozenSet[str] = frozenset(" \t")

VOID_TAGS: FrozenSet[str] = frozenset({
    "br", "hr", "img", "input", "meta", "link", "area",
    "base", "col", "embed", "source", "track", "wbr",
})


# ── Defaults ────────────────────────────────────────────────────────

DEFAULT_INDENT = 2
MAX_INDENT = 16
DEFAULT_CHUNK_SIZE = 64


def clamp_indent(width: int) -> int:
    """Clamp an indent width into ``0..MAX_INDENT``."""
    return max(0, min(width, MAX_INDENT))


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def resolve_indent(width: int | None = None) -> int:
    """Return the indent width to use.

    An explicit *width* wins; otherwise ``BEAUTIFY_INDENT`` is consulted,
    falling back to ``DEFAULT_INDENT``. The result is always clamped.
    Raises ``ValueError`` when the environment value is not an integer.
    """
    if width is None:
        width = _env_int("BEAUTIFY_INDENT", DEFAULT_INDENT)
    return clamp_indent(width)


def resolve_chunk_size() -> int:
    """Chunk size used when streaming input into the field extractor."""
    size = _env_int("BEAUTIFY_CHUNK_SIZE", DEFAULT_CHUNK_SIZE)
    return size if size > 0 else DEFAULT_CHUNK_SIZE


@dataclass(frozen=True)
class FormatOptions:
    mode: Mode = Mode.JSON
    indent: int = DEFAULT_INDENT
    compact: bool = False
    color: bool = False
    debug: bool = False
