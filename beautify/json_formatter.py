"""JSON pretty-printer and minifier.

Both transforms are single left-to-right passes that only look at structure
outside string literals.  They are not validators: unbalanced brackets are
tolerated and depth never drops below zero.
"""

from __future__ import annotations

from beautify.config import DEFAULT_INDENT, WHITESPACE
from beautify.literal import FormatterState, LiteralScanner

_CLOSER = {"{": "}", "[": "]"}


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in WHITESPACE:
        pos += 1
    return pos


def pretty(text: str, indent_width: int = DEFAULT_INDENT) -> str:
    """Return *text* re-indented, one member or element per line.

    Empty containers stay on one line (``{}``, ``[]``).  The result always
    ends with exactly one newline.
    """
    state = FormatterState(indent_width=indent_width)
    out: list[str] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        i += 1

        if state.step(ch):
            out.append(ch)
            continue
        if ch in WHITESPACE:
            continue

        if ch in _CLOSER:
            out.append(ch)
            j = _skip_whitespace(text, i)
            if j < n and text[j] == _CLOSER[ch]:
                out.append(text[j])
                i = j + 1
                continue
            state.push()
            out.append("\n" + state.indent())
        elif ch in "}]":
            state.pop()
            out.append("\n" + state.indent() + ch)
        elif ch == ",":
            out.append(",\n" + state.indent())
        elif ch == ":":
            out.append(": ")
        else:
            out.append(ch)

    out.append("\n")
    return "".join(out)


def compact(text: str) -> str:
    """Return *text* with every whitespace character outside strings removed."""
    scanner = LiteralScanner()
    return "".join(
        ch for ch in text
        if scanner.step(ch) or ch not in WHITESPACE
    )
