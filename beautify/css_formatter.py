"""CSS re-indenter: one declaration per line, blank line between top-level rules."""

from __future__ import annotations

from beautify.config import DEFAULT_INDENT, INLINE_SPACE, WHITESPACE
from beautify.literal import FormatterState


def _trim(out: list[str], chars=INLINE_SPACE) -> None:
    while out and out[-1] in chars:
        out.pop()


def pretty(text: str, indent_width: int = DEFAULT_INDENT) -> str:
    """Return *text* with rule blocks expanded and declarations indented.

    Line breaks are synthesized entirely by the formatter; source newlines
    are dropped and runs of spaces collapse to one.  Quoted strings are
    copied verbatim.
    """
    state = FormatterState(delimiters="\"'", indent_width=indent_width)
    out: list[str] = []

    for ch in text:
        if state.step(ch):
            out.append(ch)
            continue
        if ch in "\n\r":
            continue

        if ch == "{":
            _trim(out)
            out.extend(" {\n")
            state.push()
            out.extend(state.indent())
        elif ch == "}":
            _trim(out, WHITESPACE)
            out.append("\n")
            state.pop()
            out.extend(state.indent())
            out.extend("}\n")
            if state.depth == 0:
                out.append("\n")
            else:
                out.extend(state.indent())
        elif ch == ";":
            _trim(out)
            out.extend(";\n")
            out.extend(state.indent())
        elif ch in INLINE_SPACE:
            if out and out[-1] not in WHITESPACE:
                out.append(" ")
        else:
            out.append(ch)

    _trim(out, WHITESPACE)
    out.append("\n")
    return "".join(out)
