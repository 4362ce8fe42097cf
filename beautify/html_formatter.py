"""HTML re-indenter.

Every tag goes on its own line, nested content is indented one level per
open non-void element, and text runs start their own line.

Tag scanning is not attribute-quote aware: a ``>`` inside a quoted
attribute value ends the tag early.  Script and style bodies are treated
as ordinary text.
"""

from __future__ import annotations

from beautify.config import DEFAULT_INDENT, INLINE_SPACE, VOID_TAGS, WHITESPACE
from beautify.literal import FormatterState


def _tag_name(text: str, pos: int) -> str:
    end = pos
    while end < len(text) and text[end].isalnum():
        end += 1
    return text[pos:end].lower()


def _opens_scope(text: str, pos: int) -> bool:
    """True when the tag starting at *pos* (just after ``<``) nests its content."""
    if pos < len(text) and text[pos] in "!?":
        return False  # doctype, comment, processing instruction
    name = _tag_name(text, pos)
    return bool(name) and name not in VOID_TAGS


def _self_closing(text: str, start: int, end: int) -> bool:
    """True when the tag spanning text[start:end] ends in a standalone ``/``.

    The slash must follow the tag name, whitespace or a quote; a slash that
    ends an unquoted attribute value such as ``href=/x/`` does not count.
    """
    if text[end - 1] != "/":
        return False
    if end - 1 == start + len(_tag_name(text, start)):
        return True
    return text[end - 2] in WHITESPACE or text[end - 2] in "\"'"


def _trim(out: list[str], chars=INLINE_SPACE) -> None:
    while out and out[-1] in chars:
        out.pop()


def pretty(text: str, indent_width: int = DEFAULT_INDENT) -> str:
    """Return *text* with one tag or text run per line, indented by nesting depth."""
    state = FormatterState(indent_width=indent_width)
    out: list[str] = []
    in_tag = False
    tag_start = 0
    nests = False          # the tag being read will open a scope at its '>'
    text_line = False      # the current output line carries text content
    break_pending = False  # a source newline was seen inside a text run

    def new_line() -> None:
        _trim(out)
        if out and out[-1] != "\n":
            out.append("\n")
        out.extend(state.indent())

    for i, ch in enumerate(text):
        if ch == "<":
            closing = text.startswith("/", i + 1)
            if closing:
                state.pop()
            new_line()
            out.append(ch)
            in_tag = True
            tag_start = i + 1
            nests = not closing and _opens_scope(text, i + 1)
            text_line = False
            break_pending = False
        elif in_tag:
            if ch == ">":
                out.append(ch)
                in_tag = False
                if nests and not _self_closing(text, tag_start, i):
                    state.push()
                nests = False
            elif ch in "\n\r":
                if out[-1] not in INLINE_SPACE:
                    out.append(" ")
            else:
                out.append(ch)
        elif ch in "\n\r":
            if text_line:
                break_pending = True
        elif ch in INLINE_SPACE:
            if text_line and not break_pending:
                out.append(ch)
        else:
            if not text_line or break_pending:
                new_line()
                text_line = True
                break_pending = False
            out.append(ch)

    _trim(out, WHITESPACE)
    out.append("\n")
    return "".join(out)
