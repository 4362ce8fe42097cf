"""Render chat text containing fenced code blocks as HTML."""

from __future__ import annotations

import html
import re

from beautify.highlight import highlight_html

_FENCE = re.compile(r"```(\w*)\n?")
_PRE_STYLE = (
    "background:#1a1a2e;color:#e0e0e0;padding:12px;overflow-x:auto;"
    "border:1px solid #333;font-family:monospace;font-size:13px;"
    "white-space:pre;border-radius:0"
)


def _render_code(code: str, lang: str) -> str:
    body = highlight_html(code, lang or "text")
    return f'<pre style="{_PRE_STYLE}"><code>{body}</code></pre>'


def _render_text(text: str) -> str:
    """Blank lines separate paragraphs; single newlines become ``<br>``."""
    out: list[str] = []
    para: list[str] = []
    for line in text.split("\n"):
        if line == "":
            if para:
                out.append("<p>" + "<br>".join(para) + "</p>")
                para = []
        else:
            para.append(html.escape(line, quote=False))
    if para:
        out.append("<p>" + "<br>".join(para) + "</p>")
    return "".join(out)


def format_for_chat(text: str) -> str:
    """Convert *text* to HTML, highlighting fenced code blocks.

    An unterminated fence renders the rest of the text as code.
    """
    parts = _FENCE.split(text)
    out = [_render_text(parts[0])]
    in_code = False
    # parts alternate: fence label, content, fence label, content, ...
    for i in range(1, len(parts), 2):
        label, content = parts[i], parts[i + 1]
        in_code = not in_code
        if in_code:
            out.append(_render_code(content, label))
        else:
            out.append(_render_text(content))
    return "".join(out)
