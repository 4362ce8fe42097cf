"""Syntax highlighting of formatted output for terminals and HTML."""

from __future__ import annotations

from pygments import highlight
from pygments.formatters import HtmlFormatter, TerminalTrueColorFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound


_TERMINAL = TerminalTrueColorFormatter(style="monokai")
_HTML = HtmlFormatter(style="monokai", noclasses=True, nowrap=True)


def _lexer_for(lang: str):
    try:
        return get_lexer_by_name(lang)
    except ClassNotFound:
        return TextLexer()


def highlight_terminal(code: str, lang: str) -> str:
    """Apply pygments syntax highlighting to *code* for terminal display."""
    return highlight(code, _lexer_for(lang), _TERMINAL)


def highlight_html(code: str, lang: str) -> str:
    """Return *code* as inline-styled HTML spans (no ``<pre>`` wrapper)."""
    return highlight(code, _lexer_for(lang), _HTML)
