"""String-literal scanning and escape decoding shared by every formatter.

Formatters only need to know *where* string literals are so they can leave
their content alone; extractors additionally decode escape sequences.  Both
concerns live here so that every caller follows the same rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from string import hexdigits

# The one escape rule both extractors decode with; any other \X yields X.
_SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    '"': '"',
    "\\": "\\",
    "/": "/",
}


@dataclass
class LiteralScanner:
    """Tracks whether the current character sits inside a quoted literal.

    ``step(ch)`` must be called once for every character in order.  It
    returns True when *ch* belongs to a literal (its quotes included) and
    must therefore be copied through untouched.
    """

    delimiters: str = '"'
    in_string: bool = False
    delimiter: str = ""
    escape_armed: bool = False

    def step(self, ch: str) -> bool:
        if self.in_string:
            if self.escape_armed:
                self.escape_armed = False
            elif ch == "\\":
                self.escape_armed = True
            elif ch == self.delimiter:
                self.in_string = False
                self.delimiter = ""
            return True
        if ch in self.delimiters:
            self.in_string = True
            self.delimiter = ch
            return True
        return False


@dataclass
class FormatterState(LiteralScanner):
    """Per-call state of a batch formatter: literal tracking plus depth."""

    indent_width: int = 2
    depth: int = 0

    def __post_init__(self) -> None:
        self.indent_width = max(0, self.indent_width)

    def push(self) -> None:
        self.depth += 1

    def pop(self) -> None:
        # unbalanced closers never drive depth negative
        if self.depth > 0:
            self.depth -= 1

    def indent(self) -> str:
        return " " * (self.depth * self.indent_width)


class EscapeDecoder:
    """Decodes one escape sequence, fed the characters after the backslash.

    * ``start()``: a backslash was just consumed.
    * ``feed(ch)``: returns ``(decoded, consumed)``.  *decoded* is the text
      produced so far (may be empty while a ``\\uXXXX`` is pending).  When
      *consumed* is False the escape ended before *ch* and the caller must
      process *ch* itself.
    """

    __slots__ = ("active", "_digits")

    def __init__(self) -> None:
        self.active = False
        self._digits: str | None = None

    def start(self) -> None:
        self.active = True
        self._digits = None

    def feed(self, ch: str) -> tuple[str, bool]:
        if self._digits is None:
            if ch == "u":
                self._digits = ""
                return "", True
            self.active = False
            return _SIMPLE_ESCAPES.get(ch, ch), True

        if ch in hexdigits:
            self._digits += ch
            if len(self._digits) < 4:
                return "", True
            code = int(self._digits, 16)
            self._reset()
            return chr(code), True

        partial = "u" + self._digits
        self._reset()
        return partial, False

    def flush(self) -> str:
        """Return whatever an unfinished ``\\u`` escape has read so far."""
        if self.active and self._digits is not None:
            partial = "u" + self._digits
            self._reset()
            return partial
        self._reset()
        return ""

    def _reset(self) -> None:
        self.active = False
        self._digits = None


def decode_string(text: str, start: int) -> str:
    """Decode the string literal body beginning at *start* (after the opening quote).

    Stops at the first unescaped ``"``; an unterminated literal yields
    everything up to the end of *text*.
    """
    out: list[str] = []
    decoder = EscapeDecoder()
    for ch in text[start:]:
        if decoder.active:
            decoded, consumed = decoder.feed(ch)
            out.append(decoded)
            if consumed:
                continue
        if ch == "\\":
            decoder.start()
        elif ch == '"':
            return "".join(out)
        else:
            out.append(ch)
    out.append(decoder.flush())
    return "".join(out)
