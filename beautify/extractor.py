"""One-shot extraction of a top-level string field from a complete JSON buffer."""

from __future__ import annotations

from beautify.config import WHITESPACE
from beautify.literal import decode_string


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in WHITESPACE:
        pos += 1
    return pos


def _find_key(text: str, field_name: str) -> int:
    """Return the index just past the ``:`` following ``"field_name"``, or -1.

    This is a textual search, not a structural parse: a nested key with
    the same name that occurs first will match.  Occurrences that are not
    followed by a colon (string values equal to the name) are skipped.
    """
    needle = f'"{field_name}"'
    start = 0
    while True:
        pos = text.find(needle, start)
        if pos == -1:
            return -1
        after = _skip_whitespace(text, pos + len(needle))
        if after < len(text) and text[after] == ":":
            return after + 1
        start = pos + 1


def extract(text: str, field_name: str) -> str | None:
    """Return the decoded string value of *field_name*, or None.

    None means the key is absent or its value is not a string.
    """
    pos = _find_key(text, field_name)
    if pos == -1:
        return None
    pos = _skip_whitespace(text, pos)
    if pos >= len(text) or text[pos] != '"':
        return None
    return decode_string(text, pos + 1)
