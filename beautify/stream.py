"""Incremental extraction of one top-level string field from streaming JSON."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from beautify.config import WHITESPACE
from beautify.literal import EscapeDecoder


class ParserState(str, Enum):
    SCANNING = "scanning"                # looking for the next key
    IN_KEY = "in_key"                    # inside a quoted key
    AFTER_KEY = "after_key"              # between key and colon
    AFTER_COLON = "after_colon"          # between colon and value
    IN_TARGET = "in_target"              # inside the target string value
    IN_OTHER_STRING = "in_other_string"  # inside a string being skipped
    IN_OTHER_VALUE = "in_other_value"    # inside a non-string value being skipped
    DONE = "done"


@dataclass
class StreamContext:
    """Mutable parse state owned by a single extractor session."""

    state: ParserState = ParserState.SCANNING
    current_key: str = ""
    collected: list[str] = field(default_factory=list)
    brace_depth: int = 0
    bracket_depth: int = 0
    other_announced: bool = False
    target_seen: bool = False
    escape_armed: bool = False
    # where a skipped string hands control back when it closes: SCANNING for a
    # top-level value, IN_OTHER_VALUE for a string nested in a skipped value so
    # its keys are never taken for top-level fields
    string_return: ParserState = ParserState.SCANNING
    decoder: EscapeDecoder = field(default_factory=EscapeDecoder)


def _ignore(_value: str) -> None:
    return None


class StreamFieldExtractor:
    """Surfaces the value of one top-level JSON string field as it streams in.

    Usage::

        ext = StreamFieldExtractor(
            "explanation",
            on_content=lambda ch: sys.stdout.write(ch),
            on_other=lambda name: print(f"skipping {name}", file=sys.stderr),
            on_done=lambda value: print(),
        )
        for chunk in stream:
            ext.feed(chunk)
        ext.end()

    ``on_content`` receives each decoded character of the target value the
    moment it is recognized.  ``on_other`` fires once for every other
    top-level field.  ``on_done`` fires once, from ``end()``, with the whole
    collected value.  Other fields are scanned and discarded, never buffered.

    One instance per stream; instances are not thread-safe.
    """

    def __init__(
        self,
        field: str,
        on_content: Callable[[str], None] | None = None,
        on_other: Callable[[str], None] | None = None,
        on_done: Callable[[str], None] | None = None,
    ) -> None:
        self.field = field
        self._on_content = on_content or _ignore
        self._on_other = on_other or _ignore
        self._on_done = on_done or _ignore
        self._ctx = StreamContext()
        self._ended = False
        self._handlers: dict[ParserState, Callable[[str], None]] = {
            ParserState.SCANNING: self._scanning,
            ParserState.IN_KEY: self._in_key,
            ParserState.AFTER_KEY: self._after_key,
            ParserState.AFTER_COLON: self._after_colon,
            ParserState.IN_TARGET: self._in_target,
            ParserState.IN_OTHER_STRING: self._in_other_string,
            ParserState.IN_OTHER_VALUE: self._in_other_value,
            ParserState.DONE: _ignore,
        }

    # ── public API ──────────────────────────────────────────────

    @property
    def state(self) -> ParserState:
        return self._ctx.state

    @property
    def current_key(self) -> str:
        return self._ctx.current_key

    @property
    def done(self) -> bool:
        return self._ctx.state is ParserState.DONE

    @property
    def found(self) -> bool:
        """True once the target field's string value has started."""
        return self._ctx.target_seen

    def feed(self, chunk: str) -> None:
        """Process *chunk*, firing callbacks synchronously as characters are recognized."""
        for ch in chunk:
            self._handlers[self._ctx.state](ch)

    def end(self) -> str:
        """Close the stream and fire ``on_done`` with the collected value.

        Only the first call has an effect; the collected value is returned
        every time.
        """
        if self._ended:
            return self.get_collected()
        self._ended = True
        ctx = self._ctx
        if ctx.state is ParserState.IN_TARGET and ctx.decoder.active:
            self._emit(ctx.decoder.flush())
        ctx.state = ParserState.DONE
        value = self.get_collected()
        self._on_done(value)
        return value

    def get_collected(self) -> str:
        """Snapshot of the target value received so far."""
        return "".join(self._ctx.collected)

    # ── internal state machine ──────────────────────────────────

    def _emit(self, text: str) -> None:
        for ch in text:
            self._ctx.collected.append(ch)
            self._on_content(ch)

    def _announce(self) -> None:
        ctx = self._ctx
        if not ctx.other_announced:
            ctx.other_announced = True
            self._on_other(ctx.current_key)

    def _scanning(self, ch: str) -> None:
        if ch == '"':
            self._ctx.current_key = ""
            self._ctx.state = ParserState.IN_KEY

    def _in_key(self, ch: str) -> None:
        ctx = self._ctx
        if ctx.decoder.active:
            decoded, consumed = ctx.decoder.feed(ch)
            ctx.current_key += decoded
            if consumed:
                return
        if ch == "\\":
            ctx.decoder.start()
        elif ch == '"':
            ctx.state = ParserState.AFTER_KEY
        else:
            ctx.current_key += ch

    def _after_key(self, ch: str) -> None:
        if ch in WHITESPACE:
            return
        if ch == ":":
            self._ctx.other_announced = False
            self._ctx.state = ParserState.AFTER_COLON
        else:
            # not a key after all; nothing has been reported for it yet
            self._ctx.state = ParserState.SCANNING

    def _after_colon(self, ch: str) -> None:
        ctx = self._ctx
        if ch in WHITESPACE:
            return
        if ch == '"':
            if ctx.current_key == self.field:
                ctx.target_seen = True
                ctx.state = ParserState.IN_TARGET
            else:
                self._announce()
                ctx.escape_armed = False
                ctx.string_return = ParserState.SCANNING
                ctx.state = ParserState.IN_OTHER_STRING
            return
        ctx.brace_depth = 0
        ctx.bracket_depth = 0
        self._announce()
        ctx.state = ParserState.IN_OTHER_VALUE
        self._in_other_value(ch)

    def _in_target(self, ch: str) -> None:
        ctx = self._ctx
        if ctx.decoder.active:
            decoded, consumed = ctx.decoder.feed(ch)
            self._emit(decoded)
            if consumed:
                return
        if ch == "\\":
            ctx.decoder.start()
        elif ch == '"':
            ctx.state = ParserState.SCANNING
        else:
            self._emit(ch)

    def _in_other_string(self, ch: str) -> None:
        ctx = self._ctx
        if ctx.escape_armed:
            ctx.escape_armed = False
        elif ch == "\\":
            ctx.escape_armed = True
        elif ch == '"':
            ctx.state = ctx.string_return

    def _in_other_value(self, ch: str) -> None:
        ctx = self._ctx
        if ch == "{":
            ctx.brace_depth += 1
        elif ch == "}":
            if ctx.brace_depth > 0:
                ctx.brace_depth -= 1
            elif ctx.bracket_depth == 0:
                # closes the enclosing top-level object
                ctx.state = ParserState.DONE
        elif ch == "[":
            ctx.bracket_depth += 1
        elif ch == "]":
            if ctx.bracket_depth > 0:
                ctx.bracket_depth -= 1
        elif ch == ",":
            if ctx.brace_depth == 0 and ctx.bracket_depth == 0:
                ctx.state = ParserState.SCANNING
        elif ch == '"':
            ctx.escape_armed = False
            ctx.string_return = ParserState.IN_OTHER_VALUE
            ctx.state = ParserState.IN_OTHER_STRING
