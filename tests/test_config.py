"""Tests for config module."""

import pytest

from beautify.config import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_INDENT,
    MAX_INDENT,
    MODE_LEXER,
    VOID_TAGS,
    FormatOptions,
    Mode,
    clamp_indent,
    resolve_chunk_size,
    resolve_indent,
)


# ── clamp_indent / resolve_indent ───────────────────────────────────

def test_clamp_indent_bounds():
    assert clamp_indent(-3) == 0
    assert clamp_indent(4) == 4
    assert clamp_indent(99) == MAX_INDENT


def test_resolve_indent_explicit_wins(monkeypatch):
    monkeypatch.setenv("BEAUTIFY_INDENT", "8")
    assert resolve_indent(3) == 3


def test_resolve_indent_from_env(monkeypatch):
    monkeypatch.setenv("BEAUTIFY_INDENT", "4")
    assert resolve_indent() == 4


def test_resolve_indent_env_clamped(monkeypatch):
    monkeypatch.setenv("BEAUTIFY_INDENT", "40")
    assert resolve_indent() == MAX_INDENT


def test_resolve_indent_default(monkeypatch):
    monkeypatch.delenv("BEAUTIFY_INDENT", raising=False)
    assert resolve_indent() == DEFAULT_INDENT


def test_resolve_indent_invalid_env(monkeypatch):
    monkeypatch.setenv("BEAUTIFY_INDENT", "wide")
    with pytest.raises(ValueError, match="BEAUTIFY_INDENT"):
        resolve_indent()


# ── resolve_chunk_size ──────────────────────────────────────────────

def test_chunk_size_default(monkeypatch):
    monkeypatch.delenv("BEAUTIFY_CHUNK_SIZE", raising=False)
    assert resolve_chunk_size() == DEFAULT_CHUNK_SIZE


def test_chunk_size_from_env(monkeypatch):
    monkeypatch.setenv("BEAUTIFY_CHUNK_SIZE", "1")
    assert resolve_chunk_size() == 1


def test_chunk_size_non_positive_falls_back(monkeypatch):
    monkeypatch.setenv("BEAUTIFY_CHUNK_SIZE", "0")
    assert resolve_chunk_size() == DEFAULT_CHUNK_SIZE


# ── Modes & constants ───────────────────────────────────────────────

def test_mode_values():
    assert {m.value for m in Mode} == {"json", "html", "css", "auto"}


def test_every_concrete_mode_has_lexer():
    assert set(MODE_LEXER) == {Mode.JSON, Mode.HTML, Mode.CSS}


def test_void_tags():
    assert "br" in VOID_TAGS
    assert "div" not in VOID_TAGS
    assert len(VOID_TAGS) == 13


def test_format_options_frozen():
    opts = FormatOptions()
    assert opts.mode is Mode.JSON
    with pytest.raises(AttributeError):
        opts.indent = 4
