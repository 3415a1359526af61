from __future__ import annotations

from jqlive.ui.highlight import highlight_json, make_highlighter


def test_highlight_keeps_text_and_adds_styles() -> None:
    out = highlight_json('{"a": 1}\n')
    assert out.plain.rstrip("\n") == '{"a": 1}'
    assert out.spans


def test_make_highlighter_uses_theme() -> None:
    hl = make_highlighter("monokai")
    assert hl("[1, 2]").plain.rstrip("\n") == "[1, 2]"
