from __future__ import annotations

from collections.abc import Callable

from rich.syntax import Syntax
from rich.text import Text

from jqlive.core.config import DEFAULT_THEME


def highlight_json(text: str, theme: str = DEFAULT_THEME) -> Text:
    """Colourise jq output. A trailing newline is not rendered."""
    code = text.rstrip("\n")
    syntax = Syntax(code, "json", theme=theme, background_color="default", word_wrap=True)
    return syntax.highlight(code)


def make_highlighter(theme: str) -> Callable[[str], Text]:
    def _highlight(text: str) -> Text:
        return highlight_json(text, theme)

    return _highlight
