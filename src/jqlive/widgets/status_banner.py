"""One-line banner under the query input showing what the preview reflects."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from jqlive.core.preview import PreviewState
from jqlive.ui.palette import PALETTE


class StatusBanner(Static):
    def __init__(self, *, id: str | None = None) -> None:  # noqa: A002
        super().__init__(id=id)
        self._state = PreviewState.IDLE
        self._query = ""
        self._failures = 0

    def update_state(self, state: PreviewState, query: str = "", failures: int = 0) -> None:
        self._state = state
        self._query = query
        self._failures = failures
        if self.is_mounted:
            self._render_content()

    def on_mount(self) -> None:  # type: ignore[override]
        self._render_content()

    def render_text(self) -> Text:
        text = Text()
        if self._state is PreviewState.IDLE:
            style = f"{PALETTE.banner_idle_fg} on {PALETTE.banner_idle_bg}"
            text.append(" Type a filter. Enter copies the result, Esc cancels, F1 lists shorthands ", style=style)
            return text

        if self._failures:
            style = f"{PALETTE.banner_stale_fg} on {PALETTE.banner_stale_bg}"
            text.append(" no match ", style=f"bold {style}")
            text.append(f"| showing last result: {self._query or '-'} ", style=style)
            return text

        style = f"{PALETTE.banner_fg} on {PALETTE.banner_bg}"
        marker = "…" if self._state is PreviewState.EVALUATING else "✓"
        text.append(f" {marker} ", style=f"bold {style}")
        text.append(f"{self._query} ", style=style)
        return text

    def _render_content(self) -> None:
        self.update(self.render_text())
