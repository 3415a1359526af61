from __future__ import annotations

import os
from collections.abc import Mapping
from functools import partial

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Footer, Header, Input, Label, OptionList, Static
from textual.worker import get_current_worker

from jqlive.core.clipboard import AppClipboard, ClipboardStore, commit
from jqlive.core.config import Config
from jqlive.core.errors import ClipboardUnavailable
from jqlive.core.expand import expand
from jqlive.core.invoke import run_filter
from jqlive.core.log import get_logger
from jqlive.core.preview import Evaluation, PreviewController, Runner
from jqlive.core.session import SessionState
from jqlive.ui.highlight import make_highlighter
from jqlive.ui.palette import PALETTE
from jqlive.widgets.preview_list import PreviewList
from jqlive.widgets.status_banner import StatusBanner

log = get_logger(__name__)

EXIT_CLIPBOARD_UNAVAILABLE = 4


class JqLiveApp(App[str | None]):
    """Interactive jq session over one JSON document.

    Returns the committed result from `run()`, or None when the session was
    cancelled or confirmed before any filter succeeded.
    """

    CSS = """
    #query-label {
        color: $text-muted;
        padding: 0 1;
    }

    #query {
        width: 100%;
    }

    #status {
        height: 1;
    }

    #preview {
        height: 1fr;
    }
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        ("f1", "open_help", "Shorthands"),
    ]

    def __init__(
        self,
        config: Config,
        document: str,
        *,
        source_name: str = "",
        runner: Runner = run_filter,
        clipboard: ClipboardStore | None = None,
    ) -> None:
        super().__init__()
        self._config = config
        self._session = SessionState(document, config.jq_path)
        self._controller = PreviewController(
            self._session,
            config.shorthands,
            make_highlighter(config.theme),
            runner=runner,
        )
        self._clipboard = clipboard if clipboard is not None else AppClipboard(self.copy_to_clipboard)
        self.title = f"jqlive — {os.path.basename(source_name)}" if source_name else "jqlive"
        self.notice: str | None = None
        self.commit_error: ClipboardUnavailable | None = None
        self._input: Input | None = None
        self._banner: StatusBanner | None = None
        self._list: PreviewList | None = None

    @property
    def controller(self) -> PreviewController:
        return self._controller

    def compose(self) -> ComposeResult:  # type: ignore[override]
        yield Header()
        yield Label("jq filter (shorthands: F1):", id="query-label")
        self._input = Input(placeholder=".", id="query")
        yield self._input
        self._banner = StatusBanner(id="status")
        self._banner.update_state(self._controller.state)
        yield self._banner
        self._list = PreviewList(self._controller.render_annotation, id="preview")
        yield self._list
        yield Footer()

    def on_mount(self) -> None:  # type: ignore[override]
        if self._input is not None:
            self.set_focus(self._input)

    # ---- Live preview ----
    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input is not self._input:
            return
        self.request_preview(event.value)

    def request_preview(self, text: str) -> None:
        generation = self._controller.update(text)
        if generation is None:
            if self._list is not None:
                self._list.clear_candidate()
            self._refresh_banner()
            return
        self._refresh_banner(expand(text, self._config.shorthands))
        self.run_worker(
            partial(self._evaluate_in_thread, generation, text),
            thread=True,
            exclusive=True,
            group="preview",
        )

    def _evaluate_in_thread(self, generation: int, text: str) -> None:
        evaluation = self._controller.evaluate(generation, text)
        if get_current_worker().is_cancelled:
            # A newer keystroke took over; its own worker reports back.
            return
        self.call_from_thread(self.apply_evaluation, evaluation)

    def apply_evaluation(self, evaluation: Evaluation) -> None:
        candidate = self._controller.apply(evaluation)
        if candidate is not None and self._list is not None:
            self._list.show_candidate(candidate)
        if self._session.is_current(evaluation.generation):
            self._refresh_banner(evaluation.query)

    def _refresh_banner(self, query: str = "") -> None:
        if self._banner is None:
            return
        shown = self._controller.candidate
        if self._controller.failures and shown is not None:
            query = shown.label
        self._banner.update_state(self._controller.state, query, self._controller.failures)

    # ---- Commit / cancel ----
    def on_input_submitted(self, event: Input.Submitted) -> None:  # type: ignore[override]
        self.action_commit()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.action_commit()

    def action_commit(self) -> None:
        result = self._controller.confirm()
        if result is None:
            self.notice = "No result to copy"
            self.exit(None)
            return
        try:
            self.notice = commit(result, self._clipboard)
        except ClipboardUnavailable as e:
            log.error("commit failed: %s", e)
            self.commit_error = e
            self.exit(None, return_code=EXIT_CLIPBOARD_UNAVAILABLE)
            return
        self.exit(result)

    def action_cancel(self) -> None:
        self._controller.cancel()
        self.exit(None)

    def action_open_help(self) -> None:
        self.push_screen(HelpScreen(self._config.shorthands))


class HelpScreen(ModalScreen[None]):
    """Lists the configured shorthands in table order."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("f1", "close", "Close"),
        ("q", "close", "Close"),
    ]

    CSS = """
    HelpScreen {
        align: center middle;
    }

    #help-container {
        width: 80%;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: thick $primary;
        padding: 1;
    }
    """

    def __init__(self, shorthands: Mapping[str, str]) -> None:
        super().__init__()
        self._shorthands = shorthands

    def compose(self) -> ComposeResult:  # type: ignore[override]
        with Container(id="help-container"):
            yield Label("Shorthands (type the name to use the filter)")
            yield Static(format_shorthands(self._shorthands))

    def action_close(self) -> None:
        self.dismiss(None)


def format_shorthands(shorthands: Mapping[str, str]) -> Text:
    text = Text()
    if not shorthands:
        text.append("(none configured)", style=PALETTE.dim)
        return text
    width = max(len(name) for name in shorthands)
    for name, expr in shorthands.items():
        text.append(f"{name:<{width}}", style=f"bold {PALETTE.shorthand_name}")
        text.append("  ", style=PALETTE.dim)
        text.append(f"{expr}\n", style=PALETTE.shorthand_expr)
    text.rstrip()
    return text
