"""Live preview loop: input text -> jq run -> single annotated candidate."""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from rich.text import Text

from jqlive.core.expand import expand
from jqlive.core.invoke import FilterResult, run_filter
from jqlive.core.log import get_logger
from jqlive.core.session import SessionState

log = get_logger(__name__)

Runner = Callable[[str, str, str], FilterResult]
Highlighter = Callable[[str], Text]


class PreviewState(enum.Enum):
    IDLE = "idle"
    EVALUATING = "evaluating"
    DISPLAYING = "displaying"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


TERMINAL_STATES = frozenset({PreviewState.COMMITTED, PreviewState.CANCELLED})


@dataclass(frozen=True)
class Candidate:
    """The one entry the list shows: expanded filter plus the output it produced."""

    label: str
    payload: str
    generation: int


@dataclass(frozen=True)
class Evaluation:
    generation: int
    query: str
    result: FilterResult
    skipped: bool = False


class PreviewController:
    """Drives the preview for one session.

    `update()` runs on the UI thread for every input change and hands out a
    generation number. `evaluate()` runs jq for that generation, usually in a
    worker thread, and `apply()` brings the outcome back on the UI thread,
    where it is kept only if no newer input arrived meanwhile.
    """

    def __init__(
        self,
        session: SessionState,
        shorthands: Mapping[str, str],
        highlighter: Highlighter,
        runner: Runner = run_filter,
    ) -> None:
        self._session = session
        self._shorthands = shorthands
        self._highlighter = highlighter
        self._runner = runner
        self._state = PreviewState.IDLE
        self._candidate: Candidate | None = None
        self._failures = 0

    @property
    def state(self) -> PreviewState:
        return self._state

    @property
    def candidate(self) -> Candidate | None:
        return self._candidate

    @property
    def session(self) -> SessionState:
        return self._session

    @property
    def failures(self) -> int:
        """Failed runs since the last successful one."""
        return self._failures

    def update(self, text: str) -> int | None:
        """Register an input change; returns the generation to evaluate, if any."""
        if self._state in TERMINAL_STATES:
            return None
        generation = self._session.begin()
        if not text.strip():
            # Empty input supersedes anything in flight and clears the list;
            # the last accepted result stays available to confirm().
            self._candidate = None
            self._failures = 0
            self._state = PreviewState.IDLE
            return None
        self._state = PreviewState.EVALUATING
        return generation

    def evaluate(self, generation: int, text: str) -> Evaluation:
        """Expand and run `text`. Safe to call from a worker thread."""
        query = expand(text, self._shorthands)
        if not query.strip():
            # A shorthand can expand to nothing; jq never sees an empty filter.
            return Evaluation(
                generation=generation,
                query=query,
                result=FilterResult(ok=False),
                skipped=True,
            )
        result = self._runner(self._session.jq_path, self._session.document, query)
        return Evaluation(generation=generation, query=query, result=result)

    def apply(self, evaluation: Evaluation) -> Candidate | None:
        """Fold a finished run into the session; returns the candidate to show.

        Must run on the UI thread. Runs for superseded input are dropped, and
        a failed run leaves the last accepted candidate on display.
        """
        if self._state in TERMINAL_STATES:
            return None
        if evaluation.skipped:
            # Nothing was run; the shown candidate stays as it is.
            if self._session.is_current(evaluation.generation):
                self._state = PreviewState.DISPLAYING if self._candidate else PreviewState.IDLE
            return None
        if not evaluation.result.ok:
            if self._session.is_current(evaluation.generation):
                self._failures += 1
                self._state = PreviewState.DISPLAYING
            return None
        if not self._session.accept(evaluation.generation, evaluation.result.output):
            log.debug("discarding superseded run %d (%r)", evaluation.generation, evaluation.query)
            return None

        candidate = Candidate(
            label=evaluation.query,
            payload=evaluation.result.output,
            generation=evaluation.generation,
        )
        self._candidate = candidate
        self._failures = 0
        self._state = PreviewState.DISPLAYING
        return candidate

    def step(self, text: str) -> Candidate | None:
        """Synchronous update, evaluate and apply for one input change."""
        generation = self.update(text)
        if generation is None:
            return None
        return self.apply(self.evaluate(generation, text))

    def render_annotation(self, candidate: Candidate) -> Text:
        rendered = Text("\n")
        rendered.append_text(self._highlighter(candidate.payload))
        return rendered

    def confirm(self) -> str | None:
        """Finish the session with the last accepted result, or None if there is none."""
        result = self._session.result
        if result is None:
            log.info("confirm with no result")
            return None
        self._state = PreviewState.COMMITTED
        return result

    def cancel(self) -> None:
        self._state = PreviewState.CANCELLED
        self._candidate = None
        self._session.reset()
