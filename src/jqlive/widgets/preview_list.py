from __future__ import annotations

from collections.abc import Callable

from rich.text import Text
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from jqlive.core.preview import Candidate
from jqlive.ui.palette import PALETTE


class PreviewList(OptionList):
    """Candidate list holding at most one entry: the latest accepted preview.

    The option's prompt is the expanded filter followed by the annotation the
    renderer produces for the candidate's payload.
    """

    def __init__(
        self,
        renderer: Callable[[Candidate], Text],
        *,
        id: str | None = None,  # noqa: A002
    ) -> None:
        super().__init__(id=id)
        self._renderer = renderer
        self._candidates: dict[str, Candidate] = {}

    @property
    def candidate(self) -> Candidate | None:
        return next(iter(self._candidates.values()), None)

    def candidate_for(self, option: Option) -> Candidate | None:
        if option.id is None:
            return None
        return self._candidates.get(option.id)

    def format_prompt(self, candidate: Candidate) -> Text:
        prompt = Text()
        prompt.append("jq ", style=PALETTE.dim)
        prompt.append(candidate.label, style=f"bold {PALETTE.prompt}")
        prompt.append_text(self._renderer(candidate))
        return prompt

    def show_candidate(self, candidate: Candidate) -> None:
        self.clear_options()
        self._candidates.clear()
        option_id = f"gen-{candidate.generation}"
        self._candidates[option_id] = candidate
        self.add_option(Option(self.format_prompt(candidate), id=option_id))
        self.highlighted = 0

    def clear_candidate(self) -> None:
        self.clear_options()
        self._candidates.clear()
