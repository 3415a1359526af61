from __future__ import annotations

from jqlive.core.expand import ROOT_PREFIX
from jqlive.core.invoke import run_filter


def is_valid(jq_path: str, content: str) -> bool:
    """Probe whether `content` is acceptable jq input.

    Runs the identity filter; any successful run counts, even one with empty
    output. `content` is an immutable str, so edits made elsewhere while the
    probe runs cannot reach it.
    """
    if not content:
        return False
    return run_filter(jq_path, content, ROOT_PREFIX).ok
