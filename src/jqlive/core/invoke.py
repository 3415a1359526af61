from __future__ import annotations

import subprocess
from dataclasses import dataclass

from jqlive.core.log import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class FilterResult:
    ok: bool
    output: str = ""
    error: str = ""


def run_filter(jq_path: str, document: str, query: str) -> FilterResult:
    """Run `jq_path query` with `document` on stdin.

    Returns the captured stdout verbatim on exit status 0. Any other outcome,
    including a failure to spawn the process, is reported as a failed
    FilterResult and its partial output is dropped.
    """
    if not query.strip():
        raise ValueError("query must not be empty")

    try:
        proc = subprocess.run(
            [jq_path, query],
            input=document,
            capture_output=True,
            text=True,
            encoding="utf-8",
        )
    except (OSError, UnicodeError) as e:
        log.debug("jq spawn failed for %r: %s", query, e)
        return FilterResult(ok=False, error=str(e))

    if proc.returncode != 0:
        error = (proc.stderr or "").strip() or f"jq exited with status {proc.returncode}"
        log.debug("jq rejected %r: %s", query, error)
        return FilterResult(ok=False, error=error)
    return FilterResult(ok=True, output=proc.stdout)
