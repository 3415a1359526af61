from __future__ import annotations

import platform
import subprocess
from collections.abc import Callable
from typing import Protocol

from jqlive.core.errors import ClipboardUnavailable
from jqlive.core.log import get_logger

log = get_logger(__name__)


class ClipboardStore(Protocol):
    def copy(self, text: str) -> None: ...


def _clipboard_commands(system: str) -> list[list[str]]:
    if system == "Darwin":  # macOS
        return [["pbcopy"]]
    if system == "Windows":
        return [["clip"]]
    if system == "Linux":
        # Wayland first, then X11
        return [["wl-copy"], ["xclip", "-selection", "clipboard"], ["xsel", "--clipboard", "--input"]]
    return []


class SystemClipboard:
    """Copies through the platform's clipboard command line tools."""

    def __init__(self, system: str | None = None) -> None:
        self._system = system or platform.system()

    def copy(self, text: str) -> None:
        tried: list[str] = []
        for cmd in _clipboard_commands(self._system):
            tried.append(cmd[0])
            try:
                proc = subprocess.Popen(
                    cmd,
                    stdin=subprocess.PIPE,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE,
                )
                proc.communicate(input=text.encode("utf-8"))
            except OSError:
                continue
            if proc.returncode == 0:
                log.debug("copied %d chars with %s", len(text), cmd[0])
                return
        raise ClipboardUnavailable(
            f"no clipboard tool available (tried: {', '.join(tried) or 'none'})"
        )


class AppClipboard:
    """OS clipboard first, then the terminal's OSC 52 escape.

    The escape cannot report whether the terminal honoured it, so it is only
    used when no OS clipboard tool is available.
    """

    def __init__(
        self,
        terminal_copy: Callable[[str], None] | None,
        system: ClipboardStore | None = None,
    ) -> None:
        self._terminal_copy = terminal_copy
        self._system = system if system is not None else SystemClipboard()

    def copy(self, text: str) -> None:
        try:
            self._system.copy(text)
        except ClipboardUnavailable:
            if self._terminal_copy is None:
                raise
            log.debug("falling back to terminal clipboard")
            self._terminal_copy(text)


def commit(result: str, store: ClipboardStore) -> str:
    """Make `result` the newest clipboard entry and return a notice for the user."""
    store.copy(result)
    count = len(result)
    log.info("committed %d characters", count)
    return f"Copied {count} character{'s' if count != 1 else ''} to clipboard"
