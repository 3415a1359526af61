from __future__ import annotations

import pytest

from jqlive.core.clipboard import AppClipboard, SystemClipboard, commit
from jqlive.core.errors import ClipboardUnavailable


class MemoryStore:
    def __init__(self) -> None:
        self.entries: list[str] = []

    def copy(self, text: str) -> None:
        self.entries.append(text)


class BrokenStore:
    def copy(self, text: str) -> None:
        raise ClipboardUnavailable("no clipboard")


def test_commit_puts_result_on_top() -> None:
    store = MemoryStore()
    store.copy("older")
    notice = commit('"a"\n"b"\n', store)
    assert store.entries[-1] == '"a"\n"b"\n'
    assert notice == "Copied 8 characters to clipboard"


def test_commit_singular_notice() -> None:
    assert commit("1", MemoryStore()) == "Copied 1 character to clipboard"


def test_commit_propagates_unavailable_store() -> None:
    with pytest.raises(ClipboardUnavailable):
        commit("1\n", BrokenStore())


def test_unknown_platform_has_no_clipboard() -> None:
    with pytest.raises(ClipboardUnavailable):
        SystemClipboard(system="Plan9").copy("x")


def test_linux_without_tools_is_unavailable(monkeypatch) -> None:
    def _missing(*args, **kwargs):  # type: ignore[no-untyped-def]
        raise FileNotFoundError(args[0][0])

    monkeypatch.setattr("jqlive.core.clipboard.subprocess.Popen", _missing)
    with pytest.raises(ClipboardUnavailable) as info:
        SystemClipboard(system="Linux").copy("x")
    assert "wl-copy" in str(info.value)
    assert "xclip" in str(info.value)


def test_app_clipboard_prefers_system() -> None:
    system = MemoryStore()
    terminal: list[str] = []
    AppClipboard(terminal.append, system).copy("x")
    assert system.entries == ["x"]
    assert terminal == []


def test_app_clipboard_falls_back_to_terminal() -> None:
    terminal: list[str] = []
    AppClipboard(terminal.append, BrokenStore()).copy("x")
    assert terminal == ["x"]


def test_app_clipboard_without_terminal_raises() -> None:
    with pytest.raises(ClipboardUnavailable):
        AppClipboard(None, BrokenStore()).copy("x")
