from __future__ import annotations

import logging
from pathlib import Path

from jqlive.core.log import get_logger, setup_logging


def test_get_logger_is_namespaced() -> None:
    assert get_logger("jqlive.core.invoke").name == "jqlive.core.invoke"
    assert get_logger("plugin").name == "jqlive.plugin"


def test_records_go_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "jqlive.log"
    setup_logging("DEBUG", str(log_file))
    get_logger("jqlive.test").debug("hello %s", "file")
    for handler in logging.getLogger("jqlive").handlers:
        handler.flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")
    setup_logging("INFO", None)


def test_without_file_nothing_is_emitted(capsys) -> None:
    setup_logging("DEBUG", None)
    get_logger("jqlive.test").warning("quiet")
    captured = capsys.readouterr()
    assert "quiet" not in captured.err
    assert all(isinstance(h, logging.NullHandler) for h in logging.getLogger("jqlive").handlers)
