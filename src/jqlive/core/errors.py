from __future__ import annotations


class JqLiveError(Exception):
    """Base class for errors that end a jqlive session."""


class ConfigError(JqLiveError):
    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class InvalidDocumentError(JqLiveError):
    """Raised when the input document is rejected by jq's identity filter."""


class ClipboardUnavailable(JqLiveError):
    """Raised when no clipboard backend accepted the result."""
