from __future__ import annotations

import threading


class SessionState:
    """Per-session data shared between the UI thread and preview workers.

    Each input change takes a new generation number from `begin()`. A worker
    may only store its output through `accept()`, which rejects anything
    produced for a generation other than the latest one.
    """

    def __init__(self, document: str, jq_path: str) -> None:
        self._document = document
        self._jq_path = jq_path
        self._lock = threading.Lock()
        self._generation = 0
        self._result: str | None = None
        self._result_generation = 0

    @property
    def document(self) -> str:
        return self._document

    @property
    def jq_path(self) -> str:
        return self._jq_path

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    @property
    def result(self) -> str | None:
        with self._lock:
            return self._result

    @property
    def result_generation(self) -> int:
        with self._lock:
            return self._result_generation

    def begin(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def accept(self, generation: int, output: str) -> bool:
        with self._lock:
            if generation != self._generation:
                return False
            self._result = output
            self._result_generation = generation
            return True

    def reset(self) -> None:
        with self._lock:
            self._result = None
            self._result_generation = 0
