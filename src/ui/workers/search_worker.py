# ui/workers/search_worker.py
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QThread, QTimer, Signal

from catalog.formatter import search_formatted
from core.errors import TrackSearchError
from core.utils import collapse

logger = logging.getLogger(__name__)


class QueryGate:
    """Caller-side filter: too-short queries never reach the catalog."""

    def __init__(self, min_length: int = 2, debounce_ms: int = 300):
        self.min_length = max(0, int(min_length))
        self.debounce_ms = max(0, int(debounce_ms))

    def normalize(self, term: str) -> str:
        return collapse(term or "")

    def accepts(self, term: str) -> bool:
        return len(self.normalize(term)) >= self.min_length


class SearchWorker(QThread):
    results = Signal(int, object)   # generation, list[Candidate]
    failed = Signal(int, str)       # generation, message

    def __init__(self, client, term: str, generation: int, parent=None):
        super().__init__(parent)
        self.client = client
        self.term = term
        self.generation = generation

    def run(self):
        try:
            candidates = search_formatted(self.term, self.client)
        except TrackSearchError as e:
            self.failed.emit(self.generation, str(e))
            return
        self.results.emit(self.generation, candidates)


class SearchCoordinator(QObject):
    """
    Debounces keystrokes and keeps only the newest query's answer.

    Every accepted term gets a fresh generation number. In-flight workers are
    not cancelled; when an older worker finishes after a newer query was
    issued its result is dropped.
    """

    candidates_ready = Signal(object)   # list[Candidate]
    search_failed = Signal(str)

    def __init__(self, client, gate: QueryGate | None = None, parent=None):
        super().__init__(parent)
        self.client = client
        self.gate = gate or QueryGate()
        self.generation = 0
        self._pending_term: str | None = None
        self._workers: set[SearchWorker] = set()

        self._debounce = QTimer(self)
        self._debounce.setSingleShot(True)
        self._debounce.setInterval(self.gate.debounce_ms)
        self._debounce.timeout.connect(self._fire)

    @classmethod
    def from_config(cls, client, config, parent=None) -> "SearchCoordinator":
        gate = QueryGate(min_length=config.min_query_length, debounce_ms=config.debounce_ms)
        return cls(client, gate=gate, parent=parent)

    def submit(self, term: str) -> bool:
        """
        Feed the current input text. Returns False when the gate rejects it;
        a rejected term still invalidates whatever search is in flight.
        """
        if not self.gate.accepts(term):
            self._debounce.stop()
            self._pending_term = None
            self.generation += 1
            return False

        self._pending_term = self.gate.normalize(term)
        self._debounce.start()
        return True

    def _fire(self) -> None:
        term = self._pending_term
        self._pending_term = None
        if term is None:
            return

        self.generation += 1
        worker = SearchWorker(self.client, term, self.generation)
        worker.results.connect(self._on_results)
        worker.failed.connect(self._on_failed)
        worker.finished.connect(lambda w=worker: self._workers.discard(w))
        self._workers.add(worker)
        logger.debug("Starting search #%d for %r", self.generation, term)
        worker.start()

    def _is_stale(self, generation: int) -> bool:
        if generation != self.generation:
            logger.debug("Dropping stale search #%d (latest is #%d)", generation, self.generation)
            return True
        return False

    def _on_results(self, generation: int, candidates) -> None:
        if not self._is_stale(generation):
            self.candidates_ready.emit(candidates)

    def _on_failed(self, generation: int, message: str) -> None:
        if not self._is_stale(generation):
            self.search_failed.emit(message)
