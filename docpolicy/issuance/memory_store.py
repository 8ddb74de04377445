import threading

from docpolicy.issuance.base import BaseIssuanceStore
from docpolicy.issuance.models import IssuanceRecord


class InMemoryIssuanceStore(BaseIssuanceStore):
    """Process-local counters behind a single lock.

    State is lost when the process exits.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}
        self._lock = threading.Lock()

    def increment(self, document_id: str) -> int:
        with self._lock:
            count = self._counts.get(document_id, 0) + 1
            self._counts[document_id] = count
            return count

    def remove(self, document_id: str) -> None:
        with self._lock:
            self._counts.pop(document_id, None)

    def get(self, document_id: str) -> int:
        with self._lock:
            return self._counts.get(document_id, 0)

    def snapshot(self) -> list[IssuanceRecord]:
        with self._lock:
            items = sorted(self._counts.items())
        return [IssuanceRecord(document_id=k, count=v) for k, v in items]
