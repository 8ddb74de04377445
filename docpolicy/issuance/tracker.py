from docpolicy.issuance.base import BaseIssuanceStore
from docpolicy.logging.logger import Log


class IssuanceTracker:
    """Counts issuances per document identity and decides masking.

    The first issuance of a series is full; every later one is masked
    until the series is reset.
    """

    def __init__(self, store: BaseIssuanceStore) -> None:
        self._store = store

    def record(self, document_id: str) -> int:
        """Increment and return the issuance count for *document_id*."""
        self._validate(document_id)
        count = self._store.increment(document_id)
        Log.debug(f"Issuance {count} recorded for document {document_id}")
        return count

    def reset(self, document_id: str) -> None:
        """Start a fresh series so the next ``record`` returns 1."""
        self._validate(document_id)
        self._store.remove(document_id)
        Log.info(f"Issuance series reset for document {document_id}")

    def peek(self, document_id: str) -> int:
        self._validate(document_id)
        return self._store.get(document_id)

    @staticmethod
    def is_masked(count: int) -> bool:
        return count > 1

    @staticmethod
    def _validate(document_id: str) -> None:
        if not document_id:
            raise ValueError("document_id must be a non-empty string")
