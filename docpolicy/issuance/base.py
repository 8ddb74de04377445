from abc import ABC, abstractmethod

from docpolicy.issuance.models import IssuanceRecord


class BaseIssuanceStore(ABC):
    """Contract for issuance counter storage backends."""

    @abstractmethod
    def increment(self, document_id: str) -> int:
        """Atomically add one to the counter for *document_id*.

        Returns:
            The new count. A missing key starts at 1.
        """

    @abstractmethod
    def remove(self, document_id: str) -> None:
        """Delete the counter for *document_id*. Unknown keys are ignored."""

    @abstractmethod
    def get(self, document_id: str) -> int:
        """Return the current count without mutating it (0 when absent)."""

    @abstractmethod
    def snapshot(self) -> list[IssuanceRecord]:
        """Return every tracked counter, ordered by document id."""
