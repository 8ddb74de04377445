from dataclasses import dataclass


@dataclass(frozen=True)
class IssuanceRecord:
    """Issuance counter for one document identity."""

    document_id: str
    count: int
