from dataclasses import dataclass
from enum import Enum
from typing import Any

from docpolicy.redaction.models import FieldKind, MaskedField


class DocumentPurpose(str, Enum):
    """Kind of document produced from a clinical or financial record."""

    RECEIPT = "receipt"
    TEMPLATE = "template"
    PATIENT_CARD = "patient_card"
    INVOICE = "invoice"
    PHARMACY_BILL = "pharmacy_bill"
    LAB_REPORT = "lab_report"
    CONSULTATION_SUMMARY = "consultation_summary"


class ActionType(str, Enum):
    DOWNLOAD = "download"
    PRINT = "print"


@dataclass(frozen=True)
class IssuedDocument:
    """Policy output passed to the renderer."""

    resolved_fields: tuple[MaskedField, ...]
    masked: bool
    filename: str
    count: int
    document_id: str

    def field(self, key: str) -> MaskedField | None:
        """Return the first field whose label, or kind, equals *key*."""
        for resolved in self.resolved_fields:
            if resolved.label == key:
                return resolved
        for resolved in self.resolved_fields:
            kind = resolved.kind.value if isinstance(resolved.kind, FieldKind) else resolved.kind
            if kind == key:
                return resolved
        return None

    def as_dict(self) -> dict[str, Any]:
        """Renderer payload. Fields are listed in issue order; keys may repeat."""
        return {
            "resolved_fields": [
                {
                    "key": f.key,
                    "kind": f.kind.value if isinstance(f.kind, FieldKind) else f.kind,
                    "value": f.value,
                    "masked": f.masked,
                }
                for f in self.resolved_fields
            ],
            "masked": self.masked,
            "filename": self.filename,
        }
