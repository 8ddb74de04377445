import io
from datetime import date

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from docpolicy.documents.assembler import DocumentAssembler
from docpolicy.documents.issuer import title_for
from docpolicy.documents.models import IssuedDocument
from docpolicy.documents.renderer import BaseRenderer
from docpolicy.issuance.memory_store import InMemoryIssuanceStore
from docpolicy.issuance.tracker import IssuanceTracker
from docpolicy.naming.filename_composer import FilenameComposer
from docpolicy.redaction.models import Field, FieldKind
from docpolicy.redaction.policy import RedactionPolicy


class CanvasRenderer(BaseRenderer):
    """Minimal receipt renderer: one line per field, watermark when masked."""

    def __init__(self) -> None:
        self.rendered: list[IssuedDocument] = []

    def render(self, document: IssuedDocument) -> bytes:
        self.rendered.append(document)
        buf = io.BytesIO()
        c = canvas.Canvas(buf, pagesize=A4)
        c.drawString(72, 780, title_for("Registration Receipt", document.masked))
        y = 750
        for resolved in document.resolved_fields:
            c.drawString(72, y, f"{resolved.key}: {resolved.value or 'N/A'}")
            y -= 18
        if document.masked:
            c.saveState()
            c.translate(300, 420)
            c.rotate(45)
            c.drawCentredString(0, 0, "MASKED COPY")
            c.restoreState()
        c.save()
        return buf.getvalue()


@pytest.fixture()
def fixed_clock():  # type: ignore[no-untyped-def]
    return lambda: date(2024, 5, 1)


@pytest.fixture()
def tracker() -> IssuanceTracker:
    return IssuanceTracker(InMemoryIssuanceStore())


@pytest.fixture()
def assembler(tracker: IssuanceTracker, fixed_clock) -> DocumentAssembler:  # type: ignore[no-untyped-def]
    return DocumentAssembler(
        tracker=tracker,
        policy=RedactionPolicy(),
        composer=FilenameComposer(clock=fixed_clock),
    )


@pytest.fixture()
def canvas_renderer() -> CanvasRenderer:
    return CanvasRenderer()


@pytest.fixture()
def patient_fields() -> list[Field]:
    return [
        Field(FieldKind.NAME, "John Doe", label="name"),
        Field(FieldKind.IDENTIFIER, "P-2024-0001", label="uhid"),
        Field(FieldKind.PHONE, "9876543210", label="phone"),
        Field(FieldKind.EMAIL, "john.doe@example.com", label="email"),
        Field(
            FieldKind.ADDRESS,
            "12, MG Road, Blue Town, Springfield, State - 500001",
            label="address",
        ),
    ]
