from collections.abc import Iterable
from typing import Any

from docpolicy.documents.assembler import DocumentAssembler
from docpolicy.documents.models import IssuedDocument
from docpolicy.documents.renderer import BaseRenderer, RendererError
from docpolicy.logging.logger import Log
from docpolicy.redaction.models import Field


def title_for(base_title: str, masked: bool) -> str:
    """``Registration Receipt`` -> ``Registration Receipt (Masked Copy)`` when masked."""
    return f"{base_title} (Masked Copy)" if masked else base_title


class DocumentIssuer:
    """Caller-side glue: assemble the policy output, then render it.

    A render failure does not roll back the issuance count, so a retry
    is issued as a masked copy.
    """

    def __init__(self, assembler: DocumentAssembler, renderer: BaseRenderer) -> None:
        self._assembler = assembler
        self._renderer = renderer

    def issue(
        self,
        fields: Iterable[Field],
        document_id: str,
        **kwargs: Any,
    ) -> tuple[IssuedDocument, bytes]:
        document = self._assembler.issue(fields, document_id, **kwargs)
        try:
            artifact = self._renderer.render(document)
        except RendererError:
            Log.error(f"Rendering failed for document {document_id} copy {document.count}")
            raise
        except Exception as exc:
            Log.error(
                f"Rendering failed for document {document_id} copy {document.count}: "
                f"{type(exc).__name__}"
            )
            raise RendererError(f"Rendering failed: {exc}") from exc

        Log.info(
            f"Rendered document {document_id} copy {document.count}: "
            f"{len(artifact)} bytes"
        )
        return document, artifact
