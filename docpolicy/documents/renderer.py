from abc import ABC, abstractmethod

from docpolicy.documents.models import IssuedDocument


class RendererError(Exception):
    """Raised when a renderer cannot produce the document artifact."""


class BaseRenderer(ABC):
    """Contract for document renderers (PDF, HTML, print)."""

    @abstractmethod
    def render(self, document: IssuedDocument) -> bytes:
        """Produce the downloadable or printable artifact.

        Args:
            document: Already-resolved fields plus the masked flag and
                      filename. When ``document.masked`` is true the
                      fields carry no raw PII and a watermark may be drawn.

        Returns:
            Raw artifact bytes.

        Raises:
            RendererError: on any failure.
        """
