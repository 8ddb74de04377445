from collections.abc import Callable, Iterable
from datetime import date
from typing import Any

from docpolicy.config.settings import Settings
from docpolicy.documents.identity import build_document_id
from docpolicy.documents.models import ActionType, DocumentPurpose, IssuedDocument
from docpolicy.issuance.factory import IssuanceStoreFactory
from docpolicy.issuance.tracker import IssuanceTracker
from docpolicy.logging.logger import Log
from docpolicy.naming.filename_composer import FilenameComposer
from docpolicy.redaction.models import Field, FieldKind, MaskedField
from docpolicy.redaction.policy import RedactionPolicy


class DocumentAssembler:
    """Resolves the fields, masked flag and filename for one issuance.

    Flow: reset (optional) -> record -> mask if repeat -> compose filename.
    Rendering is left to the caller.
    """

    def __init__(
        self,
        tracker: IssuanceTracker,
        policy: RedactionPolicy,
        composer: FilenameComposer,
    ) -> None:
        self._tracker = tracker
        self._policy = policy
        self._composer = composer

    def issue(
        self,
        fields: Iterable[Field],
        document_id: str,
        reset_first: bool = False,
        force_masked: bool = False,
        filename_prefix: str = "",
    ) -> IssuedDocument:
        """Issue one copy of *document_id*.

        Args:
            fields: Raw entity fields from the record store. Not mutated.
            document_id: Issuance key, see ``build_document_id``.
            reset_first: Start a fresh series first. Pass ``True`` once,
                         right after the source entity is created or edited.
            force_masked: Mask this copy even when it is the first issuance.
            filename_prefix: Constant prepended to the filename.

        Returns:
            IssuedDocument with resolved fields, masked flag and filename.
        """
        fields = list(fields)
        if reset_first:
            self._tracker.reset(document_id)

        count = self._tracker.record(document_id)
        masked = IssuanceTracker.is_masked(count) or force_masked

        if masked:
            resolved = tuple(self._mask(f, document_id) for f in fields)
        else:
            resolved = tuple(self._passthrough(f) for f in fields)

        filename = self._composer.compose(
            self._first_value(resolved, FieldKind.NAME),
            self._first_value(fields, FieldKind.IDENTIFIER),
            masked_suffix=masked,
            prefix=filename_prefix,
        )
        Log.info(
            f"Issued document {document_id}: copy {count}, "
            f"{'masked' if masked else 'full'}, {len(resolved)} fields"
        )
        return IssuedDocument(
            resolved_fields=resolved,
            masked=masked,
            filename=filename,
            count=count,
            document_id=document_id,
        )

    def issue_for(
        self,
        subject_id: str | int,
        purpose: DocumentPurpose | str,
        action: ActionType | str | None,
        fields: Iterable[Field],
        **kwargs: Any,
    ) -> IssuedDocument:
        """Derive the document id from subject, purpose and action, then issue."""
        document_id = build_document_id(subject_id, purpose, action)
        return self.issue(fields, document_id, **kwargs)

    def _mask(self, field: Field, document_id: str) -> MaskedField:
        try:
            return self._policy.apply_field(field)
        except Exception as exc:
            Log.error(
                f"Masking failed for {field.kind} field on document {document_id}: "
                f"{type(exc).__name__}"
            )
            return self._passthrough(field)

    @staticmethod
    def _passthrough(field: Field) -> MaskedField:
        return MaskedField(
            kind=field.kind,
            value=field.raw_value,
            label=field.label,
            masked=False,
        )

    @staticmethod
    def _first_value(fields: Iterable[Field | MaskedField], kind: FieldKind) -> str:
        for f in fields:
            try:
                if FieldKind.parse(f.kind) is not kind:
                    continue
            except ValueError:
                continue
            value = f.raw_value if isinstance(f, Field) else f.value
            return str(value) if value else ""
        return ""


def build_assembler(
    settings: Settings,
    clock: Callable[[], date] | None = None,
) -> DocumentAssembler:
    """Build a DocumentAssembler with the configured store and rules."""
    store = IssuanceStoreFactory.create(settings)
    return DocumentAssembler(
        tracker=IssuanceTracker(store),
        policy=RedactionPolicy(mask_token=settings.mask_token),
        composer=FilenameComposer(
            clock=clock,
            max_name_length=settings.filename_max_name_length,
            masked_marker=settings.masked_filename_marker,
        ),
    )
