from docpolicy.documents.models import ActionType, DocumentPurpose


def build_document_id(
    subject_id: str | int,
    purpose: DocumentPurpose | str,
    action: ActionType | str | None = None,
) -> str:
    """Derive the issuance key for one logical document.

    ``build_document_id("patient_001", "receipt", "download")`` gives
    ``patient_001_receipt_download``. Download and print keep separate series.
    """
    subject = str(subject_id).strip()
    if not subject:
        raise ValueError("subject_id must be a non-empty value")
    parts = [subject, DocumentPurpose(purpose).value]
    if action is not None:
        parts.append(ActionType(action).value)
    return "_".join(parts)


def compose_subject_name(
    title: str | None = None,
    first_name: str | None = None,
    last_name: str | None = None,
) -> str:
    """Join the non-empty name parts with single spaces."""
    parts = (title, first_name, last_name)
    return " ".join(p.strip() for p in parts if p and p.strip())
