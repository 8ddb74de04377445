from dataclasses import dataclass
from enum import Enum

from docpolicy.redaction.exceptions import PolicyInputError


class FieldKind(str, Enum):
    """PII field kind selecting which redaction rule applies."""

    NAME = "name"
    PHONE = "phone"
    EMAIL = "email"
    ADDRESS = "address"
    IDENTIFIER = "identifier"

    @classmethod
    def parse(cls, value: "FieldKind | str") -> "FieldKind":
        """Resolve an enum member, its value, or the legacy ``id`` alias."""
        if isinstance(value, FieldKind):
            return value
        normalized = str(value).strip().lower()
        if normalized == "id":
            return cls.IDENTIFIER
        try:
            return cls(normalized)
        except ValueError as exc:
            raise PolicyInputError(
                f"Unknown field kind '{value}'. Choose from: {[k.value for k in cls]}"
            ) from exc


@dataclass(frozen=True)
class Field:
    """Raw entity field supplied by the record store."""

    kind: FieldKind | str
    raw_value: str | None
    label: str = ""  # e.g. "phone", "guardian_phone"


@dataclass(frozen=True)
class MaskedField:
    """Resolved field handed to the renderer. Never written back."""

    kind: FieldKind | str
    value: str | None
    label: str = ""
    masked: bool = False

    @property
    def key(self) -> str:
        if self.label:
            return self.label
        return self.kind.value if isinstance(self.kind, FieldKind) else str(self.kind)
