"""Per-kind redaction rules for masked document copies.

Every rule is pure: the same value and kind always give the same output,
and empty input is returned as-is. Unknown kinds never raise out of
``apply``; the raw value is returned and a warning is logged.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import ClassVar

from docpolicy.logging.logger import Log
from docpolicy.redaction.exceptions import PolicyInputError
from docpolicy.redaction.models import Field, FieldKind, MaskedField


class RedactionPolicy:
    """Stateless field-transform table keyed by ``FieldKind``."""

    _VISIBLE_TAIL: ClassVar[int] = 4
    _EMAIL_VISIBLE_HEAD: ClassVar[int] = 2
    _NAME_VISIBLE_HEAD: ClassVar[int] = 3
    _NAME_SUFFIX: ClassVar[str] = "***"

    def __init__(self, mask_token: str = "*****", mask_char: str = "*") -> None:
        self._mask_token = mask_token
        self._mask_char = mask_char
        self._rules: dict[FieldKind, Callable[[str], str]] = {
            FieldKind.PHONE: self._mask_tail,
            FieldKind.EMAIL: self._mask_email,
            FieldKind.ADDRESS: self._mask_address,
            FieldKind.IDENTIFIER: self._mask_tail,
            FieldKind.NAME: self._mask_name,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def apply(self, value: str | None, kind: FieldKind | str) -> str | None:
        """Return the masked form of *value* for the given field kind.

        Args:
            value: Raw field value. ``None`` and ``""`` are returned unchanged;
                   other non-string values (e.g. numeric phone numbers) are
                   masked as their ``str`` form.
            kind: A ``FieldKind`` or its string value (``id`` is accepted
                  as an alias for ``identifier``).

        Returns:
            The redacted string, or *value* itself when no stable redaction
            can be computed.
        """
        if not value:
            return value
        try:
            field_kind = FieldKind.parse(kind)
        except PolicyInputError as exc:
            Log.warning(f"Redaction skipped: {exc}")
            return value
        return self._rules[field_kind](str(value))

    def apply_field(self, field: Field) -> MaskedField:
        """Mask a single ``Field`` into a read-only ``MaskedField``."""
        return MaskedField(
            kind=field.kind,
            value=self.apply(field.raw_value, field.kind),
            label=field.label,
            masked=True,
        )

    def apply_all(self, fields: Iterable[Field]) -> list[MaskedField]:
        return [self.apply_field(f) for f in fields]

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def _mask_tail(self, value: str) -> str:
        """Keep the last four characters: ``9876543210`` -> ``******3210``."""
        if len(value) <= self._VISIBLE_TAIL:
            return value
        hidden = len(value) - self._VISIBLE_TAIL
        return self._mask_char * hidden + value[-self._VISIBLE_TAIL :]

    def _mask_email(self, value: str) -> str:
        local, sep, domain = value.partition("@")
        if not sep or not local or not domain:
            return value
        head = local[: self._EMAIL_VISIBLE_HEAD]
        padding = self._mask_char * max(0, len(local) - self._EMAIL_VISIBLE_HEAD)
        return f"{head}{padding}@{domain}"

    def _mask_address(self, value: str) -> str:
        segments = value.split(",")
        if len(segments) < 2:
            return self._mask_token
        locality = ", ".join(s.strip() for s in segments[-2:])
        return f"{self._mask_token}, {locality}"

    def _mask_name(self, value: str) -> str:
        tokens = value.split()
        if len(tokens) > 1:
            return f"{tokens[0]} {tokens[-1][0]}{self._NAME_SUFFIX}"
        # Whitespace-only input collapses to the empty token here.
        token = tokens[0] if tokens else ""
        if len(token) > self._NAME_VISIBLE_HEAD:
            return token[: self._NAME_VISIBLE_HEAD] + self._NAME_SUFFIX
        return token + self._NAME_SUFFIX
