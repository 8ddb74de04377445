import pytest

from docpolicy.redaction.exceptions import PolicyInputError
from docpolicy.redaction.models import Field, FieldKind, MaskedField


class TestFieldKindParse:
    def test_returns_member_unchanged(self) -> None:
        assert FieldKind.parse(FieldKind.EMAIL) is FieldKind.EMAIL

    def test_parses_value_case_insensitive(self) -> None:
        assert FieldKind.parse(" Phone ") is FieldKind.PHONE

    def test_id_alias_maps_to_identifier(self) -> None:
        assert FieldKind.parse("id") is FieldKind.IDENTIFIER

    def test_unknown_kind_raises_policy_input_error(self) -> None:
        with pytest.raises(PolicyInputError, match="Unknown field kind"):
            FieldKind.parse("ssn")

    def test_policy_input_error_is_value_error(self) -> None:
        assert issubclass(PolicyInputError, ValueError)


class TestFieldModels:
    def test_field_is_frozen(self) -> None:
        field = Field(FieldKind.NAME, "John Doe")
        with pytest.raises(AttributeError):
            field.raw_value = "Jane"  # type: ignore[misc]

    def test_masked_field_key_prefers_label(self) -> None:
        assert MaskedField(FieldKind.PHONE, "x", label="guardian_phone").key == "guardian_phone"

    def test_masked_field_key_falls_back_to_kind(self) -> None:
        assert MaskedField(FieldKind.PHONE, "x").key == "phone"
