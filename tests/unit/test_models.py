"""Unit tests for the error taxonomy and the shared payload base."""

import pydantic
import pytest

from wcif_types import (
    ExtensionPayload,
    ExtensionSchemaMismatch,
    FieldViolation,
    InvalidAttemptResult,
    MalformedActivityCode,
    MalformedIdentifier,
    UnknownEventType,
    WcifTypesError,
)
from wcif_types.models import field_violations


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "error_class",
        [
            UnknownEventType,
            InvalidAttemptResult,
            MalformedActivityCode,
            MalformedIdentifier,
            ExtensionSchemaMismatch,
        ],
    )
    def test_subclasses_base(self, error_class: type) -> None:
        assert issubclass(error_class, WcifTypesError)
        assert issubclass(error_class, ValueError)

    def test_unknown_event_type(self) -> None:
        err = UnknownEventType("3x3")
        assert err.value == "3x3"
        assert str(err) == "Unknown event type: '3x3'"

    def test_invalid_attempt_result(self) -> None:
        err = InvalidAttemptResult(-7)
        assert err.value == -7
        assert "-7" in str(err)
        assert "-2 (DNS)" in str(err)

    def test_malformed_activity_code(self) -> None:
        err = MalformedActivityCode("333-g1", "group segment requires a round")
        assert err.value == "333-g1"
        assert err.reason == "group segment requires a round"
        assert str(err) == (
            "Malformed activity code '333-g1': group segment requires a round"
        )

    def test_malformed_identifier(self) -> None:
        err = MalformedIdentifier("2012park03", "bad name")
        assert (err.value, err.reason) == ("2012park03", "bad name")


class TestExtensionSchemaMismatch:
    def test_without_violations(self) -> None:
        err = ExtensionSchemaMismatch("groupifier.RoomConfig", "stations")
        assert err.namespace == "groupifier.RoomConfig"
        assert err.field == "stations"
        assert err.violations == ()
        assert str(err) == (
            "Extension 'groupifier.RoomConfig' payload does not match its schema "
            "at field 'stations'"
        )

    def test_first_violation_in_message(self) -> None:
        violation = FieldViolation(field="color", message="Field required", violation_type="missing")
        err = ExtensionSchemaMismatch("groupifier.RoomConfiguration", "color", (violation,))
        assert err.violations == (violation,)
        assert str(err).endswith("at field 'color' (Field required)")

    def test_field_violations_from_validation_error(self) -> None:
        with pytest.raises(pydantic.ValidationError) as exc_info:
            Banner.model_validate({"fontSize": "big"})
        violations = field_violations(exc_info.value)
        assert [v.field for v in violations] == ["headlineText", "fontSize"]
        assert violations[0].violation_type == "missing"
        assert violations[1].input_value == "big"

    def test_field_violations_root_path(self) -> None:
        with pytest.raises(pydantic.ValidationError) as exc_info:
            Banner.model_validate(["Finals"])
        (violation,) = field_violations(exc_info.value)
        assert violation.field == "$"
        assert violation.input_value == ["Finals"]

    def test_field_violation_frozen(self) -> None:
        violation = FieldViolation(field="a", message="b", violation_type="c")
        with pytest.raises(AttributeError):
            violation.field = "x"  # type: ignore[misc]


class Banner(ExtensionPayload):
    headline_text: str
    font_size: int = 12


class TestExtensionPayload:
    def test_camel_case_wire_names(self) -> None:
        banner = Banner.model_validate({"headlineText": "Finals", "fontSize": 20})
        assert banner.headline_text == "Finals"
        assert banner.to_wcif() == {"headlineText": "Finals", "fontSize": 20}

    def test_field_name_is_not_a_wire_name(self) -> None:
        with pytest.raises(pydantic.ValidationError) as exc_info:
            Banner.model_validate({"headline_text": "Finals"})
        assert exc_info.value.errors()[0]["loc"] == ("headlineText",)

    def test_field_name_keyword_becomes_extra(self) -> None:
        banner = Banner.model_validate({"headlineText": "Finals", "font_size": 20})
        assert banner.font_size == 12
        assert banner.to_wcif() == {"headlineText": "Finals", "font_size": 20}

    def test_unset_defaults_omitted(self) -> None:
        banner = Banner.model_validate({"headlineText": "Finals"})
        assert banner.font_size == 12
        assert "fontSize" not in banner.to_wcif()

    def test_extra_keys_allowed(self) -> None:
        banner = Banner.model_validate({"headlineText": "Finals", "vendorFlag": True})
        assert banner.model_extra == {"vendorFlag": True}
