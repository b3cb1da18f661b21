"""Core error taxonomy and shared payload base for wcif-types.

Every parser in the library either returns a fully typed value or raises one
of the exceptions below. They all derive from :class:`WcifTypesError`, which
is itself a ``ValueError`` so that the parsers can be used as pydantic
validators and surface as ``pydantic.ValidationError`` there.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel


class WcifTypesError(ValueError):
    """Base exception for all library errors."""
    pass


class UnknownEventType(WcifTypesError):
    """Raised when an identifier is not in the event/puzzle vocabulary."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown event type: {value!r}")


class InvalidAttemptResult(WcifTypesError):
    """Raised when an integer is outside the attempt-result range."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Invalid attempt result: {value!r}. "
            f"Expected a positive integer or one of 0 (skipped), "
            f"-1 (DNF), -2 (DNS)"
        )


class MalformedActivityCode(WcifTypesError):
    """Raised when an activity code violates the activity-code grammar."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Malformed activity code {value!r}: {reason}")


class MalformedIdentifier(WcifTypesError):
    """Raised when a WCA ID or assignment code cannot be parsed."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Malformed identifier {value!r}: {reason}")


@dataclass(frozen=True)
class FieldViolation:
    """A single rejected field inside an extension payload."""

    field: str
    message: str
    violation_type: str
    input_value: object = None


def field_violations(error: PydanticValidationError) -> Tuple[FieldViolation, ...]:
    """Flatten a pydantic ``ValidationError`` into wire-named violations.

    Field paths are dotted wire names with list indices, e.g.
    ``checkInOverrides.0.checkInTime``. Errors on the payload itself
    (not an object, say) get the path ``$``.
    """
    return tuple(
        FieldViolation(
            field=".".join(str(loc) for loc in item["loc"]) or "$",
            message=item["msg"],
            violation_type=item["type"],
            input_value=item.get("input"),
        )
        for item in error.errors()
    )


class ExtensionSchemaMismatch(WcifTypesError):
    """Raised when a registered extension decoder rejects a payload."""

    def __init__(
        self,
        namespace: str,
        field: str,
        violations: Tuple[FieldViolation, ...] = (),
    ) -> None:
        self.namespace = namespace
        self.field = field
        self.violations = violations
        detail = f" ({violations[0].message})" if violations else ""
        super().__init__(
            f"Extension {namespace!r} payload does not match its schema "
            f"at field {field!r}{detail}"
        )


class ExtensionPayload(BaseModel):
    """Base for typed extension payloads.

    Declared fields are populated only through their camelCase wire names.
    A snake_case key is not a declared field; like any other undeclared
    key it is kept verbatim as an extra, so re-serializing a payload gives
    back the same set of keys.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        extra="allow",
    )

    def to_wcif(self) -> Dict[str, Any]:
        """Serialize back to the wire form, emitting only keys that were set.

        Values come back in their declared type, so a ``float`` field read
        from an integer literal (``capacity: 1``) is written as ``1.0``.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
