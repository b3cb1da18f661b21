"""Dual-layer validation for wcif-types extension payloads.

This module provides conformance validation combining:
1. Pydantic model validation (primary layer)
2. JSON Schema validation (optional secondary layer)

The validator gracefully degrades if jsonschema is unavailable, unless
strict=True is specified.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from wcif_types.extensions import BUILTIN_SPECS, ExtensionSpec
from wcif_types.models import field_violations
from wcif_types.schemas import load_namespace_schema


@dataclass(frozen=True)
class ModelViolation:
    """A violation detected by Pydantic model validation."""

    field: str
    message: str
    violation_type: str
    input_value: object


@dataclass(frozen=True)
class SchemaViolation:
    """A violation detected by JSON Schema validation."""

    json_path: str
    message: str
    validator: str
    validator_value: object
    schema_path: Tuple[Union[str, int], ...]


@dataclass(frozen=True)
class ConformanceResult:
    """Result of dual-layer conformance validation."""

    valid: bool
    model_violations: Tuple[ModelViolation, ...]
    schema_violations: Tuple[SchemaViolation, ...]
    schema_check_skipped: bool
    namespace: str


_SPECS_BY_NAMESPACE: Dict[str, ExtensionSpec] = {
    spec.namespace: spec for spec in BUILTIN_SPECS
}


def _validate_with_model(
    payload: Any,
    spec: ExtensionSpec,
) -> Tuple[ModelViolation, ...]:
    """Validate payload using the namespace's Pydantic model."""
    try:
        spec.model.model_validate(payload)
        return ()
    except PydanticValidationError as e:
        return tuple(
            ModelViolation(
                field=violation.field,
                message=violation.message,
                violation_type=violation.violation_type,
                input_value=violation.input_value,
            )
            for violation in field_violations(e)
        )


def _validate_with_schema(
    payload: Any,
    namespace: str,
    strict: bool,
) -> Tuple[Tuple[SchemaViolation, ...], bool]:
    """Validate payload using the committed JSON Schema.

    Returns:
        Tuple of (violations, skipped) where skipped indicates that
        validation did not run because jsonschema is missing.

    Raises:
        ImportError: If strict=True and jsonschema is unavailable.
    """
    try:
        from jsonschema import Draft202012Validator
    except ImportError:
        if strict:
            raise ImportError(
                "jsonschema is required for strict conformance validation. "
                "Install with: pip install 'wcif-types[conformance]'"
            )
        return ((), True)

    try:
        schema = load_namespace_schema(namespace)
    except (OSError, json.JSONDecodeError) as e:
        return (
            (
                SchemaViolation(
                    json_path="$",
                    message=f"Failed to load schema: {e}",
                    validator="schema_loading",
                    validator_value=namespace,
                    schema_path=(),
                ),
            ),
            False,
        )

    validator = Draft202012Validator(
        schema, format_checker=Draft202012Validator.FORMAT_CHECKER
    )
    violations = []
    for error in validator.iter_errors(payload):
        json_path = "$" + "".join(
            f"[{p}]" if isinstance(p, int) else f".{p}" for p in error.absolute_path
        )
        violations.append(
            SchemaViolation(
                json_path=json_path,
                message=error.message,
                validator=str(error.validator),
                validator_value=error.validator_value,
                schema_path=tuple(error.absolute_schema_path),
            )
        )
    return (tuple(violations), False)


def validate_extension(
    namespace: str,
    payload: Any,
    strict: bool = False,
) -> ConformanceResult:
    """Validate an extension payload against its contract.

    Unlike :func:`wcif_types.extensions.resolve_extension`, this collects
    every violation from both layers instead of stopping at the first.

    Args:
        namespace: A registered extension namespace, e.g.
            ``"groupifier.RoomConfiguration"``.
        payload: The JSON-decoded ``data`` value.
        strict: If True, require jsonschema and fail if unavailable.

    Returns:
        ConformanceResult with validation status and any violations found.

    Raises:
        ValueError: If namespace is not registered.
        ImportError: If strict=True and jsonschema is unavailable.
    """
    spec = _SPECS_BY_NAMESPACE.get(namespace)
    if spec is None:
        raise ValueError(
            f"Unknown extension namespace: {namespace!r}. "
            f"Known namespaces: {sorted(_SPECS_BY_NAMESPACE)}"
        )

    model_violations = _validate_with_model(payload, spec)
    schema_violations, schema_skipped = _validate_with_schema(
        payload, namespace, strict
    )

    valid = len(model_violations) == 0 and (
        len(schema_violations) == 0 or schema_skipped
    )

    return ConformanceResult(
        valid=valid,
        model_violations=model_violations,
        schema_violations=schema_violations,
        schema_check_skipped=schema_skipped,
        namespace=namespace,
    )
