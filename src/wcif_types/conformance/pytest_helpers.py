"""Reusable test helpers for wcif-types conformance testing.

Consumers can import these to write their own conformance assertions:
    from wcif_types.conformance.pytest_helpers import (
        assert_extension_conforms,
        assert_extension_fails,
        assert_activity_code_round_trips,
    )
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List

from wcif_types.activity_code import parse_activity_code
from wcif_types.conformance.loader import FixtureCase
from wcif_types.conformance.validators import (
    ConformanceResult,
    validate_extension,
)
from wcif_types.events import ResultUnit, classify_event
from wcif_types.models import WcifTypesError
from wcif_types.results import decode_attempt_result


def assert_extension_conforms(
    payload: Any,
    namespace: str,
    *,
    strict: bool = False,
) -> ConformanceResult:
    """Assert a payload conforms to the namespace's contract."""
    result = validate_extension(namespace, payload, strict=strict)
    if not result.valid:
        violations = []
        for mv in result.model_violations:
            violations.append(f"  Model: {mv.field}: {mv.message}")
        for sv in result.schema_violations:
            violations.append(f"  Schema: {sv.json_path}: {sv.message}")
        raise AssertionError(
            f"Payload for {namespace!r} failed conformance:\n"
            + "\n".join(violations)
        )
    return result


def assert_extension_fails(
    payload: Any,
    namespace: str,
    *,
    strict: bool = False,
) -> ConformanceResult:
    """Assert a payload DOES NOT conform (expected invalid)."""
    result = validate_extension(namespace, payload, strict=strict)
    if result.valid:
        raise AssertionError(
            f"Payload for {namespace!r} was expected to fail but passed conformance."
        )
    return result


def assert_activity_code_round_trips(code: str) -> None:
    """Assert a code parses and serializes back to the same string."""
    rendered = parse_activity_code(code).to_wcif()
    assert rendered == code, f"Expected {code!r} to round-trip, got {rendered!r}"


def _check_event_id(value: Any, subject: str) -> None:
    classify_event(value)


def _check_activity_code(value: Any, subject: str) -> None:
    assert_activity_code_round_trips(value)


def _check_attempt_result(value: Any, subject: str) -> None:
    result = decode_attempt_result(value, classify_event(subject))
    if result.is_solved and result.unit is ResultUnit.POINTS:
        result.multi_blind()
    assert result.to_wcif() == value


_VALUE_CHECKS: Dict[str, Callable[[Any, str], None]] = {
    "event_ids": _check_event_id,
    "activity_codes": _check_activity_code,
    "attempt_results": _check_attempt_result,
}


def assert_fixture_case(category: str, case: FixtureCase) -> None:
    """Assert a manifest fixture validates (or fails) as the manifest says.

    Value fixtures hold a list of raw values; every value must pass when
    the case is valid and every value must be rejected when it is invalid.
    """
    if category == "extensions":
        if case.expected_valid:
            assert_extension_conforms(case.payload, case.subject)
        else:
            assert_extension_fails(case.payload, case.subject)
        return

    check = _VALUE_CHECKS[category]
    values: List[Any] = case.payload
    for value in values:
        try:
            check(value, case.subject)
        except WcifTypesError:
            if case.expected_valid:
                raise
            continue
        if not case.expected_valid:
            raise AssertionError(
                f"Fixture {case.id}: {value!r} was expected to be rejected"
            )
