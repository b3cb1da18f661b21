"""Conformance test suite for wcif-types.

Run: pytest --pyargs wcif_types.conformance
"""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest

from wcif_types.conformance.loader import FixtureCase, load_fixtures
from wcif_types.conformance.pytest_helpers import (
    assert_activity_code_round_trips,
    assert_fixture_case,
)
from wcif_types.conformance.validators import validate_extension
from wcif_types.events import EventId, all_events, classify_event
from wcif_types.extensions import BUILTIN_SPECS, resolve_extension
from wcif_types.schemas import list_schemas, load_schema


_CATEGORIES = ("event_ids", "activity_codes", "attempt_results", "extensions")


def _fixture_params() -> List[Tuple[str, FixtureCase]]:
    return [
        (category, case)
        for category in _CATEGORIES
        for case in load_fixtures(category)
    ]


def _fixture_ids() -> List[str]:
    return [case.id for _, case in _fixture_params()]


# --- Manifest-driven fixture tests ---


@pytest.mark.parametrize("category,case", _fixture_params(), ids=_fixture_ids())
def test_fixture_conformance(category: str, case: FixtureCase) -> None:
    """Each bundled fixture validates (or fails) as its manifest says."""
    assert_fixture_case(category, case)


def test_manifest_covers_every_category(manifest: Dict[str, Any]) -> None:
    prefixes = {entry["path"].split("/", 1)[0] for entry in manifest["fixtures"]}
    assert prefixes == set(_CATEGORIES)


def test_manifest_ids_unique(manifest: Dict[str, Any]) -> None:
    ids = [entry["id"] for entry in manifest["fixtures"]]
    assert len(ids) == len(set(ids))


def test_every_namespace_has_valid_fixture() -> None:
    covered = {case.subject for case in load_fixtures("extensions") if case.expected_valid}
    assert covered == {spec.namespace for spec in BUILTIN_SPECS}


# --- Valid extension fixtures resolve to typed payloads ---


@pytest.mark.parametrize(
    "case",
    [case for case in load_fixtures("extensions") if case.expected_valid],
    ids=lambda case: case.id,
)
def test_valid_extension_fixture_resolves(case: FixtureCase) -> None:
    resolved = resolve_extension(case.subject, case.payload)
    assert resolved.namespace == case.subject
    assert validate_extension(case.subject, case.payload).model_violations == ()


# --- Vocabulary completeness ---


@pytest.mark.parametrize("event", all_events(), ids=[e.value for e in all_events()])
def test_every_event_classifies_to_itself(event: EventId) -> None:
    assert classify_event(event.value) is event


@pytest.mark.parametrize("event", all_events(), ids=[e.value for e in all_events()])
def test_every_round_id_round_trips(event: EventId) -> None:
    assert_activity_code_round_trips(f"{event.value}-r1")


# --- Schema integrity tests ---


def test_all_schemas_present() -> None:
    """A committed schema exists for every registered namespace."""
    assert set(list_schemas()) == {spec.schema_name for spec in BUILTIN_SPECS}


@pytest.mark.parametrize("name", list_schemas())
def test_schema_is_valid_json_schema(name: str) -> None:
    """Each schema file is a JSON Schema document with an identity."""
    schema = load_schema(name)
    assert "$schema" in schema
    assert schema["$id"] == f"wcif-types/{name}"
