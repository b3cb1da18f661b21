"""Conformance test suite for wcif-types.

Run: pytest --pyargs wcif_types.conformance
"""
from wcif_types.conformance.loader import (
    FixtureCase,
    load_fixtures,
    load_manifest,
)
from wcif_types.conformance.pytest_helpers import (
    assert_activity_code_round_trips,
    assert_extension_conforms,
    assert_extension_fails,
    assert_fixture_case,
)
from wcif_types.conformance.validators import (
    ConformanceResult,
    ModelViolation,
    SchemaViolation,
    validate_extension,
)

__all__ = [
    "ConformanceResult",
    "FixtureCase",
    "ModelViolation",
    "SchemaViolation",
    "assert_activity_code_round_trips",
    "assert_extension_conforms",
    "assert_extension_fails",
    "assert_fixture_case",
    "load_fixtures",
    "load_manifest",
    "validate_extension",
]
