"""Canonical fixture loading for wcif-types conformance testing.

Provides FixtureCase (frozen dataclass) and load_fixtures() for data-driven
conformance tests. Reads from the bundled manifest.json and fixture JSON files.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

_FIXTURES_DIR = Path(__file__).parent / "fixtures"
_MANIFEST_PATH = _FIXTURES_DIR / "manifest.json"

_VALID_CATEGORIES = frozenset({
    "event_ids", "attempt_results", "activity_codes", "extensions",
})


@dataclass(frozen=True)
class FixtureCase:
    """A single fixture test case loaded from the manifest.

    ``subject`` says what the payload is checked against: an extension
    namespace for ``extensions``, an event id for ``attempt_results``, and
    the value kind (``EventId``, ``ActivityCode``) otherwise.
    """

    id: str
    payload: Any
    expected_valid: bool
    subject: str
    notes: str


def load_manifest() -> Dict[str, Any]:
    """Return the parsed fixture manifest."""
    with open(_MANIFEST_PATH, "r", encoding="utf-8") as fh:
        manifest: Dict[str, Any] = json.load(fh)
    return manifest


def load_fixtures(category: str) -> List[FixtureCase]:
    """Load canonical fixture cases for a category.

    Args:
        category: One of ``"event_ids"``, ``"attempt_results"``,
            ``"activity_codes"`` or ``"extensions"``.

    Returns:
        List of :class:`FixtureCase` instances with payloads loaded from JSON.

    Raises:
        ValueError: If *category* is not one of the recognised categories.
        FileNotFoundError: If a referenced fixture file is missing.
    """
    if category not in _VALID_CATEGORIES:
        raise ValueError(
            f"Unknown fixture category: {category!r}. "
            f"Valid categories: {sorted(_VALID_CATEGORIES)}"
        )

    fixtures: List[FixtureCase] = []
    for entry in load_manifest()["fixtures"]:
        fixture_path: str = entry["path"]
        if not fixture_path.startswith(category + "/"):
            continue

        full_path = _FIXTURES_DIR / fixture_path
        if not full_path.exists():
            raise FileNotFoundError(
                f"Fixture file referenced in manifest does not exist: {full_path}"
            )

        with open(full_path, "r", encoding="utf-8") as fh:
            payload: Any = json.load(fh)

        fixtures.append(
            FixtureCase(
                id=entry["id"],
                payload=payload,
                expected_valid=entry["expected_result"] == "valid",
                subject=entry["subject"],
                notes=entry["notes"],
            )
        )

    return fixtures
