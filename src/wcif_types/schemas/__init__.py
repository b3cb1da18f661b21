"""Committed JSON Schemas for the built-in extension payloads.

Every registered namespace has exactly one schema file, named after its
``ExtensionSpec.schema_name``: ``groupifier.RoomConfig`` is described by
``groupifier_room_config.schema.json``. The files are generated from the
payload models by :mod:`wcif_types.schemas.generate`.

Example:
    >>> from wcif_types.schemas import load_namespace_schema
    >>> load_namespace_schema("groupifier.RoomConfiguration")["required"]
    ['color']
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from wcif_types.extensions import BUILTIN_SPECS

SCHEMA_DIR = Path(__file__).parent
SCHEMA_SUFFIX = ".schema.json"

_SCHEMA_NAMES: Dict[str, str] = {spec.namespace: spec.schema_name for spec in BUILTIN_SPECS}


def schema_file_name(name: str) -> str:
    return f"{name}{SCHEMA_SUFFIX}"


def schema_name_for(namespace: str) -> str:
    """Schema name registered for a built-in extension namespace.

    Raises:
        ValueError: If the namespace has no built-in payload model.
    """
    try:
        return _SCHEMA_NAMES[namespace]
    except KeyError:
        raise ValueError(
            f"Unknown extension namespace: {namespace!r}. "
            f"Known namespaces: {sorted(_SCHEMA_NAMES)}"
        ) from None


def schema_path(name: str) -> Path:
    """Path of the committed schema file for a schema name."""
    path = SCHEMA_DIR / schema_file_name(name)
    if not path.exists():
        raise FileNotFoundError(
            f"No schema found for '{name}'. Available: {list_schemas()}"
        )
    return path


def load_schema(name: str) -> Dict[str, Any]:
    """Load a committed schema by schema name, e.g. ``groupifier_room_config``."""
    result: Dict[str, Any] = json.loads(schema_path(name).read_text(encoding="utf-8"))
    return result


def load_namespace_schema(namespace: str) -> Dict[str, Any]:
    """Load the committed schema for an extension namespace.

    Raises:
        ValueError: If the namespace has no built-in payload model.
        FileNotFoundError: If its schema file has not been generated.
    """
    return load_schema(schema_name_for(namespace))


def list_schemas() -> List[str]:
    """Names of all committed schema files, sorted."""
    return sorted(p.name[: -len(SCHEMA_SUFFIX)] for p in SCHEMA_DIR.glob(f"*{SCHEMA_SUFFIX}"))
