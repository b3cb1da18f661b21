"""Build-time JSON Schema generation script for wcif-types extension payloads."""
from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Type

from pydantic import BaseModel

from wcif_types.extensions import BUILTIN_SPECS
from wcif_types.schemas import SCHEMA_DIR, SCHEMA_SUFFIX, schema_file_name

# Registry of payload models to generate schemas for
PYDANTIC_MODELS: List[tuple[str, Type[BaseModel]]] = [
    (spec.schema_name, spec.model) for spec in BUILTIN_SPECS
]


def generate_schema(name: str, model: Type[BaseModel]) -> Dict[str, Any]:
    """Generate JSON Schema for a payload model.

    Args:
        name: Schema name for $id field
        model: Pydantic model class

    Returns:
        JSON Schema dict with $schema and $id fields
    """
    schema = model.model_json_schema(mode="serialization", by_alias=True)
    schema["$schema"] = "https://json-schema.org/draft/2020-12/schema"
    schema["$id"] = f"wcif-types/{name}"
    return schema


def schema_to_json(schema: Dict[str, Any]) -> str:
    """Serialize schema to deterministic JSON string with trailing newline."""
    return json.dumps(schema, indent=2, sort_keys=True) + "\n"


def write_schema_file(name: str, schema: Dict[str, Any]) -> None:
    """Write schema to its committed file in the schemas package."""
    path = SCHEMA_DIR / schema_file_name(name)
    path.write_text(schema_to_json(schema), encoding="utf-8")
    print(f"Generated {path}")


def generate_all_schemas() -> Dict[str, Dict[str, Any]]:
    """Generate all schemas, keyed by schema name."""
    return {name: generate_schema(name, model) for name, model in PYDANTIC_MODELS}


def check_drift() -> int:
    """Check if generated schemas match committed files.

    Returns:
        0 if all schemas match, 1 if any drift detected
    """
    schemas = generate_all_schemas()
    drift_detected = False

    for name, schema in schemas.items():
        path = SCHEMA_DIR / schema_file_name(name)
        expected_content = schema_to_json(schema)

        if not path.exists():
            print(f"ERROR: Missing schema file: {path}", file=sys.stderr)
            drift_detected = True
            continue

        actual_content = path.read_text(encoding="utf-8")
        if actual_content != expected_content:
            print(f"ERROR: Schema drift detected in {path}", file=sys.stderr)
            print("--- Expected", file=sys.stderr)
            print(expected_content, file=sys.stderr)
            print("--- Actual", file=sys.stderr)
            print(actual_content, file=sys.stderr)
            drift_detected = True

    expected_files = {schema_file_name(name) for name in schemas}
    actual_files = {p.name for p in SCHEMA_DIR.glob(f"*{SCHEMA_SUFFIX}")}
    for orphan in sorted(actual_files - expected_files):
        print(f"Orphaned schema {orphan}", file=sys.stderr)
        drift_detected = True

    if drift_detected:
        print("\nSchema drift detected. Run without --check to regenerate.", file=sys.stderr)
        return 1

    print(f"All {len(schemas)} schemas are up to date.")
    return 0


def main() -> int:
    """Entry point. Returns 0 for success, 1 for drift."""
    parser = argparse.ArgumentParser(
        description="Generate JSON schemas for wcif-types extension payloads"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Check for schema drift without writing files (CI mode)",
    )
    args = parser.parse_args()

    if args.check:
        return check_drift()

    schemas = generate_all_schemas()
    for name, schema in schemas.items():
        write_schema_file(name, schema)
    print(f"\nSuccessfully generated {len(schemas)} schemas.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
