"""
wcif-types: typed values for the WCA Competition Interchange Format (WCIF).

This library turns the weakly typed primitives of a WCIF document (event ids,
attempt-result integers, activity codes, extension payloads) into validated,
immutable domain values, and serializes them back to the exact wire form.

Example:
    >>> from wcif_types import EventId, decode_attempt_result, format_attempt_result
    >>> from wcif_types import parse_activity_code
    >>> parse_activity_code("333-r1-g2").group
    2
    >>> format_attempt_result(decode_attempt_result(4059, EventId.CUBE_333))
    '40.59'

Versioning Notes (1.0.0):
    Extension payload models carry SCHEMA_VERSION = "1.0" for both the
    Groupifier and Delegate Dashboard namespaces. Committed JSON Schemas are
    available via ``wcif_types.schemas.load_schema()``; conformance fixtures
    via ``wcif_types.conformance.load_fixtures()``.
"""

__version__ = "1.0.0"

# Errors and shared payload base
from wcif_types.models import (
    WcifTypesError,
    UnknownEventType,
    InvalidAttemptResult,
    MalformedActivityCode,
    MalformedIdentifier,
    ExtensionSchemaMismatch,
    FieldViolation,
    ExtensionPayload,
)

# Event vocabulary
from wcif_types.events import (
    EventId,
    PuzzleType,
    ResultUnit,
    EventInfo,
    EVENT_TABLE,
    classify_event,
    classify_puzzle,
    event_info,
    puzzle_type_of,
    result_unit_of,
    all_events,
    official_events,
)

# Attempt results
from wcif_types.results import (
    AttemptStatus,
    ResultType,
    AttemptResult,
    MultiBlindResult,
    SKIPPED_VALUE,
    DNF_VALUE,
    DNS_VALUE,
    decode_attempt_result,
    decode_multi_blind,
    encode_multi_blind,
    format_attempt_result,
)

# Activity codes
from wcif_types.activity_code import (
    ActivityCode,
    EventActivityCode,
    OtherActivityCode,
    OtherActivityCategory,
    parse_activity_code,
    parse_round_id,
)

# Identifiers
from wcif_types.identifiers import (
    WcaId,
    StaffRole,
    AssignmentCode,
    parse_wca_id,
    parse_assignment_code,
)

# Extensions
from wcif_types.extensions import (
    Extension,
    ExtensionSpec,
    ExtensionResolver,
    ResolvedExtension,
    UnrecognizedExtension,
    BUILTIN_SPECS,
    DEFAULT_RESOLVER,
    resolve_extension,
    resolve_extension_node,
)

# Pydantic field types
from wcif_types.fields import (
    WcifEventId,
    WcifActivityCode,
    WcifRoundId,
    WcifWcaId,
    WcifAssignmentCode,
    attempt_result_field,
)

# Public API (controls what's exported with "from wcif_types import *")
__all__ = [
    # Version
    "__version__",
    # Exceptions
    "WcifTypesError",
    "UnknownEventType",
    "InvalidAttemptResult",
    "MalformedActivityCode",
    "MalformedIdentifier",
    "ExtensionSchemaMismatch",
    "FieldViolation",
    "ExtensionPayload",
    # Events
    "EventId",
    "PuzzleType",
    "ResultUnit",
    "EventInfo",
    "EVENT_TABLE",
    "classify_event",
    "classify_puzzle",
    "event_info",
    "puzzle_type_of",
    "result_unit_of",
    "all_events",
    "official_events",
    # Attempt results
    "AttemptStatus",
    "ResultType",
    "AttemptResult",
    "MultiBlindResult",
    "SKIPPED_VALUE",
    "DNF_VALUE",
    "DNS_VALUE",
    "decode_attempt_result",
    "decode_multi_blind",
    "encode_multi_blind",
    "format_attempt_result",
    # Activity codes
    "ActivityCode",
    "EventActivityCode",
    "OtherActivityCode",
    "OtherActivityCategory",
    "parse_activity_code",
    "parse_round_id",
    # Identifiers
    "WcaId",
    "StaffRole",
    "AssignmentCode",
    "parse_wca_id",
    "parse_assignment_code",
    # Extensions
    "Extension",
    "ExtensionSpec",
    "ExtensionResolver",
    "ResolvedExtension",
    "UnrecognizedExtension",
    "BUILTIN_SPECS",
    "DEFAULT_RESOLVER",
    "resolve_extension",
    "resolve_extension_node",
    # Field types
    "WcifEventId",
    "WcifActivityCode",
    "WcifRoundId",
    "WcifWcaId",
    "WcifAssignmentCode",
    "attempt_result_field",
]
