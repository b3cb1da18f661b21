"""Groupifier extension payload contracts.

Groupifier stores its per-competition, per-activity and per-room settings
as WCIF extensions. Each model below is the ``data`` member of one of them.
"""

from datetime import datetime
from enum import Enum
from typing import Literal, Optional, Tuple

from pydantic import Field, StrictInt, field_serializer, field_validator

from wcif_types.models import ExtensionPayload

# ── Section 1: Namespaces ────────────────────────────────────────────────────

ACTIVITY_CONFIG: str = "groupifier.ActivityConfig"
COMPETITION_CONFIG: str = "groupifier.CompetitionConfig"
ROOM_CONFIG: str = "groupifier.RoomConfig"
ROOM_CONFIGURATION: str = "groupifier.RoomConfiguration"
ASSIGNMENT_SCHEDULE: str = "groupifier.AssignmentSchedule"
RESULT_DISPLAY: str = "groupifier.ResultDisplay"

SCHEMA_VERSION: str = "1.0"
SPEC_URL_BASE: str = "https://groupifier.jonatanklosko.com/wcif-extensions"


def spec_url(namespace: str) -> str:
    """Published schema URL for a Groupifier namespace."""
    return f"{SPEC_URL_BASE}/{namespace.split('.', 1)[1]}.json"


# ── Section 2: Enums ─────────────────────────────────────────────────────────


class CompetitorsSortingRule(str, Enum):
    """How Groupifier orders competitors when building groups."""

    RANKS = "ranks"
    BALANCED = "balanced"
    SYMMETRIC = "symmetric"
    NAME_OPTIMISED = "name-optimised"


class ScorecardPaperSize(str, Enum):
    A4 = "a4"
    A6 = "a6"
    LETTER = "letter"


class ScorecardOrder(str, Enum):
    NATURAL = "natural"
    STACKED = "stacked"


# ── Section 3: Payload Models ────────────────────────────────────────────────


class ActivityConfig(ExtensionPayload):
    """Payload for groupifier.ActivityConfig (attached to a round activity)."""

    # Integer capacities are stored as floats, so 1 is written back as 1.0
    capacity: float = Field(
        ..., ge=0, strict=True, description="Fraction of stations used per group"
    )
    groups: int = Field(..., ge=1, strict=True, description="Number of groups")
    scramblers: int = Field(..., ge=0, strict=True, description="Scramblers per group")
    runners: int = Field(..., ge=0, strict=True, description="Runners per group")
    assign_judges: bool = Field(
        ..., strict=True, description="Whether Groupifier assigns judges"
    )
    featured_competitors_wca_user_ids: Tuple[StrictInt, ...] = Field(
        default=(), description="Competitors to spread across groups"
    )


class CompetitionConfig(ExtensionPayload):
    """Payload for groupifier.CompetitionConfig (attached to the competition)."""

    local_names_first: bool = Field(..., strict=True)
    scorecards_background_url: Optional[str] = Field(
        None, description="Scorecard background image; empty string on the wire means none"
    )
    competitors_sorting_rule: CompetitorsSortingRule = Field(...)
    no_tasks_for_newcomers: bool = Field(..., strict=True)
    tasks_for_own_events_only: bool = Field(..., strict=True)
    no_running_for_foreigners: Optional[bool] = Field(None, strict=True)
    print_stations: Optional[bool] = Field(None, strict=True)
    scorecard_paper_size: Optional[ScorecardPaperSize] = None
    scorecard_order: Optional[ScorecardOrder] = None

    @field_validator("scorecards_background_url", mode="before")
    @classmethod
    def _empty_url_is_none(cls, v: object) -> object:
        if v == "":
            return None
        return v

    @field_serializer("scorecards_background_url")
    def _none_url_is_empty(self, v: Optional[str]) -> str:
        return "" if v is None else v


class RoomConfig(ExtensionPayload):
    """Payload for groupifier.RoomConfig (attached to a room)."""

    stations: int = Field(..., ge=0, strict=True, description="Timing stations in the room")


class RoomConfiguration(ExtensionPayload):
    """Payload for groupifier.RoomConfiguration: how a room is shown on displays."""

    color: str = Field(
        ..., pattern=r"^#[0-9a-fA-F]{6}$", strict=True, description="Stage color, #RRGGBB"
    )
    stage_display_order: Tuple[str, ...] = Field(
        default=(), description="Stage names in display order"
    )


class CheckInOverride(ExtensionPayload):
    """Replacement check-in time for one assignment."""

    activity_id: int = Field(..., ge=1, strict=True, description="Assigned activity")
    check_in_time: datetime = Field(..., description="When the competitor must check in")

    @field_validator("check_in_time", mode="before")
    @classmethod
    def _iso_timestamp_only(cls, v: object) -> object:
        # Lax datetime parsing would also take epoch numbers
        if isinstance(v, (str, datetime)):
            return v
        raise ValueError("check-in time must be an ISO 8601 string")


class AssignmentSchedule(ExtensionPayload):
    """Payload for groupifier.AssignmentSchedule (attached to a person)."""

    check_in_overrides: Tuple[CheckInOverride, ...] = Field(
        ..., description="Per-assignment check-in time overrides"
    )


class ResultDisplay(ExtensionPayload):
    """Payload for groupifier.ResultDisplay (attached to an event)."""

    sort_by: Literal["ranking", "name", "registrant-id"] = Field(
        ..., description="Order results are listed in"
    )
    show_country: bool = Field(True, strict=True)
    highlight_podium: bool = Field(False, strict=True)
