"""Activity-code parsing.

Grammar::

    activity-code := event ("-r" N)? ("-g" N)? ("-a" N)?
                   | "other-" tag

N is a positive decimal integer without sign or leading zeros. Group and
attempt segments are only meaningful inside a round. Parsed codes serialize
back to exactly the string they were parsed from.
"""

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from wcif_types.events import EventId, classify_event
from wcif_types.models import MalformedActivityCode, UnknownEventType

SEPARATOR: str = "-"
OTHER_PREFIX: str = "other"
UNOFFICIAL_PREFIX: str = "unofficial"
MISC_PREFIX: str = "misc"

# Segment prefix -> field name, in the only order segments may appear.
_SEGMENTS: Dict[str, str] = {"r": "round", "g": "group", "a": "attempt"}
_SEGMENT_ORDER: List[str] = list(_SEGMENTS)


class OtherActivityCategory(str, Enum):
    """Kinds of non-competition activities."""

    REGISTRATION = "registration"
    CHECKIN = "checkin"
    TUTORIAL = "tutorial"
    MULTI_SUBMISSION = "multi"
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    AWARDS = "awards"
    MISC = "misc"
    UNOFFICIAL = "unofficial"
    CUSTOM = "custom"


_FIXED_CATEGORIES: Dict[str, OtherActivityCategory] = {
    member.value: member
    for member in OtherActivityCategory
    if member not in (OtherActivityCategory.UNOFFICIAL, OtherActivityCategory.CUSTOM)
}


class EventActivityCode(BaseModel):
    """An event, round, group or attempt slot."""

    model_config = ConfigDict(frozen=True)

    event: Union[EventId, str] = Field(
        ...,
        description="Classified event, or the raw id of an unofficial event",
    )
    round: Optional[int] = Field(None, ge=1, description="Round number")
    group: Optional[int] = Field(None, ge=1, description="Group number")
    attempt: Optional[int] = Field(None, ge=1, description="Attempt number")

    @field_validator("event")
    @classmethod
    def _check_event_token(cls, v: Union[EventId, str]) -> Union[EventId, str]:
        if isinstance(v, EventId):
            return v
        if not v or SEPARATOR in v:
            raise ValueError(f"invalid event token {v!r}")
        return v

    @model_validator(mode="after")
    def _check_nesting(self) -> "EventActivityCode":
        if self.round is None and (self.group is not None or self.attempt is not None):
            raise ValueError("group and attempt numbers require a round")
        return self

    @property
    def is_official(self) -> bool:
        return isinstance(self.event, EventId)

    @property
    def event_token(self) -> str:
        if isinstance(self.event, EventId):
            return self.event.value
        return self.event

    def round_id(self) -> "EventActivityCode":
        """The ``<event>-r<n>`` code of the round this slot belongs to."""
        if self.round is None:
            raise ValueError(f"{self} does not name a round")
        return EventActivityCode(event=self.event, round=self.round)

    def to_wcif(self) -> str:
        parts = [self.event_token]
        if self.round is not None:
            parts.append(f"r{self.round}")
        if self.group is not None:
            parts.append(f"g{self.group}")
        if self.attempt is not None:
            parts.append(f"a{self.attempt}")
        return SEPARATOR.join(parts)

    def __str__(self) -> str:
        return self.to_wcif()


class OtherActivityCode(BaseModel):
    """A non-competition activity such as registration, lunch or awards.

    The text after ``other-`` is kept verbatim; its meaning is venue-defined.
    """

    model_config = ConfigDict(frozen=True)

    discriminator: str = Field(
        ..., min_length=1, description="Verbatim text after 'other-'"
    )

    @property
    def is_official(self) -> bool:
        return False

    @property
    def category(self) -> OtherActivityCategory:
        fixed = _FIXED_CATEGORIES.get(self.discriminator)
        if fixed is not None:
            return fixed
        head, sep, _ = self.discriminator.partition(SEPARATOR)
        if sep and head == MISC_PREFIX:
            return OtherActivityCategory.MISC
        if sep and head == UNOFFICIAL_PREFIX:
            return OtherActivityCategory.UNOFFICIAL
        return OtherActivityCategory.CUSTOM

    @property
    def detail(self) -> Optional[str]:
        """Text following ``misc-`` or ``unofficial-``, if any."""
        if self.category in (OtherActivityCategory.MISC, OtherActivityCategory.UNOFFICIAL):
            _, _, rest = self.discriminator.partition(SEPARATOR)
            return rest or None
        return None

    def unofficial_event(self) -> EventActivityCode:
        """Parse the ``unofficial-<event>[-r..]`` form into an event code.

        The event token is kept as a raw string.

        Raises:
            MalformedActivityCode: If this is not an unofficial-event code
                or its segments are malformed.
        """
        raw = str(self)
        if self.category is not OtherActivityCategory.UNOFFICIAL or not self.detail:
            raise MalformedActivityCode(raw, "not an unofficial event activity")
        tokens = self.detail.split(SEPARATOR)
        return _build_event_code(raw, tokens[0], tokens[1:])

    def to_wcif(self) -> str:
        return f"{OTHER_PREFIX}{SEPARATOR}{self.discriminator}"

    def __str__(self) -> str:
        return self.to_wcif()


ActivityCode = Union[EventActivityCode, OtherActivityCode]


def _parse_number(raw: str, name: str, token: str) -> int:
    digits = token[1:]
    if not digits:
        raise MalformedActivityCode(raw, f"{name} segment {token!r} has no number")
    if not (digits.isascii() and digits.isdigit()):
        raise MalformedActivityCode(raw, f"{name} segment {token!r} is not numeric")
    if digits[0] == "0":
        if len(digits) == 1:
            raise MalformedActivityCode(raw, f"{name} number must be at least 1")
        raise MalformedActivityCode(raw, f"{name} segment {token!r} has a leading zero")
    try:
        return int(digits)
    except ValueError:
        # int() refuses strings past the interpreter's digit limit
        raise MalformedActivityCode(raw, f"{name} number is too long") from None


def _build_event_code(
    raw: str, event: Union[EventId, str], tokens: List[str]
) -> EventActivityCode:
    if not event:
        raise MalformedActivityCode(raw, "missing event id")
    numbers: Dict[str, int] = {}
    next_index = 0
    for token in tokens:
        if not token:
            raise MalformedActivityCode(raw, "empty segment")
        prefix = token[0]
        if prefix not in _SEGMENTS:
            raise MalformedActivityCode(raw, f"unrecognized segment {token!r}")
        name = _SEGMENTS[prefix]
        if name in numbers:
            raise MalformedActivityCode(raw, f"duplicate {name} segment {token!r}")
        index = _SEGMENT_ORDER.index(prefix)
        if index < next_index:
            raise MalformedActivityCode(raw, f"{name} segment {token!r} is out of order")
        numbers[name] = _parse_number(raw, name, token)
        next_index = index + 1

    if "round" not in numbers:
        for name in ("group", "attempt"):
            if name in numbers:
                raise MalformedActivityCode(raw, f"{name} segment requires a round")

    return EventActivityCode(event=event, **numbers)


def parse_activity_code(value: object) -> ActivityCode:
    """Parse a WCIF activity code.

    Args:
        value: The raw code, e.g. ``"333-r1-g2"`` or ``"other-lunch"``.

    Returns:
        An EventActivityCode for event slots, OtherActivityCode otherwise.

    Raises:
        MalformedActivityCode: If value does not follow the grammar. An
            unknown event id is reported this way too, chained from the
            underlying UnknownEventType.
    """
    if not isinstance(value, str):
        raise MalformedActivityCode(value, "activity code must be a string")
    tokens = value.split(SEPARATOR)
    head = tokens[0]

    if head == OTHER_PREFIX:
        discriminator = value[len(OTHER_PREFIX) + len(SEPARATOR):]
        if len(tokens) == 1 or not discriminator:
            raise MalformedActivityCode(value, "missing activity tag after 'other-'")
        return OtherActivityCode(discriminator=discriminator)

    if not head:
        raise MalformedActivityCode(value, "missing event id")
    try:
        event = classify_event(head)
    except UnknownEventType as exc:
        raise MalformedActivityCode(value, f"unknown event id {head!r}") from exc
    return _build_event_code(value, event, tokens[1:])


def parse_round_id(value: object) -> EventActivityCode:
    """Parse a WCIF round id, which must be exactly ``<event>-r<n>``.

    Raises:
        MalformedActivityCode: If value is not a round id.
    """
    code = parse_activity_code(value)
    if (
        not isinstance(code, EventActivityCode)
        or code.round is None
        or code.group is not None
        or code.attempt is not None
    ):
        raise MalformedActivityCode(value, "expected '<event>-r<round>'")
    return code
