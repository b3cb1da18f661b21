"""Event and puzzle vocabulary for WCIF documents."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

from wcif_types.models import UnknownEventType


class EventId(str, Enum):
    """Event identifiers used by WCIF, in the order the format lists them."""

    CUBE_333 = "333"
    CUBE_222 = "222"
    CUBE_444 = "444"
    CUBE_555 = "555"
    CUBE_666 = "666"
    CUBE_777 = "777"
    BLIND_333 = "333bf"
    FEWEST_MOVES_333 = "333fm"
    ONE_HANDED_333 = "333oh"
    CLOCK = "clock"
    MEGAMINX = "minx"
    PYRAMINX = "pyram"
    SKEWB = "skewb"
    SQUARE_1 = "sq1"
    BLIND_444 = "444bf"
    BLIND_555 = "555bf"
    MULTI_BLIND_333 = "333mbf"
    FEET_333 = "333ft"
    MAGIC = "magic"
    MASTER_MAGIC = "mmagic"
    MULTI_BLIND_OLD_STYLE_333 = "333mbo"


class PuzzleType(str, Enum):
    """Physical puzzles events are held on."""

    CUBE_333 = "333"
    CUBE_222 = "222"
    CUBE_444 = "444"
    CUBE_555 = "555"
    CUBE_666 = "666"
    CUBE_777 = "777"
    CLOCK = "clock"
    MEGAMINX = "minx"
    PYRAMINX = "pyram"
    SKEWB = "skewb"
    SQUARE_1 = "sq1"
    MAGIC = "magic"
    MASTER_MAGIC = "mmagic"


class ResultUnit(str, Enum):
    """Unit a solved attempt-result value is expressed in."""

    CENTISECONDS = "centiseconds"
    MOVES = "moves"
    POINTS = "points"


@dataclass(frozen=True)
class EventInfo:
    """Static metadata for one event."""

    event: EventId
    name: str
    official: bool
    puzzle: PuzzleType
    unit: ResultUnit
    blind: bool
    has_average: bool
    has_mean: bool

    @property
    def has_average_or_mean(self) -> bool:
        return self.has_average or self.has_mean


_CS = ResultUnit.CENTISECONDS

# event, name, official, puzzle, unit, blind, average, mean
_EVENT_ROWS: Tuple[EventInfo, ...] = (
    EventInfo(EventId.CUBE_333, "3x3x3 Cube", True, PuzzleType.CUBE_333, _CS, False, True, False),
    EventInfo(EventId.CUBE_222, "2x2x2 Cube", True, PuzzleType.CUBE_222, _CS, False, True, False),
    EventInfo(EventId.CUBE_444, "4x4x4 Cube", True, PuzzleType.CUBE_444, _CS, False, True, False),
    EventInfo(EventId.CUBE_555, "5x5x5 Cube", True, PuzzleType.CUBE_555, _CS, False, True, False),
    EventInfo(EventId.CUBE_666, "6x6x6 Cube", True, PuzzleType.CUBE_666, _CS, False, False, True),
    EventInfo(EventId.CUBE_777, "7x7x7 Cube", True, PuzzleType.CUBE_777, _CS, False, False, True),
    EventInfo(EventId.BLIND_333, "3x3x3 Blindfolded", True, PuzzleType.CUBE_333, _CS, True, False, True),
    EventInfo(
        EventId.FEWEST_MOVES_333, "3x3x3 Fewest Moves", True, PuzzleType.CUBE_333,
        ResultUnit.MOVES, False, False, True,
    ),
    EventInfo(EventId.ONE_HANDED_333, "3x3x3 One-Handed", True, PuzzleType.CUBE_333, _CS, False, True, False),
    EventInfo(EventId.CLOCK, "Clock", True, PuzzleType.CLOCK, _CS, False, True, False),
    EventInfo(EventId.MEGAMINX, "Megaminx", True, PuzzleType.MEGAMINX, _CS, False, True, False),
    EventInfo(EventId.PYRAMINX, "Pyraminx", True, PuzzleType.PYRAMINX, _CS, False, True, False),
    EventInfo(EventId.SKEWB, "Skewb", True, PuzzleType.SKEWB, _CS, False, True, False),
    EventInfo(EventId.SQUARE_1, "Square-1", True, PuzzleType.SQUARE_1, _CS, False, True, False),
    EventInfo(EventId.BLIND_444, "4x4x4 Blindfolded", True, PuzzleType.CUBE_444, _CS, True, False, True),
    EventInfo(EventId.BLIND_555, "5x5x5 Blindfolded", True, PuzzleType.CUBE_555, _CS, True, False, True),
    EventInfo(
        EventId.MULTI_BLIND_333, "3x3x3 Multi-Blind", True, PuzzleType.CUBE_333,
        ResultUnit.POINTS, True, False, False,
    ),
    EventInfo(EventId.FEET_333, "3x3x3 With Feet", False, PuzzleType.CUBE_333, _CS, False, True, False),
    EventInfo(EventId.MAGIC, "Magic", False, PuzzleType.MAGIC, _CS, False, True, False),
    EventInfo(EventId.MASTER_MAGIC, "Master Magic", False, PuzzleType.MASTER_MAGIC, _CS, False, True, False),
    EventInfo(
        EventId.MULTI_BLIND_OLD_STYLE_333, "3x3x3 Multi-Blind", False, PuzzleType.CUBE_333,
        ResultUnit.POINTS, True, False, False,
    ),
)

EVENT_TABLE: Mapping[EventId, EventInfo] = MappingProxyType(
    {row.event: row for row in _EVENT_ROWS}
)

# Exact wire identifier -> member
_EVENT_BY_ID: Mapping[str, EventId] = MappingProxyType(
    {member.value: member for member in EventId}
)
_PUZZLE_BY_ID: Mapping[str, PuzzleType] = MappingProxyType(
    {member.value: member for member in PuzzleType}
)


def classify_event(value: object) -> EventId:
    """Resolve a raw WCIF event identifier to an :class:`EventId`.

    Matching is exact: no case folding, trimming or aliasing.

    Args:
        value: The raw identifier, e.g. ``"333"`` or ``"sq1"``.

    Returns:
        The corresponding EventId member.

    Raises:
        UnknownEventType: If value is not a string or not a known identifier.
    """
    if isinstance(value, EventId):
        return value
    if not isinstance(value, str) or value not in _EVENT_BY_ID:
        raise UnknownEventType(value)
    return _EVENT_BY_ID[value]


def classify_puzzle(value: object) -> PuzzleType:
    """Resolve a raw puzzle identifier to a :class:`PuzzleType`.

    Raises:
        UnknownEventType: If value is not a known puzzle identifier.
    """
    if isinstance(value, PuzzleType):
        return value
    if not isinstance(value, str) or value not in _PUZZLE_BY_ID:
        raise UnknownEventType(value)
    return _PUZZLE_BY_ID[value]


def event_info(event: EventId) -> EventInfo:
    """Return the static metadata row for an event."""
    return EVENT_TABLE[event]


def puzzle_type_of(event: EventId) -> PuzzleType:
    return EVENT_TABLE[event].puzzle


def result_unit_of(event: EventId) -> ResultUnit:
    return EVENT_TABLE[event].unit


def all_events() -> Tuple[EventId, ...]:
    """All known events, including retired ones."""
    return tuple(EventId)


def official_events() -> Tuple[EventId, ...]:
    """Events currently held at official competitions."""
    return tuple(row.event for row in _EVENT_ROWS if row.official)
