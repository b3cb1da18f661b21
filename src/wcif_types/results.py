"""Attempt-result decoding.

WCIF stores every attempt, best and average as a signed integer. Positive
values are results in the event's unit; ``0``, ``-1`` and ``-2`` are the
skipped, DNF and DNS sentinels. Anything below ``-2`` is malformed.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from wcif_types.events import EventId, ResultUnit, classify_event, result_unit_of
from wcif_types.models import InvalidAttemptResult


class AttemptStatus(str, Enum):
    """Tag of an :class:`AttemptResult`."""

    SOLVED = "solved"
    SKIPPED = "skipped"
    DNF = "dnf"
    DNS = "dns"


class ResultType(str, Enum):
    """Whether a value is a single attempt or an average/mean."""

    SINGLE = "single"
    AVERAGE = "average"


SKIPPED_VALUE: int = 0
DNF_VALUE: int = -1
DNS_VALUE: int = -2

_SENTINEL_TO_STATUS: Mapping[int, AttemptStatus] = MappingProxyType({
    SKIPPED_VALUE: AttemptStatus.SKIPPED,
    DNF_VALUE: AttemptStatus.DNF,
    DNS_VALUE: AttemptStatus.DNS,
})

_STATUS_TO_SENTINEL: Mapping[AttemptStatus, int] = MappingProxyType(
    {status: value for value, status in _SENTINEL_TO_STATUS.items()}
)

_OLD_STYLE_THRESHOLD = 1_000_000_000


class MultiBlindResult(BaseModel):
    """Decoded 3x3x3 Multi-Blind value."""

    model_config = ConfigDict(frozen=True)

    solved: int = Field(..., ge=0, le=99, description="Cubes solved")
    attempted: int = Field(..., ge=1, le=99, description="Cubes attempted")
    time_seconds: int = Field(
        ..., ge=0, le=99999, description="Time in whole seconds (99999 = unknown)"
    )
    old_style: bool = Field(
        False, description="Whether the value used the pre-2009 encoding"
    )

    @model_validator(mode="after")
    def _check_counts(self) -> "MultiBlindResult":
        if self.solved > self.attempted:
            raise ValueError("solved cannot exceed attempted")
        if not self.old_style and self.points < 0:
            raise ValueError("new-style results cannot score negative points")
        return self

    @property
    def failed(self) -> int:
        return self.attempted - self.solved

    @property
    def points(self) -> int:
        return self.solved - self.failed


def decode_multi_blind(value: int) -> MultiBlindResult:
    """Unpack a positive multi-blind attempt-result value.

    New style: ``0DDTTTTTMM`` with DD = 99 - points, TTTTT = seconds,
    MM = missed cubes. Old style: ``1SSAATTTTT`` with SS = 99 - solved,
    AA = attempted, TTTTT = seconds.

    Raises:
        InvalidAttemptResult: If value is not positive or does not describe
            a consistent result.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidAttemptResult(value)
    try:
        if value < _OLD_STYLE_THRESHOLD:
            missed = value % 100
            time_seconds = (value // 100) % 100000
            points = 99 - value // 10_000_000
            solved = points + missed
            return MultiBlindResult(
                solved=solved,
                attempted=solved + missed,
                time_seconds=time_seconds,
            )
        rest = value - _OLD_STYLE_THRESHOLD
        time_seconds = rest % 100000
        attempted = (rest // 100000) % 100
        solved = 99 - (rest // 10_000_000) % 100
        return MultiBlindResult(
            solved=solved,
            attempted=attempted,
            time_seconds=time_seconds,
            old_style=True,
        )
    except ValidationError as exc:
        raise InvalidAttemptResult(value) from exc


def encode_multi_blind(result: MultiBlindResult) -> int:
    """Pack a :class:`MultiBlindResult` back into its integer form."""
    if result.old_style:
        return (
            _OLD_STYLE_THRESHOLD
            + (99 - result.solved) * 10_000_000
            + result.attempted * 100000
            + result.time_seconds
        )
    return (
        (99 - result.points) * 10_000_000
        + result.time_seconds * 100
        + result.failed
    )


class AttemptResult(BaseModel):
    """A decoded attempt result.

    ``value`` is the raw positive integer of a solved attempt, preserved
    verbatim; its meaning depends on ``unit``. It is ``None`` for every
    other status.
    """

    model_config = ConfigDict(frozen=True)

    status: AttemptStatus = Field(..., description="Which outcome this is")
    value: Optional[int] = Field(
        None, ge=1, description="Raw result value (solved attempts only)"
    )
    unit: ResultUnit = Field(
        ResultUnit.CENTISECONDS, description="Unit of value"
    )
    result_type: ResultType = Field(
        ResultType.SINGLE, description="Single attempt or average/mean"
    )

    @model_validator(mode="after")
    def _check_value_matches_status(self) -> "AttemptResult":
        if self.status is AttemptStatus.SOLVED and self.value is None:
            raise ValueError("a solved attempt requires a value")
        if self.status is not AttemptStatus.SOLVED and self.value is not None:
            raise ValueError(f"a {self.status.value} attempt cannot carry a value")
        return self

    @property
    def is_solved(self) -> bool:
        return self.status is AttemptStatus.SOLVED

    def to_wcif(self) -> int:
        """Encode back to the WCIF integer."""
        if self.value is not None:
            return self.value
        return _STATUS_TO_SENTINEL[self.status]

    def _value_in(self, unit: ResultUnit) -> Optional[int]:
        if self.unit is not unit:
            raise ValueError(
                f"result is measured in {self.unit.value}, not {unit.value}"
            )
        return self.value

    @property
    def centiseconds(self) -> Optional[int]:
        """Duration of a solved timed attempt, ``None`` otherwise."""
        return self._value_in(ResultUnit.CENTISECONDS)

    @property
    def moves(self) -> Optional[int]:
        """Move count (hundredths of a move for averages), ``None`` if unsolved."""
        return self._value_in(ResultUnit.MOVES)

    def multi_blind(self) -> Optional[MultiBlindResult]:
        value = self._value_in(ResultUnit.POINTS)
        if value is None:
            return None
        return decode_multi_blind(value)


def decode_attempt_result(
    value: object,
    event: EventId,
    result_type: ResultType = ResultType.SINGLE,
) -> AttemptResult:
    """Decode a raw WCIF attempt-result integer.

    Args:
        value: The raw integer from the document.
        event: The classified event the result belongs to; selects the unit.
            A raw event identifier string is classified first.
        result_type: Whether the value is a single or an average/mean.

    Returns:
        The decoded AttemptResult.

    Raises:
        InvalidAttemptResult: If value is not an integer or is below -2.
        UnknownEventType: If event is a string outside the vocabulary.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAttemptResult(value)
    unit = result_unit_of(classify_event(event))

    status = _SENTINEL_TO_STATUS.get(value)
    if status is not None:
        return AttemptResult(status=status, unit=unit, result_type=result_type)
    if value < 0:
        raise InvalidAttemptResult(value)
    return AttemptResult(
        status=AttemptStatus.SOLVED,
        value=value,
        unit=unit,
        result_type=result_type,
    )


def _format_centiseconds(value: int) -> str:
    hundredths = value % 100
    seconds = value // 100
    if seconds < 60:
        return f"{seconds}.{hundredths:02d}"
    minutes, seconds = divmod(seconds, 60)
    if minutes < 60:
        return f"{minutes}:{seconds:02d}.{hundredths:02d}"
    hours, minutes = divmod(minutes, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}.{hundredths:02d}"


def _format_multi_blind(result: MultiBlindResult) -> str:
    seconds = result.time_seconds
    if seconds >= 3600:
        clock = f"{seconds // 3600}:{(seconds % 3600) // 60:02d}:{seconds % 60:02d}"
    else:
        clock = f"{seconds // 60:02d}:{seconds % 60:02d}"
    return f"{result.solved}/{result.attempted} {clock}"


def format_attempt_result(result: AttemptResult) -> str:
    """Render a result the way scorecards and result pages show it.

    Examples: ``40.59``, ``1:02.03``, ``DNF``, ``28``, ``28.33``,
    ``9/10 58:32``. Skipped attempts render as an empty string.
    """
    if result.status is AttemptStatus.SKIPPED:
        return ""
    if result.status is AttemptStatus.DNF:
        return "DNF"
    if result.status is AttemptStatus.DNS:
        return "DNS"
    assert result.value is not None
    if result.unit is ResultUnit.MOVES:
        if result.result_type is ResultType.AVERAGE:
            return f"{result.value // 100}.{result.value % 100:02d}"
        return str(result.value)
    if result.unit is ResultUnit.POINTS:
        return _format_multi_blind(decode_multi_blind(result.value))
    return _format_centiseconds(result.value)
