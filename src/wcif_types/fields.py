"""Pydantic field types that run the WCIF parsers.

Use these in a document model to get typed values on validation and the
wire form back on ``model_dump(mode="json")``::

    class Activity(BaseModel):
        activity_code: WcifActivityCode

Parser errors surface as ``pydantic.ValidationError``.
"""

from typing import Annotated, Any, Callable, Tuple, Type, Union

from pydantic import BeforeValidator, PlainSerializer

from wcif_types.activity_code import (
    EventActivityCode,
    OtherActivityCode,
    parse_activity_code,
    parse_round_id,
)
from wcif_types.events import EventId, classify_event
from wcif_types.identifiers import AssignmentCode, WcaId, parse_assignment_code, parse_wca_id
from wcif_types.results import AttemptResult, ResultType, decode_attempt_result


def _unless_instance(
    types: Union[Type[Any], Tuple[Type[Any], ...]], parse: Callable[[Any], Any]
) -> Callable[[Any], Any]:
    def validate(value: Any) -> Any:
        if isinstance(value, types):
            return value
        return parse(value)
    return validate


def _to_wcif(value: Any) -> Any:
    return value.to_wcif()


WcifEventId = Annotated[EventId, BeforeValidator(classify_event)]

WcifActivityCode = Annotated[
    Union[EventActivityCode, OtherActivityCode],
    BeforeValidator(
        _unless_instance((EventActivityCode, OtherActivityCode), parse_activity_code)
    ),
    PlainSerializer(_to_wcif, return_type=str),
]

WcifRoundId = Annotated[
    EventActivityCode,
    BeforeValidator(_unless_instance(EventActivityCode, parse_round_id)),
    PlainSerializer(_to_wcif, return_type=str),
]

WcifWcaId = Annotated[
    WcaId,
    BeforeValidator(_unless_instance(WcaId, parse_wca_id)),
    PlainSerializer(_to_wcif, return_type=str),
]

WcifAssignmentCode = Annotated[
    AssignmentCode,
    BeforeValidator(_unless_instance(AssignmentCode, parse_assignment_code)),
    PlainSerializer(_to_wcif, return_type=str),
]


def attempt_result_field(
    event: EventId, result_type: ResultType = ResultType.SINGLE
) -> Any:
    """Annotated AttemptResult type decoding integers for a fixed event.

    Example::

        class Cutoff(BaseModel):
            attempt_result: attempt_result_field(EventId.CUBE_333)
    """

    def decode(value: Any) -> Any:
        return decode_attempt_result(value, event, result_type)

    return Annotated[
        AttemptResult,
        BeforeValidator(_unless_instance(AttemptResult, decode)),
        PlainSerializer(_to_wcif, return_type=int),
    ]
