"""Property-based tests for activity-code parsing."""

from typing import Optional

import pytest
from hypothesis import assume, given, settings, strategies as st

from wcif_types import (
    EventActivityCode,
    EventId,
    MalformedActivityCode,
    OtherActivityCode,
    parse_activity_code,
)

events = st.sampled_from(list(EventId))
numbers = st.integers(min_value=1, max_value=10_000)


@st.composite
def event_codes(draw: st.DrawFn) -> EventActivityCode:
    event = draw(events)
    round_number: Optional[int] = draw(st.none() | numbers)
    group: Optional[int] = None
    attempt: Optional[int] = None
    if round_number is not None:
        group = draw(st.none() | numbers)
        attempt = draw(st.none() | numbers)
    return EventActivityCode(event=event, round=round_number, group=group, attempt=attempt)


tags = st.text(
    alphabet=st.characters(exclude_categories=("Cs",)), min_size=1, max_size=40
)


class TestRoundTrip:
    """str(parse(s)) == s for every accepted s."""

    @settings(deadline=None)
    @given(code=event_codes())
    def test_event_code_round_trip(self, code: EventActivityCode) -> None:
        raw = code.to_wcif()
        parsed = parse_activity_code(raw)
        assert parsed == code
        assert str(parsed) == raw

    @settings(deadline=None)
    @given(tag=tags)
    def test_other_code_round_trip(self, tag: str) -> None:
        raw = f"other-{tag}"
        parsed = parse_activity_code(raw)
        assert isinstance(parsed, OtherActivityCode)
        assert parsed.discriminator == tag
        assert str(parsed) == raw

    @settings(deadline=None)
    @given(raw=st.text(max_size=30))
    def test_accepted_input_reproduced(self, raw: str) -> None:
        try:
            parsed = parse_activity_code(raw)
        except MalformedActivityCode:
            return
        assert str(parsed) == raw


class TestNesting:
    @settings(deadline=None)
    @given(event=events, group=numbers, attempt=st.none() | numbers)
    def test_group_without_round_rejected(
        self, event: EventId, group: int, attempt: Optional[int]
    ) -> None:
        raw = f"{event.value}-g{group}"
        if attempt is not None:
            raw += f"-a{attempt}"
        with pytest.raises(MalformedActivityCode):
            parse_activity_code(raw)

    @settings(deadline=None)
    @given(event=events, round_number=numbers, zeros=st.integers(min_value=1, max_value=3))
    def test_leading_zeros_rejected(self, event: EventId, round_number: int, zeros: int) -> None:
        with pytest.raises(MalformedActivityCode):
            parse_activity_code(f"{event.value}-r{'0' * zeros}{round_number}")

    @settings(deadline=None)
    @given(head=st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789", min_size=1, max_size=8))
    def test_unknown_event_rejected(self, head: str) -> None:
        assume(head not in {e.value for e in EventId} and head != "other")
        with pytest.raises(MalformedActivityCode):
            parse_activity_code(f"{head}-r1")
