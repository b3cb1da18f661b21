"""Unit tests for WCA ID and assignment-code parsing."""

import pytest

from wcif_types import (
    AssignmentCode,
    MalformedIdentifier,
    StaffRole,
    WcaId,
    parse_assignment_code,
    parse_wca_id,
)


class TestWcaId:
    def test_parse(self) -> None:
        wca_id = parse_wca_id("2012PARK03")
        assert wca_id == WcaId(year=2012, name="PARK", discriminant=3)
        assert str(wca_id) == "2012PARK03"

    def test_round_trip_keeps_zero_padding(self) -> None:
        assert parse_wca_id("2003AKIM01").to_wcif() == "2003AKIM01"

    def test_sort_order(self) -> None:
        raw = ["2012PARK03", "2003POCH01", "2012PARK01", "2009ZEMD01", "2012AAAA99"]
        ordered = sorted((parse_wca_id(r) for r in raw), key=WcaId.sort_key)
        assert [str(w) for w in ordered] == [
            "2003POCH01",
            "2009ZEMD01",
            "2012AAAA99",
            "2012PARK01",
            "2012PARK03",
        ]

    def test_natural_ordering(self) -> None:
        raw = ["2012PARK03", "2003POCH01", "2012PARK01", "2009ZEMD01", "2012AAAA99"]
        ordered = sorted(parse_wca_id(r) for r in raw)
        assert ordered == sorted((parse_wca_id(r) for r in raw), key=WcaId.sort_key)
        assert max(parse_wca_id(r) for r in raw) == parse_wca_id("2012PARK03")

    def test_comparison_operators(self) -> None:
        early, late = parse_wca_id("2012PARK01"), parse_wca_id("2012PARK03")
        assert early < late
        assert early <= late
        assert late > early
        assert late >= early
        assert early <= parse_wca_id("2012PARK01")
        assert not late < early

    def test_not_ordered_against_strings(self) -> None:
        with pytest.raises(TypeError):
            parse_wca_id("2012PARK01") < "2012PARK03"  # type: ignore[operator]

    @pytest.mark.parametrize(
        "raw,reason",
        [
            ("2012PARK3", "10 characters"),
            ("2012PARK003", "10 characters"),
            ("20X2PARK03", "year"),
            ("2012park03", "four uppercase letters"),
            ("2012PA1K03", "four uppercase letters"),
            ("2012PARKO3", "discriminant"),
            ("2012ÄBCD03", "four uppercase letters"),
        ],
    )
    def test_malformed(self, raw: str, reason: str) -> None:
        with pytest.raises(MalformedIdentifier) as exc_info:
            parse_wca_id(raw)
        assert reason in exc_info.value.reason

    def test_non_string(self) -> None:
        with pytest.raises(MalformedIdentifier):
            parse_wca_id(2012)


class TestAssignmentCode:
    def test_competitor(self) -> None:
        code = parse_assignment_code("competitor")
        assert code.is_competitor
        assert code.staff_role is None
        assert code.to_wcif() == "competitor"

    @pytest.mark.parametrize("role", list(StaffRole), ids=[r.value for r in StaffRole])
    def test_known_roles(self, role: StaffRole) -> None:
        code = parse_assignment_code(f"staff-{role.value}")
        assert code.staff_role is role
        assert not code.is_competitor
        assert str(code) == f"staff-{role.value}"

    def test_unknown_role_kept_verbatim(self) -> None:
        code = parse_assignment_code("staff-delegate")
        assert code.staff_role == "delegate"
        assert not isinstance(code.staff_role, StaffRole)
        assert code.to_wcif() == "staff-delegate"

    def test_competitor_staffing_roles(self) -> None:
        assert parse_assignment_code("staff-judge").is_competitor_staffing_role
        assert parse_assignment_code("staff-runner").is_competitor_staffing_role
        assert not parse_assignment_code("staff-announcer").is_competitor_staffing_role
        assert not parse_assignment_code("competitor").is_competitor_staffing_role

    def test_model_normalizes_known_role_strings(self) -> None:
        assert AssignmentCode(staff_role="scrambler").staff_role is StaffRole.SCRAMBLER

    @pytest.mark.parametrize("raw", ["", "staff-", "Competitor", "judge", "staff", None])
    def test_malformed(self, raw: object) -> None:
        with pytest.raises(MalformedIdentifier):
            parse_assignment_code(raw)
