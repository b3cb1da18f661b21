"""Person identifier and assignment-code parsing."""

from enum import Enum
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wcif_types.models import MalformedIdentifier

WCA_ID_LENGTH: int = 10
COMPETITOR: str = "competitor"
STAFF_PREFIX: str = "staff-"


def _is_ascii_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


class WcaId(BaseModel):
    """A WCA ID such as ``2012PARK03``.

    IDs order by year, then name, then discriminant.
    """

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=0, le=9999, description="Year of first competition")
    name: str = Field(
        ..., pattern=r"^[A-Z]{4}$", description="First four letters of the surname"
    )
    discriminant: int = Field(
        ..., ge=0, le=99, description="Disambiguates people sharing year and name"
    )

    def sort_key(self) -> Tuple[int, str, int]:
        return (self.year, self.name, self.discriminant)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, WcaId):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, WcaId):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, WcaId):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, WcaId):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def to_wcif(self) -> str:
        return f"{self.year:04d}{self.name}{self.discriminant:02d}"

    def __str__(self) -> str:
        return self.to_wcif()


def parse_wca_id(value: object) -> WcaId:
    """Parse a WCA ID.

    Raises:
        MalformedIdentifier: If value is not ``YYYY`` + four uppercase
            letters + two digits.
    """
    if not isinstance(value, str):
        raise MalformedIdentifier(value, "WCA ID must be a string")
    if len(value) != WCA_ID_LENGTH:
        raise MalformedIdentifier(
            value, f"WCA ID must be {WCA_ID_LENGTH} characters, got {len(value)}"
        )
    year, name, discriminant = value[:4], value[4:8], value[8:]
    if not _is_ascii_digits(year):
        raise MalformedIdentifier(value, f"year {year!r} is not numeric")
    if not (name.isascii() and name.isalpha() and name.isupper()):
        raise MalformedIdentifier(value, f"name part {name!r} must be four uppercase letters")
    if not _is_ascii_digits(discriminant):
        raise MalformedIdentifier(value, f"discriminant {discriminant!r} is not numeric")
    return WcaId(year=int(year), name=name, discriminant=int(discriminant))


class StaffRole(str, Enum):
    """Staff roles with a fixed meaning in WCIF assignments."""

    JUDGE = "judge"
    SCRAMBLER = "scrambler"
    RUNNER = "runner"
    DATA_ENTRY = "dataentry"
    ANNOUNCER = "announcer"


_STAFFING_ROLES = frozenset({StaffRole.JUDGE, StaffRole.SCRAMBLER, StaffRole.RUNNER})
_ROLES_BY_ID = {member.value: member for member in StaffRole}


class AssignmentCode(BaseModel):
    """``competitor`` or ``staff-<role>``; unknown roles are kept verbatim."""

    model_config = ConfigDict(frozen=True)

    staff_role: Optional[Union[StaffRole, str]] = Field(
        None, description="Staff role, None for a competitor assignment"
    )

    @field_validator("staff_role", mode="before")
    @classmethod
    def _normalize_role(cls, v: object) -> object:
        """Map known role strings onto StaffRole members."""
        if isinstance(v, str) and not isinstance(v, StaffRole) and v in _ROLES_BY_ID:
            return _ROLES_BY_ID[v]
        return v

    @property
    def is_competitor(self) -> bool:
        return self.staff_role is None

    @property
    def is_competitor_staffing_role(self) -> bool:
        """Judge, scrambler and runner duties are usually given to competitors."""
        return self.staff_role in _STAFFING_ROLES

    def to_wcif(self) -> str:
        if self.staff_role is None:
            return COMPETITOR
        role = self.staff_role.value if isinstance(self.staff_role, StaffRole) else self.staff_role
        return f"{STAFF_PREFIX}{role}"

    def __str__(self) -> str:
        return self.to_wcif()


def parse_assignment_code(value: object) -> AssignmentCode:
    """Parse a WCIF assignment code.

    Raises:
        MalformedIdentifier: If value is neither ``competitor`` nor
            ``staff-`` followed by a non-empty role.
    """
    if not isinstance(value, str):
        raise MalformedIdentifier(value, "assignment code must be a string")
    if value == COMPETITOR:
        return AssignmentCode()
    if value.startswith(STAFF_PREFIX) and len(value) > len(STAFF_PREFIX):
        role = value[len(STAFF_PREFIX):]
        return AssignmentCode(staff_role=_ROLES_BY_ID.get(role, role))
    raise MalformedIdentifier(value, "expected 'competitor' or 'staff-<role>'")
