"""Candidate snapshot as read from the recruitment backend.

Only the fields the scoring engine looks at are declared; anything else in
the backend payload is ignored. Badly typed values become None (numbers are
kept as text, lists of strings are joined) instead of failing validation, so a
bad record scores as "no credit".
"""

from datetime import date, datetime

from pydantic import BaseModel, field_validator

TEXT_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone_number",
    "address",
    "city",
    "current_position",
    "current_company",
    "currently_employed",
    "skills",
    "certifications",
    "courses",
    "highest_education",
    "availability_start",
    "has_own_transportation",
    "travel_availability",
    "height_painting",
    "how_found_vacancy",
)


def parse_lenient_date(value) -> date | None:
    """Parse an ISO date/datetime string, returning None when it can't."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            return None
    return None


def parse_lenient_text(value) -> str | None:
    """Coerce a backend value to text, or None when it isn't text-like."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value) if value == value else None
    if isinstance(value, (list, tuple)):
        parts = [p.strip() for p in value if isinstance(p, str) and p.strip()]
        return ", ".join(parts) or None
    return None


def parse_lenient_id(value) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


class ProfessionalExperience(BaseModel):
    company: str | None = None
    role: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    leave_reason: str | None = None

    @field_validator("company", "role", "leave_reason", mode="before")
    @classmethod
    def _coerce_text(cls, v):
        return parse_lenient_text(v)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _coerce_date(cls, v):
        return parse_lenient_date(v)


class Interview(BaseModel):
    status: str | None = None
    rating: float | None = None  # 1-5 stars
    feedback: str | None = None

    @field_validator("status", "feedback", mode="before")
    @classmethod
    def _coerce_text(cls, v):
        return parse_lenient_text(v)

    @field_validator("rating", mode="before")
    @classmethod
    def _coerce_rating(cls, v):
        if v is None or isinstance(v, bool):
            return None
        try:
            rating = float(v)
        except (TypeError, ValueError):
            return None
        return rating if rating == rating else None  # drop NaN


class Candidate(BaseModel):
    id: int | None = None
    first_name: str | None = None
    last_name: str | None = None

    # Contact
    email: str | None = None
    phone_number: str | None = None
    address: str | None = None
    city: str | None = None

    # Professional
    current_position: str | None = None
    current_company: str | None = None
    currently_employed: str | None = None
    skills: str | None = None  # comma-separated
    certifications: str | None = None  # comma-separated
    courses: str | None = None  # comma-separated
    highest_education: str | None = None  # education code, e.g. "superior_completa"

    # Availability / logistics ("sim" | "nao" | "ocasionalmente")
    availability_start: str | None = None  # "imediato" | "15_dias" | "30_dias"
    has_own_transportation: str | None = None
    travel_availability: str | None = None
    height_painting: str | None = None

    how_found_vacancy: str | None = None

    experiences: list[ProfessionalExperience] = []
    interviews: list[Interview] = []

    @field_validator("experiences", "interviews", mode="before")
    @classmethod
    def _drop_malformed(cls, v):
        if not isinstance(v, (list, tuple)):
            return []
        return [item for item in v if isinstance(item, (dict, BaseModel))]

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v):
        return parse_lenient_id(v)

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _coerce_text(cls, v):
        return parse_lenient_text(v)

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p).strip()


class ScoredCandidate(BaseModel):
    """A candidate's total as fed to the distribution summary."""
    candidate_id: int | None = None
    name: str = ""
    score: float = 0.0
