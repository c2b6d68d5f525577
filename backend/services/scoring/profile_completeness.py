"""Profile completeness: share of filled fields in each field group."""

from datetime import date

from models.schemas.candidate import Candidate
from models.schemas.scoring_weights import ProfileCompletenessWeights
from services.scoring.base import BaseCategoryScorer

ESSENTIAL_FIELDS = ("email", "phone_number", "address", "city")
PROFESSIONAL_FIELDS = ("current_position", "current_company", "skills")
ADDITIONAL_FIELDS = ("highest_education", "certifications", "how_found_vacancy")


def filled_fraction(candidate: Candidate, fields: tuple[str, ...]) -> float:
    filled = 0
    for name in fields:
        value = getattr(candidate, name, None)
        if isinstance(value, str) and value.strip():
            filled += 1
    return filled / len(fields)


class ProfileCompletenessScorer(BaseCategoryScorer):
    category = "profile_completeness"

    def score(
        self,
        candidate: Candidate,
        weights: ProfileCompletenessWeights,
        today: date | None = None,
    ) -> float:
        return (
            weights.essential_fields * filled_fraction(candidate, ESSENTIAL_FIELDS)
            + weights.professional_fields * filled_fraction(candidate, PROFESSIONAL_FIELDS)
            + weights.additional_info * filled_fraction(candidate, ADDITIONAL_FIELDS)
        )
