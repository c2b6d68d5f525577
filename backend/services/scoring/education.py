"""Education: level code mapped to a fixed fraction, plus a per-course bonus."""

from datetime import date

from models.schemas.candidate import Candidate
from models.schemas.scoring_weights import EducationWeights
from services.scoring.base import BaseCategoryScorer, normalize_code, split_csv

EDUCATION_LEVEL_FRACTIONS: dict[str, float] = {
    "analfabeto": 0.0,
    "fundamental_incompleto": 0.2,
    "fundamental_completo": 0.3,
    "medio_incompleto": 0.5,
    "medio_completo": 0.6,
    "tecnica_incompleta": 0.7,
    "tecnica_completa": 0.8,
    "superior_incompleta": 0.85,
    "superior_completa": 0.95,
    "pos_graduacao": 1.0,
}

POINTS_PER_COURSE = 0.5


class EducationScorer(BaseCategoryScorer):
    category = "education"

    def score(
        self,
        candidate: Candidate,
        weights: EducationWeights,
        today: date | None = None,
    ) -> float:
        level = EDUCATION_LEVEL_FRACTIONS.get(normalize_code(candidate.highest_education), 0.0)
        courses = len(split_csv(candidate.courses)) * POINTS_PER_COURSE
        return weights.education_level * level + min(courses, weights.courses)
