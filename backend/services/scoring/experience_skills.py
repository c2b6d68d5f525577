"""Experience & skills: tenure from the experience history, skill and
certification counts.
"""

from datetime import date

from models.schemas.candidate import Candidate, ProfessionalExperience
from models.schemas.scoring_weights import ExperienceSkillsWeights
from services.scoring.base import BaseCategoryScorer, bucket_fraction, split_csv

DAYS_PER_YEAR = 365.25

# (minimum years, fraction of the years_of_experience weight)
YEARS_BUCKETS = ((6.0, 1.0), (4.0, 0.87), (2.0, 0.67), (1.0, 0.33))
YEARS_FLOOR = 0.13

SKILLS_BUCKETS = ((5, 1.0), (3, 0.75), (1, 0.5))
CERTIFICATIONS_BUCKETS = ((3, 1.0), (2, 0.71), (1, 0.43))


def compute_tenure_years(
    experiences: list[ProfessionalExperience],
    today: date | None = None,
) -> float | None:
    """Total years across all experiences that have a start date.

    Open-ended entries run until today. Entries ending before they start add
    nothing. Returns None when no entry has a start date.
    """
    today = today or date.today()
    dated = [e for e in experiences if e.start_date is not None]
    if not dated:
        return None

    total_days = 0
    for exp in dated:
        end = exp.end_date or today
        days = (end - exp.start_date).days
        if days > 0:
            total_days += days
    return total_days / DAYS_PER_YEAR


def years_fraction(years: float | None) -> float:
    if years is None:
        return 0.0
    return bucket_fraction(years, YEARS_BUCKETS, floor=YEARS_FLOOR)


def skills_fraction(skills: str | None) -> float:
    return bucket_fraction(len(split_csv(skills)), SKILLS_BUCKETS)


def certifications_fraction(certifications: str | None) -> float:
    return bucket_fraction(len(split_csv(certifications)), CERTIFICATIONS_BUCKETS)


class ExperienceSkillsScorer(BaseCategoryScorer):
    category = "experience_skills"

    def score(
        self,
        candidate: Candidate,
        weights: ExperienceSkillsWeights,
        today: date | None = None,
    ) -> float:
        years = compute_tenure_years(candidate.experiences, today)
        return (
            weights.years_of_experience * years_fraction(years)
            + weights.skills * skills_fraction(candidate.skills)
            + weights.certifications * certifications_fraction(candidate.certifications)
        )
