"""Scoring weight configuration: five categories sharing a 100-point budget."""

from pydantic import BaseModel, ConfigDict


class CategoryWeights(BaseModel):
    """Criterion -> points for one scoring category.

    Fixed shape: unknown criteria are rejected so a typo in an admin edit
    cannot silently drop points from the budget.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    def total(self) -> float:
        return float(sum(self.model_dump().values()))


class ExperienceSkillsWeights(CategoryWeights):
    years_of_experience: float = 15.0
    skills: float = 8.0
    certifications: float = 7.0


class EducationWeights(CategoryWeights):
    education_level: float = 18.0
    courses: float = 2.0


class AvailabilityLogisticsWeights(CategoryWeights):
    immediate_availability: float = 8.0
    own_transportation: float = 6.0
    travel_availability: float = 4.0
    height_painting: float = 2.0


class ProfileCompletenessWeights(CategoryWeights):
    essential_fields: float = 8.0
    professional_fields: float = 4.5
    additional_info: float = 2.5


class InterviewPerformanceWeights(CategoryWeights):
    average_rating: float = 12.0
    feedback_quality: float = 3.0


class ScoringWeights(BaseModel):
    """The full weight configuration. Defaults are the fixed baseline."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    experience_skills: ExperienceSkillsWeights = ExperienceSkillsWeights()
    education: EducationWeights = EducationWeights()
    availability_logistics: AvailabilityLogisticsWeights = AvailabilityLogisticsWeights()
    profile_completeness: ProfileCompletenessWeights = ProfileCompletenessWeights()
    interview_performance: InterviewPerformanceWeights = InterviewPerformanceWeights()

    def category(self, name: str) -> CategoryWeights:
        if name not in CATEGORIES:
            raise KeyError(name)
        return getattr(self, name)

    def category_totals(self) -> dict[str, float]:
        return {name: self.category(name).total() for name in CATEGORIES}

    def total(self) -> float:
        return sum(self.category_totals().values())


CATEGORIES: tuple[str, ...] = tuple(ScoringWeights.model_fields)


class ScoringConfig(BaseModel):
    """Weights as stored by the backend, plus the custom flag."""
    weights: ScoringWeights = ScoringWeights()
    is_custom: bool = False
