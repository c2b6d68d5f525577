"""Lazy registry of category scorers, keyed by ScoringWeights category.

Module-level singletons, created on first use.
"""

import logging

from models.schemas.scoring_weights import CATEGORIES
from services.scoring.base import BaseCategoryScorer

logger = logging.getLogger(__name__)

_registry: dict[str, BaseCategoryScorer] = {}


def _create_scorer(name: str) -> BaseCategoryScorer:
    """Factory: create a scorer by category name with deferred imports."""
    if name == "experience_skills":
        from services.scoring.experience_skills import ExperienceSkillsScorer
        return ExperienceSkillsScorer()
    elif name == "education":
        from services.scoring.education import EducationScorer
        return EducationScorer()
    elif name == "availability_logistics":
        from services.scoring.availability_logistics import AvailabilityLogisticsScorer
        return AvailabilityLogisticsScorer()
    elif name == "profile_completeness":
        from services.scoring.profile_completeness import ProfileCompletenessScorer
        return ProfileCompletenessScorer()
    elif name == "interview_performance":
        from services.scoring.interview_performance import InterviewPerformanceScorer
        return InterviewPerformanceScorer()
    else:
        raise ValueError(f"Unknown scoring category: {name}")


def get_scorer(name: str) -> BaseCategoryScorer:
    """Get a scorer by category, creating it on first access."""
    if name not in _registry:
        _registry[name] = _create_scorer(name)
        logger.debug("Registered scorer: %s", name)
    return _registry[name]


def all_scorers() -> list[BaseCategoryScorer]:
    """One scorer per category, in ScoringWeights field order."""
    return [get_scorer(name) for name in CATEGORIES]


def clear() -> None:
    """Drop all scorers. Useful for testing."""
    _registry.clear()
