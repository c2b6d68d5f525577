"""Pydantic contracts shared by the scoring engine and the API."""

from models.schemas.candidate import Candidate, Interview, ProfessionalExperience, ScoredCandidate
from models.schemas.questionnaire import Question, QuestionnaireScore, QuestionOption
from models.schemas.scoring_weights import CATEGORIES, ScoringConfig, ScoringWeights

__all__ = [
    "CATEGORIES",
    "Candidate",
    "Interview",
    "ProfessionalExperience",
    "Question",
    "QuestionOption",
    "QuestionnaireScore",
    "ScoringConfig",
    "ScoredCandidate",
    "ScoringWeights",
]
