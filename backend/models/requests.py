from typing import Any

from pydantic import BaseModel, Field

from models.schemas.candidate import Candidate, ScoredCandidate
from models.schemas.questionnaire import Question


class ScoreRequest(BaseModel):
    candidate: Candidate
    # Raw nested mapping so bad leaves surface as InvalidCriterion, not a 422 from pydantic
    weights: dict[str, Any] | None = Field(None, description="Optional weight override")


class UpdateScoringConfigRequest(BaseModel):
    weights: dict[str, Any] = Field(..., description="Full nested weight configuration")


class DistributionRequest(BaseModel):
    scores: list[ScoredCandidate] = Field(default_factory=list, max_length=10000)
    top_n: int | None = Field(None, ge=0, le=100)


class QuestionnaireValidateRequest(BaseModel):
    questions: list[Question] = Field(default_factory=list, max_length=200)


class QuestionnaireScoreRequest(BaseModel):
    questions: list[Question] = Field(default_factory=list, max_length=200)
    # answers[i] = indices of the options selected for questions[i]
    answers: list[list[int]] = []
