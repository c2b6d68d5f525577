"""Questionnaire templates authored in the dashboard."""

from typing import Literal

from pydantic import BaseModel


class QuestionOption(BaseModel):
    option_text: str = ""
    is_correct: bool = False
    order: int = 0
    option_points: float = 0.0


class Question(BaseModel):
    question_text: str = ""
    question_type: Literal["multi_select", "single_select"] = "multi_select"
    order: int = 0
    points: float = 1.0
    scoring_mode: Literal["all_or_nothing", "partial", "weighted"] = "all_or_nothing"
    options: list[QuestionOption] = []


class QuestionScore(BaseModel):
    earned: float = 0.0
    possible: float = 0.0
    percentage: float = 0.0


class QuestionnaireScore(BaseModel):
    questions: list[QuestionScore] = []
    earned: float = 0.0
    possible: float = 0.0
    percentage: float = 0.0
