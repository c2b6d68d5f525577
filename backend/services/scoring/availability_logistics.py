"""Availability & logistics: start date, transportation, travel, height work."""

from datetime import date

from models.schemas.candidate import Candidate
from models.schemas.scoring_weights import AvailabilityLogisticsWeights
from services.scoring.base import BaseCategoryScorer, normalize_code

START_FRACTIONS: dict[str, float] = {
    "imediato": 1.0,
    "15_dias": 0.75,
    "30_dias": 0.5,
}

YES = "sim"
OCCASIONALLY = "ocasionalmente"


def _flag(value: str | None) -> float:
    return 1.0 if normalize_code(value) == YES else 0.0


def _travel(value: str | None) -> float:
    code = normalize_code(value)
    if code == YES:
        return 1.0
    if code == OCCASIONALLY:
        return 0.5
    return 0.0


class AvailabilityLogisticsScorer(BaseCategoryScorer):
    category = "availability_logistics"

    def score(
        self,
        candidate: Candidate,
        weights: AvailabilityLogisticsWeights,
        today: date | None = None,
    ) -> float:
        start = START_FRACTIONS.get(normalize_code(candidate.availability_start), 0.0)
        return (
            weights.immediate_availability * start
            + weights.own_transportation * _flag(candidate.has_own_transportation)
            + weights.travel_availability * _travel(candidate.travel_availability)
            + weights.height_painting * _flag(candidate.height_painting)
        )
