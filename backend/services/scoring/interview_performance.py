"""Interview performance: mean star rating and feedback coverage."""

from datetime import date

from models.schemas.candidate import Candidate, Interview
from models.schemas.scoring_weights import InterviewPerformanceWeights
from services.scoring.base import BaseCategoryScorer, normalize_code

MIN_RATING = 1.0
MAX_RATING = 5.0
COMPLETED_STATUS = "completed"


def average_rating(interviews: list[Interview]) -> float | None:
    """Mean of the 1-5 ratings. Unrated interviews (None, 0) are skipped."""
    ratings = [
        i.rating for i in interviews
        if i.rating is not None and MIN_RATING <= i.rating <= MAX_RATING
    ]
    if not ratings:
        return None
    return sum(ratings) / len(ratings)


def feedback_coverage(interviews: list[Interview]) -> float:
    """Fraction of completed interviews that carry written feedback."""
    completed = [i for i in interviews if normalize_code(i.status) == COMPLETED_STATUS]
    if not completed:
        return 0.0
    with_feedback = sum(1 for i in completed if i.feedback and i.feedback.strip())
    return with_feedback / len(completed)


class InterviewPerformanceScorer(BaseCategoryScorer):
    category = "interview_performance"

    def score(
        self,
        candidate: Candidate,
        weights: InterviewPerformanceWeights,
        today: date | None = None,
    ) -> float:
        avg = average_rating(candidate.interviews)
        rating_points = 0.0 if avg is None else weights.average_rating * (avg / MAX_RATING)
        return rating_points + weights.feedback_quality * feedback_coverage(candidate.interviews)
