"""Abstract base class for the per-category scorers."""

from abc import ABC, abstractmethod
from datetime import date

from models.schemas.candidate import Candidate
from models.schemas.scoring_weights import CategoryWeights


def split_csv(value: str | None) -> list[str]:
    """Split a comma-separated field into its non-empty, stripped tokens."""
    if not value or not isinstance(value, str):
        return []
    return [token.strip() for token in value.split(",") if token.strip()]


def normalize_code(value: str | None) -> str:
    """Lower-case and strip a coded field ("Sim " -> "sim"). None -> ""."""
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def bucket_fraction(
    value: float,
    buckets: tuple[tuple[float, float], ...],
    floor: float = 0.0,
) -> float:
    """Return the fraction for the first (threshold, fraction) that value reaches.

    Buckets must be ordered by descending threshold. Thresholds are inclusive.
    """
    for threshold, fraction in buckets:
        if value >= threshold:
            return fraction
    return floor


class BaseCategoryScorer(ABC):
    """Base class for category scorers.

    Subclasses must implement:
        - category: the ScoringWeights field this scorer consumes
        - score(candidate, weights, today): points in [0, weights.total()]
    """

    category: str = ""

    @abstractmethod
    def score(
        self,
        candidate: Candidate,
        weights: CategoryWeights,
        today: date | None = None,
    ) -> float:
        """Compute this category's points for one candidate."""

    def bounded_score(
        self,
        candidate: Candidate,
        weights: CategoryWeights,
        today: date | None = None,
    ) -> float:
        """score() clamped to the category's point budget."""
        return max(0.0, min(weights.total(), self.score(candidate, weights, today)))
