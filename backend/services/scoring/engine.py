"""Scoring engine: runs every category scorer and assembles the breakdown.

Flow:
    Candidate + ScoringWeights
      ├─ scorer[category].bounded_score(candidate, weights.<category>)
      ├─ aggregate(category points)  → total, clamped to [0, 100]
      └─ grade(total)                → letter
                       ↓
         ScoreBreakdown (one decimal)

Pure function of its inputs: nothing is cached between calls.
"""

import logging
from datetime import date

from models.responses import ScoreBreakdown
from models.schemas.candidate import Candidate
from models.schemas.scoring_weights import ScoringWeights
from services.scoring.grading import aggregate, grade
from services.scoring.registry import all_scorers
from services.scoring.weights import DEFAULT_WEIGHTS

logger = logging.getLogger(__name__)


def compute_category_scores(
    candidate: Candidate,
    weights: ScoringWeights,
    today: date | None = None,
) -> dict[str, float]:
    """Unrounded points per category."""
    return {
        scorer.category: scorer.bounded_score(candidate, weights.category(scorer.category), today)
        for scorer in all_scorers()
    }


def score_candidate(
    candidate: Candidate,
    weights: ScoringWeights | None = None,
    today: date | None = None,
) -> ScoreBreakdown:
    """Score one candidate. The grade comes from the unrounded total."""
    weights = weights or DEFAULT_WEIGHTS
    scores = compute_category_scores(candidate, weights, today)
    total = aggregate(scores.values())

    logger.debug("Scored candidate %s: total=%.2f", candidate.id, total)
    # Grade from the unrounded total: 89.96 shows as total=90.0 with grade A-.
    return ScoreBreakdown(
        **{category: round(points, 1) for category, points in scores.items()},
        total=round(total, 1),
        grade=grade(total),
    )
