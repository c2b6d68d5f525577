"""Score distribution across a candidate population.

Buckets (inclusive lower bounds):
    excellent 80-100 | good 60-79 | average 40-59 | poor 0-39

Fractional totals between labelled ranges fall into the lower bucket
(79.5 is "good"). Percentages are of the whole population, one decimal.
"""

import logging
from collections import Counter
from collections.abc import Sequence

import numpy as np

from models.responses import (
    DistributionBucket,
    DistributionBuckets,
    ScoreDistribution,
    ScoreStatistics,
    TopCandidate,
)
from models.schemas.candidate import ScoredCandidate
from services.scoring.grading import GRADE_ORDER, grade

logger = logging.getLogger(__name__)

# (bucket name, inclusive lower bound, range label), highest first
BUCKETS: tuple[tuple[str, float, str], ...] = (
    ("excellent", 80.0, "80-100"),
    ("good", 60.0, "60-79"),
    ("average", 40.0, "40-59"),
    ("poor", float("-inf"), "0-39"),
)

DEFAULT_TOP_N = 5


def bucket_for(score: float) -> str:
    for name, lower, _ in BUCKETS:
        if score >= lower:
            return name
    return BUCKETS[-1][0]


def _percentage(count: int, total: int) -> float:
    if total == 0:
        return 0.0
    return round(count / total * 100, 1)


def compute_statistics(scores: Sequence[float]) -> ScoreStatistics:
    if not scores:
        return ScoreStatistics()
    arr = np.asarray(scores, dtype=float)
    return ScoreStatistics(
        mean=round(float(np.mean(arr)), 1),
        median=round(float(np.median(arr)), 1),
        std_dev=round(float(np.std(arr)), 1),
        min=round(float(np.min(arr)), 1),
        max=round(float(np.max(arr)), 1),
    )


def distribution(
    candidates: Sequence[ScoredCandidate],
    top_n: int = DEFAULT_TOP_N,
) -> ScoreDistribution:
    """Summarize totals into buckets, statistics and a ranked top slice."""
    total = len(candidates)
    counts = Counter(bucket_for(c.score) for c in candidates)

    buckets = DistributionBuckets(**{
        name: DistributionBucket(
            count=counts.get(name, 0),
            percentage=_percentage(counts.get(name, 0), total),
            range=label,
        )
        for name, _, label in BUCKETS
    })

    # sorted() is stable: equal scores keep their input order
    ranked = sorted(candidates, key=lambda c: c.score, reverse=True)
    top_candidates = [
        TopCandidate(
            candidate_id=c.candidate_id,
            name=c.name,
            score=round(c.score, 1),
            grade=grade(c.score),
        )
        for c in ranked[:max(0, top_n)]
    ]

    grades = Counter(grade(c.score) for c in candidates)
    grade_counts = {letter: grades.get(letter, 0) for letter in GRADE_ORDER}

    logger.debug("Distribution over %d candidates: %s", total, dict(counts))
    return ScoreDistribution(
        total=total,
        distribution=buckets,
        top_candidates=top_candidates,
        statistics=compute_statistics([c.score for c in candidates]),
        grade_counts=grade_counts,
    )
