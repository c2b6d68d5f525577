"""Total aggregation and letter-grade banding."""

from collections.abc import Iterable

MIN_TOTAL = 0.0
MAX_TOTAL = 100.0

# Inclusive lower bounds, highest first
GRADE_BANDS: tuple[tuple[float, str], ...] = (
    (95.0, "A+"),
    (90.0, "A"),
    (85.0, "A-"),
    (80.0, "B+"),
    (75.0, "B"),
    (70.0, "B-"),
    (65.0, "C+"),
    (60.0, "C"),
    (55.0, "C-"),
    (50.0, "D"),
)
FAILING_GRADE = "F"

GRADE_ORDER: tuple[str, ...] = tuple(letter for _, letter in GRADE_BANDS) + (FAILING_GRADE,)


def aggregate(category_scores: Iterable[float]) -> float:
    """Sum category points and clamp the result to [0, 100]."""
    total = sum(category_scores)
    return min(MAX_TOTAL, max(MIN_TOTAL, total))


def grade(total: float) -> str:
    for threshold, letter in GRADE_BANDS:
        if total >= threshold:
            return letter
    return FAILING_GRADE
