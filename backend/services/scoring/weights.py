"""Weight configuration validation, defaults and reset.

A configuration is only valid when every leaf is a non-negative finite
number and all leaves across the five categories add up to 100 points,
within WEIGHT_TOLERANCE. Nothing here persists; the backend does that.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from models.schemas.scoring_weights import CATEGORIES, ScoringConfig, ScoringWeights
from services.exceptions import InvalidCriterion, InvalidTotal

logger = logging.getLogger(__name__)

TARGET_TOTAL = 100.0
WEIGHT_TOLERANCE = 0.1

DEFAULT_WEIGHTS = ScoringWeights()


def _criteria(category: str) -> tuple[str, ...]:
    annotation = ScoringWeights.model_fields[category].annotation
    return tuple(annotation.model_fields)


def _check_leaf(path: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidCriterion(path, value, "must be a number")
    if not math.isfinite(value):
        raise InvalidCriterion(path, value, "must be finite")
    if value < 0:
        raise InvalidCriterion(path, value, "must not be negative")
    return float(value)


def _walk(raw: Mapping[str, Any]) -> dict[str, dict[str, float]]:
    """Check shape and leaves of a raw nested mapping."""
    unknown = set(raw) - set(CATEGORIES)
    if unknown:
        name = sorted(unknown)[0]
        raise InvalidCriterion(name, raw[name], "unknown category")

    checked: dict[str, dict[str, float]] = {}
    for category in CATEGORIES:
        if category not in raw:
            raise InvalidCriterion(category, None, "missing category")
        criteria = raw[category]
        if not isinstance(criteria, Mapping):
            raise InvalidCriterion(category, criteria, "must be a mapping of criteria")

        expected = _criteria(category)
        unknown = set(criteria) - set(expected)
        if unknown:
            name = sorted(unknown)[0]
            raise InvalidCriterion(f"{category}.{name}", criteria[name], "unknown criterion")

        checked[category] = {}
        for name in expected:
            path = f"{category}.{name}"
            if name not in criteria:
                raise InvalidCriterion(path, None, "missing criterion")
            checked[category][name] = _check_leaf(path, criteria[name])
    return checked


def validate(weights: ScoringWeights | Mapping[str, Any]) -> ScoringWeights:
    """Validate a configuration and return it as ScoringWeights.

    Raises:
        InvalidCriterion: a leaf is missing, unknown, non-numeric or negative.
        InvalidTotal: leaves sum to something other than 100 (±0.1).
    """
    if isinstance(weights, BaseModel):
        weights = weights.model_dump()
    if not isinstance(weights, Mapping):
        raise InvalidCriterion("weights", weights, "must be a mapping of categories")

    checked = _walk(weights)
    total = sum(sum(criteria.values()) for criteria in checked.values())
    if abs(total - TARGET_TOTAL) > WEIGHT_TOLERANCE:
        logger.info("Rejected weight configuration totalling %.2f", total)
        raise InvalidTotal(total)
    return ScoringWeights.model_validate(checked)


def reset() -> ScoringConfig:
    """The fixed default configuration, custom flag cleared."""
    return ScoringConfig(weights=DEFAULT_WEIGHTS.model_copy(deep=True), is_custom=False)


def is_custom(weights: ScoringWeights) -> bool:
    return weights != DEFAULT_WEIGHTS


def category_total(weights: ScoringWeights, category: str) -> float:
    """Sum of one category's criteria (the budget shown per category)."""
    return weights.category(category).total()
