"""Tests for the scoring engine and scorer registry."""

from datetime import date

import pytest

from models.responses import ScoreBreakdown
from models.schemas.candidate import Candidate, Interview
from models.schemas.scoring_weights import CATEGORIES
from services.scoring.engine import compute_category_scores, score_candidate
from services.scoring.registry import all_scorers, clear as clear_registry, get_scorer
from services.scoring.weights import DEFAULT_WEIGHTS, validate

TODAY = date(2026, 1, 1)


@pytest.fixture(autouse=True)
def _reset_registry():
    """Clear scorer registry before each test."""
    clear_registry()
    yield
    clear_registry()


class TestRegistry:
    def test_one_scorer_per_category(self):
        assert [s.category for s in all_scorers()] == list(CATEGORIES)

    def test_scorers_are_reused(self):
        assert get_scorer("education") is get_scorer("education")

    def test_unknown_category(self):
        with pytest.raises(ValueError):
            get_scorer("salary")


class TestScoreCandidate:
    def test_strong_candidate_full_marks(self, strong_candidate):
        result = score_candidate(strong_candidate, DEFAULT_WEIGHTS, TODAY)
        assert isinstance(result, ScoreBreakdown)
        assert result.experience_skills == 30.0
        assert result.education == 20.0
        assert result.availability_logistics == 20.0
        assert result.profile_completeness == 15.0
        assert result.interview_performance == 15.0
        assert result.total == 100.0
        assert result.grade == "A+"

    def test_empty_candidate_scores_zero(self, empty_candidate):
        result = score_candidate(empty_candidate, DEFAULT_WEIGHTS, TODAY)
        assert result.total == 0.0
        assert result.grade == "F"

    def test_defaults_used_without_weights(self, strong_candidate):
        assert score_candidate(strong_candidate, today=TODAY) == score_candidate(
            strong_candidate, DEFAULT_WEIGHTS, TODAY
        )

    def test_one_decimal_rounding(self):
        candidate = Candidate(
            highest_education="superior_completa",
            interviews=[Interview(rating=4), Interview(rating=3)],
        )
        result = score_candidate(candidate, DEFAULT_WEIGHTS, TODAY)
        assert result.education == 17.1
        assert result.interview_performance == 8.4
        # highest_education also fills one of three additional profile fields: 2.5 / 3
        assert result.profile_completeness == 0.8
        assert result.total == 26.3
        assert result.grade == "F"

    def test_category_scores_never_exceed_budget(self, strong_candidate):
        scores = compute_category_scores(strong_candidate, DEFAULT_WEIGHTS, TODAY)
        totals = DEFAULT_WEIGHTS.category_totals()
        for category, points in scores.items():
            assert 0.0 <= points <= totals[category]

    def test_custom_weights_change_result(self):
        raw = DEFAULT_WEIGHTS.model_dump()
        raw["interview_performance"]["average_rating"] = 0.0
        raw["education"]["education_level"] = 30.0
        weights = validate(raw)

        candidate = Candidate(highest_education="pos_graduacao")
        result = score_candidate(candidate, weights, TODAY)
        assert result.education == 30.0
        assert result.interview_performance == 0.0

    def test_pure_function(self, strong_candidate):
        first = score_candidate(strong_candidate, DEFAULT_WEIGHTS, TODAY)
        second = score_candidate(strong_candidate, DEFAULT_WEIGHTS, TODAY)
        assert first == second

    def test_grade_uses_unrounded_total(self, monkeypatch):
        points = {category: 0.0 for category in CATEGORIES}
        points["experience_skills"] = 29.98
        points["education"] = 19.99
        points["availability_logistics"] = 19.99
        points["profile_completeness"] = 15.0
        points["interview_performance"] = 5.0
        monkeypatch.setattr(
            "services.scoring.engine.compute_category_scores",
            lambda candidate, weights, today=None: points,
        )
        result = score_candidate(Candidate(), DEFAULT_WEIGHTS, TODAY)
        assert result.total == 90.0
        assert result.grade == "A-"
