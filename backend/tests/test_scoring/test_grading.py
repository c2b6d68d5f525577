"""Tests for total aggregation and grade banding."""

import pytest

from services.scoring.grading import GRADE_ORDER, aggregate, grade


class TestAggregate:
    def test_sums(self):
        assert aggregate([10.0, 20.5, 5.0]) == pytest.approx(35.5)

    def test_clamps_high(self):
        assert aggregate([60.0, 60.0]) == 100.0

    def test_clamps_low(self):
        assert aggregate([-5.0, 1.0]) == 0.0

    def test_empty(self):
        assert aggregate([]) == 0.0


class TestGrade:
    @pytest.mark.parametrize(
        "total,expected",
        [
            (100.0, "A+"),
            (95.0, "A+"),
            (94.99, "A"),
            (90.0, "A"),
            (89.99, "A-"),
            (85.0, "A-"),
            (80.0, "B+"),
            (75.0, "B"),
            (70.0, "B-"),
            (65.0, "C+"),
            (60.0, "C"),
            (55.0, "C-"),
            (50.0, "D"),
            (49.99, "F"),
            (0.0, "F"),
        ],
    )
    def test_boundaries(self, total, expected):
        assert grade(total) == expected

    def test_monotonic(self):
        rank = {letter: i for i, letter in enumerate(GRADE_ORDER)}
        previous = rank[grade(0.0)]
        for step in range(0, 1001):
            current = rank[grade(step / 10)]
            # Lower index = better grade; must never get worse as total rises
            assert current <= previous
            previous = current
