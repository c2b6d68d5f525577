"""Questionnaire template validation and response scoring.

Scoring modes:
    all_or_nothing  full points only when the selection equals the correct set
    partial         option_points of the selected correct options, nothing if
                    any incorrect option is selected, capped at question points
    weighted        option_points of every selected option, capped at the best
                    attainable total for the question
"""

import logging

from models.schemas.questionnaire import (
    Question,
    QuestionnaireScore,
    QuestionScore,
)
from services.exceptions import QuestionnaireError

logger = logging.getLogger(__name__)

MIN_OPTIONS = 2


def validate_template(questions: list[Question]) -> None:
    """Raise QuestionnaireError on the first invalid question."""
    if not questions:
        raise QuestionnaireError("Add at least one question")

    for idx, q in enumerate(questions):
        if not q.question_text.strip():
            raise QuestionnaireError("Every question needs text", idx)
        if len(q.options) < MIN_OPTIONS:
            raise QuestionnaireError("Every question needs at least 2 options", idx)
        if q.points < 0:
            raise QuestionnaireError("Question points must not be negative", idx)
        if any(o.option_points < 0 for o in q.options):
            raise QuestionnaireError("Option points must not be negative", idx)

        correct = [o for o in q.options if o.is_correct]
        if q.scoring_mode != "weighted" and not correct:
            raise QuestionnaireError("Every question needs at least one correct answer", idx)
        if q.question_type == "single_select" and q.scoring_mode != "weighted" and len(correct) > 1:
            raise QuestionnaireError("Single-select questions take one correct answer", idx)
        if q.scoring_mode == "partial" and sum(o.option_points for o in correct) <= 0:
            raise QuestionnaireError(
                "Partial mode needs points (>0) spread over the correct options", idx
            )
        if q.scoring_mode == "weighted" and sum(o.option_points for o in q.options) <= 0:
            raise QuestionnaireError("Weighted mode needs points (>0) spread over the options", idx)


def _weighted_possible(q: Question) -> float:
    points = sorted((o.option_points for o in q.options), reverse=True)
    if q.question_type == "single_select":
        return points[0] if points else 0.0
    return sum(points)


def possible_points(q: Question) -> float:
    if q.scoring_mode == "weighted":
        return _weighted_possible(q)
    return q.points


def score_question(q: Question, selected: list[int]) -> QuestionScore:
    chosen = {i for i in selected if 0 <= i < len(q.options)}
    if q.question_type == "single_select" and len(chosen) > 1:
        chosen = set()  # invalid answer scores nothing
    correct = {i for i, o in enumerate(q.options) if o.is_correct}
    possible = possible_points(q)

    if q.scoring_mode == "all_or_nothing":
        earned = q.points if chosen and chosen == correct else 0.0
    elif q.scoring_mode == "partial":
        if chosen - correct:
            earned = 0.0
        else:
            earned = min(q.points, sum(q.options[i].option_points for i in chosen))
    else:
        earned = min(possible, sum(q.options[i].option_points for i in chosen))

    percentage = round(earned / possible * 100, 1) if possible > 0 else 0.0
    return QuestionScore(earned=earned, possible=possible, percentage=percentage)


def score_response(questions: list[Question], answers: list[list[int]]) -> QuestionnaireScore:
    """Score answers[i] (selected option indices) against questions[i]."""
    results = [
        score_question(q, answers[idx] if idx < len(answers) else [])
        for idx, q in enumerate(questions)
    ]
    earned = sum(r.earned for r in results)
    possible = sum(r.possible for r in results)
    percentage = round(earned / possible * 100, 1) if possible > 0 else 0.0
    logger.debug("Questionnaire scored %.1f/%.1f", earned, possible)
    return QuestionnaireScore(
        questions=results,
        earned=earned,
        possible=possible,
        percentage=percentage,
    )
