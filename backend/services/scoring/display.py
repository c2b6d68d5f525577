"""View adapter: regroups a breakdown the way the dashboard presents it.

The dashboard shows skills and certifications under "education" even though
they are scored under experience_skills. The regrouping happens only here;
the engine's categories are untouched.
"""

from models.responses import DisplayCategory, ScoreBreakdown, ScoreDisplay
from models.schemas.scoring_weights import ScoringWeights
from services.scoring.experience_skills import (
    certifications_fraction,
    skills_fraction,
)


def _entry(key: str, label: str, score: float, max_score: float) -> DisplayCategory:
    percentage = min(100.0, score / max_score * 100) if max_score > 0 else 0.0
    return DisplayCategory(
        key=key,
        label=label,
        score=round(score, 1),
        max_score=round(max_score, 1),
        percentage=round(percentage, 0),
    )


def _insights(breakdown: ScoreBreakdown) -> list[str]:
    insights: list[str] = []
    if breakdown.total >= 80:
        insights.append("Excellent candidate: highly qualified profile for the position.")
    elif breakdown.total >= 60:
        insights.append("Good candidate with potential. Consider for interview.")
    else:
        insights.append("Candidate may need further development in some areas.")
    if breakdown.interview_performance == 0:
        insights.append("Not interviewed yet. Score may increase after an interview.")
    return insights


def to_display(
    breakdown: ScoreBreakdown,
    weights: ScoringWeights,
    skills: str | None = None,
    certifications: str | None = None,
) -> ScoreDisplay:
    """Build the dashboard view of a breakdown.

    skills/certifications are the candidate's raw fields; their points are
    recomputed so they can be moved out of experience_skills.
    """
    exp = weights.experience_skills
    moved = (
        exp.skills * skills_fraction(skills)
        + exp.certifications * certifications_fraction(certifications)
    )
    experience_points = max(0.0, breakdown.experience_skills - moved)

    categories = [
        _entry("experience", "Experience", experience_points, exp.years_of_experience),
        _entry(
            "education",
            "Education & Qualifications",
            breakdown.education + moved,
            weights.education.total() + exp.skills + exp.certifications,
        ),
        _entry(
            "availability_logistics",
            "Availability & Logistics",
            breakdown.availability_logistics,
            weights.availability_logistics.total(),
        ),
        _entry(
            "profile_completeness",
            "Profile Completeness",
            breakdown.profile_completeness,
            weights.profile_completeness.total(),
        ),
        _entry(
            "interview_performance",
            "Interview Performance",
            breakdown.interview_performance,
            weights.interview_performance.total(),
        ),
    ]
    return ScoreDisplay(
        total=breakdown.total,
        grade=breakdown.grade,
        categories=categories,
        insights=_insights(breakdown),
    )
