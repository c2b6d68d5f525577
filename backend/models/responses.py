from pydantic import BaseModel

from models.schemas.scoring_weights import ScoringWeights


class ScoreBreakdown(BaseModel):
    experience_skills: float = 0.0
    education: float = 0.0
    availability_logistics: float = 0.0
    profile_completeness: float = 0.0
    interview_performance: float = 0.0
    total: float = 0.0
    grade: str = "F"


class CandidateScoreResponse(BaseModel):
    candidate_id: int | None = None
    breakdown: ScoreBreakdown = ScoreBreakdown()
    tenure_years: float = 0.0
    is_custom_config: bool = False


class ScoringConfigResponse(BaseModel):
    weights: ScoringWeights = ScoringWeights()
    is_custom: bool = False
    total: float = 100.0
    category_totals: dict[str, float] = {}


class DistributionBucket(BaseModel):
    count: int = 0
    percentage: float = 0.0
    range: str = ""


class DistributionBuckets(BaseModel):
    excellent: DistributionBucket = DistributionBucket(range="80-100")
    good: DistributionBucket = DistributionBucket(range="60-79")
    average: DistributionBucket = DistributionBucket(range="40-59")
    poor: DistributionBucket = DistributionBucket(range="0-39")


class ScoreStatistics(BaseModel):
    mean: float = 0.0
    median: float = 0.0
    std_dev: float = 0.0
    min: float = 0.0
    max: float = 0.0


class TopCandidate(BaseModel):
    candidate_id: int | None = None
    name: str = ""
    score: float = 0.0
    grade: str = "F"


class ScoreDistribution(BaseModel):
    total: int = 0
    distribution: DistributionBuckets = DistributionBuckets()
    top_candidates: list[TopCandidate] = []
    statistics: ScoreStatistics = ScoreStatistics()
    grade_counts: dict[str, int] = {}


class DisplayCategory(BaseModel):
    key: str
    label: str
    score: float = 0.0
    max_score: float = 0.0
    percentage: float = 0.0


class ScoreDisplay(BaseModel):
    total: float = 0.0
    grade: str = "F"
    categories: list[DisplayCategory] = []
    insights: list[str] = []


class RecalculateResponse(BaseModel):
    status: str = "accepted"
    detail: dict = {}
