from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_scoring_service
from config import settings
from models.requests import (
    DistributionRequest,
    QuestionnaireScoreRequest,
    QuestionnaireValidateRequest,
    ScoreRequest,
    UpdateScoringConfigRequest,
)
from models.responses import (
    CandidateScoreResponse,
    RecalculateResponse,
    ScoreDisplay,
    ScoreDistribution,
    ScoringConfigResponse,
)
from models.schemas.questionnaire import QuestionnaireScore
from models.schemas.scoring_weights import ScoringConfig
from services import questionnaire
from services.exceptions import (
    BackendError,
    BackendPayloadError,
    BackendRequestError,
    BackendUnavailableError,
    InvalidCriterion,
    InvalidTotal,
    QuestionnaireError,
)
from services.scoring.distribution import distribution
from services.scoring_service import ScoringService

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _http_error(exc: Exception) -> HTTPException:
    """Map service exceptions onto HTTP responses."""
    if isinstance(exc, InvalidTotal):
        return HTTPException(
            status_code=422,
            detail={"message": str(exc), "total": round(exc.total, 1)},
        )
    if isinstance(exc, InvalidCriterion):
        return HTTPException(status_code=422, detail={"message": str(exc), "path": exc.path})
    if isinstance(exc, BackendPayloadError):
        return HTTPException(
            status_code=503,
            detail={"message": "Recruitment backend returned invalid data", "retryable": False},
        )
    if isinstance(exc, BackendUnavailableError):
        return HTTPException(
            status_code=503,
            detail={"message": "Recruitment backend unavailable, try again", "retryable": True},
        )
    if isinstance(exc, BackendRequestError):
        return HTTPException(status_code=exc.status_code, detail=exc.detail or str(exc))
    if isinstance(exc, QuestionnaireError):
        return HTTPException(
            status_code=400,
            detail={"message": str(exc), "question_index": exc.question_index},
        )
    return HTTPException(status_code=500, detail=str(exc))


def _config_response(config: ScoringConfig) -> ScoringConfigResponse:
    return ScoringConfigResponse(
        weights=config.weights,
        is_custom=config.is_custom,
        total=round(config.weights.total(), 1),
        category_totals=config.weights.category_totals(),
    )


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "backend_configured": bool(settings.backend_api_url),
    }


# --- Scoring configuration ---

@router.get("/scoring-config", response_model=ScoringConfigResponse)
async def get_scoring_config(service: ScoringService = Depends(get_scoring_service)):
    try:
        config = await service.get_config()
    except BackendError as e:
        raise _http_error(e)
    return _config_response(config)


@router.post("/update-scoring-config", response_model=ScoringConfigResponse)
@limiter.limit(settings.rate_limit)
async def update_scoring_config(
    request: Request,
    body: UpdateScoringConfigRequest,
    service: ScoringService = Depends(get_scoring_service),
):
    try:
        config = await service.update_config(body.weights)
    except (InvalidTotal, InvalidCriterion, BackendError) as e:
        raise _http_error(e)
    return _config_response(config)


@router.post("/reset-scoring-config", response_model=ScoringConfigResponse)
@limiter.limit(settings.rate_limit)
async def reset_scoring_config(
    request: Request,
    service: ScoringService = Depends(get_scoring_service),
):
    try:
        config = await service.reset_config()
    except BackendError as e:
        raise _http_error(e)
    return _config_response(config)


@router.post("/recalculate-all-scores", response_model=RecalculateResponse)
@limiter.limit(settings.rate_limit)
async def recalculate_all_scores(
    request: Request,
    service: ScoringService = Depends(get_scoring_service),
):
    try:
        detail = await service.recalculate_all()
    except BackendError as e:
        raise _http_error(e)
    return RecalculateResponse(status="accepted", detail=detail if isinstance(detail, dict) else {})


# --- Candidate scores ---

@router.post("/score", response_model=CandidateScoreResponse)
async def score(body: ScoreRequest, service: ScoringService = Depends(get_scoring_service)):
    try:
        return await service.score(body.candidate, body.weights)
    except (InvalidTotal, InvalidCriterion, BackendError) as e:
        raise _http_error(e)


@router.get("/candidates/{candidate_id}/score", response_model=CandidateScoreResponse)
async def candidate_score(
    candidate_id: int,
    service: ScoringService = Depends(get_scoring_service),
):
    try:
        return await service.score_candidate_by_id(candidate_id)
    except BackendError as e:
        raise _http_error(e)


@router.get("/candidates/{candidate_id}/score/display", response_model=ScoreDisplay)
async def candidate_score_display(
    candidate_id: int,
    service: ScoringService = Depends(get_scoring_service),
):
    try:
        return await service.display_candidate_by_id(candidate_id)
    except BackendError as e:
        raise _http_error(e)


# --- Distribution ---

@router.post("/score-distribution", response_model=ScoreDistribution)
async def score_distribution(body: DistributionRequest):
    top_n = settings.distribution_top_n if body.top_n is None else body.top_n
    return distribution(body.scores, top_n)


@router.get("/score-distribution", response_model=ScoreDistribution)
@limiter.limit(settings.rate_limit)
async def population_score_distribution(
    request: Request,
    top_n: int | None = None,
    service: ScoringService = Depends(get_scoring_service),
):
    try:
        return await service.population_distribution(top_n)
    except BackendError as e:
        raise _http_error(e)


# --- Questionnaires ---

@router.post("/questionnaires/validate")
async def validate_questionnaire(body: QuestionnaireValidateRequest):
    try:
        questionnaire.validate_template(body.questions)
    except QuestionnaireError as e:
        raise _http_error(e)
    return {"valid": True, "question_count": len(body.questions)}


@router.post("/questionnaires/score", response_model=QuestionnaireScore)
async def score_questionnaire(body: QuestionnaireScoreRequest):
    try:
        questionnaire.validate_template(body.questions)
    except QuestionnaireError as e:
        raise _http_error(e)
    return questionnaire.score_response(body.questions, body.answers)
