"""Service layer between the API and the recruitment backend.

Owns the config cache: reads go through it, every write invalidates it.
Candidate scores are recomputed on every read against the current config.
"""

import logging
from datetime import date
from typing import Any

from config import settings
from models.responses import CandidateScoreResponse, ScoreBreakdown, ScoreDisplay, ScoreDistribution
from models.schemas.candidate import Candidate, ScoredCandidate
from models.schemas.scoring_weights import ScoringConfig, ScoringWeights
from services.backend_client import RecruitmentBackendClient
from services.config_cache import TTLCache
from services.scoring import weights as weight_config
from services.scoring.display import to_display
from services.scoring.distribution import distribution
from services.scoring.engine import score_candidate
from services.scoring.experience_skills import compute_tenure_years

logger = logging.getLogger(__name__)


class ScoringService:
    def __init__(
        self,
        client: RecruitmentBackendClient,
        cache_ttl_seconds: float | None = None,
    ) -> None:
        self.client = client
        ttl = settings.scoring_config_cache_ttl_seconds if cache_ttl_seconds is None else cache_ttl_seconds
        self.config_cache: TTLCache[ScoringConfig] = TTLCache(ttl)

    # --- Configuration ---

    async def get_config(self) -> ScoringConfig:
        cached = self.config_cache.get()
        if cached is not None:
            return cached
        config = await self.client.get_scoring_config()
        self.config_cache.set(config)
        logger.info("Fetched scoring config (custom=%s)", config.is_custom)
        return config

    async def update_config(self, raw_weights: ScoringWeights | dict[str, Any]) -> ScoringConfig:
        """Validate, persist upstream, invalidate the cache."""
        weights = weight_config.validate(raw_weights)
        try:
            await self.client.update_scoring_config(weights)
        finally:
            self.config_cache.invalidate()
        logger.info("Saved scoring config (total=%.1f)", weights.total())
        return ScoringConfig(weights=weights, is_custom=weight_config.is_custom(weights))

    async def reset_config(self) -> ScoringConfig:
        try:
            await self.client.reset_scoring_config()
        finally:
            self.config_cache.invalidate()
        logger.info("Scoring config reset to defaults")
        return weight_config.reset()

    async def recalculate_all(self) -> dict:
        """Fire the backend's bulk recalculation; no client-side batching."""
        logger.info("Triggering recalculation of all candidate scores")
        return await self.client.recalculate_all_scores()

    # --- Scoring ---

    async def resolve_weights(self, raw_weights: dict[str, Any] | None = None) -> ScoringWeights:
        if raw_weights is not None:
            return weight_config.validate(raw_weights)
        return (await self.get_config()).weights

    async def score(
        self,
        candidate: Candidate,
        raw_weights: dict[str, Any] | None = None,
        today: date | None = None,
    ) -> CandidateScoreResponse:
        weights = await self.resolve_weights(raw_weights)
        return self._score_response(candidate, weights, today)

    async def score_candidate_by_id(
        self, candidate_id: int, today: date | None = None
    ) -> CandidateScoreResponse:
        candidate = await self.client.fetch_candidate_snapshot(candidate_id)
        weights = (await self.get_config()).weights
        return self._score_response(candidate, weights, today)

    async def display_candidate_by_id(
        self, candidate_id: int, today: date | None = None
    ) -> ScoreDisplay:
        candidate = await self.client.fetch_candidate_snapshot(candidate_id)
        weights = (await self.get_config()).weights
        breakdown = score_candidate(candidate, weights, today)
        return to_display(breakdown, weights, candidate.skills, candidate.certifications)

    async def population_distribution(
        self, top_n: int | None = None, today: date | None = None
    ) -> ScoreDistribution:
        """Score every backend candidate with the current config and summarize."""
        weights = (await self.get_config()).weights
        scored: list[ScoredCandidate] = []
        for payload in await self.client.list_candidates():
            if not isinstance(payload, dict):
                logger.warning("Skipping malformed candidate entry: %r", payload)
                continue
            candidate = Candidate.model_validate(payload)
            if candidate.id is not None and not (
                "experiences" in payload and "interviews" in payload
            ):
                candidate = await self.client.fetch_candidate_snapshot(candidate.id)
            breakdown = score_candidate(candidate, weights, today)
            scored.append(ScoredCandidate(
                candidate_id=candidate.id,
                name=candidate.full_name,
                score=breakdown.total,
            ))
        return distribution(scored, settings.distribution_top_n if top_n is None else top_n)

    def _score_response(
        self, candidate: Candidate, weights: ScoringWeights, today: date | None
    ) -> CandidateScoreResponse:
        breakdown: ScoreBreakdown = score_candidate(candidate, weights, today)
        tenure = compute_tenure_years(candidate.experiences, today) or 0.0
        return CandidateScoreResponse(
            candidate_id=candidate.id,
            breakdown=breakdown,
            tenure_years=round(tenure, 1),
            is_custom_config=weight_config.is_custom(weights),
        )
