"""Async client for the recruitment REST backend.

Every call is one round trip. Network failures, timeouts and 5xx responses
become BackendUnavailableError (retryable); 4xx become BackendRequestError.
"""

import logging
from typing import Any

import httpx

from config import settings
from models.schemas.candidate import Candidate
from models.schemas.scoring_weights import CATEGORIES, ScoringConfig, ScoringWeights
from services.exceptions import (
    BackendPayloadError,
    BackendRequestError,
    BackendUnavailableError,
    ConfigError,
)
from services.scoring import weights as weight_config

logger = logging.getLogger(__name__)


def parse_scoring_config(payload: Any) -> ScoringConfig:
    """Accept either {"weights": {...}, "is_custom": bool} or bare weights.

    Upstream weights go through the same validation as an admin edit: a
    partial or off-total configuration raises BackendPayloadError.
    """
    is_custom = None
    raw = payload
    if isinstance(payload, dict) and "weights" in payload:
        raw = payload["weights"]
        is_custom = payload.get("is_custom")
    try:
        weights = weight_config.validate(raw)
    except ConfigError as e:
        logger.error("Backend returned an invalid scoring config: %s", e)
        raise BackendPayloadError(f"Invalid scoring config from backend: {e}") from e
    if not isinstance(is_custom, bool):
        is_custom = weight_config.is_custom(weights)
    return ScoringConfig(weights=weights, is_custom=is_custom)


def _written_config(payload: Any) -> ScoringConfig | None:
    """Config echoed back by a write, or None for a bare acknowledgement."""
    if not isinstance(payload, dict):
        return None
    if "weights" in payload or any(name in payload for name in CATEGORIES):
        return parse_scoring_config(payload)
    return None


def _results(payload: Any) -> list:
    """Unwrap paginated {"results": [...]} responses."""
    if isinstance(payload, dict) and "results" in payload:
        return payload["results"] or []
    return payload or []


class RecruitmentBackendClient:
    """Thin wrapper over httpx.AsyncClient for the endpoints scoring needs."""

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"Content-Type": "application/json"}
        token = settings.backend_api_token if token is None else token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.backend_api_url,
            headers=headers,
            timeout=timeout or settings.backend_timeout_seconds,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "RecruitmentBackendClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.error("Backend timeout on %s %s: %s", method, path, e)
            raise BackendUnavailableError(f"Timed out calling {path}") from e
        except httpx.HTTPError as e:
            logger.error("Backend transport error on %s %s: %s", method, path, e)
            raise BackendUnavailableError(f"Could not reach backend for {path}") from e

        if response.status_code >= 500:
            logger.error("Backend %s on %s %s", response.status_code, method, path)
            raise BackendUnavailableError(
                f"Backend returned {response.status_code} for {path}"
            )
        if response.status_code >= 400:
            detail = response.text[:500]
            logger.warning("Backend rejected %s %s: %s", method, path, response.status_code)
            raise BackendRequestError(response.status_code, detail)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error("Backend sent non-JSON body for %s %s", method, path)
            raise BackendUnavailableError(f"Malformed response from {path}") from e

    # --- Scoring configuration ---

    async def get_scoring_config(self) -> ScoringConfig:
        return parse_scoring_config(await self._request("GET", "/scoring-config/"))

    async def update_scoring_config(self, weights: ScoringWeights) -> ScoringConfig | None:
        payload = await self._request(
            "POST", "/update-scoring-config/", json={"weights": weights.model_dump()}
        )
        return _written_config(payload)

    async def reset_scoring_config(self) -> ScoringConfig | None:
        payload = await self._request("POST", "/reset-scoring-config/")
        return _written_config(payload)

    async def recalculate_all_scores(self) -> dict:
        return await self._request("POST", "/recalculate-all-scores/") or {}

    # --- Candidates ---

    async def get_candidate(self, candidate_id: int) -> dict:
        return await self._request("GET", f"/candidates/{candidate_id}/") or {}

    async def list_candidates(self, params: dict | None = None) -> list[dict]:
        return _results(await self._request("GET", "/candidates/", params=params or {}))

    async def get_experiences(self, candidate_id: int) -> list[dict]:
        return _results(
            await self._request("GET", f"/candidates/{candidate_id}/experiences/")
        )

    async def get_interviews(self, candidate_id: int) -> list[dict]:
        return _results(
            await self._request("GET", "/interviews/", params={"candidate": candidate_id})
        )

    async def fetch_candidate_snapshot(self, candidate_id: int) -> Candidate:
        """Candidate profile with its experience and interview lists attached."""
        profile = await self.get_candidate(candidate_id)
        experiences = profile.get("experiences")
        if experiences is None:
            experiences = await self.get_experiences(candidate_id)
        interviews = profile.get("interviews")
        if interviews is None:
            interviews = await self.get_interviews(candidate_id)
        return Candidate.model_validate(
            {**profile, "experiences": experiences, "interviews": interviews}
        )
