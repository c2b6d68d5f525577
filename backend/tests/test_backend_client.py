"""Tests for the recruitment backend HTTP client."""

import json

import httpx
import pytest

from models.schemas.scoring_weights import ScoringWeights
from services.backend_client import RecruitmentBackendClient, parse_scoring_config
from services.exceptions import BackendPayloadError, BackendRequestError, BackendUnavailableError

BASE_URL = "http://backend.test/api"


def _client(handler) -> RecruitmentBackendClient:
    return RecruitmentBackendClient(
        base_url=BASE_URL,
        token="secret-token",
        transport=httpx.MockTransport(handler),
    )


class TestParseScoringConfig:
    def test_wrapped(self):
        config = parse_scoring_config({"weights": ScoringWeights().model_dump(), "is_custom": True})
        assert config.is_custom is True
        assert config.weights == ScoringWeights()

    def test_bare_weights(self):
        config = parse_scoring_config(ScoringWeights().model_dump())
        assert config.is_custom is False
        assert config.weights.total() == pytest.approx(100.0)

    def test_partial_config_rejected(self):
        with pytest.raises(BackendPayloadError):
            parse_scoring_config({"weights": {"education": {"education_level": 50, "courses": 50}}})

    def test_off_total_config_rejected(self):
        raw = ScoringWeights().model_dump()
        raw["education"]["courses"] = 30.0
        with pytest.raises(BackendPayloadError):
            parse_scoring_config(raw)

    def test_is_custom_derived_when_missing(self):
        raw = ScoringWeights().model_dump()
        raw["education"]["courses"] = 1.0
        raw["education"]["education_level"] = 19.0
        assert parse_scoring_config({"weights": raw}).is_custom is True


class TestRecruitmentBackendClient:
    @pytest.mark.asyncio
    async def test_get_scoring_config(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"weights": ScoringWeights().model_dump(), "is_custom": False})

        async with _client(handler) as client:
            config = await client.get_scoring_config()

        assert config.weights == ScoringWeights()
        assert seen[0].url.path == "/api/scoring-config/"
        assert seen[0].headers["Authorization"] == "Bearer secret-token"

    @pytest.mark.asyncio
    async def test_update_sends_nested_weights(self):
        bodies = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={})

        async with _client(handler) as client:
            result = await client.update_scoring_config(ScoringWeights())

        assert result is None
        assert bodies[0]["weights"]["education"]["courses"] == 2.0

    @pytest.mark.asyncio
    async def test_list_candidates_unwraps_pagination(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"count": 1, "results": [{"id": 3}]})

        async with _client(handler) as client:
            assert await client.list_candidates() == [{"id": 3}]

    @pytest.mark.asyncio
    async def test_fetch_candidate_snapshot_joins_lists(self):
        def handler(request: httpx.Request) -> httpx.Response:
            path = request.url.path
            if path == "/api/candidates/5/":
                return httpx.Response(200, json={"id": 5, "skills": "Excel"})
            if path == "/api/candidates/5/experiences/":
                return httpx.Response(200, json=[{"start_date": "2020-01-01"}])
            if path == "/api/interviews/":
                assert request.url.params["candidate"] == "5"
                return httpx.Response(200, json=[{"status": "completed", "rating": 4}])
            return httpx.Response(404)

        async with _client(handler) as client:
            candidate = await client.fetch_candidate_snapshot(5)

        assert candidate.id == 5
        assert len(candidate.experiences) == 1
        assert candidate.interviews[0].rating == 4.0

    @pytest.mark.asyncio
    async def test_server_error_is_retryable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="bad gateway")

        async with _client(handler) as client:
            with pytest.raises(BackendUnavailableError):
                await client.get_scoring_config()

    @pytest.mark.asyncio
    async def test_timeout_is_retryable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        async with _client(handler) as client:
            with pytest.raises(BackendUnavailableError):
                await client.recalculate_all_scores()

    @pytest.mark.asyncio
    async def test_connection_error_is_retryable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with _client(handler) as client:
            with pytest.raises(BackendUnavailableError):
                await client.get_candidate(1)

    @pytest.mark.asyncio
    async def test_client_error_carries_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="Not found")

        async with _client(handler) as client:
            with pytest.raises(BackendRequestError) as exc_info:
                await client.get_candidate(99)

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Not found"

    @pytest.mark.asyncio
    async def test_partial_upstream_config_rejected(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"weights": {"education": {"education_level": 100}}})

        async with _client(handler) as client:
            with pytest.raises(BackendPayloadError):
                await client.get_scoring_config()

    @pytest.mark.asyncio
    async def test_reset_acknowledgement_without_weights(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "ok"})

        async with _client(handler) as client:
            assert await client.reset_scoring_config() is None
