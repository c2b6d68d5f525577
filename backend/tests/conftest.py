"""Shared test configuration, pytest markers and fakes."""

import pytest

from models.schemas.candidate import Candidate
from models.schemas.scoring_weights import ScoringConfig, ScoringWeights
from services.exceptions import BackendRequestError
from services.scoring_service import ScoringService


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: talks to a running recruitment backend"
    )


class FakeBackendClient:
    """In-memory stand-in for RecruitmentBackendClient."""

    def __init__(self, candidates: list[dict] | None = None) -> None:
        self.config = ScoringConfig()
        self.candidates = {c["id"]: c for c in (candidates or [])}
        self.calls: list[str] = []
        self.fail_with: Exception | None = None

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    async def get_scoring_config(self) -> ScoringConfig:
        self._record("get_scoring_config")
        return self.config

    async def update_scoring_config(self, weights: ScoringWeights) -> ScoringConfig:
        self._record("update_scoring_config")
        self.config = ScoringConfig(weights=weights, is_custom=weights != ScoringWeights())
        return self.config

    async def reset_scoring_config(self) -> ScoringConfig:
        self._record("reset_scoring_config")
        self.config = ScoringConfig()
        return self.config

    async def recalculate_all_scores(self) -> dict:
        self._record("recalculate_all_scores")
        return {"updated": len(self.candidates)}

    async def list_candidates(self, params: dict | None = None) -> list[dict]:
        self._record("list_candidates")
        return list(self.candidates.values())

    async def fetch_candidate_snapshot(self, candidate_id: int) -> Candidate:
        self._record("fetch_candidate_snapshot")
        if candidate_id not in self.candidates:
            raise BackendRequestError(404, "Candidate not found")
        return Candidate.model_validate(self.candidates[candidate_id])

    async def aclose(self) -> None:
        pass


STRONG_CANDIDATE = {
    "id": 1,
    "first_name": "Ana",
    "last_name": "Souza",
    "email": "ana@example.com",
    "phone_number": "+55 11 99999-0000",
    "address": "Rua A, 100",
    "city": "Campinas",
    "current_position": "Pintora",
    "current_company": "Obras SA",
    "skills": "Pintura, Textura, Massa corrida, Gesso, Acabamento",
    "certifications": "NR-35, NR-18, NR-10",
    "courses": "Pintura industrial, Segurança, Leitura de projetos, Gesso",
    "highest_education": "pos_graduacao",
    "how_found_vacancy": "linkedin",
    "availability_start": "imediato",
    "has_own_transportation": "sim",
    "travel_availability": "sim",
    "height_painting": "sim",
    "experiences": [
        {"company": "Obras SA", "role": "Pintora", "start_date": "2015-01-01", "end_date": "2023-01-01"},
    ],
    "interviews": [
        {"status": "completed", "rating": 5, "feedback": "Excelente"},
        {"status": "completed", "rating": 5, "feedback": "Muito boa"},
    ],
}

EMPTY_CANDIDATE = {"id": 2, "first_name": "Bruno"}


@pytest.fixture
def fake_backend():
    return FakeBackendClient(candidates=[STRONG_CANDIDATE, EMPTY_CANDIDATE])


@pytest.fixture
def scoring_service(fake_backend):
    return ScoringService(fake_backend, cache_ttl_seconds=300)


@pytest.fixture
def strong_candidate():
    return Candidate.model_validate(STRONG_CANDIDATE)


@pytest.fixture
def empty_candidate():
    return Candidate.model_validate(EMPTY_CANDIDATE)
