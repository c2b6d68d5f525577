"""Shared dependencies for API routes."""

from services.backend_client import RecruitmentBackendClient
from services.scoring_service import ScoringService

_service: ScoringService | None = None


def get_scoring_service() -> ScoringService:
    """Process-wide service, so the config cache is shared across requests."""
    global _service
    if _service is None:
        _service = ScoringService(RecruitmentBackendClient())
    return _service


async def close_scoring_service() -> None:
    global _service
    if _service is not None:
        await _service.client.aclose()
        _service = None
