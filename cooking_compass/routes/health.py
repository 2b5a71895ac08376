"""
Health check endpoint.

Used by load balancers, uptime checks and the front-end to confirm the API
process is alive. `ai_configured` tells operators whether recipe requests
will fail with a missing-key 500, without revealing the key itself.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from cooking_compass.ai.openai_client import OpenAIClient, get_openai_client
from cooking_compass.core.config import settings

VERSION = "0.1.0"

router = APIRouter()


class HealthResponse(BaseModel):
    status: str  # Always "ok" if the API process is alive
    version: str
    environment: str
    ai_configured: bool


@router.get("", response_model=HealthResponse, summary="API health check")
async def health_check(provider: OpenAIClient = Depends(get_openai_client)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=VERSION,
        environment=settings.environment,
        ai_configured=provider.configured,
    )
