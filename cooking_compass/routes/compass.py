"""
compass.py — Cooking Compass recipe suggestion endpoint.

Route:
  POST /api/v1/compass — {"ingredients": "..."} → RecipeSuggestion

One OpenAI call per accepted request. Flow:
  method check (router) → cooldown → body → credential → prompt →
  provider → JSON recovery → field sanitizing → 200.

Errors are plain text (see the HTTPException handler in main.py). Nothing
internal reaches the client except the provider's own error text on 502.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from cooking_compass.ai.openai_client import OpenAIClient, ProviderError, get_openai_client
from cooking_compass.ai.prompts import build_messages
from cooking_compass.core.rate_limit import client_identifier
from cooking_compass.models.recipe import INGREDIENTS_MAX, RecipeSuggestion
from cooking_compass.services.recipe_sanitizer import safe_string, suggestion_from_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/compass", tags=["compass"])


async def _read_json_body(request: Request) -> dict[str, Any]:
    """Request body as a dict; malformed or non-object bodies count as {}."""
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


async def _suggest(request: Request, provider: OpenAIClient) -> RecipeSuggestion:
    body = await _read_json_body(request)
    ingredients = safe_string(body.get("ingredients"), INGREDIENTS_MAX).strip()
    if not ingredients:
        raise HTTPException(status_code=400, detail="Missing ingredients")

    if not provider.configured:
        logger.error("Rejecting request: OPENAI_API_KEY is not configured")
        raise HTTPException(status_code=500, detail="Server missing OPENAI_API_KEY")

    try:
        text = await provider.complete(build_messages(ingredients))
    except ProviderError as exc:
        raise HTTPException(status_code=502, detail=exc.body or "OpenAI request failed") from exc

    return suggestion_from_text(text)


@router.post("", response_model=RecipeSuggestion, status_code=200)
async def suggest_recipe(
    request: Request,
    provider: OpenAIClient = Depends(get_openai_client),
):
    """
    Suggest one coherent dish from a free-text ingredient list.

    Any non-POST method is rejected with 405 by the router before this runs,
    so the cooldown is never consumed by stray GETs.
    """
    client_id = client_identifier(request)
    if not request.app.state.limiter.allow(client_id):
        logger.info("Cooldown active for client %s", client_id)
        raise HTTPException(status_code=429, detail="Too many requests. Please slow down.")

    try:
        return await _suggest(request, provider)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Recipe suggestion failed")
        return PlainTextResponse("Server error", status_code=500)
