"""
recipe_sanitizer.py — Turns untrusted model text into a RecipeSuggestion.

Two stages:
  1. parse_model_json()  strict json.loads, then a fallback that recovers a
     JSON object sitting at the very end of the text (after some prose).
  2. sanitize_recipe()   builds every output field explicitly, with length
     and item caps, regardless of what the parsed object contains.

The fallback only matches when the object ends the text. A reply that puts
JSON first and commentary after it is not recovered and surfaces as an error.
"""

import json
import logging
import re
from typing import Any

from cooking_compass.models.recipe import (
    INTRO_MAX,
    ITEM_MAX,
    NOTE_MAX,
    OPTIONAL_MAX_ITEMS,
    OPTIONAL_PREFIX,
    STEPS_MAX_ITEMS,
    TITLE_MAX,
    RecipeSuggestion,
)

logger = logging.getLogger(__name__)

# First "{" through a "}" that ends the text.
_TRAILING_OBJECT = re.compile(r"\{[\s\S]*\}$")


class ModelOutputError(ValueError):
    """The model reply contained no parsable JSON."""


def safe_string(value: Any, max_length: int = 800) -> str:
    """Stringify *value* ("" for None and other empty values) and cap its length."""
    if not value:
        return ""
    return str(value)[:max_length]


def parse_model_json(text: str) -> dict[str, Any]:
    """
    Parse the model reply into a dict.

    A reply that parses to something other than a JSON object (a list, a
    number) yields {} so every output field falls back to its default.

    Raises:
        ModelOutputError: neither the whole text nor a trailing object parses.
    """
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        match = _TRAILING_OBJECT.search(text)
        if not match:
            logger.warning("Model reply has no JSON object: %r", text[:120])
            raise ModelOutputError("Model did not return JSON.")
        try:
            parsed = json.loads(match.group())
        except json.JSONDecodeError as exc:
            logger.warning("Trailing object in model reply is not valid JSON: %s", exc)
            raise ModelOutputError("Model did not return JSON.") from exc

    return parsed if isinstance(parsed, dict) else {}


def _with_optional_prefix(item: str) -> str:
    return item if item.startswith(OPTIONAL_PREFIX) else f"{OPTIONAL_PREFIX} {item}"


def sanitize_recipe(parsed: dict[str, Any]) -> RecipeSuggestion:
    """
    Map a parsed model object onto RecipeSuggestion.

    The prefix is added before the item cap is applied, so running the result
    back through this function changes nothing.
    """
    steps = parsed.get("steps")
    optional = parsed.get("optional")

    return RecipeSuggestion(
        title=safe_string(parsed.get("title"), TITLE_MAX),
        intro=safe_string(parsed.get("intro"), INTRO_MAX),
        steps=(
            [safe_string(s, ITEM_MAX) for s in steps[:STEPS_MAX_ITEMS]]
            if isinstance(steps, list)
            else []
        ),
        optional=(
            [
                safe_string(_with_optional_prefix(safe_string(s)), ITEM_MAX)
                for s in optional[:OPTIONAL_MAX_ITEMS]
            ]
            if isinstance(optional, list)
            else []
        ),
        note=safe_string(parsed.get("note"), NOTE_MAX),
    )


def suggestion_from_text(text: str) -> RecipeSuggestion:
    """parse_model_json() followed by sanitize_recipe()."""
    return sanitize_recipe(parse_model_json(text))
