"""
Pydantic models for the Cooking Compass endpoint.

RecipeSuggestion is the only success payload. Every field has a default so
the response is fully formed even when the model ignores the format request;
services/recipe_sanitizer.py builds it field by field within these caps.
"""

from pydantic import BaseModel, Field

# ─── Field caps ───────────────────────────────────────────────────────────────
TITLE_MAX = 140
INTRO_MAX = 420
NOTE_MAX = 260
ITEM_MAX = 220
STEPS_MAX_ITEMS = 8
OPTIONAL_MAX_ITEMS = 5

INGREDIENTS_MAX = 700

OPTIONAL_PREFIX = "Optional:"


class RecipeSuggestion(BaseModel):
    title: str = Field(default="", max_length=TITLE_MAX)
    intro: str = Field(default="", max_length=INTRO_MAX)
    steps: list[str] = Field(default_factory=list, max_length=STEPS_MAX_ITEMS)
    # Every entry starts with "Optional:"
    optional: list[str] = Field(default_factory=list, max_length=OPTIONAL_MAX_ITEMS)
    note: str = Field(default="", max_length=NOTE_MAX)
