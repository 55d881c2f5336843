"""Recipe deep links.

Format (consumed by other goose clients, so any change is breaking):

    goose://recipe?config=<percent-encoded standard base64 of compact recipe JSON>

Base64 uses the standard alphabet with padding; percent-encoding leaves only
unreserved characters (A-Z a-z 0-9 - _ . ~) as-is.
"""

from __future__ import annotations

import base64
import binascii
import json
from urllib.parse import parse_qs
from urllib.parse import quote
from urllib.parse import urlsplit

from pydantic import ValidationError

from .errors import RecipeValidationError
from .resolver import RecipeResolver
from .schema import Recipe

DEEPLINK_SCHEME = "goose"
DEEPLINK_HOST = "recipe"


def recipe_to_json(recipe: Recipe) -> str:
    """Serialize a recipe to compact JSON, omitting unset fields."""
    data = recipe.model_dump(mode="json", exclude_none=True)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def encode_deeplink(recipe: Recipe) -> str:
    """Encode a validated recipe into a deep-link URL."""
    token = base64.b64encode(recipe_to_json(recipe).encode("utf-8")).decode("ascii")
    return f"{DEEPLINK_SCHEME}://{DEEPLINK_HOST}?config={quote(token, safe='')}"


def decode_deeplink(url: str) -> Recipe:
    """Decode a deep-link URL back into a Recipe.

    Raises:
        RecipeValidationError: Not a recipe deep link, or the payload is corrupt
    """
    parts = urlsplit(url)
    if parts.scheme != DEEPLINK_SCHEME or parts.netloc != DEEPLINK_HOST:
        raise RecipeValidationError(f"Not a recipe deep link: {url}")

    # parse_qs un-percent-encodes; keep '+' literal since quote() never emits it unescaped
    values = parse_qs(parts.query.replace("+", "%2B")).get("config")
    if not values:
        raise RecipeValidationError("Deep link has no config parameter")

    try:
        payload = base64.b64decode(values[0], validate=True)
        return Recipe.model_validate_json(payload)
    except (binascii.Error, ValueError, ValidationError) as e:
        raise RecipeValidationError(f"Invalid deep link payload: {e}") from e


def generate_deeplink(identifier: str, resolver: RecipeResolver) -> tuple[Recipe, str]:
    """Load and validate a recipe, then encode it.

    Validation errors propagate unchanged; no URL is produced for an invalid
    recipe.

    Returns:
        Tuple of (recipe, deep-link URL)
    """
    recipe = resolver.load_recipe(identifier)
    return recipe, encode_deeplink(recipe)
