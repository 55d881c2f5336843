"""Recipe parsing and template validation.

Turns raw recipe text (YAML or JSON) into a validated Recipe. Templates use
the {{ key }} placeholder style; every placeholder must be declared as a
recipe parameter and every declared parameter must be used.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import RecipeValidationError
from .schema import Recipe

logger = logging.getLogger(__name__)

_VAR_RE = re.compile(r"\{\{\s*(?P<key>[a-zA-Z_][a-zA-Z0-9_]*)\s*(?:\|[^}]*)?\}\}")

# Always available to templates, never declared in parameters
BUILTIN_PARAMETERS = frozenset({"recipe_dir"})


def find_template_variables(content: str) -> set[str]:
    """Collect placeholder names referenced in recipe text."""
    return {match.group("key") for match in _VAR_RE.finditer(content)}


def parse_recipe_content(content: str, base_dir: str | Path) -> Recipe:
    """Parse and validate recipe text.

    Args:
        content: Raw recipe text (YAML or JSON)
        base_dir: Directory the recipe is evaluated from; relative
            sub-recipe paths must exist beneath it

    Returns:
        Validated Recipe

    Raises:
        RecipeValidationError: Content is malformed, fails schema validation,
            or has undeclared/unused template parameters
    """
    data = _load_mapping(content)

    try:
        recipe = Recipe.model_validate(data)
    except ValidationError as e:
        raise RecipeValidationError(f"Invalid recipe: {_format_validation_error(e)}") from e

    _check_parameters(recipe, find_template_variables(content))
    _check_sub_recipes(recipe, Path(base_dir))

    logger.debug(f"Parsed recipe '{recipe.title}' (base dir: {base_dir})")
    return recipe


def _load_mapping(content: str) -> dict[str, Any]:
    # JSON is a subset of YAML, so one loader covers both extensions
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise RecipeValidationError(f"Invalid recipe format: {e}") from e

    if not isinstance(data, dict):
        raise RecipeValidationError("Invalid recipe format: top level must be a mapping")
    return data


def _check_parameters(recipe: Recipe, template_vars: set[str]) -> None:
    declared = {p.key for p in recipe.parameters or []}
    used = template_vars - BUILTIN_PARAMETERS

    missing = sorted(used - declared)
    if missing:
        raise RecipeValidationError(
            f"Missing definitions for parameters in the recipe file: {', '.join(missing)}"
        )

    unused = sorted(declared - used)
    if unused:
        raise RecipeValidationError(f"Unnecessary parameter definitions: {', '.join(unused)}")


def _check_sub_recipes(recipe: Recipe, base_dir: Path) -> None:
    for sub_recipe in recipe.sub_recipes or []:
        sub_path = Path(sub_recipe.path)
        if not sub_path.is_absolute():
            sub_path = base_dir / sub_path
        if not sub_path.is_file():
            raise RecipeValidationError(f"Sub-recipe '{sub_recipe.name}' not found: {sub_path}")


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(part) for part in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)
