"""Directory recipe scanning.

Two primitives shared by resolution and listing:
- Find one recipe by bare name, trying each recognized extension in order
- Enumerate every recipe file directly inside a directory

Scanning is tolerant: unreadable candidates, missing directories and
unparseable files reduce the result instead of failing it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import RecipeError
from .errors import RecipeNotFoundError
from .reader import read_recipe_file
from .template import parse_recipe_content
from .types import RECIPE_FILE_EXTENSIONS
from .types import RecipeInfo
from .types import RecipeSource
from .types import ResolvedRecipe

logger = logging.getLogger(__name__)


def find_recipe_in_dir(directory: Path, recipe_name: str) -> ResolvedRecipe | None:
    """Find a recipe by bare name in one directory.

    Args:
        directory: Directory to look in
        recipe_name: Recipe name without extension

    Returns:
        ResolvedRecipe for the first readable candidate, None if none matched
    """
    for ext in RECIPE_FILE_EXTENSIONS:
        candidate = directory / f"{recipe_name}.{ext}"
        try:
            return read_recipe_file(candidate)
        except RecipeError as e:
            logger.debug(f"[recipe:scan] {candidate} skipped: {e}")
    return None


def read_recipe_in_dir(directory: Path, recipe_name: str) -> ResolvedRecipe:
    """Like find_recipe_in_dir, but a miss is an error.

    Raises:
        RecipeNotFoundError: Neither <name>.yaml nor <name>.json was readable
    """
    resolved = find_recipe_in_dir(directory, recipe_name)
    if resolved is None:
        raise RecipeNotFoundError(
            recipe_name,
            [directory],
            message=f"No {recipe_name}.yaml or {recipe_name}.json recipe file found in directory: {directory}",
        )
    return resolved


def list_recipe_files(directory: Path) -> list[Path]:
    """List recipe files directly inside a directory (not recursive).

    A directory that does not exist, is not a directory, or cannot be listed
    yields an empty list.
    """
    if not directory.exists() or not directory.is_dir():
        return []

    try:
        entries = list(directory.iterdir())
    except OSError as e:
        logger.debug(f"[recipe:scan] Cannot list {directory}: {e}")
        return []

    return sorted(
        (p for p in entries if p.is_file() and p.suffix[1:] in RECIPE_FILE_EXTENSIONS),
        key=lambda p: p.name,
    )


def create_local_recipe_info(path: Path) -> RecipeInfo | None:
    """Build a listing entry for one local recipe file.

    The recipe is parsed as if invoked from its own directory.

    Returns:
        RecipeInfo, or None when the file cannot be read or parsed
    """
    try:
        content = path.read_text(encoding="utf-8")
        recipe = parse_recipe_content(content, path.parent)
    except (OSError, UnicodeDecodeError, RecipeError) as e:
        logger.debug(f"[recipe:scan] Skipping {path}: {e}")
        return None

    return RecipeInfo(
        name=path.stem,
        source=RecipeSource.LOCAL,
        path=str(path),
        title=recipe.title,
        description=recipe.description,
    )


def scan_directory_for_recipes(directory: Path) -> list[RecipeInfo]:
    """Listing entries for every valid recipe directly inside a directory."""
    infos = (create_local_recipe_info(path) for path in list_recipe_files(directory))
    return [info for info in infos if info is not None]
