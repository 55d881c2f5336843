"""Local recipe file reader."""

from pathlib import Path

from .errors import RecipePathError
from .errors import RecipeReadError
from .types import ResolvedRecipe


def read_recipe_file(recipe_path: str | Path) -> ResolvedRecipe:
    """Read a recipe file and compute its canonical parent directory.

    The parent is taken from the symlink-resolved path, so relative resources
    resolve the same way however the file was named.

    Args:
        recipe_path: Path to a recipe file

    Returns:
        ResolvedRecipe with the file text and canonical parent directory

    Raises:
        RecipeReadError: File missing, unreadable, or not UTF-8
        RecipePathError: Canonical path could not be determined
    """
    path = Path(recipe_path)

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RecipeReadError(path, e) from e

    try:
        canonical = path.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise RecipePathError(path, e) from e

    if canonical.parent == canonical:
        raise RecipePathError(canonical, "resolved path has no parent")

    return ResolvedRecipe(content=content, base_dir=canonical.parent)
