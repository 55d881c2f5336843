"""Recipe search paths.

Search order (highest precedence first):
1. Current directory
2. Each entry of GOOSE_RECIPE_PATH, left to right

Both single-recipe resolution and listing build their directory list here,
so the two modes always agree on precedence.
"""

import os
import sys
from collections.abc import Mapping
from pathlib import Path

GOOSE_RECIPE_PATH_ENV_VAR = "GOOSE_RECIPE_PATH"


def recipe_path_separator() -> str:
    """Delimiter used between GOOSE_RECIPE_PATH entries on this platform."""
    return ";" if sys.platform == "win32" else ":"


def recipe_path_from_env(environ: Mapping[str, str] | None = None) -> str | None:
    """Read GOOSE_RECIPE_PATH, or None when it is unset."""
    if environ is None:
        environ = os.environ
    return environ.get(GOOSE_RECIPE_PATH_ENV_VAR)


def get_recipe_search_paths(cwd: Path | None = None, recipe_path_env: str | None = None) -> list[Path]:
    """
    Get recipe search directories in precedence order.

    Entries are neither deduplicated nor checked for existence; a missing
    directory simply yields no matches downstream.

    Args:
        cwd: Directory searched first (defaults to ".")
        recipe_path_env: Raw GOOSE_RECIPE_PATH value, or None when unset

    Returns:
        List of directories, highest precedence first

    Example:
        >>> get_recipe_search_paths(Path("."), "/opt/recipes:/srv/recipes")
        [PosixPath('.'), PosixPath('/opt/recipes'), PosixPath('/srv/recipes')]
    """
    search_dirs = [cwd if cwd is not None else Path(".")]

    if recipe_path_env is not None:
        search_dirs.extend(Path(entry) for entry in recipe_path_env.split(recipe_path_separator()))

    return search_dirs
