"""CLI-specific path policy and dependency injection helpers.

The recipe library receives search paths and configuration via injection;
this module makes the CLI's choices (current directory, GOOSE_RECIPE_PATH,
config.yaml, GITHUB_TOKEN).
"""

import os
from pathlib import Path

from .recipes import GOOSE_RECIPE_GITHUB_REPO_CONFIG_KEY
from .recipes import GitHubRecipeRepository
from .recipes import RecipeCatalog
from .recipes import RecipeResolver
from .recipes import get_recipe_search_paths
from .recipes.search_paths import recipe_path_from_env
from .settings import ConfigStore


def get_recipe_search_paths_from_env() -> list[Path]:
    """Search paths for this process: "." then GOOSE_RECIPE_PATH entries."""
    return get_recipe_search_paths(Path("."), recipe_path_from_env())


def configured_github_recipe_repo(config: ConfigStore | None = None) -> str | None:
    """GitHub recipe repository from config, or None to disable remote recipes."""
    config = config or ConfigStore()
    return config.get_param(GOOSE_RECIPE_GITHUB_REPO_CONFIG_KEY)


def create_github_repository() -> GitHubRecipeRepository:
    """Create GitHub client authenticated with GITHUB_TOKEN when set."""
    return GitHubRecipeRepository(token=os.environ.get("GITHUB_TOKEN"))


def create_recipe_resolver(config: ConfigStore | None = None) -> RecipeResolver:
    """Create resolver with CLI search paths and configured GitHub repo."""
    return RecipeResolver(
        search_paths=get_recipe_search_paths_from_env(),
        github_repo=configured_github_recipe_repo(config),
        repository=create_github_repository(),
    )


def create_recipe_catalog(config: ConfigStore | None = None) -> RecipeCatalog:
    """Create catalog with the same sources the resolver uses."""
    return RecipeCatalog(
        search_paths=get_recipe_search_paths_from_env(),
        github_repo=configured_github_recipe_repo(config),
        repository=create_github_repository(),
    )
