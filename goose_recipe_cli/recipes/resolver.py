"""Recipe resolver - turn a recipe identifier into recipe content.

Resolution order (first match wins):
1. Direct path: identifier ends in .yaml/.json (terminal, never falls back)
2. Search directories: current directory, then GOOSE_RECIPE_PATH entries
3. GitHub repository: only when one is configured

Steps 2 and 3 are an ordered list of strategies, each returning a
ResolvedRecipe or None. The GitHub strategy is last; its error is final.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from .errors import RecipeNotFoundError
from .github import RecipeRepository
from .reader import read_recipe_file
from .scanner import find_recipe_in_dir
from .schema import Recipe
from .template import parse_recipe_content
from .types import ResolvedRecipe
from .types import is_recipe_file_path

logger = logging.getLogger(__name__)

ResolutionStrategy = tuple[str, Callable[[], ResolvedRecipe | None]]


class RecipeResolver:
    """Resolve recipe identifiers against local directories and GitHub.

    Configuration is injected: the resolver never reads the environment or
    config files itself.
    """

    def __init__(
        self,
        search_paths: list[Path],
        github_repo: str | None = None,
        repository: RecipeRepository | None = None,
    ):
        """Initialize resolver.

        Args:
            search_paths: Directories to search, highest precedence first
            github_repo: Configured GitHub repository (owner/name), or None
            repository: Remote client; required for the GitHub fallback
        """
        self.search_paths = list(search_paths)
        self.github_repo = github_repo
        self.repository = repository

    def resolve(self, identifier: str) -> ResolvedRecipe:
        """Resolve an identifier to recipe content and its base directory.

        Raises:
            RecipeReadError: Direct path could not be read
            RecipePathError: Direct path could not be canonicalized
            RecipeNotFoundError: No local match and no remote configured
            RemoteRecipeError: No local match and the GitHub lookup failed
        """
        if is_recipe_file_path(identifier):
            logger.debug(f"[recipe:resolve] {identifier} -> direct path")
            return read_recipe_file(Path(identifier))

        for layer, strategy in self.strategies(identifier):
            resolved = strategy()
            if resolved is not None:
                logger.debug(f"[recipe:resolve] {identifier} -> {layer}")
                return resolved

        raise RecipeNotFoundError(identifier, self.search_paths)

    def strategies(self, recipe_name: str) -> list[ResolutionStrategy]:
        """Ordered (layer_name, strategy) pairs tried for a bare recipe name."""
        strategies: list[ResolutionStrategy] = [
            (f"local:{directory}", _local_strategy(directory, recipe_name)) for directory in self.search_paths
        ]
        if self.github_repo and self.repository is not None:
            strategies.append(
                (f"github:{self.github_repo}", _github_strategy(self.repository, self.github_repo, recipe_name))
            )
        return strategies

    def load_recipe(self, identifier: str) -> Recipe:
        """Resolve and fully validate a recipe.

        Raises:
            RecipeError: Any resolution or validation failure
        """
        resolved = self.resolve(identifier)
        return parse_recipe_content(resolved.content, resolved.base_dir)

    def __repr__(self) -> str:
        return f"RecipeResolver(search_paths={self.search_paths}, github_repo={self.github_repo})"


def _local_strategy(directory: Path, recipe_name: str) -> Callable[[], ResolvedRecipe | None]:
    return lambda: find_recipe_in_dir(directory, recipe_name)


def _github_strategy(repository: RecipeRepository, repo: str, recipe_name: str) -> Callable[[], ResolvedRecipe]:
    def strategy() -> ResolvedRecipe:
        logger.info(f"Recipe '{recipe_name}' not found locally, trying GitHub repository {repo}")
        return repository.retrieve_recipe(recipe_name, repo)

    return strategy
