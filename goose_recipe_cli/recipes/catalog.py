"""Recipe catalog - list every discoverable recipe.

Listing is fail-soft: a missing directory, an unparseable recipe file or an
unreachable GitHub repository shrinks the result but never fails it.
Unlike resolution, listing does not deduplicate by name; two directories
providing the same recipe name are both listed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .github import RecipeRepository
from .scanner import scan_directory_for_recipes
from .types import RecipeInfo

logger = logging.getLogger(__name__)


class RecipeCatalog:
    """Aggregates local and GitHub recipes into a flat listing."""

    def __init__(
        self,
        search_paths: list[Path],
        github_repo: str | None = None,
        repository: RecipeRepository | None = None,
    ):
        """Initialize catalog.

        Args:
            search_paths: Directories to scan, highest precedence first
            github_repo: Configured GitHub repository (owner/name), or None
            repository: Remote client used when github_repo is set
        """
        self.search_paths = list(search_paths)
        self.github_repo = github_repo
        self.repository = repository

    def list_available(self) -> list[RecipeInfo]:
        """List local recipes (in search order) followed by GitHub recipes."""
        recipes = self.discover_local_recipes()
        recipes.extend(self.discover_github_recipes())
        return recipes

    def discover_local_recipes(self) -> list[RecipeInfo]:
        recipes: list[RecipeInfo] = []
        for directory in self.search_paths:
            recipes.extend(scan_directory_for_recipes(directory))
        return recipes

    def discover_github_recipes(self) -> list[RecipeInfo]:
        """GitHub recipes, or an empty list when unconfigured or unreachable."""
        if not self.github_repo or self.repository is None:
            return []

        try:
            return self.repository.list_recipes(self.github_repo)
        except Exception as e:
            logger.warning(f"Failed to list recipes from GitHub repository {self.github_repo}: {e}")
            return []
