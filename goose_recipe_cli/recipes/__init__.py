"""
Recipes module - resolve, list, validate and share goose recipes.

Public API:
- RecipeResolver: Resolve a name or path to recipe content (first match wins)
- RecipeCatalog: List local and GitHub recipes (fail-soft)
- get_recipe_search_paths: Current directory plus GOOSE_RECIPE_PATH entries
- parse_recipe_content: Validate recipe text into a Recipe
- encode_deeplink / decode_deeplink / generate_deeplink: goose:// deep links
- GitHubRecipeRepository: Remote recipe source
"""

from .catalog import RecipeCatalog
from .deeplink import decode_deeplink
from .deeplink import encode_deeplink
from .deeplink import generate_deeplink
from .errors import RecipeError
from .errors import RecipeNotFoundError
from .errors import RecipePathError
from .errors import RecipeReadError
from .errors import RecipeValidationError
from .errors import RemoteRecipeError
from .github import GOOSE_RECIPE_GITHUB_REPO_CONFIG_KEY
from .github import GitHubRecipeRepository
from .github import RecipeRepository
from .resolver import RecipeResolver
from .schema import Recipe
from .search_paths import GOOSE_RECIPE_PATH_ENV_VAR
from .search_paths import get_recipe_search_paths
from .template import parse_recipe_content
from .types import RECIPE_FILE_EXTENSIONS
from .types import RecipeInfo
from .types import RecipeSource
from .types import ResolvedRecipe

__all__ = [
    "GOOSE_RECIPE_GITHUB_REPO_CONFIG_KEY",
    "GOOSE_RECIPE_PATH_ENV_VAR",
    "RECIPE_FILE_EXTENSIONS",
    "GitHubRecipeRepository",
    "Recipe",
    "RecipeCatalog",
    "RecipeError",
    "RecipeInfo",
    "RecipeNotFoundError",
    "RecipePathError",
    "RecipeReadError",
    "RecipeRepository",
    "RecipeResolver",
    "RecipeSource",
    "RecipeValidationError",
    "RemoteRecipeError",
    "ResolvedRecipe",
    "decode_deeplink",
    "encode_deeplink",
    "generate_deeplink",
    "get_recipe_search_paths",
    "parse_recipe_content",
]
