"""Shared types for recipe resolution and discovery."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel
from pydantic import Field

# Priority order: when both exist for the same name, yaml wins
RECIPE_FILE_EXTENSIONS: tuple[str, ...] = ("yaml", "json")


def is_recipe_file_path(identifier: str) -> bool:
    """Check whether an identifier names a recipe file directly."""
    return any(identifier.endswith(f".{ext}") for ext in RECIPE_FILE_EXTENSIONS)


class RecipeSource(Enum):
    """Where a listed recipe was found."""

    LOCAL = "Local"
    GITHUB = "GitHub"


@dataclass(frozen=True)
class ResolvedRecipe:
    """Raw recipe content plus the directory relative resources resolve against.

    Attributes:
        content: Recipe file text
        base_dir: Canonical (symlink-resolved) parent directory of the recipe file
    """

    content: str
    base_dir: Path


class RecipeInfo(BaseModel):
    """A single entry in a recipe listing."""

    name: str = Field(..., description="File stem for local recipes, directory name for remote ones")
    source: RecipeSource
    path: str = Field(..., description="Filesystem path or repository location")
    title: str | None = None
    description: str | None = None

    @property
    def source_label(self) -> str:
        """Short lowercase label used in text listings."""
        return "local" if self.source == RecipeSource.LOCAL else "github"
