"""Recipe resolution errors.

Every failure the resolver, scanner, parser or GitHub client can produce
derives from RecipeError so commands can catch a single type.
"""

from __future__ import annotations

import os
from pathlib import Path


class RecipeError(Exception):
    """Base class for recipe errors."""


class RecipeNotFoundError(RecipeError):
    """No source could provide a recipe with the requested name."""

    def __init__(self, name: str, searched_dirs: list[Path], message: str | None = None):
        self.name = name
        self.searched_dirs = list(searched_dirs)

        if message is None:
            dirs = os.pathsep.join(str(d) for d in self.searched_dirs)
            message = f"Failed to retrieve {name}.yaml or {name}.json in {dirs}"
        super().__init__(message)


class RecipeReadError(RecipeError):
    """A candidate recipe file exists but could not be read as UTF-8 text."""

    def __init__(self, path: Path, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read recipe file {path}: {cause}")


class RecipePathError(RecipeError):
    """The canonical parent directory of a recipe file could not be computed."""

    def __init__(self, path: Path, cause: BaseException | str):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to resolve absolute path for {path}: {cause}")


class RecipeValidationError(RecipeError):
    """Recipe content was read but is not a valid recipe."""


class RemoteRecipeError(RecipeError):
    """The remote recipe repository could not list or provide a recipe."""

    def __init__(self, repo: str, message: str):
        self.repo = repo
        super().__init__(f"{message} (repository: {repo})")
