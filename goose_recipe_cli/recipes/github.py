"""GitHub recipe repository client.

A recipe repository holds one directory per recipe:

    <repo>/<recipe-name>/recipe.yaml   (or recipe.json)
    <repo>/<recipe-name>/<any resources the recipe references>

Discovery only talks to the GitHub contents API. Nothing is cached between
calls; retrieval downloads the recipe directory into a fresh temp directory.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Any
from typing import Protocol

import httpx
import yaml

from .errors import RemoteRecipeError
from .types import RECIPE_FILE_EXTENSIONS
from .types import RecipeInfo
from .types import RecipeSource
from .types import ResolvedRecipe

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
GOOSE_RECIPE_GITHUB_REPO_CONFIG_KEY = "GOOSE_RECIPE_GITHUB_REPO"
RECIPE_FILE_STEM = "recipe"


class RecipeRepository(Protocol):
    """Remote source of recipes addressed by a repository name."""

    def list_recipes(self, repo: str) -> list[RecipeInfo]: ...

    def retrieve_recipe(self, recipe_name: str, repo: str) -> ResolvedRecipe: ...


class GitHubRecipeRepository:
    """Lists and fetches recipes from a GitHub repository (owner/name)."""

    def __init__(
        self,
        token: str | None = None,
        api_url: str = GITHUB_API_URL,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
        download_root: Path | None = None,
    ):
        """Initialize the client.

        Args:
            token: GitHub token sent as a bearer token (optional for public repos)
            api_url: GitHub API base URL
            timeout: Per-request timeout in seconds
            transport: Custom httpx transport (for testing)
            download_root: Parent for retrieval temp directories (default: system temp)
        """
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self.download_root = download_root

    def list_recipes(self, repo: str) -> list[RecipeInfo]:
        """List every recipe directory in the repository.

        Entries whose metadata cannot be fetched are still listed, without
        title or description.

        Raises:
            RemoteRecipeError: Repository listing failed
        """
        with self._client() as client:
            entries = self._list_contents(client, repo, "")
            if entries is None:
                raise RemoteRecipeError(repo, "Recipe repository not found")

            recipes = []
            for entry in entries:
                name = entry.get("name") if isinstance(entry, dict) else None
                if not isinstance(name, str) or entry.get("type") != "dir":
                    continue
                info = self._remote_recipe_info(client, repo, name)
                if info is not None:
                    recipes.append(info)
            return recipes

    def retrieve_recipe(self, recipe_name: str, repo: str) -> ResolvedRecipe:
        """Download a recipe and its sibling files.

        Returns:
            ResolvedRecipe whose base_dir is the downloaded recipe directory

        Raises:
            RemoteRecipeError: Recipe missing upstream or download failed
        """
        with self._client() as client:
            entries = self._list_contents(client, repo, recipe_name)
            if entries is None:
                raise RemoteRecipeError(repo, f"Recipe '{recipe_name}' not found")

            recipe_entry = _pick_recipe_file(entries)
            if recipe_entry is None:
                raise RemoteRecipeError(repo, f"No recipe.yaml or recipe.json found for '{recipe_name}'")

            download_dir = Path(tempfile.mkdtemp(prefix="goose-recipe-", dir=self.download_root))
            target_dir = download_dir / recipe_name
            logger.info(f"Downloading recipe '{recipe_name}' from {repo} to {target_dir}")

            try:
                target_dir.mkdir(parents=True)
                for entry in _file_entries(entries):
                    data = self._download(client, repo, entry["download_url"])
                    (target_dir / entry["name"]).write_bytes(data)
            except OSError as e:
                shutil.rmtree(download_dir, ignore_errors=True)
                raise RemoteRecipeError(repo, f"Failed to store recipe '{recipe_name}': {e}") from e
            except RemoteRecipeError:
                shutil.rmtree(download_dir, ignore_errors=True)
                raise

        content_path = target_dir / recipe_entry["name"]
        try:
            content = content_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RemoteRecipeError(repo, f"Downloaded recipe is not readable: {e}") from e

        return ResolvedRecipe(content=content, base_dir=target_dir.resolve())

    def _client(self) -> httpx.Client:
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return httpx.Client(
            base_url=self.api_url,
            headers=headers,
            timeout=self.timeout,
            follow_redirects=True,
            transport=self.transport,
        )

    def _list_contents(self, client: httpx.Client, repo: str, path: str) -> list[dict[str, Any]] | None:
        """List a repository directory, or None if it does not exist."""
        url = f"/repos/{repo}/contents/{path}".rstrip("/")
        try:
            response = client.get(url)
            if response.status_code == 404:
                return None
            response.raise_for_status()
            entries = response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            raise RemoteRecipeError(repo, f"Failed to list '{path or '/'}': {e}") from e

        # The contents API returns a single object when the path is a file
        if not isinstance(entries, list):
            return None
        return entries

    def _download(self, client: httpx.Client, repo: str, url: str) -> bytes:
        try:
            response = client.get(url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RemoteRecipeError(repo, f"Failed to download {url}: {e}") from e
        return response.content

    def _remote_recipe_info(self, client: httpx.Client, repo: str, name: str) -> RecipeInfo | None:
        try:
            entries = self._list_contents(client, repo, name) or []
        except RemoteRecipeError as e:
            logger.debug(f"[recipe:github] Skipping {name}: {e}")
            return None

        recipe_entry = _pick_recipe_file(entries)
        if recipe_entry is None:
            return None

        title = description = None
        try:
            metadata = yaml.safe_load(self._download(client, repo, recipe_entry["download_url"]))
            if isinstance(metadata, dict):
                title = _optional_str(metadata.get("title"))
                description = _optional_str(metadata.get("description"))
        except (RemoteRecipeError, yaml.YAMLError, KeyError) as e:
            logger.debug(f"[recipe:github] No metadata for {name}: {e}")

        return RecipeInfo(
            name=name,
            source=RecipeSource.GITHUB,
            path=f"{repo}/{name}",
            title=title,
            description=description,
        )

    def __repr__(self) -> str:
        return f"GitHubRecipeRepository({self.api_url})"


def _file_entries(entries: list[Any]) -> list[dict[str, Any]]:
    """Downloadable file entries of a directory listing."""
    return [
        entry
        for entry in entries
        if isinstance(entry, dict)
        and entry.get("type") == "file"
        and isinstance(entry.get("name"), str)
        and isinstance(entry.get("download_url"), str)
    ]


def _pick_recipe_file(entries: list[Any]) -> dict[str, Any] | None:
    """Pick recipe.<ext> from a directory listing, honoring extension priority."""
    files = {entry["name"]: entry for entry in _file_entries(entries)}
    for ext in RECIPE_FILE_EXTENSIONS:
        entry = files.get(f"{RECIPE_FILE_STEM}.{ext}")
        if entry is not None:
            return entry
    return None


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None
