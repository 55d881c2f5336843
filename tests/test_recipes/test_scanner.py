"""Tests for directory recipe scanning."""

import pytest

from goose_recipe_cli.recipes.errors import RecipeNotFoundError
from goose_recipe_cli.recipes.scanner import create_local_recipe_info
from goose_recipe_cli.recipes.scanner import find_recipe_in_dir
from goose_recipe_cli.recipes.scanner import list_recipe_files
from goose_recipe_cli.recipes.scanner import read_recipe_in_dir
from goose_recipe_cli.recipes.scanner import scan_directory_for_recipes
from goose_recipe_cli.recipes.types import RecipeSource

JSON_RECIPE = '{"title": "From JSON", "description": "json variant", "prompt": "hi"}'


class TestFindRecipeInDir:
    def test_finds_yaml(self, tmp_path, write_recipe, valid_recipe):
        write_recipe(tmp_path, "hello.yaml")

        resolved = find_recipe_in_dir(tmp_path, "hello")

        assert resolved is not None
        assert resolved.content == valid_recipe

    def test_finds_json(self, tmp_path, write_recipe):
        write_recipe(tmp_path, "hello.json", JSON_RECIPE)

        resolved = find_recipe_in_dir(tmp_path, "hello")

        assert resolved is not None
        assert resolved.content == JSON_RECIPE

    def test_yaml_wins_over_json(self, tmp_path, write_recipe, valid_recipe):
        write_recipe(tmp_path, "hello.json", JSON_RECIPE)
        write_recipe(tmp_path, "hello.yaml")

        # Repeated calls stay deterministic
        for _ in range(3):
            assert find_recipe_in_dir(tmp_path, "hello").content == valid_recipe

    def test_unreadable_yaml_falls_through_to_json(self, tmp_path, write_recipe):
        (tmp_path / "hello.yaml").write_bytes(b"\xff\xfe not utf-8")
        write_recipe(tmp_path, "hello.json", JSON_RECIPE)

        resolved = find_recipe_in_dir(tmp_path, "hello")

        assert resolved.content == JSON_RECIPE

    def test_no_match_returns_none(self, tmp_path):
        assert find_recipe_in_dir(tmp_path, "hello") is None

    def test_missing_directory_returns_none(self, tmp_path):
        assert find_recipe_in_dir(tmp_path / "nope", "hello") is None


def test_read_recipe_in_dir_reports_directory(tmp_path):
    with pytest.raises(RecipeNotFoundError) as exc_info:
        read_recipe_in_dir(tmp_path, "hello")

    assert str(exc_info.value) == f"No hello.yaml or hello.json recipe file found in directory: {tmp_path}"
    assert exc_info.value.searched_dirs == [tmp_path]


class TestListRecipeFiles:
    def test_filters_by_extension(self, tmp_path, write_recipe):
        write_recipe(tmp_path, "a.yaml")
        write_recipe(tmp_path, "b.json", JSON_RECIPE)
        write_recipe(tmp_path, "notes.md", "# not a recipe")
        write_recipe(tmp_path, "c.yml")

        names = [p.name for p in list_recipe_files(tmp_path)]

        assert names == ["a.yaml", "b.json"]

    def test_not_recursive(self, tmp_path, write_recipe):
        write_recipe(tmp_path / "nested", "deep.yaml")
        (tmp_path / "folder.yaml").mkdir()

        assert list_recipe_files(tmp_path) == []

    def test_missing_directory_is_empty(self, tmp_path):
        assert list_recipe_files(tmp_path / "missing") == []

    def test_file_instead_of_directory_is_empty(self, tmp_path, write_recipe):
        path = write_recipe(tmp_path, "a.yaml")
        assert list_recipe_files(path) == []


def test_create_local_recipe_info(tmp_path, write_recipe):
    path = write_recipe(tmp_path, "hello.yaml")

    info = create_local_recipe_info(path)

    assert info is not None
    assert info.name == "hello"
    assert info.source == RecipeSource.LOCAL
    assert info.path == str(path)
    assert info.title == "Test Recipe"
    assert info.description == "A test recipe for deeplink generation"


def test_create_local_recipe_info_swallows_parse_errors(tmp_path, write_recipe):
    path = write_recipe(tmp_path, "broken.yaml", "title: [unterminated")
    assert create_local_recipe_info(path) is None


def test_scan_skips_malformed_recipe(tmp_path, write_recipe, placeholder_recipe):
    """One good and one bad file yields exactly one entry."""
    write_recipe(tmp_path, "good.yaml")
    write_recipe(tmp_path, "bad.yaml", placeholder_recipe)

    recipes = scan_directory_for_recipes(tmp_path)

    assert [r.name for r in recipes] == ["good"]


def test_scan_parses_relative_to_own_directory(tmp_path, write_recipe):
    """Sub-recipe paths are checked against the recipe's own folder."""
    recipe_dir = tmp_path / "recipes"
    write_recipe(recipe_dir, "child.yaml")
    write_recipe(
        recipe_dir,
        "parent.yaml",
        'title: "Parent"\ndescription: "d"\nprompt: "p"\nsub_recipes:\n  - name: child\n    path: child.yaml\n',
    )

    names = sorted(r.name for r in scan_directory_for_recipes(recipe_dir))

    assert names == ["child", "parent"]
