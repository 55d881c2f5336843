"""Tests for recipe parsing and template validation."""

import pytest

from goose_recipe_cli.recipes.errors import RecipeValidationError
from goose_recipe_cli.recipes.template import find_template_variables
from goose_recipe_cli.recipes.template import parse_recipe_content

PARAMETERIZED_RECIPE = """\
title: "Greeter"
description: "Greets someone"
prompt: "Say hello to {{ name }} in {{language}}"
parameters:
  - key: name
    input_type: string
    requirement: required
    description: Who to greet
  - key: language
    requirement: optional
    default: English
    description: Language to use
"""


def test_parses_valid_yaml(tmp_path, valid_recipe):
    recipe = parse_recipe_content(valid_recipe, tmp_path)

    assert recipe.title == "Test Recipe"
    assert recipe.version == "1.0.0"
    assert recipe.prompt == "Test prompt content"
    assert recipe.parameters is None


def test_parses_json(tmp_path):
    recipe = parse_recipe_content('{"title": "T", "description": "D", "instructions": "I"}', tmp_path)
    assert recipe.instructions == "I"


def test_declared_parameters_are_accepted(tmp_path):
    recipe = parse_recipe_content(PARAMETERIZED_RECIPE, tmp_path)

    assert [p.key for p in recipe.parameters] == ["name", "language"]
    assert recipe.parameters[1].default == "English"


def test_unresolved_placeholder_is_rejected(tmp_path, placeholder_recipe):
    with pytest.raises(RecipeValidationError, match="Missing definitions for parameters.*name"):
        parse_recipe_content(placeholder_recipe, tmp_path)


def test_unused_parameter_is_rejected(tmp_path):
    content = (
        'title: "T"\ndescription: "D"\nprompt: "no placeholders"\n'
        "parameters:\n  - key: unused\n    description: never referenced\n"
    )
    with pytest.raises(RecipeValidationError, match="Unnecessary parameter definitions: unused"):
        parse_recipe_content(content, tmp_path)


def test_builtin_recipe_dir_needs_no_declaration(tmp_path):
    content = 'title: "T"\ndescription: "D"\nprompt: "Read {{ recipe_dir }}/notes.md"\n'
    recipe = parse_recipe_content(content, tmp_path)
    assert "recipe_dir" in recipe.prompt


def test_requires_prompt_or_instructions(tmp_path):
    with pytest.raises(RecipeValidationError, match="instructions"):
        parse_recipe_content('title: "T"\ndescription: "D"\n', tmp_path)


def test_missing_title_is_rejected(tmp_path):
    with pytest.raises(RecipeValidationError, match="title"):
        parse_recipe_content('description: "D"\nprompt: "P"\n', tmp_path)


def test_malformed_yaml_is_rejected(tmp_path):
    with pytest.raises(RecipeValidationError, match="Invalid recipe format"):
        parse_recipe_content("title: [oops", tmp_path)


def test_non_mapping_is_rejected(tmp_path):
    with pytest.raises(RecipeValidationError, match="mapping"):
        parse_recipe_content("- just\n- a list\n", tmp_path)


def test_sub_recipe_resolved_against_base_dir(tmp_path, write_recipe):
    write_recipe(tmp_path, "child.yaml")
    content = 'title: "T"\ndescription: "D"\nprompt: "P"\nsub_recipes:\n  - name: child\n    path: child.yaml\n'

    recipe = parse_recipe_content(content, tmp_path)
    assert recipe.sub_recipes[0].name == "child"

    with pytest.raises(RecipeValidationError, match="Sub-recipe 'child' not found"):
        parse_recipe_content(content, tmp_path / "elsewhere")


def test_find_template_variables():
    assert find_template_variables("{{ a }} {{b}} {{ c | upper }} { d }") == {"a", "b", "c"}
