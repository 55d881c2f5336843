"""Recipe commands - validate, share and list recipes.

RECIPE arguments accept either a file path ending in .yaml/.json or a bare
name searched for in the current directory, GOOSE_RECIPE_PATH and the
configured GitHub recipe repository.
"""

import json
import logging
import sys
from typing import NoReturn

import click

from ..console import console
from ..paths import create_recipe_catalog
from ..paths import create_recipe_resolver
from ..recipes import RecipeError
from ..recipes import RecipeInfo
from ..recipes import generate_deeplink
from ..utils.error_format import escape_markup
from ..utils.error_format import format_error_message

logger = logging.getLogger(__name__)


@click.group()
def recipe():
    """Validate, share and list goose recipes.

    Examples:

        \b
        # Check a recipe file for errors
        goose recipe validate ./my-recipe.yaml

        \b
        # Create a shareable goose:// link
        goose recipe deeplink my-recipe

        \b
        # List recipes from all sources
        goose recipe list --verbose
    """


def _fail(error: Exception) -> NoReturn:
    console.print(f"[bold red]✗[/bold red] {escape_markup(format_error_message(error))}", soft_wrap=True)
    sys.exit(1)


@recipe.command()
@click.argument("recipe_name")
def validate(recipe_name: str):
    """Validate a recipe file.

    RECIPE_NAME is a recipe file path or a recipe name.
    """
    try:
        create_recipe_resolver().load_recipe(recipe_name)
    except RecipeError as e:
        logger.info(f"Recipe validation failed for {recipe_name}: {e}")
        _fail(e)

    console.print("[bold green]✓[/bold green] recipe file is valid")


@recipe.command()
@click.argument("recipe_name")
def deeplink(recipe_name: str):
    """Generate a shareable goose:// deep link for a recipe.

    The recipe is fully validated first; invalid recipes produce no link.
    """
    try:
        loaded, url = generate_deeplink(recipe_name, create_recipe_resolver())
    except RecipeError as e:
        _fail(e)

    console.print(f"[bold green]✓[/bold green] Generated deeplink for: {escape_markup(loaded.title)}", soft_wrap=True)
    # Plain echo: the URL must never be wrapped or styled
    click.echo(url)


@recipe.command("list")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Show titles and full paths")
def list_recipes(output_format: str, verbose: bool):
    """List recipes from local directories and the GitHub repository.

    Local recipes come from the current directory and GOOSE_RECIPE_PATH;
    GitHub recipes appear when GOOSE_RECIPE_GITHUB_REPO is configured.
    """
    recipes = create_recipe_catalog().list_available()

    if output_format == "json":
        print(json.dumps([r.model_dump(mode="json") for r in recipes]))
        return

    if not recipes:
        click.echo("No recipes found")
        return

    click.echo("Available recipes:")
    for info in recipes:
        for line in format_recipe_lines(info, verbose):
            click.echo(line)


def format_recipe_lines(info: RecipeInfo, verbose: bool = False) -> list[str]:
    """Render one listing entry as text lines."""
    description = info.description or "(none)"
    output = f"{info.name} - {description} - {info.source_label}: {info.path}"

    if not verbose:
        return [output]

    lines = [f"  {output}"]
    if info.title is not None:
        lines.append(f"    Title: {info.title}")
    lines.append(f"    Path: {info.path}")
    return lines
