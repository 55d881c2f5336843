"""Pydantic schemas for goose recipes."""

from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import model_validator


class Author(BaseModel):
    """Recipe author contact details."""

    contact: str | None = Field(None, description="Author handle or email")
    metadata: str | None = Field(None, description="Free-form author metadata")


class RecipeParameter(BaseModel):
    """A template parameter the recipe declares."""

    key: str = Field(..., description="Placeholder name used as {{ key }}")
    input_type: str = Field(default="string", description="string, number, boolean, date, file or select")
    requirement: str = Field(default="required", description="required, optional or user_prompt")
    description: str = Field(default="", description="Shown when prompting for a value")
    default: str | None = Field(None, description="Value used when none is supplied")
    options: list[str] | None = Field(None, description="Allowed values for select parameters")


class SubRecipe(BaseModel):
    """Reference to another recipe file the recipe can delegate to."""

    name: str
    path: str = Field(..., description="Recipe path, relative to the recipe's own directory")
    values: dict[str, str] | None = None


class Recipe(BaseModel):
    """Complete recipe specification.

    Field order is the serialization order used for deep links.
    """

    version: str = Field(default="1.0.0", description="Recipe format version")
    title: str = Field(..., description="Short human-readable title")
    description: str = Field(..., description="What the recipe does")
    instructions: str | None = Field(None, description="System instructions for the agent")
    prompt: str | None = Field(None, description="Initial prompt sent to the agent")
    extensions: list[dict[str, Any]] | None = Field(None, description="Extensions to enable")
    context: list[str] | None = None
    activities: list[str] | None = Field(None, description="Suggested activities shown to the user")
    author: Author | None = None
    parameters: list[RecipeParameter] | None = None
    sub_recipes: list[SubRecipe] | None = None

    @model_validator(mode="after")
    def _require_instructions_or_prompt(self) -> "Recipe":
        if not self.instructions and not self.prompt:
            raise ValueError("Recipe must specify at least one of `instructions` or `prompt`.")
        return self
