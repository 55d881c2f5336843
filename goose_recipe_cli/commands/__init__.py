"""CLI command groups."""

from .recipe import recipe

__all__ = ["recipe"]
