"""goose recipe CLI - resolve, list, validate and share goose recipes."""

__version__ = "0.1.0"
