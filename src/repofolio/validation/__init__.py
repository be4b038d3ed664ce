"""Input validation for the CLI."""

from .models import BuildInput

__all__ = ["BuildInput"]
