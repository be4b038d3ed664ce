"""Input validation models using Pydantic.

These models validate CLI inputs before they reach the build pipeline.
"""

import re
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

GITHUB_USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9](?:[a-zA-Z0-9]|-(?=[a-zA-Z0-9])){0,38}$")


class BuildInput(BaseModel):
    """Validated input for a portfolio build."""

    username: str = Field(
        min_length=1,
        max_length=39,
        description="GitHub username",
    )
    output_dir: Path | None = Field(
        default=None,
        description="Directory for the static export",
    )

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate GitHub username format."""
        # Alphanumeric and single hyphens, not at either end
        if not GITHUB_USERNAME_PATTERN.match(v):
            raise ValueError(
                "Invalid GitHub username. Must contain only alphanumeric "
                "characters and hyphens, cannot start/end with hyphen."
            )
        return v

    @field_validator("output_dir")
    @classmethod
    def validate_output_dir(cls, v: Path | None) -> Path | None:
        """Reject output paths that exist but are not directories."""
        if v is not None and v.exists() and not v.is_dir():
            raise ValueError(f"Output path is not a directory: {v}")
        return v
