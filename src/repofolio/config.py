"""Configuration management using pydantic-settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # GitHub
    github_username: str = "tambunjb"
    github_token: str = ""  # Optional, raises the unauthenticated rate limit
    github_api_url: str = "https://api.github.com"
    github_raw_url: str = "https://raw.githubusercontent.com"
    github_per_page: int = 100
    github_max_pages: int = 10
    request_timeout: float = 30.0

    # README location and conventions
    readme_branch: str = "main"
    readme_filename: str = "README.md"
    title_marker_id: str = "tjidtitle"
    techs_marker_id: str = "tjidtechs"
    links_marker_id: str = "tjidlinks"

    # Output
    site_title: str = ""  # Empty = derived from github_username
    output_dir: Path = Path("out")
    index_filename: str = "index.html"
    data_filename: str = "projects.json"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Path | None = None

    @property
    def has_github_token(self) -> bool:
        """Check if a GitHub token is configured."""
        return bool(self.github_token)

    def resolved_site_title(self, username: str | None = None) -> str:
        """Get the page title, falling back to the username."""
        if self.site_title:
            return self.site_title
        return f"{username or self.github_username}'s Portfolio"

    def ensure_output_dir(self, output_dir: Path | None = None) -> Path:
        """Create the output directory if it doesn't exist."""
        target = output_dir or self.output_dir
        target.mkdir(parents=True, exist_ok=True)
        return target


# Global settings instance
settings = Settings()
