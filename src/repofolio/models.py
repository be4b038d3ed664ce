"""Data records shared by the gatherers and the site renderer."""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class Repository:
    """Repository descriptor from the GitHub listing."""

    name: str
    html_url: str
    description: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Repository":
        """Build a descriptor from one element of the listing JSON."""
        return cls(
            name=str(data["name"]),
            html_url=str(data["html_url"]),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class ReadmeMetadata:
    """Fields extracted from a README."""

    title: str = ""
    technologies: tuple[str, ...] = ()
    links: tuple[str, ...] = ()


@dataclass(frozen=True)
class Project:
    """One portfolio entry derived from a repository."""

    name: str
    html_url: str
    title: str
    technologies: tuple[str, ...] = ()
    description: str | None = None
    links: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        if not self.links:
            # Every project links back to its repository
            object.__setattr__(self, "links", (self.html_url,))

    @classmethod
    def from_repository(cls, repo: Repository, metadata: ReadmeMetadata) -> "Project":
        """Combine a descriptor with extracted README metadata."""
        return cls(
            name=repo.name,
            html_url=repo.html_url,
            title=metadata.title or repo.name,
            technologies=metadata.technologies,
            description=repo.description,
            links=(repo.html_url, *metadata.links),
        )

    @classmethod
    def degraded(cls, repo: Repository) -> "Project":
        """Build a project from fallback values only."""
        return cls(
            name=repo.name,
            html_url=repo.html_url,
            title=repo.name,
            technologies=(),
            description=repo.description,
            links=(repo.html_url,),
        )

    def uses(self, tech: str) -> bool:
        """Check if the project lists a technology."""
        return tech in self.technologies

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        data = asdict(self)
        data["technologies"] = list(self.technologies)
        data["links"] = list(self.links)
        return data


@dataclass(frozen=True)
class ProjectResult:
    """Outcome of building one project."""

    project: Project
    degraded: bool = False
    error: str | None = None
