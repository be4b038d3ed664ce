"""Build service - static export of the portfolio.

Single responsibility: Run the gatherer once and write the rendered page
and its data to the output directory.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from ..config import settings
from ..gatherers.projects import ProjectGatherer, projects_from_results
from ..models import Project, ProjectResult
from ..site.filters import tech_set
from ..site.renderer import PortfolioRenderer

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Summary of one static build."""

    index_path: Path
    data_path: Path
    projects: list[Project]
    degraded: list[str]
    technologies: list[str]

    @property
    def project_count(self) -> int:
        return len(self.projects)


class BuildService:
    """Service for portfolio builds.

    Supports dependency injection for testing:
        service = BuildService(gatherer=mock_gatherer)
    """

    def __init__(
        self,
        gatherer: ProjectGatherer | None = None,
        renderer: PortfolioRenderer | None = None,
    ) -> None:
        self._gatherer = gatherer or ProjectGatherer()
        self._renderer = renderer

    def collect(self, username: str | None = None) -> list[ProjectResult]:
        """Gather project results for a user.

        Raises:
            RepositoryListError: If the repository listing fails
        """
        return self._gatherer.gather(username or settings.github_username)

    def build(
        self,
        username: str | None = None,
        output_dir: Path | None = None,
    ) -> BuildResult:
        """Gather projects and write the static site.

        Args:
            username: GitHub username (defaults to config)
            output_dir: Export directory (defaults to config)

        Returns:
            BuildResult describing the written files

        Raises:
            RepositoryListError: If the repository listing fails
        """
        user = username or settings.github_username
        results = self.collect(user)
        projects = projects_from_results(results)

        target = settings.ensure_output_dir(output_dir)
        renderer = self._renderer or PortfolioRenderer(settings.resolved_site_title(user))

        index_path = target / settings.index_filename
        index_path.write_text(renderer.render(projects), encoding="utf-8")

        data_path = target / settings.data_filename
        data_path.write_text(
            json.dumps([project.to_dict() for project in projects], indent=2, ensure_ascii=False),
            encoding="utf-8",
        )

        logger.info("Wrote %d projects to %s", len(projects), target)
        return BuildResult(
            index_path=index_path,
            data_path=data_path,
            projects=projects,
            degraded=[result.project.name for result in results if result.degraded],
            technologies=tech_set(projects),
        )
