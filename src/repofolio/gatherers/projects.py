"""Project gatherer - coordinator class.

Orchestrates listing, README fetching and extraction into Project records.
"""

import asyncio
from collections.abc import Callable

from ..config import settings
from ..models import Project, ProjectResult, Repository
from ..exceptions import ReadmeUnavailableError
from ..utils.logging import get_logger
from .github import GitHubFetcher, RepositorySource
from .readme import ReadmeExtractor

logger = get_logger(__name__)


class ProjectGatherer:
    """Gather portfolio projects for a GitHub user.

    This class coordinates the build using specialized components:
    - GitHubFetcher: repository listing and README requests
    - ReadmeExtractor: README parsing

    Components can be injected for testing.
    """

    def __init__(
        self,
        source_factory: Callable[[], RepositorySource] | None = None,
        extractor: ReadmeExtractor | None = None,
    ) -> None:
        """Initialize gatherer with optional dependency injection.

        Args:
            source_factory: Returns an async context manager exposing
                list_repositories/fetch_readme (GitHubFetcher if not provided)
            extractor: README parser (created if not provided)
        """
        self._source_factory = source_factory or GitHubFetcher
        self._extractor = extractor or ReadmeExtractor()

    async def gather_async(self, username: str | None = None) -> list[ProjectResult]:
        """Build one result per repository, in listing order.

        Args:
            username: GitHub username (defaults to config)

        Returns:
            List of ProjectResult, degraded where the README was unusable

        Raises:
            RepositoryListError: If the repository listing fails
        """
        user = username or settings.github_username
        logger.info("Gathering projects for %s", user)

        async with self._source_factory() as source:
            repositories = await source.list_repositories(user)
            # Each task handles its own failures, so gather never short-circuits
            results = await asyncio.gather(
                *(self._build_project(source, user, repo) for repo in repositories)
            )

        degraded = sum(1 for result in results if result.degraded)
        logger.info("Gathered %d projects (%d degraded)", len(results), degraded)
        return list(results)

    def gather(self, username: str | None = None) -> list[ProjectResult]:
        """Sync wrapper around gather_async."""
        return asyncio.run(self.gather_async(username))

    async def _build_project(
        self,
        source: RepositorySource,
        username: str,
        repo: Repository,
    ) -> ProjectResult:
        """Fetch and parse one README, degrading on any failure."""
        try:
            readme = await source.fetch_readme(username, repo.name)
            metadata = self._extractor.extract(readme)
        except ReadmeUnavailableError as e:
            logger.warning("%s", e)
            return ProjectResult(Project.degraded(repo), degraded=True, error=str(e))
        except Exception as e:
            logger.warning("Failed to build project %s: %s", repo.name, e)
            return ProjectResult(Project.degraded(repo), degraded=True, error=str(e))

        return ProjectResult(Project.from_repository(repo, metadata))


def projects_from_results(results: list[ProjectResult]) -> list[Project]:
    """Extract the project records from a list of results."""
    return [result.project for result in results]
