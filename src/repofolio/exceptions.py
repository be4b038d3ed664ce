"""Exception hierarchy for the build pipeline."""


class PortfolioError(Exception):
    """Base exception for portfolio build errors."""

    pass


class RepositoryListError(PortfolioError):
    """Raised when the repository listing cannot be retrieved.

    Fatal: no project can be built without the listing.
    """

    pass


class ReadmeUnavailableError(PortfolioError):
    """Raised when a repository README cannot be fetched.

    Recovered per repository by falling back to a degraded project.
    """

    def __init__(self, repo_name: str, reason: str) -> None:
        super().__init__(f"README unavailable for {repo_name}: {reason}")
        self.repo_name = repo_name
        self.reason = reason
