"""Service layer for repofolio builds."""

from ..exceptions import PortfolioError, ReadmeUnavailableError, RepositoryListError
from .build_service import BuildResult, BuildService

__all__ = [
    "BuildResult",
    "BuildService",
    "PortfolioError",
    "ReadmeUnavailableError",
    "RepositoryListError",
]
