"""Data gatherers for GitHub repositories and their READMEs."""

from .github import GitHubFetcher, RepositorySource
from .projects import ProjectGatherer, projects_from_results
from .readme import ReadmeExtractor, split_technologies

__all__ = [
    "GitHubFetcher",
    "ProjectGatherer",
    "ReadmeExtractor",
    "RepositorySource",
    "projects_from_results",
    "split_technologies",
]
