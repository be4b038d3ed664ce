"""HTTP fetching from GitHub.

Single Responsibility: List a user's repositories and fetch raw README text.
"""

from typing import Any, Protocol

import httpx

from ..config import settings
from ..models import Repository
from ..exceptions import ReadmeUnavailableError, RepositoryListError
from ..utils.logging import get_logger

logger = get_logger(__name__)


class RepositorySource(Protocol):
    """Protocol for GitHub access - enables dependency injection."""

    async def __aenter__(self) -> "RepositorySource":
        ...

    async def __aexit__(self, *args: Any) -> None:
        ...

    async def list_repositories(self, username: str) -> list[Repository]:
        """List a user's repositories in API order."""
        ...

    async def fetch_readme(self, username: str, repo_name: str) -> str:
        """Fetch raw README text for a repository."""
        ...


class GitHubFetcher:
    """Async client for the GitHub REST API and raw content host.

    Implements async context manager for proper resource cleanup. One client
    is shared by every README request of a build.
    """

    ACCEPT_HEADER = "application/vnd.github+json"
    USER_AGENT = "repofolio/0.1 (Portfolio Generator)"

    def __init__(
        self,
        api_url: str | None = None,
        raw_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize fetcher.

        Args:
            api_url: GitHub API base URL (defaults to config)
            raw_url: Raw content base URL (defaults to config)
            token: Optional bearer token (defaults to config)
            timeout: HTTP request timeout in seconds (defaults to config)
            transport: Optional httpx transport, used by tests
        """
        self.api_url = (api_url or settings.github_api_url).rstrip("/")
        self.raw_url = (raw_url or settings.github_raw_url).rstrip("/")
        self.token = settings.github_token if token is None else token
        self.timeout = timeout or settings.request_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GitHubFetcher":
        """Enter context manager, create HTTP client."""
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            headers=self._get_headers(),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit context manager, close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _get_headers(self) -> dict[str, str]:
        headers = {"Accept": self.ACCEPT_HEADER, "User-Agent": self.USER_AGENT}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _ensure_client(self) -> httpx.AsyncClient:
        if not self._client:
            raise RuntimeError("GitHubFetcher must be used as async context manager")
        return self._client

    async def list_repositories(self, username: str) -> list[Repository]:
        """List a user's repositories.

        Pages through the listing until a short page or the page cap.

        Args:
            username: GitHub username

        Returns:
            Repositories in the order the API returns them

        Raises:
            RepositoryListError: On any network, HTTP or payload error
        """
        client = self._ensure_client()
        url = f"{self.api_url}/users/{username}/repos"
        per_page = settings.github_per_page
        repositories: list[Repository] = []

        for page in range(1, settings.github_max_pages + 1):
            try:
                response = await client.get(url, params={"per_page": per_page, "page": page})
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPStatusError as e:
                raise RepositoryListError(self._describe_status_error(username, e)) from e
            except (httpx.HTTPError, ValueError) as e:
                raise RepositoryListError(
                    f"Failed to list repositories for {username}: {e}"
                ) from e

            if not isinstance(data, list):
                raise RepositoryListError(
                    f"Unexpected repository listing payload for {username}: "
                    f"{type(data).__name__}"
                )

            try:
                repositories.extend(Repository.from_api(item) for item in data)
            except (KeyError, TypeError) as e:
                raise RepositoryListError(f"Malformed repository entry: {e}") from e

            logger.debug("Page %d: %d repositories", page, len(data))
            if len(data) < per_page:
                break
        else:
            logger.warning(
                "Stopped listing %s after %d full pages; remaining repositories are skipped "
                "(raise GITHUB_MAX_PAGES to include them)",
                username,
                settings.github_max_pages,
            )

        logger.info("Listed %d repositories for %s", len(repositories), username)
        return repositories

    @staticmethod
    def _describe_status_error(username: str, error: httpx.HTTPStatusError) -> str:
        response = error.response
        if response.status_code == 403 and response.headers.get("x-ratelimit-remaining") == "0":
            return (
                f"GitHub API rate limit exceeded while listing {username}'s repositories. "
                "Set GITHUB_TOKEN to raise the limit."
            )
        if response.status_code == 404:
            return f"GitHub user not found: {username}"
        return f"Failed to list repositories for {username}: HTTP {response.status_code}"

    def readme_url(self, username: str, repo_name: str) -> str:
        """Build the raw README URL for a repository."""
        return (
            f"{self.raw_url}/{username}/{repo_name}/"
            f"{settings.readme_branch}/{settings.readme_filename}"
        )

    async def fetch_readme(self, username: str, repo_name: str) -> str:
        """Fetch raw README text from the configured branch.

        Args:
            username: Repository owner
            repo_name: Repository name

        Returns:
            README text

        Raises:
            ReadmeUnavailableError: Missing branch or file, network error,
                or non-text response
        """
        client = self._ensure_client()
        url = self.readme_url(username, repo_name)

        try:
            response = await client.get(url)
        except httpx.HTTPError as e:
            raise ReadmeUnavailableError(repo_name, f"network error: {e}") from e

        if not response.is_success:
            raise ReadmeUnavailableError(repo_name, f"HTTP {response.status_code}")

        content_type = response.headers.get("content-type", "")
        if content_type and not content_type.startswith("text/"):
            raise ReadmeUnavailableError(repo_name, f"non-text response ({content_type})")

        logger.debug("Fetched %d bytes of README for %s", len(response.text), repo_name)
        return response.text
