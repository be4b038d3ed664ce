"""Shared test fixtures for repofolio."""

from typing import Any

import httpx
import pytest

from repofolio.models import Project, Repository


class FakeSource:
    """In-memory stand-in for GitHubFetcher."""

    def __init__(
        self,
        repositories: list[Repository],
        readmes: dict[str, str | Exception],
    ) -> None:
        self.repositories = repositories
        self.readmes = readmes
        self.requested: list[str] = []
        self.closed = False

    async def __aenter__(self) -> "FakeSource":
        return self

    async def __aexit__(self, *args: Any) -> None:
        self.closed = True

    async def list_repositories(self, username: str) -> list[Repository]:
        return list(self.repositories)

    async def fetch_readme(self, username: str, repo_name: str) -> str:
        self.requested.append(repo_name)
        value = self.readmes[repo_name]
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def sample_readme() -> str:
    """README using the element id convention."""
    return """
# Weather Station

<h1 id="tjidtitle">Weather Station</h1>
<p id="tjidtechs">Python, FastAPI , ,Docker</p>
<ul id="tjidlinks">
  <li> https://weather.example.com </li>
  <li>https://docs.example.com/weather</li>
  <li>   </li>
</ul>

Some more text about the project.
"""


@pytest.fixture
def sample_projects() -> list[Project]:
    """Three projects with overlapping technologies."""
    return [
        Project(name="c-repo", html_url="https://github.com/u/c-repo", title="C",
                technologies=("Go", "Rust")),
        Project(name="a-repo", html_url="https://github.com/u/a-repo", title="A",
                technologies=("Go",)),
        Project(name="b-repo", html_url="https://github.com/u/b-repo", title="B",
                technologies=("Rust",)),
    ]


@pytest.fixture
def make_repo():
    """Factory for repository descriptors."""

    def _make(name: str, description: str | None = None) -> Repository:
        return Repository(
            name=name,
            html_url=f"https://github.com/tester/{name}",
            description=description,
        )

    return _make


@pytest.fixture
def repo_payload():
    """Factory for one listing JSON element."""

    def _payload(name: str, description: str | None = None) -> dict[str, Any]:
        return {
            "id": hash(name) & 0xFFFF,
            "name": name,
            "full_name": f"tester/{name}",
            "html_url": f"https://github.com/tester/{name}",
            "description": description,
            "fork": False,
        }

    return _payload


@pytest.fixture
def mock_transport():
    """Build an httpx.MockTransport from a request handler."""

    def _make(handler) -> httpx.MockTransport:
        return httpx.MockTransport(handler)

    return _make


@pytest.fixture
def fake_source():
    """Factory for FakeSource instances."""

    def _make(
        repositories: list[Repository],
        readmes: dict[str, str | Exception],
    ) -> FakeSource:
        return FakeSource(repositories, readmes)

    return _make
