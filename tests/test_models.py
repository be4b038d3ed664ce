"""Tests for the shared data records."""

import pytest

from repofolio.models import Project, ReadmeMetadata, Repository


class TestRepository:
    """Test Repository descriptor."""

    def test_from_api_ignores_extra_fields(self) -> None:
        data = {
            "name": "demo",
            "html_url": "https://github.com/u/demo",
            "description": "A demo",
            "stargazers_count": 3,
        }
        expected = Repository("demo", "https://github.com/u/demo", "A demo")
        assert Repository.from_api(data) == expected

    def test_from_api_missing_description(self) -> None:
        repo = Repository.from_api({"name": "demo", "html_url": "https://github.com/u/demo"})
        assert repo.description is None

    def test_from_api_requires_name(self) -> None:
        with pytest.raises(KeyError):
            Repository.from_api({"html_url": "https://github.com/u/demo"})


class TestProject:
    """Test Project record."""

    @pytest.fixture
    def repo(self) -> Repository:
        return Repository("demo", "https://github.com/u/demo", "Demo repo")

    def test_from_repository_prefers_readme_title(self, repo: Repository) -> None:
        project = Project.from_repository(repo, ReadmeMetadata(title="Demo App"))
        assert project.title == "Demo App"
        assert project.description == "Demo repo"

    def test_from_repository_falls_back_to_name(self, repo: Repository) -> None:
        assert Project.from_repository(repo, ReadmeMetadata()).title == "demo"

    def test_extra_links_follow_repository_url(self, repo: Repository) -> None:
        metadata = ReadmeMetadata(links=("https://demo.example", "https://docs.example"))
        project = Project.from_repository(repo, metadata)
        assert project.links == (
            "https://github.com/u/demo",
            "https://demo.example",
            "https://docs.example",
        )

    def test_degraded(self, repo: Repository) -> None:
        project = Project.degraded(repo)
        assert project.title == "demo"
        assert project.technologies == ()
        assert project.links == ("https://github.com/u/demo",)
        assert project.description == "Demo repo"

    def test_links_default_to_repository_url(self) -> None:
        project = Project(name="x", html_url="https://github.com/u/x", title="x")
        assert project.links == ("https://github.com/u/x",)

    def test_uses_is_exact_match(self) -> None:
        project = Project(name="x", html_url="u", title="x", technologies=("Go",))
        assert project.uses("Go")
        assert not project.uses("go")

    def test_to_dict_is_json_friendly(self, repo: Repository) -> None:
        project = Project.from_repository(repo, ReadmeMetadata(technologies=("Go",)))
        assert project.to_dict() == {
            "name": "demo",
            "html_url": "https://github.com/u/demo",
            "title": "demo",
            "technologies": ["Go"],
            "description": "Demo repo",
            "links": ["https://github.com/u/demo"],
        }
