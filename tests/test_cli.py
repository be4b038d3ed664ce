"""CLI smoke tests for repofolio."""

import logging
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from repofolio.cli import app
from repofolio.exceptions import RepositoryListError
from repofolio.models import ProjectResult
from repofolio.services import BuildResult

runner = CliRunner()


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_app_shows_help(self) -> None:
        """Test app shows help when no args provided."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Portfolio Generator" in result.output

    def test_version_flag(self) -> None:
        """Test --version flag shows version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "repofolio" in result.output

    def test_build_help(self) -> None:
        """Test build subcommand shows help."""
        result = runner.invoke(app, ["build", "--help"])
        assert result.exit_code == 0
        assert "static portfolio site" in result.output

    def test_projects_help(self) -> None:
        """Test projects subcommand shows help."""
        result = runner.invoke(app, ["projects", "--help"])
        assert result.exit_code == 0
        assert "without writing files" in result.output


class TestBuildCommand:
    """Test the build command."""

    def test_build_success(self, sample_projects, tmp_path) -> None:
        """Test a successful build reports saved files."""
        with patch("repofolio.services.BuildService") as mock_service:
            mock_service.return_value.build.return_value = BuildResult(
                index_path=tmp_path / "index.html",
                data_path=tmp_path / "projects.json",
                projects=sample_projects,
                degraded=["b-repo"],
                technologies=["Go", "Rust"],
            )
            result = runner.invoke(app, ["build", "--user", "tester", "-o", str(tmp_path)])

        assert result.exit_code == 0
        mock_service.return_value.build.assert_called_once_with("tester", Path(tmp_path))
        assert "Projects: 3" in result.output
        assert "b-repo" in result.output
        assert "Saved" in result.output

    def test_build_failure_exits_nonzero(self) -> None:
        """Test a listing failure is reported with exit code 1."""
        with patch("repofolio.services.BuildService") as mock_service:
            mock_service.return_value.build.side_effect = RepositoryListError("user not found")
            result = runner.invoke(app, ["build", "--user", "ghost"])

        assert result.exit_code == 1
        assert "Build failed" in result.output

    def test_invalid_username(self) -> None:
        """Test usernames are validated before any request."""
        with patch("repofolio.services.BuildService") as mock_service:
            result = runner.invoke(app, ["build", "--user", "bad_name"])

        assert result.exit_code == 1
        assert "Validation error" in result.output
        mock_service.assert_not_called()

    def test_output_must_be_directory(self, tmp_path) -> None:
        """Test an existing file is rejected as output directory."""
        target = tmp_path / "file.txt"
        target.write_text("x")
        with patch("repofolio.services.BuildService"):
            result = runner.invoke(app, ["build", "--user", "tester", "-o", str(target)])
        assert result.exit_code == 1


class TestProjectsCommand:
    """Test the projects command."""

    def test_lists_all_projects(self, sample_projects) -> None:
        """Test projects lists every project without a filter."""
        with patch("repofolio.services.BuildService") as mock_service:
            mock_service.return_value.collect.return_value = [
                ProjectResult(project) for project in sample_projects
            ]
            result = runner.invoke(app, ["projects", "--user", "tester"])

        assert result.exit_code == 0
        assert "Go (2)" in result.output
        assert "All Projects (3)" in result.output
        assert "Filtered Projects" not in result.output

    def test_tech_filter(self, sample_projects) -> None:
        """Test --tech splits projects into filtered and other tables."""
        with patch("repofolio.services.BuildService") as mock_service:
            mock_service.return_value.collect.return_value = [
                ProjectResult(project) for project in sample_projects
            ]
            result = runner.invoke(app, ["projects", "-u", "tester", "-t", "Go", "-t", "Go"])

        assert result.exit_code == 0
        assert "Filtered Projects (2)" in result.output
        assert "Other Projects (1)" in result.output

    def test_listing_failure(self) -> None:
        """Test a listing failure exits with code 1."""
        with patch("repofolio.services.BuildService") as mock_service:
            mock_service.return_value.collect.side_effect = RepositoryListError("boom")
            result = runner.invoke(app, ["projects", "--user", "tester"])
        assert result.exit_code == 1


class TestLoggingSetup:
    """Test logging configured by the commands."""

    def test_missing_token_is_logged(self, sample_projects, monkeypatch, caplog) -> None:
        """Test an unauthenticated run says which rate limit applies."""
        from repofolio.config import settings

        monkeypatch.setattr(settings, "github_token", "")
        monkeypatch.setattr(settings, "log_level", "INFO")
        with patch("repofolio.services.BuildService") as mock_service:
            mock_service.return_value.collect.return_value = [
                ProjectResult(project) for project in sample_projects
            ]
            with caplog.at_level(logging.INFO):
                result = runner.invoke(app, ["projects", "--user", "tester"])

        assert result.exit_code == 0
        assert "GITHUB_TOKEN not set" in caplog.text

    def test_token_suppresses_notice(self, monkeypatch, caplog) -> None:
        from repofolio.config import settings

        monkeypatch.setattr(settings, "github_token", "ghp_example")
        with patch("repofolio.services.BuildService") as mock_service:
            mock_service.return_value.collect.return_value = []
            with caplog.at_level(logging.INFO):
                runner.invoke(app, ["projects", "--user", "tester"])

        assert "GITHUB_TOKEN not set" not in caplog.text
