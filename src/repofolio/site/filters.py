"""Technology filtering over a project list.

The page script mirrors these functions so the pre-rendered page and the
in-browser state agree.
"""

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ..models import Project


def title_key(project: Project) -> str:
    """Case-insensitive sort key on project title."""
    return project.title.lower()


def tech_set(projects: Iterable[Project]) -> list[str]:
    """Distinct technologies across all projects, sorted case-insensitively."""
    distinct = {tech for project in projects for tech in project.technologies}
    return sorted(distinct, key=lambda tech: (tech.lower(), tech))


def tech_counts(projects: Iterable[Project]) -> dict[str, int]:
    """Number of projects listing each technology."""
    counts: Counter[str] = Counter()
    for project in projects:
        # A project counts once even if it repeats a technology
        counts.update(set(project.technologies))
    return dict(counts)


def matches_any(project: Project, selected: Iterable[str]) -> bool:
    """Check if a project lists any selected technology."""
    return any(project.uses(tech) for tech in selected)


def partition_projects(
    projects: Sequence[Project],
    selected: Iterable[str],
    matching: bool,
) -> list[Project]:
    """Select one side of the filter partition, sorted by title.

    Args:
        projects: Full project list
        selected: Active technology filters
        matching: True for projects matching any filter, False for the rest

    Returns:
        With no active filter, matching=True gives [] and matching=False
        gives every project.
    """
    active = set(selected)
    chosen = [project for project in projects if matches_any(project, active) == matching]
    return sorted(chosen, key=title_key)


def toggle_tech_filter(selected: frozenset[str], tech: str) -> frozenset[str]:
    """Return the selection with one technology toggled."""
    return selected - {tech} if tech in selected else selected | {tech}


@dataclass
class FilterState:
    """Selected technologies, toggled by the user."""

    selected: set[str] = field(default_factory=set)

    def toggle(self, tech: str) -> None:
        """Remove the technology if selected, otherwise add it."""
        self.selected = set(toggle_tech_filter(frozenset(self.selected), tech))

    @property
    def is_active(self) -> bool:
        return bool(self.selected)


@dataclass(frozen=True)
class PortfolioView:
    """Derived views of a project list under a filter state."""

    technologies: list[str]
    counts: dict[str, int]
    filtered: list[Project]
    others: list[Project]
    filter_active: bool

    @property
    def others_heading(self) -> str:
        return "Other Projects" if self.filter_active else "All Projects"


def build_view(projects: Sequence[Project], state: FilterState | None = None) -> PortfolioView:
    """Compute every derived view for one render."""
    selected = state.selected if state else set()
    return PortfolioView(
        technologies=tech_set(projects),
        counts=tech_counts(projects),
        filtered=partition_projects(projects, selected, matching=True),
        others=partition_projects(projects, selected, matching=False),
        filter_active=state.is_active if state else False,
    )
