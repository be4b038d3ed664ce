"""Portfolio page generation."""

from .filters import (
    FilterState,
    PortfolioView,
    build_view,
    partition_projects,
    tech_counts,
    tech_set,
    toggle_tech_filter,
)
from .renderer import PortfolioRenderer

__all__ = [
    "FilterState",
    "PortfolioRenderer",
    "PortfolioView",
    "build_view",
    "partition_projects",
    "tech_counts",
    "tech_set",
    "toggle_tech_filter",
]
