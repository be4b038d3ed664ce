"""repofolio - static portfolio site generator for GitHub repositories."""

__version__ = "0.1.0"
