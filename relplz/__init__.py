"""Release helpers for Cargo workspaces: package comparison, release ordering, templates and pull request text."""

__version__ = "0.1.0"