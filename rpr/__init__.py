"""Draft a GitHub release from an open pull request."""

__version__ = "0.1.0"
