"""Application services: the release drafting flow and its building blocks."""
