"""API route handlers."""

from injury_info.api.routes import cache, cases, content, health, sources

__all__ = ["cache", "cases", "content", "health", "sources"]
