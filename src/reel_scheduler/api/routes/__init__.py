"""API route modules."""

from reel_scheduler.api.routes import health, videos

__all__ = ["health", "videos"]
