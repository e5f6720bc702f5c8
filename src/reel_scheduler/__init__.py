"""Reel Scheduler - offline-first tracking of short-form video production."""

__version__ = "1.0.0"
