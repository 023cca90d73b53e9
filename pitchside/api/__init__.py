"""Pitchside API package - FastAPI backend for the tactical board."""

from pitchside.api.main import app, create_app

__all__ = ["app", "create_app"]
