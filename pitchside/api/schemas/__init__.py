"""Pydantic schemas for the Pitchside API."""
