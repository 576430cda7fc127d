"""Pydantic models for tool results."""
from decent_drums.models.base import CamelModel

__all__ = ["CamelModel"]
