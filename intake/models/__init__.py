"""Database models."""

from intake.models.application import Application

__all__ = ["Application"]
