"""Scoring engines."""

from . import bowling, validation

__all__ = ["bowling", "validation"]
