"""Internal application services (pure helpers, no I/O)."""

from .games import score_rolls

__all__ = ["score_rolls"]
