"""Command-line interface for the Dragon Ball heroes service."""

from dragonball import __version__

__all__ = ["__version__"]
