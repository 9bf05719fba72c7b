"""Domain models for the heroes service."""

from .credentials import Credentials
from .hero import Hero, Record, Transformation, list_adapter

__all__ = [
    "Credentials",
    "Hero",
    "Record",
    "Transformation",
    "list_adapter",
]
