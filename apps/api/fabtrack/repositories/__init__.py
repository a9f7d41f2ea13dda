"""
Data access layer.
"""

from .base import BaseRepository

__all__ = ["BaseRepository"]
