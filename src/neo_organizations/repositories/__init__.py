"""Repository abstractions."""

from .base import BaseRepository

__all__ = ["BaseRepository"]
