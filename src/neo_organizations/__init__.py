"""
neo-organizations: HTTP CRUD service for organizations.

Organizations are stored in PostgreSQL via an asyncpg pool and served through
FastAPI with a uniform ``{data, error, status}`` response envelope.
"""

from .__version__ import __version__

__all__ = ["__version__"]
