"""Workflow Admin: grouped workflow list pages over FastAPI and SQLAlchemy."""

__version__ = "0.1.0"
