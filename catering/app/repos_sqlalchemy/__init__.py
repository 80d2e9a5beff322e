"""SQLAlchemy-backed repository implementations."""

from .catering_repo_sql import CateringRepoSQL

__all__ = ["CateringRepoSQL"]
