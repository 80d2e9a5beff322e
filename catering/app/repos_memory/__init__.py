"""In-memory repository implementations."""

from .catering_repo_memory import CateringRepoMemory

__all__ = ["CateringRepoMemory"]
