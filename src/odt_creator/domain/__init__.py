"""Domain layer - core business logic."""

from .dates import first_wednesday, folder_name, resolve
from .models import ArchiveEntry, CreationResult

__all__ = ["ArchiveEntry", "CreationResult", "first_wednesday", "folder_name", "resolve"]
