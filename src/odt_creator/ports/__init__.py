"""Ports - interfaces for external dependencies."""

from .launcher import LauncherPort
from .writer import DocumentWriterPort

__all__ = ["DocumentWriterPort", "LauncherPort"]
