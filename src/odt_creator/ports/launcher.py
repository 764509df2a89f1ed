"""Launcher port - interface for opening documents in a viewer."""

from abc import ABC, abstractmethod
from pathlib import Path


class LauncherPort(ABC):
    """Interface for opening a document with an external application."""

    @abstractmethod
    def launch(self, path: Path) -> bool:
        """Open the document without waiting for the viewer.

        Returns True if a viewer process was started. Never raises.
        """
        pass
