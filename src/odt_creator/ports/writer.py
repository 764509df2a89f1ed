"""Writer port - interface for document file creation."""

from abc import ABC, abstractmethod
from pathlib import Path


class DocumentWriterPort(ABC):
    """Interface for writing document files."""

    @abstractmethod
    def write(self, path: Path) -> Path:
        """Write a new document to path, replacing any existing file.

        Returns path to written file. Raises OSError on filesystem failure.
        """
        pass
