"""Domain models."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ArchiveEntry:
    """A single member of a document archive."""

    name: str
    data: bytes
    compressed: bool = True


@dataclass
class CreationResult:
    """Result of document creation."""

    output_path: Path
    launched: bool = False
