"""Domain services - orchestrate business logic."""

import logging
from datetime import date
from pathlib import Path

from ..ports.launcher import LauncherPort
from ..ports.writer import DocumentWriterPort
from .dates import folder_name
from .models import CreationResult

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".odt"


class DocumentService:
    """Creates dated folders and documents inside them."""

    def __init__(
        self,
        writer: DocumentWriterPort,
        launcher: LauncherPort,
        output_root: Path = Path("."),
        extension: str = DEFAULT_EXTENSION,
    ) -> None:
        self.writer = writer
        self.launcher = launcher
        self.output_root = output_root
        self.extension = extension

    def folder_for(self, target: date) -> Path:
        return self.output_root / folder_name(target)

    def prepare_folder(self, target: date) -> Path:
        """Create the folder for a date, succeeding if it already exists."""
        folder = self.folder_for(target)
        folder.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Folder ready: {folder}")
        return folder

    def create(self, folder: Path, filename: str) -> CreationResult:
        """Write a document named after filename and try to open it.

        Pipeline:
            1. Build the output path (extension appended, name used verbatim)
            2. Write the document, replacing an existing file
            3. Launch a viewer (best effort)

        Write failures propagate; a viewer that fails to start is only
        reported through ``CreationResult.launched``.
        """
        output_path = folder / f"{filename}{self.extension}"

        self.writer.write(output_path)
        logger.info(f"Created: {output_path}")

        result = CreationResult(output_path=output_path)
        result.launched = self.launcher.launch(output_path)
        return result
