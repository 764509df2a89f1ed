"""Document writer producing OpenDocument text archives with zipfile."""

import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from zipfile import ZIP_DEFLATED, ZIP_STORED, ZipFile

from ...domain.models import ArchiveEntry
from ...ports.writer import DocumentWriterPort
from .templates import (
    CONTENT_XML,
    GENERATOR,
    MANIFEST_XML,
    META_XML,
    MIMETYPE,
    STYLES_XML,
)

logger = logging.getLogger(__name__)


def _current_umask() -> int:
    """Return the process umask without changing it."""
    umask = os.umask(0)
    os.umask(umask)
    return umask


def build_entries(created: datetime) -> list[ArchiveEntry]:
    """Build the ordered archive members of an empty text document.

    The mimetype member comes first and is stored uncompressed so readers
    can identify the package from the raw bytes at the start of the file.
    """
    meta = META_XML.format(
        generator=GENERATOR,
        creation_date=created.replace(microsecond=0).isoformat(),
    )
    return [
        ArchiveEntry("mimetype", MIMETYPE.encode("ascii"), compressed=False),
        ArchiveEntry("META-INF/manifest.xml", MANIFEST_XML.encode("utf-8")),
        ArchiveEntry("content.xml", CONTENT_XML.encode("utf-8")),
        ArchiveEntry("styles.xml", STYLES_XML.encode("utf-8")),
        ArchiveEntry("meta.xml", meta.encode("utf-8")),
    ]


class OdtArchiveWriter(DocumentWriterPort):
    """Writes a minimal OpenDocument text file.

    ``creation_date`` pins the timestamp recorded in meta.xml; by default
    the time of writing is used.
    """

    def __init__(self, creation_date: datetime | None = None) -> None:
        self.creation_date = creation_date

    def write(self, path: Path) -> Path:
        entries = build_entries(self.creation_date or datetime.now())

        # Assembled next to the target so the final replace stays on one filesystem
        with tempfile.NamedTemporaryFile(
            dir=path.parent, prefix=".", suffix=".partial", delete=False
        ) as tmp:
            tmp_path = Path(tmp.name)

        try:
            with ZipFile(tmp_path, "w") as zf:
                for entry in entries:
                    compress_type = ZIP_DEFLATED if entry.compressed else ZIP_STORED
                    zf.writestr(entry.name, entry.data, compress_type=compress_type)
            # Temporary files are private; give the document the usual mode
            tmp_path.chmod(0o666 & ~_current_umask())
            tmp_path.replace(path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

        logger.debug(f"Wrote {len(entries)} entries: {path}")
        return path
