"""OpenDocument adapters."""

from .archive import OdtArchiveWriter, build_entries

__all__ = ["OdtArchiveWriter", "build_entries"]
