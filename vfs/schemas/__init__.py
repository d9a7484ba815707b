"""Pydantic schemas for persisted records."""

from vfs.schemas.records import (
    StoredFile,
    StoredFileList,
    StoredFolder,
    StoredFolderList,
)

__all__ = [
    "StoredFile",
    "StoredFileList",
    "StoredFolder",
    "StoredFolderList",
]
