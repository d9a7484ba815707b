"""Service layer for business logic."""

from vfs.services.user_service import UserService
from vfs.services.folder_service import FolderService
from vfs.services.file_service import FileService

__all__ = [
    "UserService",
    "FolderService",
    "FileService",
]
