"""Repository layer for data access."""

from vfs.repositories.user_repository import UserRepository
from vfs.repositories.folder_repository import FolderRepository
from vfs.repositories.file_repository import FileRepository

__all__ = [
    "UserRepository",
    "FolderRepository",
    "FileRepository",
]
