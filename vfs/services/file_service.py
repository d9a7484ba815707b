"""File service for business logic."""

import threading
from datetime import datetime
from typing import List, Optional

from common.logging_config import get_logger
from vfs.exceptions import FolderNotFoundError, UserNotFoundError
from vfs.repositories.file_repository import FileRepository
from vfs.repositories.folder_repository import FolderRepository
from vfs.repositories.user_repository import UserRepository
from vfs.types import File

logger = get_logger(__name__)


class FileService:
    def __init__(
        self,
        file_repo: FileRepository,
        folder_repo: FolderRepository,
        user_repo: UserRepository,
        lock: Optional[threading.RLock] = None,
    ):
        self.file_repo = file_repo
        self.folder_repo = folder_repo
        self.user_repo = user_repo
        self._lock = lock or threading.RLock()

    def create_file(self, username: str, folder_name: str, file_name: str, description: str = "") -> File:
        logger.info(f"Creating file {file_name} [username={username}, folder={folder_name}]")
        with self._lock:
            self._require_folder(username, folder_name)
            self.file_repo.validate_file_name(file_name)

            file = File(
                username=username,
                folder_name=folder_name,
                name=file_name,
                description=description,
                created_at=datetime.now(),
            )
            self.file_repo.create_file(file)
        return file

    def delete_file(self, username: str, folder_name: str, file_name: str) -> None:
        logger.info(f"Deleting file {file_name} [username={username}, folder={folder_name}]")
        with self._lock:
            self._require_folder(username, folder_name)
            self.file_repo.delete_file(username, folder_name, file_name)

    def list_files(
        self,
        username: str,
        folder_name: str,
        sort_field: Optional[str] = None,
        sort_order: Optional[str] = "asc",
    ) -> List[File]:
        with self._lock:
            self._require_folder(username, folder_name)
            return self.file_repo.list_files(username, folder_name, sort_field, sort_order)

    def _require_folder(self, username: str, folder_name: str) -> None:
        if not self.user_repo.exists(username):
            logger.warning(f"Unknown user: {username}")
            raise UserNotFoundError(username)
        if not self.folder_repo.exists(username, folder_name):
            logger.warning(f"Unknown folder: {folder_name} [username={username}]")
            raise FolderNotFoundError(folder_name)
