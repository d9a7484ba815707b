"""Folder service for business logic."""

import threading
from datetime import datetime
from typing import List, Optional

from common.logging_config import get_logger
from vfs.exceptions import StorageError, UserNotFoundError
from vfs.repositories.file_repository import FileRepository
from vfs.repositories.folder_repository import FolderRepository
from vfs.repositories.user_repository import UserRepository
from vfs.types import Folder

logger = get_logger(__name__)


class FolderService:
    """
    Sequences user checks and name validation in front of the folder store.

    When a file repository is given, deleting or renaming a folder carries
    its files along.
    """

    def __init__(
        self,
        folder_repo: FolderRepository,
        user_repo: UserRepository,
        file_repo: Optional[FileRepository] = None,
        lock: Optional[threading.RLock] = None,
    ):
        self.folder_repo = folder_repo
        self.user_repo = user_repo
        self.file_repo = file_repo
        self._lock = lock or threading.RLock()

    def create_folder(self, username: str, folder_name: str, description: str = "") -> Folder:
        logger.info(f"Creating folder {folder_name} [username={username}]")
        with self._lock:
            self._require_user(username)
            self.folder_repo.validate_folder_name(folder_name)

            folder = Folder(
                username=username,
                name=folder_name,
                description=description,
                created_at=datetime.now(),
            )
            self.folder_repo.create_folder(folder)
        return folder

    def delete_folder(self, username: str, folder_name: str) -> None:
        """
        Delete a folder and then its files.

        If removing the files fails, the folder record is put back before the
        error propagates.
        """
        logger.info(f"Deleting folder {folder_name} [username={username}]")
        with self._lock:
            self._require_user(username)
            self.folder_repo.validate_folder_name(folder_name)
            removed = self.folder_repo.delete_folder(username, folder_name)

            if self.file_repo is None:
                return
            try:
                self.file_repo.delete_folder_files(username, folder_name)
            except StorageError:
                logger.error(f"Removing files of {folder_name} failed, restoring folder [username={username}]")
                self.folder_repo.restore_folder(removed)
                raise

    def rename_folder(self, username: str, folder_name: str, new_folder_name: str) -> None:
        """Rename a folder and move its files, undoing the rename if the move fails."""
        logger.info(f"Renaming folder {folder_name} to {new_folder_name} [username={username}]")
        with self._lock:
            self._require_user(username)
            self.folder_repo.validate_folder_name(new_folder_name)
            self.folder_repo.rename_folder(username, folder_name, new_folder_name)

            if self.file_repo is None:
                return
            try:
                self.file_repo.move_folder_files(username, folder_name, new_folder_name)
            except StorageError:
                logger.error(f"Moving files of {folder_name} failed, reverting rename [username={username}]")
                self.folder_repo.rename_folder(username, new_folder_name, folder_name)
                raise

    def list_folders(
        self,
        username: str,
        sort_field: Optional[str] = None,
        sort_order: Optional[str] = "asc",
    ) -> List[Folder]:
        with self._lock:
            self._require_user(username)
            return self.folder_repo.list_folders(username, sort_field, sort_order)

    def _require_user(self, username: str) -> None:
        if not self.user_repo.exists(username):
            logger.warning(f"Unknown user: {username}")
            raise UserNotFoundError(username)
