"""Folder repository backed by a JSON collection."""

import threading
from pathlib import Path
from typing import List, Optional

from common.logging_config import get_logger
from vfs.exceptions import FolderAlreadyExistsError, FolderNotFoundError, NoFoldersFoundError
from vfs.repositories.json_collection import JsonCollection
from vfs.schemas.records import StoredFolder, StoredFolderList
from vfs.types import Folder
from vfs.utils import names_equal, parse_timestamp, sort_records, validate_name

logger = get_logger(__name__)


class FolderRepository:
    """
    Folders of every user in one flat collection.

    Folder names are unique per user, compared case-insensitively. Each
    public method loads the whole collection, mutates it and saves it back
    while holding the store lock.
    """

    def __init__(self, path: Path):
        self._collection: JsonCollection[StoredFolder] = JsonCollection(path, StoredFolderList)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._collection.path

    def exists(self, username: str, folder_name: str) -> bool:
        with self._lock:
            folders = self._collection.load()
            return self._find_index(folders, username, folder_name) is not None

    def create_folder(self, folder: Folder) -> None:
        """
        Add a folder.

        Raises:
            FolderAlreadyExistsError: If the user already has a folder with that name
            StorageError: If the store cannot be read or written
        """
        logger.debug(f"Creating folder: {folder.name} [username={folder.username}]")
        with self._lock:
            folders = self._collection.load()

            if self._find_index(folders, folder.username, folder.name) is not None:
                logger.warning(f"Folder already exists: {folder.name} [username={folder.username}]")
                raise FolderAlreadyExistsError(folder.name)

            folders.append(StoredFolder.from_folder(folder))
            self._collection.save(folders)
        logger.info(f"Folder created: {folder.name} [username={folder.username}]")

    def delete_folder(self, username: str, folder_name: str) -> StoredFolder:
        """
        Remove the first folder matching (username, folder_name).

        Returns:
            The removed record, as stored

        Raises:
            FolderNotFoundError: If no such folder exists
        """
        logger.debug(f"Deleting folder: {folder_name} [username={username}]")
        with self._lock:
            folders = self._collection.load()

            index = self._find_index(folders, username, folder_name)
            if index is None:
                raise FolderNotFoundError(folder_name)

            removed = folders.pop(index)
            self._collection.save(folders)
        logger.info(f"Folder deleted: {folder_name} [username={username}]")
        return removed

    def restore_folder(self, record: StoredFolder) -> None:
        """Put back a record returned by delete_folder, unchanged."""
        with self._lock:
            folders = self._collection.load()
            folders.append(record)
            self._collection.save(folders)
        logger.info(f"Folder restored: {record.name} [username={record.username}]")

    def rename_folder(self, username: str, folder_name: str, new_folder_name: str) -> None:
        """
        Rename a folder in place.

        The collision scan covers the whole collection, the source folder
        included, so a case-only rename is rejected.

        Raises:
            FolderNotFoundError: If the source folder does not exist
            FolderAlreadyExistsError: If the user already has a folder named new_folder_name
        """
        logger.debug(f"Renaming folder: {folder_name} -> {new_folder_name} [username={username}]")
        with self._lock:
            folders = self._collection.load()

            index = self._find_index(folders, username, folder_name)
            if index is None:
                raise FolderNotFoundError(folder_name)

            if self._find_index(folders, username, new_folder_name) is not None:
                logger.warning(f"Rename target already exists: {new_folder_name} [username={username}]")
                raise FolderAlreadyExistsError(new_folder_name)

            folders[index].name = new_folder_name
            self._collection.save(folders)
        logger.info(f"Folder renamed: {folder_name} -> {new_folder_name} [username={username}]")

    def list_folders(
        self,
        username: str,
        sort_field: Optional[str] = None,
        sort_order: Optional[str] = "asc",
    ) -> List[Folder]:
        """
        List a user's folders.

        Args:
            username: Owner of the folders
            sort_field: '--sort-name' / '--sort-created' (or 'name' / 'createdAt');
                anything else sorts by ascending name
            sort_order: 'asc' or 'desc'

        Returns:
            Sorted folders; records with an unreadable timestamp are skipped

        Raises:
            NoFoldersFoundError: If the user has no folders
        """
        with self._lock:
            folders = self._collection.load()

        owned = [f for f in folders if names_equal(f.username, username)]
        if not owned:
            raise NoFoldersFoundError(username)

        result = []
        for stored in owned:
            try:
                created_at = parse_timestamp(stored.created_at)
            except ValueError as e:
                logger.warning(f"Skipping folder '{stored.name}' with invalid timestamp: {e}")
                continue
            result.append(Folder(
                username=stored.username,
                name=stored.name,
                description=stored.description,
                created_at=created_at,
            ))

        logger.debug(f"Listing {len(result)} folders [username={username}]")
        return sort_records(
            result,
            sort_field,
            sort_order,
            name_of=lambda f: f.name,
            created_of=lambda f: f.created_at,
        )

    @staticmethod
    def validate_folder_name(folder_name: str) -> None:
        validate_name(folder_name)

    @staticmethod
    def _find_index(folders: List[StoredFolder], username: str, folder_name: str) -> Optional[int]:
        for i, f in enumerate(folders):
            if names_equal(f.username, username) and names_equal(f.name, folder_name):
                return i
        return None
