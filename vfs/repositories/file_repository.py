"""File repository backed by a JSON collection."""

import threading
from pathlib import Path
from typing import List, Optional

from common.logging_config import get_logger
from vfs.exceptions import FileAlreadyExistsError, VirtualFileNotFoundError
from vfs.repositories.json_collection import JsonCollection
from vfs.schemas.records import StoredFile, StoredFileList
from vfs.types import File
from vfs.utils import names_equal, parse_timestamp, sort_records, validate_name

logger = get_logger(__name__)


class FileRepository:
    """
    File records of every folder in one flat collection.

    A file belongs to a (username, folder name) pair, both matched
    case-insensitively; the file name itself is matched exactly.
    """

    def __init__(self, path: Path):
        self._collection: JsonCollection[StoredFile] = JsonCollection(path, StoredFileList)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._collection.path

    def exists(self, username: str, folder_name: str, file_name: str) -> bool:
        with self._lock:
            files = self._collection.load()
            return self._find_index(files, username, folder_name, file_name) is not None

    def create_file(self, file: File) -> None:
        """
        Add a file to its folder.

        Raises:
            FileAlreadyExistsError: If the folder already holds a file with exactly that name
            StorageError: If the store cannot be read or written
        """
        logger.debug(f"Creating file: {file.name} [username={file.username}, folder={file.folder_name}]")
        with self._lock:
            files = self._collection.load()

            if self._find_index(files, file.username, file.folder_name, file.name) is not None:
                logger.warning(f"File already exists: {file.name} [username={file.username}, folder={file.folder_name}]")
                raise FileAlreadyExistsError(file.name)

            files.append(StoredFile.from_file(file))
            self._collection.save(files)
        logger.info(f"File created: {file.name} [username={file.username}, folder={file.folder_name}]")

    def delete_file(self, username: str, folder_name: str, file_name: str) -> None:
        """
        Remove a file.

        Raises:
            VirtualFileNotFoundError: If the folder holds no file with exactly that name
        """
        logger.debug(f"Deleting file: {file_name} [username={username}, folder={folder_name}]")
        with self._lock:
            files = self._collection.load()

            index = self._find_index(files, username, folder_name, file_name)
            if index is None:
                raise VirtualFileNotFoundError(file_name)

            del files[index]
            self._collection.save(files)
        logger.info(f"File deleted: {file_name} [username={username}, folder={folder_name}]")

    def list_files(
        self,
        username: str,
        folder_name: str,
        sort_field: Optional[str] = None,
        sort_order: Optional[str] = "asc",
    ) -> List[File]:
        """
        List the files of a folder.

        An empty folder yields an empty list. Records whose creation time
        cannot be parsed are logged and skipped.
        """
        with self._lock:
            files = self._collection.load()

        result = []
        for stored in files:
            if not self._in_folder(stored, username, folder_name):
                continue
            try:
                created_at = parse_timestamp(stored.created_at)
            except ValueError as e:
                logger.warning(f"Skipping file '{stored.name}' with invalid timestamp: {e}")
                continue
            result.append(File(
                username=stored.username,
                folder_name=stored.folder_name,
                name=stored.name,
                description=stored.description,
                created_at=created_at,
            ))

        logger.debug(f"Listing {len(result)} files [username={username}, folder={folder_name}]")
        return sort_records(
            result,
            sort_field,
            sort_order,
            name_of=lambda f: f.name,
            created_of=lambda f: f.created_at,
        )

    def delete_folder_files(self, username: str, folder_name: str) -> int:
        """
        Remove every file of a folder.

        Returns:
            Number of files removed
        """
        with self._lock:
            files = self._collection.load()
            kept = [f for f in files if not self._in_folder(f, username, folder_name)]
            removed = len(files) - len(kept)
            if removed:
                self._collection.save(kept)
        if removed:
            logger.info(f"Removed {removed} files of folder {folder_name} [username={username}]")
        return removed

    def move_folder_files(self, username: str, folder_name: str, new_folder_name: str) -> int:
        """
        Re-home every file of a renamed folder.

        Returns:
            Number of files moved
        """
        with self._lock:
            files = self._collection.load()
            moved = 0
            for f in files:
                if self._in_folder(f, username, folder_name):
                    f.folder_name = new_folder_name
                    moved += 1
            if moved:
                self._collection.save(files)
        if moved:
            logger.info(f"Moved {moved} files from {folder_name} to {new_folder_name} [username={username}]")
        return moved

    @staticmethod
    def validate_file_name(file_name: str) -> None:
        validate_name(file_name)

    @staticmethod
    def _in_folder(file: StoredFile, username: str, folder_name: str) -> bool:
        return names_equal(file.username, username) and names_equal(file.folder_name, folder_name)

    @classmethod
    def _find_index(cls, files: List[StoredFile], username: str, folder_name: str, file_name: str) -> Optional[int]:
        for i, f in enumerate(files):
            if cls._in_folder(f, username, folder_name) and f.name == file_name:
                return i
        return None
