"""Service locator wiring repositories and services."""

import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from vfs import config
from vfs.repositories import FileRepository, FolderRepository, UserRepository
from vfs.services import FileService, FolderService, UserService


@dataclass(frozen=True)
class Services:
    """The three services of one virtual file system, sharing one lock."""
    users: UserService
    folders: FolderService
    files: FileService


_services: Optional[Services] = None


def build_services(
    users_path: Optional[str] = None,
    folders_path: Optional[str] = None,
    files_path: Optional[str] = None,
) -> Services:
    """
    Create repositories over the given store paths and the services on top.

    Paths default to the environment-derived values in vfs.config.
    """
    user_repo = UserRepository(Path(users_path or config.USERS_PATH))
    folder_repo = FolderRepository(Path(folders_path or config.FOLDERS_PATH))
    file_repo = FileRepository(Path(files_path or config.FILES_PATH))

    lock = threading.RLock()
    return Services(
        users=UserService(user_repo, lock=lock),
        folders=FolderService(folder_repo, user_repo, file_repo=file_repo, lock=lock),
        files=FileService(file_repo, folder_repo, user_repo, lock=lock),
    )


def set_services(services: Optional[Services]) -> None:
    """Set global services instance"""
    global _services
    _services = services


def get_services() -> Services:
    """Get global services instance, building defaults on first use"""
    global _services
    if _services is None:
        _services = build_services()
    return _services
