"""User repository backed by a newline-delimited text file."""

import threading
from pathlib import Path
from typing import List

from common.logging_config import get_logger
from vfs.exceptions import StorageError
from vfs.types import User
from vfs.utils import names_equal, validate_name

logger = get_logger(__name__)


class UserRepository:
    """
    Append-only registry of usernames, one per line.

    Every public method holds the store lock for its whole duration.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def register(self, username: str) -> User:
        """
        Append a username to the store.

        Duplicates are not checked here; callers use exists() first.

        Raises:
            StorageError: If the store cannot be opened or written
        """
        logger.debug(f"Registering user: {username}")
        with self._lock:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(self.path, 'a', encoding='utf-8') as f:
                    f.write(username + "\n")
            except OSError as e:
                logger.error(f"Failed to register user {username}: {e}", exc_info=True)
                raise StorageError(str(self.path), e) from e
        logger.info(f"User registered: {username}")
        return User(username=username)

    def exists(self, username: str) -> bool:
        """
        Check whether a username is registered, ignoring case.

        A store that has not been created yet holds no users.
        """
        with self._lock:
            return any(names_equal(line, username) for line in self._read_lines())

    def list_users(self) -> List[User]:
        with self._lock:
            return [User(username=line) for line in self._read_lines()]

    @staticmethod
    def validate_username(username: str) -> None:
        validate_name(username)

    def _read_lines(self) -> List[str]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                return [line.rstrip("\n") for line in f if line.strip()]
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.error(f"Failed to read users from {self.path}: {e}", exc_info=True)
            raise StorageError(str(self.path), e) from e
