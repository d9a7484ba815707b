"""User service for business logic."""

import threading
from typing import Optional

from common.logging_config import get_logger
from vfs.exceptions import UserAlreadyExistsError
from vfs.repositories.user_repository import UserRepository
from vfs.types import User

logger = get_logger(__name__)


class UserService:
    def __init__(self, user_repo: UserRepository, lock: Optional[threading.RLock] = None):
        self.user_repo = user_repo
        self._lock = lock or threading.RLock()

    def register(self, username: str) -> User:
        logger.info(f"Attempting to register user: {username}")
        self.user_repo.validate_username(username)

        with self._lock:
            if self.user_repo.exists(username):
                logger.warning(f"Registration failed: username '{username}' already exists")
                raise UserAlreadyExistsError(username)

            user = self.user_repo.register(username)

        logger.info(f"Successfully registered user: {username}")
        return user
