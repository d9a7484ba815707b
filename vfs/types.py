"""Domain data type definitions (User, Folder, File)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    """
    A registered user.
    """
    username: str


@dataclass(frozen=True)
class Folder:
    """
    A folder owned by a user.
    """
    username: str
    name: str
    description: str
    created_at: datetime


@dataclass(frozen=True)
class File:
    """
    A file record inside a user's folder. Metadata only, no content.
    """
    username: str
    folder_name: str
    name: str
    description: str
    created_at: datetime
