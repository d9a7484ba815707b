"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class RegisterCommand:
    """Register a new user."""

    username: str
    command: Literal["register"] = "register"


@dataclass(frozen=True)
class CreateFolderCommand:
    """Create a folder for a user."""

    username: str
    folder_name: str
    description: str = ""
    command: Literal["create-folder"] = "create-folder"


@dataclass(frozen=True)
class DeleteFolderCommand:
    """Delete a user's folder and its files."""

    username: str
    folder_name: str
    command: Literal["delete-folder"] = "delete-folder"


@dataclass(frozen=True)
class RenameFolderCommand:
    """Rename a user's folder."""

    username: str
    folder_name: str
    new_folder_name: str
    command: Literal["rename-folder"] = "rename-folder"


@dataclass(frozen=True)
class ListFoldersCommand:
    """List a user's folders."""

    username: str
    sort_field: str | None = None
    sort_order: str = "asc"
    command: Literal["list-folders"] = "list-folders"


@dataclass(frozen=True)
class CreateFileCommand:
    """Create a file in a folder."""

    username: str
    folder_name: str
    file_name: str
    description: str = ""
    command: Literal["create-file"] = "create-file"


@dataclass(frozen=True)
class DeleteFileCommand:
    """Delete a file from a folder."""

    username: str
    folder_name: str
    file_name: str
    command: Literal["delete-file"] = "delete-file"


@dataclass(frozen=True)
class ListFilesCommand:
    """List the files of a folder."""

    username: str
    folder_name: str
    sort_field: str | None = None
    sort_order: str = "asc"
    command: Literal["list-files"] = "list-files"


CommandRequest = (
    RegisterCommand
    | CreateFolderCommand
    | DeleteFolderCommand
    | RenameFolderCommand
    | ListFoldersCommand
    | CreateFileCommand
    | DeleteFileCommand
    | ListFilesCommand
)
