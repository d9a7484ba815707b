"""Pydantic schemas for persisted folder and file records."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from vfs.types import File, Folder
from vfs.utils import format_timestamp


class StoredFolder(BaseModel):
    """Folder record as written to the folders store."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    name: str
    description: str = ""
    created_at: str = Field(alias="createdAt")

    @classmethod
    def from_folder(cls, folder: Folder) -> "StoredFolder":
        return cls(
            username=folder.username,
            name=folder.name,
            description=folder.description,
            created_at=format_timestamp(folder.created_at),
        )


class StoredFile(BaseModel):
    """File record as written to the files store."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    folder_name: str = Field(alias="folderName")
    name: str
    description: str = ""
    created_at: str = Field(alias="createdAt")

    @classmethod
    def from_file(cls, file: File) -> "StoredFile":
        return cls(
            username=file.username,
            folder_name=file.folder_name,
            name=file.name,
            description=file.description,
            created_at=format_timestamp(file.created_at),
        )


StoredFolderList = TypeAdapter(List[StoredFolder])
StoredFileList = TypeAdapter(List[StoredFile])
