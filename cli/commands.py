"""Command handler functions for CLI operations."""

from typing import Optional

from common.logging_config import get_logger
from cli.models import (
    CreateFileCommand,
    CreateFolderCommand,
    DeleteFileCommand,
    DeleteFolderCommand,
    ListFilesCommand,
    ListFoldersCommand,
    RegisterCommand,
    RenameFolderCommand,
)
from cli.utils import format_files, format_folders
from vfs.exceptions import NoFoldersFoundError, VFSException
from vfs.service_locator import Services, get_services

logger = get_logger(__name__)


def handle_register(cmd: RegisterCommand, services: Optional[Services] = None) -> str:
    """
    Handle 'register' command.

    Args:
        cmd: RegisterCommand with username
        services: Optional Services for dependency injection (testing)

    Returns:
        Success or error message
    """
    if services is None:
        services = get_services()
    try:
        services.users.register(cmd.username)
    except VFSException as e:
        return f"Error: {e}"
    return f"Add '{cmd.username}' successfully."


def handle_create_folder(cmd: CreateFolderCommand, services: Optional[Services] = None) -> str:
    """
    Handle 'create-folder' command.

    Args:
        cmd: CreateFolderCommand with username, folder_name and description
        services: Optional Services for dependency injection (testing)

    Returns:
        Success or error message
    """
    logger.info(f"Executing create-folder command: {cmd.username}/{cmd.folder_name}")
    if services is None:
        services = get_services()
    try:
        services.folders.create_folder(cmd.username, cmd.folder_name, cmd.description)
    except VFSException as e:
        return f"Error: {e}"
    return f"Create '{cmd.folder_name}' successfully."


def handle_delete_folder(cmd: DeleteFolderCommand, services: Optional[Services] = None) -> str:
    if services is None:
        services = get_services()
    try:
        services.folders.delete_folder(cmd.username, cmd.folder_name)
    except VFSException as e:
        return f"Error: {e}"
    return f"Delete '{cmd.folder_name}' successfully."


def handle_rename_folder(cmd: RenameFolderCommand, services: Optional[Services] = None) -> str:
    if services is None:
        services = get_services()
    try:
        services.folders.rename_folder(cmd.username, cmd.folder_name, cmd.new_folder_name)
    except VFSException as e:
        return f"Error: {e}"
    return f"Rename '{cmd.folder_name}' to '{cmd.new_folder_name}' successfully."


def handle_list_folders(cmd: ListFoldersCommand, services: Optional[Services] = None) -> str:
    """
    Handle 'list-folders' command.

    Args:
        cmd: ListFoldersCommand with username and sort options
        services: Optional Services for dependency injection (testing)

    Returns:
        Folder table, empty-state warning or error message
    """
    logger.info(f"Executing list-folders command: {cmd.username} sort={cmd.sort_field} {cmd.sort_order}")
    if services is None:
        services = get_services()
    try:
        folders = services.folders.list_folders(cmd.username, cmd.sort_field, cmd.sort_order)
    except NoFoldersFoundError:
        return f"Warning: The {cmd.username} doesn't have any folders."
    except VFSException as e:
        return f"Error: {e}"
    logger.debug(f"list-folders returned {len(folders)} folders")
    return format_folders(folders)


def handle_create_file(cmd: CreateFileCommand, services: Optional[Services] = None) -> str:
    """
    Handle 'create-file' command.

    Args:
        cmd: CreateFileCommand with username, folder_name, file_name and description
        services: Optional Services for dependency injection (testing)

    Returns:
        Success or error message
    """
    logger.info(f"Executing create-file command: {cmd.username}/{cmd.folder_name}/{cmd.file_name}")
    if services is None:
        services = get_services()
    try:
        services.files.create_file(cmd.username, cmd.folder_name, cmd.file_name, cmd.description)
    except VFSException as e:
        return f"Error: {e}"
    return f"Create '{cmd.file_name}' in {cmd.username}/{cmd.folder_name} successfully."


def handle_delete_file(cmd: DeleteFileCommand, services: Optional[Services] = None) -> str:
    if services is None:
        services = get_services()
    try:
        services.files.delete_file(cmd.username, cmd.folder_name, cmd.file_name)
    except VFSException as e:
        return f"Error: {e}"
    return f"Delete '{cmd.file_name}' in {cmd.username}/{cmd.folder_name} successfully."


def handle_list_files(cmd: ListFilesCommand, services: Optional[Services] = None) -> str:
    """
    Handle 'list-files' command.

    Args:
        cmd: ListFilesCommand with username, folder_name and sort options
        services: Optional Services for dependency injection (testing)

    Returns:
        File table, empty-folder warning or error message
    """
    logger.info(f"Executing list-files command: {cmd.username}/{cmd.folder_name} sort={cmd.sort_field} {cmd.sort_order}")
    if services is None:
        services = get_services()
    try:
        files = services.files.list_files(cmd.username, cmd.folder_name, cmd.sort_field, cmd.sort_order)
    except VFSException as e:
        return f"Error: {e}"
    if not files:
        return "Warning: The folder is empty."
    logger.debug(f"list-files returned {len(files)} files")
    return format_files(files)
