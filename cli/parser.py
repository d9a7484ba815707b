"""Command parser for CLI input."""

import shlex
from typing import Optional

from cli.constants import USAGE
from cli.models import (
    CommandRequest,
    CreateFileCommand,
    CreateFolderCommand,
    DeleteFileCommand,
    DeleteFolderCommand,
    ListFilesCommand,
    ListFoldersCommand,
    RegisterCommand,
    RenameFolderCommand,
)
from common.constants import SORT_ASC, SORT_FLAGS, SORT_ORDERS
from common.logging_config import get_logger

logger = get_logger(__name__)


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object (one of the eight VFS commands)

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        # unbalanced quotes, e.g. an apostrophe in a description
        logger.debug(f"shlex failed ({e}), splitting on whitespace")
        tokens = input_line.split()

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0]
    parser = _PARSERS.get(command_name)
    if parser is None:
        raise ParseError("Unrecognized command. Type 'help' to see available commands.")

    return parser(tokens[1:])


def _parse_register(args: list[str]) -> RegisterCommand:
    """Parse 'register [username]' command."""
    if len(args) != 1:
        raise ParseError(USAGE["register"])

    return RegisterCommand(username=args[0])


def _parse_create_folder(args: list[str]) -> CreateFolderCommand:
    """Parse 'create-folder [username] [foldername] [description]?' command."""
    if len(args) < 2:
        raise ParseError(USAGE["create-folder"])

    return CreateFolderCommand(
        username=args[0],
        folder_name=args[1],
        description=" ".join(args[2:]),
    )


def _parse_delete_folder(args: list[str]) -> DeleteFolderCommand:
    """Parse 'delete-folder [username] [foldername]' command."""
    if len(args) != 2:
        raise ParseError(USAGE["delete-folder"])

    username, folder_name = args
    return DeleteFolderCommand(username=username, folder_name=folder_name)


def _parse_rename_folder(args: list[str]) -> RenameFolderCommand:
    """Parse 'rename-folder [username] [foldername] [new-folder-name]' command."""
    if len(args) != 3:
        raise ParseError(USAGE["rename-folder"])

    username, folder_name, new_folder_name = args
    return RenameFolderCommand(
        username=username,
        folder_name=folder_name,
        new_folder_name=new_folder_name,
    )


def _parse_list_folders(args: list[str]) -> ListFoldersCommand:
    """Parse 'list-folders [username] [--sort-name|--sort-created] [asc|desc]' command."""
    if not 1 <= len(args) <= 3:
        raise ParseError(USAGE["list-folders"])

    sort_field, sort_order = _parse_sort(args[1:], USAGE["list-folders"])
    return ListFoldersCommand(username=args[0], sort_field=sort_field, sort_order=sort_order)


def _parse_create_file(args: list[str]) -> CreateFileCommand:
    """Parse 'create-file [username] [foldername] [filename] [description]?' command."""
    if len(args) < 3:
        raise ParseError(USAGE["create-file"])

    return CreateFileCommand(
        username=args[0],
        folder_name=args[1],
        file_name=args[2],
        description=" ".join(args[3:]),
    )


def _parse_delete_file(args: list[str]) -> DeleteFileCommand:
    """Parse 'delete-file [username] [foldername] [filename]' command."""
    if len(args) != 3:
        raise ParseError(USAGE["delete-file"])

    username, folder_name, file_name = args
    return DeleteFileCommand(username=username, folder_name=folder_name, file_name=file_name)


def _parse_list_files(args: list[str]) -> ListFilesCommand:
    """Parse 'list-files [username] [foldername] [--sort-name|--sort-created] [asc|desc]' command."""
    if not 2 <= len(args) <= 4:
        raise ParseError(USAGE["list-files"])

    sort_field, sort_order = _parse_sort(args[2:], USAGE["list-files"])
    return ListFilesCommand(
        username=args[0],
        folder_name=args[1],
        sort_field=sort_field,
        sort_order=sort_order,
    )


def _parse_sort(args: list[str], usage: str) -> tuple[Optional[str], str]:
    """Parse the optional sort flag and order, returning (field, order)."""
    if not args:
        return None, SORT_ASC

    sort_field = args[0]
    if sort_field not in SORT_FLAGS:
        raise ParseError(usage)

    sort_order = args[1] if len(args) > 1 else SORT_ASC
    if sort_order not in SORT_ORDERS:
        raise ParseError(usage)

    return sort_field, sort_order


_PARSERS = {
    "register": _parse_register,
    "create-folder": _parse_create_folder,
    "delete-folder": _parse_delete_folder,
    "rename-folder": _parse_rename_folder,
    "list-folders": _parse_list_folders,
    "create-file": _parse_create_file,
    "delete-file": _parse_delete_file,
    "list-files": _parse_list_files,
}
