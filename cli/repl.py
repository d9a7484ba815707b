"""REPL with prompt_toolkit for user interaction."""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from cli.commands import (
    handle_create_file,
    handle_create_folder,
    handle_delete_file,
    handle_delete_folder,
    handle_list_files,
    handle_list_folders,
    handle_register,
    handle_rename_folder,
)
from cli.completer import VFSCompleter
from cli.config import Config
from cli.constants import (
    HELP_TEXT,
    LOGO,
    PROMPT_TEXT,
    STYLE,
    WELCOME_HELP,
    WELCOME_TITLE,
)
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
from cli.parser import ParseError, parse_command
from common.constants import DISPLAY_TIMESTAMP_FORMAT
from common.logging_config import get_logger
from vfs.service_locator import Services

logger = get_logger(__name__)


def clear_screen() -> None:
    """Clear the terminal screen (cross-platform)."""
    if sys.platform == "win32":
        os.system("cls")
    else:
        os.system("clear")


def show_welcome() -> None:
    """Display logo, title and the current time."""
    print(LOGO)
    print(WELCOME_TITLE)
    print(f"The current time is: {datetime.now().strftime(DISPLAY_TIMESTAMP_FORMAT)}")
    print(WELCOME_HELP)


def dispatch_command(cmd_obj, services: Optional[Services] = None) -> str:
    """Dispatch parsed command to appropriate handler."""
    if isinstance(cmd_obj, RegisterCommand):
        return handle_register(cmd_obj, services)
    elif isinstance(cmd_obj, CreateFolderCommand):
        return handle_create_folder(cmd_obj, services)
    elif isinstance(cmd_obj, DeleteFolderCommand):
        return handle_delete_folder(cmd_obj, services)
    elif isinstance(cmd_obj, RenameFolderCommand):
        return handle_rename_folder(cmd_obj, services)
    elif isinstance(cmd_obj, ListFoldersCommand):
        return handle_list_folders(cmd_obj, services)
    elif isinstance(cmd_obj, CreateFileCommand):
        return handle_create_file(cmd_obj, services)
    elif isinstance(cmd_obj, DeleteFileCommand):
        return handle_delete_file(cmd_obj, services)
    elif isinstance(cmd_obj, ListFilesCommand):
        return handle_list_files(cmd_obj, services)
    else:
        return f"Unknown command type: {type(cmd_obj)}"


def cleanup_stores(paths: Iterable[str]) -> List[str]:
    """
    Remove backing store files.

    Args:
        paths: Store file locations

    Returns:
        One message per removed file
    """
    messages = []
    for path in paths:
        try:
            Path(path).unlink()
        except FileNotFoundError:
            continue
        except OSError as e:
            logger.warning(f"Could not remove store file {path}: {e}")
            continue
        messages.append(f"Removing file {path} ...")
    return messages


def handle_exit(config: Config) -> None:
    """Print goodbye and remove the stores for throwaway sessions."""
    if config.cleanup_on_exit():
        for message in cleanup_stores(config.get_store_paths().values()):
            print(message)
        print("Removed all temp files.")
    print("Exiting program.\nSee you next time!")


def repl_loop(services: Services, config: Config) -> None:
    """Start interactive REPL with prompt_toolkit."""
    completer = VFSCompleter(
        username_source=lambda: [u.username for u in services.users.user_repo.list_users()]
    )
    history = InMemoryHistory()
    session: PromptSession = PromptSession(
        completer=completer, history=history, style=STYLE
    )

    clear_screen()
    show_welcome()

    while True:
        try:
            user_input = session.prompt([("class:prompt", PROMPT_TEXT)])

            if not user_input.strip():
                continue

            if user_input.strip() == "exit":
                handle_exit(config)
                break

            if user_input.strip() == "help":
                print(HELP_TEXT)
                continue

            if user_input.strip() == "clear":
                clear_screen()
                show_welcome()
                continue

            cmd_obj = parse_command(user_input)
            result = dispatch_command(cmd_obj, services)
            print(result)

        except ParseError as e:
            print(f"Error: {e}")
        except KeyboardInterrupt:
            continue
        except EOFError:
            print()
            handle_exit(config)
            break
