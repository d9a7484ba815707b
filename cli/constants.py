"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

COMMANDS = [
    "register",
    "create-folder",
    "delete-folder",
    "rename-folder",
    "list-folders",
    "create-file",
    "delete-file",
    "list-files",
    "clear",
    "exit",
    "help",
]

STYLE = Style.from_dict(
    {
        "prompt": "#00aa88 bold",
        "command": "#0088ff bold",
    }
)

TEAL = "\033[38;2;0;170;136m"
RESET = "\033[0m"

LOGO = f"""{TEAL}
 __     _______ ____
 \\ \\   / /  ___/ ___|
  \\ \\ / /| |_  \\___ \\
   \\ V / |  _|  ___) |
    \\_/  |_|   |____/
{RESET}"""

WELCOME_TITLE = "==== Virtual File System CLI ===="
WELCOME_HELP = "Type 'help' to see available commands.\n"

PROMPT_TEXT = "# "

USAGE = {
    "register": "Usage: register [username]",
    "create-folder": "Usage: create-folder [username] [foldername] [description]?",
    "delete-folder": "Usage: delete-folder [username] [foldername]",
    "rename-folder": "Usage: rename-folder [username] [foldername] [new-folder-name]",
    "list-folders": "Usage: list-folders [username] [--sort-name|--sort-created] [asc|desc]",
    "create-file": "Usage: create-file [username] [foldername] [filename] [description]?",
    "delete-file": "Usage: delete-file [username] [foldername] [filename]",
    "list-files": "Usage: list-files [username] [foldername] [--sort-name|--sort-created] [asc|desc]",
}

HELP_TEXT = """Available commands:
> register [username]
> create-folder [username] [foldername] [description]?
> delete-folder [username] [foldername]
> list-folders [username] [--sort-name|--sort-created] [asc|desc]
> rename-folder [username] [foldername] [new-folder-name]
> create-file [username] [foldername] [filename] [description]?
> delete-file [username] [foldername] [filename]
> list-files [username] [foldername] [--sort-name|--sort-created] [asc|desc]
> clear
> help
> exit

Names may only contain letters and digits (at most 30 characters).
Folder names ignore case; file names do not.
Examples:
  register alice
  create-folder alice Notes "weekly meeting notes"
  create-file alice notes agenda first draft
  list-files alice notes --sort-created desc
  rename-folder alice notes Archive"""
