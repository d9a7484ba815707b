"""Configuration settings for the virtual file system stores."""

import os
from pathlib import Path


DATA_DIR = Path(os.environ.get("VFS_DATA_DIR", str(Path.home() / ".vfs")))

USERS_PATH = os.environ.get("VFS_USERS_PATH", str(DATA_DIR / "users.txt"))

FOLDERS_PATH = os.environ.get("VFS_FOLDERS_PATH", str(DATA_DIR / "folders.json"))

FILES_PATH = os.environ.get("VFS_FILES_PATH", str(DATA_DIR / "files.json"))

CONFIG_PATH = os.environ.get("VFS_CONFIG_PATH", str(DATA_DIR / "config.json"))
