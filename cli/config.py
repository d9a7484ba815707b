"""Configuration management for the VFS CLI."""

import json
import shutil
from pathlib import Path
from typing import Optional

from common.logging_config import get_logger
from vfs import config as vfs_config

logger = get_logger(__name__)


class Config:
    """Manages CLI configuration stored in JSON file."""

    DEFAULT_CONFIG = {
        "users_path": None,
        "folders_path": None,
        "files_path": None,
        "log_level": "WARNING",
        "log_file": None,
        "cleanup_on_exit": False,
    }

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.vfs/config.json)
        """
        self.config_path = Path(config_path)
        self.data = self._load()

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                config = self.DEFAULT_CONFIG.copy()
                config.update(data)
                return config
            except (json.JSONDecodeError, IOError) as e:
                backup_path = self.config_path.with_suffix('.json.bak')
                logger.warning(f"Corrupted config {self.config_path} ({e}), backing up to {backup_path}")
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError as copy_error:
                    logger.warning(f"Could not back up config: {copy_error}")
                return self.DEFAULT_CONFIG.copy()
        else:
            config = self.DEFAULT_CONFIG.copy()
            try:
                with open(self.config_path, 'w') as f:
                    json.dump(config, f, indent=2)
            except IOError as e:
                logger.warning(f"Could not write default config to {self.config_path}: {e}")
            return config

    def save(self) -> None:
        """Save current configuration to file."""
        try:
            with open(self.config_path, 'w') as f:
                json.dump(self.data, f, indent=2)
        except IOError as e:
            logger.warning(f"Could not save config to {self.config_path}: {e}")

    def get_store_paths(self) -> dict:
        """
        Get backing store locations.

        Paths not set in the config file come from vfs.config, so the
        VFS_* environment variables apply on every start.

        Returns:
            Dictionary with 'users_path', 'folders_path' and 'files_path'
        """
        return {
            'users_path': self.data.get('users_path') or vfs_config.USERS_PATH,
            'folders_path': self.data.get('folders_path') or vfs_config.FOLDERS_PATH,
            'files_path': self.data.get('files_path') or vfs_config.FILES_PATH,
        }

    def set_store_paths(
        self,
        users_path: Optional[str] = None,
        folders_path: Optional[str] = None,
        files_path: Optional[str] = None,
    ) -> None:
        """Override any of the store locations and save to file."""
        if users_path is not None:
            self.data['users_path'] = users_path
        if folders_path is not None:
            self.data['folders_path'] = folders_path
        if files_path is not None:
            self.data['files_path'] = files_path
        self.save()

    def get_log_level(self) -> str:
        return self.data.get('log_level') or 'WARNING'

    def get_log_file(self) -> Optional[str]:
        return self.data.get('log_file')

    def cleanup_on_exit(self) -> bool:
        """
        Whether the backing stores are removed when the REPL exits.

        Returns:
            True for throwaway sessions
        """
        return bool(self.data.get('cleanup_on_exit', False))
