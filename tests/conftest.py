"""Shared pytest fixtures for all tests."""

import pytest
from cli.config import Config
from vfs.repositories import FileRepository, FolderRepository, UserRepository
from vfs.service_locator import build_services


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to temporary .vfs directory
    """
    config_dir = tmp_path / '.vfs'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir):
    """
    Create temporary config instance.

    Returns:
        Config instance with temp config file
    """
    return Config(temp_config_dir / 'config.json')


@pytest.fixture
def store_paths(tmp_path):
    """
    Backing store locations inside a temporary data directory.

    Returns:
        Dictionary accepted by build_services()
    """
    data_dir = tmp_path / 'data'
    return {
        'users_path': str(data_dir / 'users.txt'),
        'folders_path': str(data_dir / 'folders.json'),
        'files_path': str(data_dir / 'files.json'),
    }


@pytest.fixture
def user_repo(store_paths):
    return UserRepository(store_paths['users_path'])


@pytest.fixture
def folder_repo(store_paths):
    return FolderRepository(store_paths['folders_path'])


@pytest.fixture
def file_repo(store_paths):
    return FileRepository(store_paths['files_path'])


@pytest.fixture
def services(store_paths):
    """
    Fully wired services over temporary stores, with 'alice' registered.
    """
    services = build_services(**store_paths)
    services.users.register('alice')
    return services
