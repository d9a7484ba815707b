"""Tests for CLI configuration module."""

import json
from pathlib import Path

from cli.config import Config
from cli.repl import handle_exit
from vfs import config as vfs_config


def test_config_creates_default_file(tmp_path):
    """Test that config file is created with defaults if missing."""
    config_path = tmp_path / '.vfs' / 'config.json'
    config = Config(config_path)

    assert config_path.exists()

    assert config.get_store_paths() == {
        'users_path': vfs_config.USERS_PATH,
        'folders_path': vfs_config.FOLDERS_PATH,
        'files_path': vfs_config.FILES_PATH,
    }
    assert json.loads(config_path.read_text())['users_path'] is None
    assert config.get_log_level() == 'WARNING'
    assert config.get_log_file() is None
    assert config.cleanup_on_exit() is False


def test_store_path_environment_applies_on_later_loads(tmp_path, monkeypatch):
    """Test that a saved config does not pin the environment-derived paths."""
    config_path = tmp_path / '.vfs' / 'config.json'
    monkeypatch.setattr(vfs_config, 'USERS_PATH', str(tmp_path / 'users.txt'))
    Config(config_path)

    monkeypatch.setattr(vfs_config, 'USERS_PATH', str(tmp_path / 'other.txt'))
    reloaded = Config(config_path)

    assert reloaded.get_store_paths()['users_path'] == str(tmp_path / 'other.txt')


def test_explicit_store_path_wins_over_environment(temp_config, monkeypatch):
    temp_config.set_store_paths(users_path='/srv/vfs/users.txt')
    monkeypatch.setattr(vfs_config, 'USERS_PATH', '/tmp/env-users.txt')

    reloaded = Config(temp_config.config_path)

    assert reloaded.get_store_paths()['users_path'] == '/srv/vfs/users.txt'


def test_config_loads_existing_file(tmp_path):
    """Test loading existing config file."""
    config_path = tmp_path / '.vfs' / 'config.json'
    config_path.parent.mkdir(parents=True)

    existing_data = {
        'folders_path': '/srv/vfs/folders.json',
        'log_level': 'DEBUG',
    }
    with open(config_path, 'w') as f:
        json.dump(existing_data, f)

    config = Config(config_path)

    assert config.get_store_paths()['folders_path'] == '/srv/vfs/folders.json'
    assert config.get_store_paths()['users_path'] == vfs_config.USERS_PATH
    assert config.get_log_level() == 'DEBUG'


def test_config_set_store_paths(temp_config, store_paths):
    """Test overriding store locations persists them."""
    temp_config.set_store_paths(**store_paths)

    assert temp_config.get_store_paths() == store_paths

    with open(temp_config.config_path, 'r') as f:
        data = json.load(f)
    assert data['files_path'] == store_paths['files_path']


def test_config_partial_store_path_override(temp_config):
    temp_config.set_store_paths(users_path='/tmp/only-users.txt')

    paths = temp_config.get_store_paths()
    assert paths['users_path'] == '/tmp/only-users.txt'
    assert paths['files_path'] == vfs_config.FILES_PATH


def test_config_corrupted_file_is_backed_up(tmp_path):
    """Test that corrupted config files fall back to defaults."""
    config_path = tmp_path / '.vfs' / 'config.json'
    config_path.parent.mkdir(parents=True)
    config_path.write_text('{ invalid json')

    config = Config(config_path)

    assert config.get_log_level() == 'WARNING'
    backup = config_path.with_suffix('.json.bak')
    assert backup.read_text() == '{ invalid json'


def test_handle_exit_keeps_stores_by_default(temp_config, store_paths, capsys):
    temp_config.set_store_paths(**store_paths)
    with open(_ensure_parent(store_paths['users_path']), 'w') as f:
        f.write('alice\n')

    handle_exit(temp_config)

    out = capsys.readouterr().out
    assert 'See you next time!' in out
    assert 'Removing file' not in out


def test_handle_exit_cleanup(temp_config, store_paths, capsys):
    temp_config.set_store_paths(**store_paths)
    temp_config.data['cleanup_on_exit'] = True
    with open(_ensure_parent(store_paths['users_path']), 'w') as f:
        f.write('alice\n')

    handle_exit(temp_config)

    out = capsys.readouterr().out
    assert f"Removing file {store_paths['users_path']} ..." in out
    assert 'Removed all temp files.' in out


def _ensure_parent(path):
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    return path
