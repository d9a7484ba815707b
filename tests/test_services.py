"""Tests for the service layer."""

from datetime import datetime
from unittest.mock import Mock

import pytest

from vfs.exceptions import (
    FileAlreadyExistsError,
    FolderAlreadyExistsError,
    FolderNotFoundError,
    InvalidNameError,
    NameTooLongError,
    NoFoldersFoundError,
    StorageError,
    UserAlreadyExistsError,
    UserNotFoundError,
    VirtualFileNotFoundError,
)
from vfs.repositories import FileRepository, FolderRepository, UserRepository
from vfs.service_locator import build_services, get_services, set_services
from vfs.services import FileService, FolderService, UserService
from vfs.types import User


class TestUserService:
    def test_register_new_user(self):
        repo = Mock(spec=UserRepository)
        repo.exists.return_value = False
        repo.register.return_value = User(username='alice')

        user = UserService(repo).register('alice')

        assert user.username == 'alice'
        repo.validate_username.assert_called_once_with('alice')
        repo.register.assert_called_once_with('alice')

    def test_register_duplicate(self):
        repo = Mock(spec=UserRepository)
        repo.exists.return_value = True

        with pytest.raises(UserAlreadyExistsError) as exc_info:
            UserService(repo).register('alice')

        assert str(exc_info.value) == 'The user: alice already exists.'
        repo.register.assert_not_called()

    def test_register_invalid_name_never_reaches_store(self):
        repo = Mock(spec=UserRepository)
        repo.validate_username.side_effect = InvalidNameError('bad name')

        with pytest.raises(InvalidNameError):
            UserService(repo).register('bad name')

        repo.exists.assert_not_called()
        repo.register.assert_not_called()

    def test_register_duplicate_ignores_case(self, services):
        with pytest.raises(UserAlreadyExistsError):
            services.users.register('ALICE')

    def test_register_rejects_long_name(self, services):
        with pytest.raises(NameTooLongError):
            services.users.register('u' * 31)


class TestFolderService:
    def test_create_folder_for_unknown_user(self):
        folder_repo = Mock(spec=FolderRepository)
        user_repo = Mock(spec=UserRepository)
        user_repo.exists.return_value = False

        with pytest.raises(UserNotFoundError) as exc_info:
            FolderService(folder_repo, user_repo).create_folder('ghost', 'notes')

        assert str(exc_info.value) == "The user: ghost doesn't exist."
        folder_repo.create_folder.assert_not_called()

    def test_create_folder_stamps_creation_time(self, services):
        before = datetime.now()
        folder = services.folders.create_folder('alice', 'notes', 'my notes')
        after = datetime.now()

        assert folder.name == 'notes'
        assert folder.description == 'my notes'
        assert before <= folder.created_at <= after

    def test_create_folder_invalid_name(self, services):
        with pytest.raises(InvalidNameError):
            services.folders.create_folder('alice', 'my-notes')

    def test_create_folder_duplicate(self, services):
        services.folders.create_folder('alice', 'Notes')
        with pytest.raises(FolderAlreadyExistsError):
            services.folders.create_folder('alice', 'notes')

    def test_user_lookup_ignores_case(self, services):
        services.folders.create_folder('ALICE', 'notes')
        assert [f.name for f in services.folders.list_folders('alice')] == ['notes']

    def test_lookalike_username_is_not_the_registered_user(self, services):
        services.users.register('Strasse')

        with pytest.raises(UserNotFoundError):
            services.folders.create_folder('Straße', 'docs')
        with pytest.raises(NoFoldersFoundError):
            services.folders.list_folders('strasse')

    def test_list_folders_without_any(self, services):
        with pytest.raises(NoFoldersFoundError):
            services.folders.list_folders('alice')

    def test_delete_folder_cascades_to_files(self, services):
        services.folders.create_folder('alice', 'docs')
        services.files.create_file('alice', 'docs', 'agenda')

        services.folders.delete_folder('alice', 'docs')
        services.folders.create_folder('alice', 'docs')

        assert services.files.list_files('alice', 'docs') == []

    def test_delete_folder_without_file_repo(self):
        folder_repo = Mock(spec=FolderRepository)
        user_repo = Mock(spec=UserRepository)
        user_repo.exists.return_value = True

        FolderService(folder_repo, user_repo).delete_folder('alice', 'docs')

        folder_repo.delete_folder.assert_called_once_with('alice', 'docs')

    def test_delete_missing_folder_keeps_files(self):
        folder_repo = Mock(spec=FolderRepository)
        folder_repo.delete_folder.side_effect = FolderNotFoundError('docs')
        user_repo = Mock(spec=UserRepository)
        user_repo.exists.return_value = True
        file_repo = Mock(spec=FileRepository)

        with pytest.raises(FolderNotFoundError):
            FolderService(folder_repo, user_repo, file_repo=file_repo).delete_folder('alice', 'docs')

        file_repo.delete_folder_files.assert_not_called()

    def test_rename_folder_moves_files(self, services):
        services.folders.create_folder('alice', 'docs')
        services.files.create_file('alice', 'docs', 'agenda')

        services.folders.rename_folder('alice', 'docs', 'archive')

        assert [f.name for f in services.files.list_files('alice', 'archive')] == ['agenda']
        with pytest.raises(FolderNotFoundError):
            services.files.list_files('alice', 'docs')

    def test_failed_file_removal_restores_folder(self, folder_repo, user_repo):
        user_repo.register('alice')
        file_repo = Mock(spec=FileRepository)
        file_repo.delete_folder_files.side_effect = StorageError('files.json', 'disk full')
        service = FolderService(folder_repo, user_repo, file_repo=file_repo)
        service.create_folder('alice', 'docs', 'keep me')

        with pytest.raises(StorageError):
            service.delete_folder('alice', 'docs')

        folders = folder_repo.list_folders('alice')
        assert [(f.name, f.description) for f in folders] == [('docs', 'keep me')]

    def test_failed_file_move_reverts_rename(self, folder_repo, user_repo):
        user_repo.register('alice')
        file_repo = Mock(spec=FileRepository)
        file_repo.move_folder_files.side_effect = StorageError('files.json', 'disk full')
        service = FolderService(folder_repo, user_repo, file_repo=file_repo)
        service.create_folder('alice', 'docs')

        with pytest.raises(StorageError):
            service.rename_folder('alice', 'docs', 'archive')

        assert folder_repo.exists('alice', 'docs')
        assert not folder_repo.exists('alice', 'archive')

    def test_rename_folder_validates_new_name(self, services):
        services.folders.create_folder('alice', 'docs')
        with pytest.raises(InvalidNameError):
            services.folders.rename_folder('alice', 'docs', 'new name')
        with pytest.raises(NameTooLongError):
            services.folders.rename_folder('alice', 'docs', 'n' * 31)


class TestFileService:
    def test_create_file_in_missing_folder(self, services):
        with pytest.raises(FolderNotFoundError) as exc_info:
            services.files.create_file('alice', 'ghost', 'agenda')
        assert exc_info.value.name == 'ghost'

    def test_create_file_for_unknown_user(self, services):
        with pytest.raises(UserNotFoundError):
            services.files.create_file('bob', 'docs', 'agenda')

    def test_create_file_checks_folder_before_name(self):
        file_repo = Mock(spec=FileRepository)
        folder_repo = Mock(spec=FolderRepository)
        folder_repo.exists.return_value = False
        user_repo = Mock(spec=UserRepository)
        user_repo.exists.return_value = True

        with pytest.raises(FolderNotFoundError):
            FileService(file_repo, folder_repo, user_repo).create_file('alice', 'docs', 'bad name!')

        file_repo.validate_file_name.assert_not_called()
        file_repo.create_file.assert_not_called()

    def test_create_and_list_files(self, services):
        services.folders.create_folder('alice', 'docs')
        created = services.files.create_file('alice', 'docs', 'agenda', 'weekly agenda')

        files = services.files.list_files('alice', 'DOCS')
        assert len(files) == 1
        assert files[0].name == created.name
        assert files[0].description == 'weekly agenda'

    def test_create_duplicate_file(self, services):
        services.folders.create_folder('alice', 'docs')
        services.files.create_file('alice', 'docs', 'agenda')
        with pytest.raises(FileAlreadyExistsError):
            services.files.create_file('alice', 'docs', 'agenda')

    def test_create_file_invalid_name(self, services):
        services.folders.create_folder('alice', 'docs')
        with pytest.raises(InvalidNameError):
            services.files.create_file('alice', 'docs', 'agenda.txt')

    def test_delete_file(self, services):
        services.folders.create_folder('alice', 'docs')
        services.files.create_file('alice', 'docs', 'agenda')

        services.files.delete_file('alice', 'docs', 'agenda')

        assert services.files.list_files('alice', 'docs') == []
        with pytest.raises(VirtualFileNotFoundError):
            services.files.delete_file('alice', 'docs', 'agenda')

    def test_delete_file_in_missing_folder(self, services):
        with pytest.raises(FolderNotFoundError) as exc_info:
            services.files.delete_file('alice', 'ghost', 'agenda')
        assert exc_info.value.name == 'ghost'

    def test_delete_file_in_missing_folder_never_reaches_store(self):
        file_repo = Mock(spec=FileRepository)
        folder_repo = Mock(spec=FolderRepository)
        folder_repo.exists.return_value = False
        user_repo = Mock(spec=UserRepository)
        user_repo.exists.return_value = True

        with pytest.raises(FolderNotFoundError):
            FileService(file_repo, folder_repo, user_repo).delete_file('alice', 'ghost', 'agenda')

        folder_repo.exists.assert_called_once_with('alice', 'ghost')
        file_repo.delete_file.assert_not_called()

    def test_list_empty_folder(self, services):
        services.folders.create_folder('alice', 'docs')
        assert services.files.list_files('alice', 'docs') == []


class TestServiceLocator:
    def test_build_services_share_one_lock(self, store_paths):
        services = build_services(**store_paths)
        assert services.users._lock is services.folders._lock
        assert services.folders._lock is services.files._lock

    def test_state_persists_across_builds(self, store_paths):
        first = build_services(**store_paths)
        first.users.register('alice')
        first.folders.create_folder('alice', 'docs')

        second = build_services(**store_paths)
        assert [f.name for f in second.folders.list_folders('alice')] == ['docs']

    def test_set_and_get_services(self, services):
        set_services(services)
        try:
            assert get_services() is services
        finally:
            set_services(None)
