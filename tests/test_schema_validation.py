"""Schema validation tests for persisted store records."""

import pytest
from pydantic import ValidationError

from vfs.schemas import StoredFile, StoredFileList, StoredFolder, StoredFolderList


def test_folder_record_accepts_camel_case_keys():
    record = StoredFolderList.validate_json(
        '[{"username": "alice", "name": "docs", "createdAt": "2024-05-01T08:00:00"}]'
    )[0]

    assert record.created_at == '2024-05-01T08:00:00'
    assert record.description == ''


def test_file_record_dumps_camel_case_keys():
    record = StoredFile(
        username='alice',
        folder_name='docs',
        name='agenda',
        created_at='2024-05-01T08:00:00',
    )

    dumped = record.model_dump(by_alias=True)

    assert set(dumped) == {'username', 'folderName', 'name', 'description', 'createdAt'}


def test_missing_required_field_is_rejected():
    with pytest.raises(ValidationError):
        StoredFileList.validate_json('[{"username": "alice", "name": "agenda"}]')


def test_store_must_be_a_list():
    with pytest.raises(ValidationError):
        StoredFolderList.validate_json('{"username": "alice"}')


def test_populate_by_field_name():
    record = StoredFolder(username='alice', name='docs', created_at='2024-05-01T08:00:00')
    assert record.model_dump(by_alias=True)['createdAt'] == '2024-05-01T08:00:00'
