"""Utility helper functions shared by the stores."""

import re
from datetime import datetime
from typing import Callable, List, Optional, Sequence, TypeVar

from common.constants import (
    MAX_NAME_LENGTH,
    NAME_PATTERN,
    SORT_BY_CREATED,
    SORT_BY_NAME,
    SORT_DESC,
    SORT_FLAG_CREATED,
    SORT_FLAG_NAME,
    TIMESTAMP_FORMAT,
)
from vfs.exceptions import InvalidNameError, NameTooLongError

T = TypeVar("T")

_NAME_RE = re.compile(NAME_PATTERN)

_SORT_FIELD_ALIASES = {
    SORT_FLAG_NAME: SORT_BY_NAME,
    SORT_BY_NAME: SORT_BY_NAME,
    SORT_FLAG_CREATED: SORT_BY_CREATED,
    SORT_BY_CREATED: SORT_BY_CREATED,
    "created": SORT_BY_CREATED,
}


def validate_name(name: str) -> None:
    """
    Check a username, folder name or file name.

    Args:
        name: Candidate name

    Raises:
        NameTooLongError: If the name is longer than 30 characters
        InvalidNameError: If the name is empty or not purely ASCII letters and digits
    """
    if len(name) > MAX_NAME_LENGTH:
        raise NameTooLongError(name)
    if not _NAME_RE.fullmatch(name):
        raise InvalidNameError(name)


def names_equal(left: str, right: str) -> bool:
    """
    Case-insensitive name comparison used for usernames and folder names.

    Only simple lowercasing is applied; "Straße" and "Strasse" differ.
    """
    return left.lower() == right.lower()


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    """
    Parse a persisted creation time.

    Raises:
        ValueError: If the value does not match the persisted format
    """
    return datetime.strptime(value, TIMESTAMP_FORMAT)


def resolve_sort_field(sort_field: Optional[str]) -> Optional[str]:
    """
    Map a sort flag or field name onto 'name' / 'createdAt'.

    Returns:
        Canonical field, or None when unspecified or unknown
    """
    if not sort_field:
        return None
    return _SORT_FIELD_ALIASES.get(sort_field)


def sort_records(
    records: Sequence[T],
    sort_field: Optional[str],
    sort_order: Optional[str],
    name_of: Callable[[T], str],
    created_of: Callable[[T], datetime],
) -> List[T]:
    """
    Sort records by name or creation time.

    Unknown or missing sort fields fall back to ascending name order and
    ignore the requested order. Ties keep their stored order.

    Args:
        records: Records to sort
        sort_field: '--sort-name', '--sort-created', 'name', 'createdAt' or None
        sort_order: 'asc' or 'desc'; anything else is ascending
        name_of: Accessor for the record name
        created_of: Accessor for the record creation time

    Returns:
        New sorted list
    """
    field = resolve_sort_field(sort_field)
    if field is None:
        return sorted(records, key=name_of)

    reverse = sort_order == SORT_DESC
    if field == SORT_BY_CREATED:
        return sorted(records, key=created_of, reverse=reverse)
    return sorted(records, key=name_of, reverse=reverse)
