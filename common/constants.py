"""Project-wide constants (name rules, timestamp formats, sort options)."""

MAX_NAME_LENGTH: int = 30
NAME_PATTERN: str = r"[A-Za-z0-9]+"

# Persisted creation time, second precision
TIMESTAMP_FORMAT: str = "%Y-%m-%dT%H:%M:%S"
DISPLAY_TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S"

SORT_BY_NAME: str = "name"
SORT_BY_CREATED: str = "createdAt"

SORT_FLAG_NAME: str = "--sort-name"
SORT_FLAG_CREATED: str = "--sort-created"
SORT_FLAGS = (SORT_FLAG_NAME, SORT_FLAG_CREATED)

SORT_ASC: str = "asc"
SORT_DESC: str = "desc"
SORT_ORDERS = (SORT_ASC, SORT_DESC)
