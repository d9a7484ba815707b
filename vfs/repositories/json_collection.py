"""Whole-collection JSON persistence shared by the folder and file stores."""

from pathlib import Path
from typing import Generic, List, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from common.logging_config import get_logger
from vfs.exceptions import StorageError

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class JsonCollection(Generic[RecordT]):
    """
    A flat list of records stored as one JSON array.

    Every read returns the full collection and every write replaces it.
    Not thread-safe on its own; the owning repository serializes access.
    """

    def __init__(self, path: Path, adapter: TypeAdapter):
        """
        Initialize the collection.

        Args:
            path: Backing JSON file
            adapter: TypeAdapter for List[RecordT]
        """
        self.path = Path(path)
        self._adapter = adapter

    def load(self) -> List[RecordT]:
        """
        Read every record.

        Returns:
            Records in stored order; empty if the file does not exist yet

        Raises:
            StorageError: If the file cannot be read or does not match the schema
        """
        if not self.path.exists():
            logger.debug(f"Store file not found at {self.path}, starting with empty collection")
            return []

        try:
            data = self.path.read_bytes()
        except OSError as e:
            logger.error(f"Failed to read {self.path}: {e}", exc_info=True)
            raise StorageError(str(self.path), e) from e

        if not data.strip():
            return []

        try:
            records = self._adapter.validate_json(data)
        except ValidationError as e:
            logger.error(f"Corrupted store file {self.path}: {e}")
            raise StorageError(str(self.path), e) from e

        logger.debug(f"Loaded {len(records)} records from {self.path}")
        return records

    def save(self, records: List[RecordT]) -> None:
        """
        Overwrite the collection.

        Raises:
            StorageError: If the file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(self._adapter.dump_json(records, by_alias=True, indent=2))
        except OSError as e:
            logger.error(f"Failed to write {self.path}: {e}", exc_info=True)
            raise StorageError(str(self.path), e) from e

        logger.debug(f"Saved {len(records)} records to {self.path}")
