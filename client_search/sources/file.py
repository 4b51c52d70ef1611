"""Local JSON file record source."""

import json
from pathlib import Path
from typing import List, Union

from client_search.logging import get_logger

from .base import RawRecord, RecordSource
from .exceptions import SourceFileError, SourceResponseError

logger = get_logger(__name__, component="source")


class FileRecordSource(RecordSource):
    """Reads client records from a JSON file on disk.

    The file holds the same payload the API returns: an array of client
    objects (a single object is accepted too).
    """

    SOURCE_NAME = "file"

    def __init__(self, path: Union[str, Path], max_records: int = 0) -> None:
        super().__init__(max_records=max_records)
        self.path = Path(path).expanduser()

    @property
    def description(self) -> str:
        return str(self.path)

    def fetch_records(self) -> List[RawRecord]:
        """Load and decode the file.

        Raises:
            SourceFileError: If the file does not exist or cannot be read
            SourceResponseError: If the file is not valid JSON
        """
        if not self.path.is_file():
            raise SourceFileError(f"File not found: {self.path}", path=str(self.path))

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except json.JSONDecodeError as e:
            raise SourceResponseError(f"Invalid JSON format in {self.path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise SourceFileError(f"Failed to read {self.path}: {e}", path=str(self.path)) from e

        records = self._coerce_records(payload)

        logger.info(
            "Loaded client records from file",
            extra={
                "event": "source.fetch.completed",
                "source": self.SOURCE_NAME,
                "path": str(self.path),
                "count": len(records),
            },
        )
        return records
