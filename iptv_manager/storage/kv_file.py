"""Key-value store persisted as a single JSON file."""

import json
import logging
import os
import tempfile
from pathlib import Path

from iptv_manager.exceptions import StorageError

logger = logging.getLogger(__name__)


class KeyValueFile:
    """String key-value store backed by one JSON object on disk.

    Mirrors the get/set surface of browser local storage: values are
    opaque strings and every ``set`` rewrites the whole file.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the store.

        Parameters
        ----------
        path : str | Path
            JSON file holding the key-value pairs. Created on first write.
        """
        self.path = Path(path)

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None when absent."""
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing the file atomically.

        An unreadable existing file is replaced by one holding only ``key``.
        """
        try:
            data = self._read()
        except StorageError as e:
            logger.warning("Discarding unreadable storage file: %s", e)
            data = {}
        data[key] = value
        self._write(data)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"{self.path} does not hold a JSON object")
        return data

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f"Cannot write {self.path}: {e}") from e
        logger.debug("Wrote %d key(s) to %s", len(data), self.path)
