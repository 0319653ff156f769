"""Key-value storage clients"""
import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from quacktime.config import Settings

logger = logging.getLogger(__name__)

DEFAULTS_FILENAME = "defaults.json"


class StorageError(Exception):
    """Raised when a store cannot be read or written"""


class CorruptStoreError(StorageError):
    """Raised when a store file exists but does not hold a JSON object"""


class KeyValueStore(ABC):
    """
    Durable get/set/remove by string key.
    Values must be JSON-compatible (str, int, float, bool, None, list, dict).
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the stored value, or None when the key is absent"""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store a value, replacing any previous one"""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete a key; removing a missing key is a no-op"""


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store, mainly for tests"""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileKeyValueStore(KeyValueStore):
    """
    Store backed by a single JSON object on disk.

    The file is re-read on every access so that several readers (the timer
    screen, a widget process) always see the latest write. Writes go through
    a temp file and an atomic rename.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise StorageError(f"Could not read {self._path}: {e}") from e
        except json.JSONDecodeError as e:
            raise CorruptStoreError(f"Could not decode {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise CorruptStoreError(f"Unexpected content in {self._path}")
        return data

    def _read_for_update(self) -> Dict[str, Any]:
        """
        Read the document before a write.

        A corrupt file is moved aside to `<name>.corrupt` and writing starts
        from an empty document.
        """
        try:
            return self._read_all()
        except CorruptStoreError as e:
            backup = self._path.with_name(self._path.name + ".corrupt")
            logger.error(f"{e}; moving it to {backup.name} and starting over")
            try:
                os.replace(self._path, backup)
            except OSError as move_error:
                raise StorageError(f"Could not move aside {self._path}: {move_error}") from move_error
            return {}

    def _write_all(self, data: Dict[str, Any]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self._path.parent, prefix=".defaults-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self._path)
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(f"Could not write {self._path}: {e}") from e

    def get(self, key: str) -> Optional[Any]:
        return self._read_all().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read_for_update()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_for_update()
        if key not in data:
            return
        del data[key]
        self._write_all(data)


class MirroredKeyValueStore(KeyValueStore):
    """
    Primary store plus an optional shared copy for widget extensions.

    The primary is authoritative: its write errors propagate. The shared copy
    is best-effort on write and only consulted on read when the primary has
    nothing for the key or cannot be read.
    """

    def __init__(self, primary: KeyValueStore, shared: Optional[KeyValueStore] = None):
        self.primary = primary
        self.shared = shared

    def get(self, key: str) -> Optional[Any]:
        try:
            value = self.primary.get(key)
        except StorageError as e:
            if self.shared is None:
                raise
            logger.warning(f"Primary store unreadable for {key}, trying shared copy: {e}")
            return self.shared.get(key)

        if value is not None or self.shared is None:
            return value

        try:
            return self.shared.get(key)
        except StorageError as e:
            logger.warning(f"Shared store unavailable while reading {key}: {e}")
            return None

    def set(self, key: str, value: Any) -> None:
        self.primary.set(key, value)

        if self.shared is not None:
            try:
                self.shared.set(key, value)
            except StorageError as e:
                logger.warning(f"Shared store unavailable while writing {key}: {e}")

    def remove(self, key: str) -> None:
        self.primary.remove(key)

        if self.shared is not None:
            try:
                self.shared.remove(key)
            except StorageError as e:
                logger.warning(f"Shared store unavailable while removing {key}: {e}")


def create_key_value_store(settings: Settings) -> KeyValueStore:
    """
    Build the store described by settings.

    Returns:
        A file-backed store, mirrored into the shared directory when one is configured
    """
    primary = JsonFileKeyValueStore(settings.data_dir / DEFAULTS_FILENAME)

    if settings.shared_dir is None:
        return primary

    shared = JsonFileKeyValueStore(settings.shared_dir / DEFAULTS_FILENAME)
    logger.info(f"Mirroring storage into shared directory {settings.shared_dir}")
    return MirroredKeyValueStore(primary, shared)
