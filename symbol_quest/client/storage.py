"""Key/value persistence for the client ledger."""
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class KeyValueStorage(ABC):
    """Abstract string key/value store, one value per key."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Get raw value for key, None if absent."""
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store raw value for key."""
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key if present."""
        ...


class MemoryStorage(KeyValueStorage):
    """In-process storage, lost on exit."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage(KeyValueStorage):
    """
    Persists each key to its own file under a directory.

    Layout:
      - data_dir/lastCardDraw.json
      - data_dir/cardHistory.json
      - data_dir/auth_token.json

    Values are stored verbatim; parsing is left to the caller so a
    corrupt file surfaces as unparsable text rather than an I/O error.
    """

    SUFFIX = ".json"

    def __init__(self, data_dir: str):
        self._data_dir = data_dir

    def _path(self, key: str) -> str:
        return os.path.join(self._data_dir, f"{key}{self.SUFFIX}")

    def get_item(self, key: str) -> Optional[str]:
        try:
            with open(self._path(key), "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Unreadable storage entry '{key}': {e}")
            return None

    def set_item(self, key: str, value: str) -> None:
        """Atomically write a value."""
        os.makedirs(self._data_dir, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self._data_dir, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_path, self._path(key))
        except Exception:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise

    def remove_item(self, key: str) -> None:
        try:
            os.unlink(self._path(key))
        except FileNotFoundError:
            pass
