import logging
from typing import Dict, Optional, Protocol

from ytdl_assistant.models.config_model import StoredConfig

logger = logging.getLogger(__name__)

# Storage keys
GENERATIVE_API_KEY = "generative_api_key"
DOWNLOADER_API_URL = "downloader_api_url"
DOWNLOADER_API_KEY = "downloader_api_key"


class Storage(Protocol):
    """Key/value collaborator. Either method may raise when storage is unavailable."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class SessionStorage:
    """In-process storage that lives exactly as long as the application session."""

    def __init__(self):
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def clear(self) -> None:
        self._items.clear()


class ConfigStore:
    """
    Best-effort settings store.

    get() never fails and returns "" for missing keys or unavailable storage.
    set() reports success as a bool; callers are expected to ignore failures.
    """

    def __init__(self, storage: Optional[Storage] = None):
        self.storage = storage if storage is not None else SessionStorage()

    def get(self, name: str) -> str:
        try:
            return self.storage.get_item(name) or ""
        except Exception as e:
            logger.debug("Storage read failed for %s: %s", name, e)
            return ""

    def set(self, name: str, value: str) -> bool:
        try:
            self.storage.set_item(name, value)
            return True
        except Exception as e:
            logger.debug("Storage write failed for %s: %s", name, e)
            return False

    def load(self) -> StoredConfig:
        return StoredConfig(
            generative_api_key=self.get(GENERATIVE_API_KEY),
            downloader_api_url=self.get(DOWNLOADER_API_URL),
            downloader_api_key=self.get(DOWNLOADER_API_KEY),
        )
