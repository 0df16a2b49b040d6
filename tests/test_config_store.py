from ytdl_assistant.utils.config_store import (
    DOWNLOADER_API_KEY,
    DOWNLOADER_API_URL,
    GENERATIVE_API_KEY,
    ConfigStore,
    SessionStorage,
)


class BrokenStorage:
    def get_item(self, key):
        raise OSError("storage unavailable")

    def set_item(self, key, value):
        raise OSError("storage unavailable")


def test_missing_key_reads_empty():
    assert ConfigStore(SessionStorage()).get(GENERATIVE_API_KEY) == ""


def test_set_then_get():
    store = ConfigStore(SessionStorage())
    assert store.set(DOWNLOADER_API_URL, "https://downloader.test") is True
    assert store.get(DOWNLOADER_API_URL) == "https://downloader.test"


def test_unavailable_storage_degrades_silently():
    store = ConfigStore(BrokenStorage())
    assert store.get(DOWNLOADER_API_KEY) == ""
    assert store.set(DOWNLOADER_API_KEY, "secret") is False


def test_load_reads_all_settings():
    storage = SessionStorage()
    storage.set_item(GENERATIVE_API_KEY, "g")
    storage.set_item(DOWNLOADER_API_URL, "u")
    config = ConfigStore(storage).load()
    assert config.generative_api_key == "g"
    assert config.downloader_api_url == "u"
    assert config.downloader_api_key == ""


def test_cleared_storage_reads_empty():
    storage = SessionStorage()
    store = ConfigStore(storage)
    store.set(GENERATIVE_API_KEY, "g")
    storage.clear()
    assert store.get(GENERATIVE_API_KEY) == ""
