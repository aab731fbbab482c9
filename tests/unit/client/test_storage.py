"""Tests for key/value storage backends."""
import os

from symbol_quest.client.storage import JsonFileStorage, MemoryStorage


class TestMemoryStorage:
    """Tests for MemoryStorage."""

    def test_set_get_remove(self):
        storage = MemoryStorage()

        storage.set_item("key", "value")
        assert storage.get_item("key") == "value"

        storage.remove_item("key")
        assert storage.get_item("key") is None

    def test_initial_values(self):
        assert MemoryStorage({"a": "1"}).get_item("a") == "1"

    def test_remove_missing_key(self):
        MemoryStorage().remove_item("missing")


class TestJsonFileStorage:
    """Tests for JsonFileStorage."""

    def test_missing_key_returns_none(self, tmp_path):
        assert JsonFileStorage(str(tmp_path)).get_item("lastCardDraw") is None

    def test_persists_across_instances(self, tmp_path):
        JsonFileStorage(str(tmp_path)).set_item("cardHistory", "[]")

        assert JsonFileStorage(str(tmp_path)).get_item("cardHistory") == "[]"
        assert (tmp_path / "cardHistory.json").read_text() == "[]"

    def test_creates_data_dir(self, tmp_path):
        data_dir = tmp_path / "nested" / "home"

        JsonFileStorage(str(data_dir)).set_item("auth_token", "abc")

        assert (data_dir / "auth_token.json").exists()

    def test_overwrite_leaves_no_temp_files(self, tmp_path):
        storage = JsonFileStorage(str(tmp_path))

        storage.set_item("lastCardDraw", "first")
        storage.set_item("lastCardDraw", "second")

        assert storage.get_item("lastCardDraw") == "second"
        assert os.listdir(tmp_path) == ["lastCardDraw.json"]

    def test_remove(self, tmp_path):
        storage = JsonFileStorage(str(tmp_path))
        storage.set_item("auth_token", "abc")

        storage.remove_item("auth_token")
        storage.remove_item("auth_token")

        assert storage.get_item("auth_token") is None

    def test_undecodable_file_reads_as_missing(self, tmp_path):
        (tmp_path / "lastCardDraw.json").write_bytes(b"\xff\xfe\xfa")

        assert JsonFileStorage(str(tmp_path)).get_item("lastCardDraw") is None
