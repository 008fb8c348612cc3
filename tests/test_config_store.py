"""Tests for JsonFileConfigStore."""
import glob
import json
import os

import pytest

from tengen.common.config_store import JsonFileConfigStore


class TestJsonFileConfigStore:
    """Tests for the JSON-backed settings store."""

    @pytest.fixture
    def temp_config(self, tmp_path):
        """Create a temporary config file path."""
        return str(tmp_path / "tengen.json")

    def test_put_and_get(self, temp_config):
        store = JsonFileConfigStore(temp_config)
        store.put("board", dim=9, history_window=4)

        assert store.get("board") == {"dim": 9, "history_window": 4}

    def test_get_nonexistent(self, temp_config):
        store = JsonFileConfigStore(temp_config)
        assert store.get("nonexistent") is None

    def test_get_returns_copy(self, temp_config):
        store = JsonFileConfigStore(temp_config)
        store.put("board", dim=9)
        store.get("board")["dim"] = 13
        store["board"]["dim"] = 13
        assert store["board"] == {"dim": 9}

    def test_persistence(self, temp_config):
        """Data persists across instances."""
        JsonFileConfigStore(temp_config).put("board", validate_moves=True)

        assert JsonFileConfigStore(temp_config).get("board") == {"validate_moves": True}

    def test_mapping_protocol(self, temp_config):
        store = JsonFileConfigStore(temp_config)
        store.put("board", dim=9)
        store.put("other", value=1)

        assert dict(store) == {"board": {"dim": 9}, "other": {"value": 1}}
        assert len(store) == 2
        assert set(store) == {"board", "other"}
        assert "board" in store
        assert 5 not in store
        with pytest.raises(KeyError):
            _ = store["nonexistent"]

    def test_creates_parent_directory(self, tmp_path):
        nested_path = str(tmp_path / "subdir" / "tengen.json")
        JsonFileConfigStore(nested_path).put("board", dim=9)

        assert os.path.exists(nested_path)

    def test_handles_corrupted_json(self, temp_config):
        """Corrupt file is quarantined and the store starts empty."""
        with open(temp_config, "w") as f:
            f.write("{ invalid json }")

        store = JsonFileConfigStore(temp_config)
        assert len(store) == 0
        assert glob.glob(temp_config + ".corrupt.*")

    def test_drops_non_dict_sections(self, temp_config):
        with open(temp_config, "w") as f:
            json.dump({"board": {"dim": 9}, "junk": [1, 2]}, f)

        store = JsonFileConfigStore(temp_config)
        assert dict(store) == {"board": {"dim": 9}}

    def test_ignores_non_object_file(self, temp_config):
        with open(temp_config, "w") as f:
            json.dump([1, 2, 3], f)

        assert len(JsonFileConfigStore(temp_config)) == 0

    def test_put_overwrites_section(self, temp_config):
        store = JsonFileConfigStore(temp_config)
        store.put("board", dim=9, history_window=4)
        store.put("board", dim=13)

        assert store.get("board") == {"dim": 13}

    def test_no_temp_files_left(self, tmp_path):
        store = JsonFileConfigStore(str(tmp_path / "tengen.json"))
        store.put("board", dim=9)

        assert not list(tmp_path.glob("*.tmp"))

    def test_put_keeps_other_sections(self, temp_config):
        with open(temp_config, "w") as f:
            json.dump({"ui": {"theme": "dark"}}, f)

        JsonFileConfigStore(temp_config).put("board", dim=9)

        assert dict(JsonFileConfigStore(temp_config)) == {"ui": {"theme": "dark"}, "board": {"dim": 9}}

    def test_failed_put_leaves_store_unchanged(self, temp_config):
        store = JsonFileConfigStore(temp_config)
        store.put("board", dim=9)

        with pytest.raises(TypeError):
            store.put("board", dim=object())

        assert store["board"] == {"dim": 9}
        assert JsonFileConfigStore(temp_config)["board"] == {"dim": 9}
        assert not glob.glob(os.path.join(os.path.dirname(temp_config), "*.tmp"))

    def test_written_with_indent(self, temp_config):
        JsonFileConfigStore(temp_config, indent=2).put("board", dim=9)

        with open(temp_config, encoding="utf-8") as f:
            assert f.read() == '{\n  "board": {\n    "dim": 9\n  }\n}'
