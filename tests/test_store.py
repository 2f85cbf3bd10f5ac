"""Tests for the scoped configuration store."""

import json
from pathlib import Path

import pytest

from smart_variables.models import NamingStyle, StyleMode
from smart_variables.store import ConfigError, ConfigKey, ConfigScope, ConfigStore, parse_preference


@pytest.fixture
def store(tmp_path: Path) -> ConfigStore:
    return ConfigStore(
        global_dir=tmp_path / "global",
        workspace_dir=tmp_path / "workspace",
        defaults={
            "preferred_style": "auto",
            "api_key": "",
            "base_url": "https://api.example.com/v1",
            "model_id": "default-model",
        },
    )


class TestParsePreference:
    def test_modes(self) -> None:
        assert parse_preference("auto") is StyleMode.AUTO
        assert parse_preference(" ASK ") is StyleMode.ASK

    def test_styles(self) -> None:
        assert parse_preference("snake") is NamingStyle.SNAKE
        assert parse_preference("camelCase") is NamingStyle.CAMEL

    def test_invalid(self) -> None:
        with pytest.raises(ConfigError):
            parse_preference("kebab")


class TestConfigStore:
    def test_defaults(self, store: ConfigStore) -> None:
        assert store.get(ConfigKey.MODEL_ID) == "default-model"
        assert store.get("unknown", "fallback") == "fallback"
        assert store.preference() is StyleMode.AUTO

    def test_scope_precedence(self, store: ConfigStore) -> None:
        store.set(ConfigKey.MODEL_ID, "global-model", ConfigScope.GLOBAL)
        assert store.get(ConfigKey.MODEL_ID) == "global-model"
        store.set(ConfigKey.MODEL_ID, "workspace-model", ConfigScope.WORKSPACE)
        assert store.get(ConfigKey.MODEL_ID) == "workspace-model"
        store.set(ConfigKey.MODEL_ID, "memory-model", ConfigScope.MEMORY)
        assert store.get(ConfigKey.MODEL_ID) == "memory-model"
        store.unset(ConfigKey.MODEL_ID, ConfigScope.MEMORY)
        assert store.get(ConfigKey.MODEL_ID) == "workspace-model"

    def test_persists_to_json(self, store: ConfigStore, tmp_path: Path) -> None:
        store.set(ConfigKey.API_KEY, "sk-abc")
        path = tmp_path / "global" / "config.json"
        assert store.path_for(ConfigScope.GLOBAL) == path
        assert json.loads(path.read_text()) == {"api_key": "sk-abc"}

        reopened = ConfigStore(global_dir=tmp_path / "global", workspace_dir=tmp_path / "workspace")
        assert reopened.get(ConfigKey.API_KEY) == "sk-abc"

    def test_memory_scope_is_not_persisted(self, store: ConfigStore, tmp_path: Path) -> None:
        store.set(ConfigKey.BASE_URL, "http://localhost:1234", ConfigScope.MEMORY)
        assert not (tmp_path / "global" / "config.json").exists()
        assert store.path_for(ConfigScope.MEMORY) is None

    def test_preferred_style_is_normalised(self, store: ConfigStore) -> None:
        store.set(ConfigKey.PREFERRED_STYLE, "PascalCase")
        assert store.get(ConfigKey.PREFERRED_STYLE) == "pascal"
        assert store.preference() is NamingStyle.PASCAL

    def test_invalid_preferred_style_rejected(self, store: ConfigStore) -> None:
        with pytest.raises(ConfigError):
            store.set(ConfigKey.PREFERRED_STYLE, "kebab")
        with pytest.raises(ConfigError):
            store.set(ConfigKey.PREFERRED_STYLE, 3)

    def test_non_scalar_rejected(self, store: ConfigStore) -> None:
        with pytest.raises(ConfigError):
            store.set(ConfigKey.MODEL_ID, ["a", "b"])  # type: ignore[arg-type]

    def test_unset_missing_key_is_noop(self, store: ConfigStore, tmp_path: Path) -> None:
        store.unset(ConfigKey.API_KEY)
        assert not (tmp_path / "global" / "config.json").exists()

    def test_unset_stored_none(self, store: ConfigStore) -> None:
        store.set(ConfigKey.API_KEY, None, ConfigScope.WORKSPACE)
        assert store.get(ConfigKey.API_KEY) is None
        store.unset(ConfigKey.API_KEY, ConfigScope.WORKSPACE)
        assert store.get(ConfigKey.API_KEY) == ""

    def test_corrupt_file_is_ignored(self, tmp_path: Path) -> None:
        global_dir = tmp_path / "global"
        global_dir.mkdir()
        (global_dir / "config.json").write_text("{not json", encoding="utf-8")
        store = ConfigStore(global_dir=global_dir, workspace_dir=tmp_path / "ws", defaults={"model_id": "m"})
        assert store.get(ConfigKey.MODEL_ID) == "m"
