"""Key-value configuration store with persistence scopes.

Values are looked up memory → workspace → global, then fall back to the
defaults taken from :data:`smart_variables.config.settings`.  The global and
workspace scopes are JSON files; the memory scope lives for the process.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, Union

from smart_variables.config import settings
from smart_variables.models import NamingStyle, StyleMode
from smart_variables.utils.logging import get_logger

logger = get_logger(__name__)

Scalar = Union[str, int, float, bool, None]

CONFIG_FILENAME = "config.json"


class ConfigKey(str, Enum):
    PREFERRED_STYLE = "preferred_style"
    API_KEY = "api_key"
    BASE_URL = "base_url"
    MODEL_ID = "model_id"


class ConfigScope(str, Enum):
    GLOBAL = "global"
    WORKSPACE = "workspace"
    MEMORY = "memory"


class ConfigError(ValueError):
    """Raised for configuration values the store refuses to keep."""


def parse_preference(value: str) -> StyleMode | NamingStyle:
    """Interpret a ``preferred_style`` value: ``auto``, ``ask`` or a style."""
    normalized = value.strip().lower()
    if normalized in (StyleMode.AUTO.value, StyleMode.ASK.value):
        return StyleMode(normalized)
    style = NamingStyle.from_string(normalized)
    if style is None:
        raise ConfigError(
            f"Invalid preferred_style {value!r}; expected 'auto', 'ask' or one of "
            f"{[s.value for s in NamingStyle]}"
        )
    return style


def _key_name(key: ConfigKey | str) -> str:
    return key.value if isinstance(key, ConfigKey) else key


class ConfigStore:
    """Scoped key → scalar store."""

    _LOOKUP_ORDER = (ConfigScope.MEMORY, ConfigScope.WORKSPACE, ConfigScope.GLOBAL)

    def __init__(
        self,
        global_dir: Path | None = None,
        workspace_dir: Path | None = None,
        defaults: dict[str, Scalar] | None = None,
    ) -> None:
        self._paths: dict[ConfigScope, Path] = {
            ConfigScope.GLOBAL: Path(global_dir or settings.config_dir) / CONFIG_FILENAME,
            ConfigScope.WORKSPACE: Path(workspace_dir or settings.workspace_dir) / CONFIG_FILENAME,
        }
        self._layers: dict[ConfigScope, dict[str, Scalar]] = {ConfigScope.MEMORY: {}}
        if defaults is None:
            defaults = {
                ConfigKey.PREFERRED_STYLE.value: settings.preferred_style,
                ConfigKey.API_KEY.value: settings.llm_api_key,
                ConfigKey.BASE_URL.value: settings.llm_base_url,
                ConfigKey.MODEL_ID.value: settings.llm_model,
            }
        self._defaults = dict(defaults)

    # ── public API ───────────────────────────────────────────────────

    def get(self, key: ConfigKey | str, default: Any = None) -> Any:
        name = _key_name(key)
        for scope in self._LOOKUP_ORDER:
            layer = self._layer(scope)
            if name in layer:
                return layer[name]
        return self._defaults.get(name, default)

    def set(self, key: ConfigKey | str, value: Scalar, scope: ConfigScope = ConfigScope.GLOBAL) -> None:
        name = _key_name(key)
        value = self._validate(name, value)
        layer = self._layer(scope)
        layer[name] = value
        if scope is not ConfigScope.MEMORY:
            self._persist(scope)
        logger.info("config.set", key=name, scope=scope.value)

    def unset(self, key: ConfigKey | str, scope: ConfigScope = ConfigScope.GLOBAL) -> None:
        name = _key_name(key)
        layer = self._layer(scope)
        if name not in layer:
            return
        del layer[name]
        if scope is not ConfigScope.MEMORY:
            self._persist(scope)

    def preference(self) -> StyleMode | NamingStyle:
        """The parsed ``preferred_style`` value."""
        raw = self.get(ConfigKey.PREFERRED_STYLE, StyleMode.AUTO.value)
        return parse_preference(str(raw or StyleMode.AUTO.value))

    def path_for(self, scope: ConfigScope) -> Path | None:
        return self._paths.get(scope)

    # ── internals ────────────────────────────────────────────────────

    @staticmethod
    def _validate(name: str, value: Scalar) -> Scalar:
        if value is not None and not isinstance(value, (str, int, float, bool)):
            raise ConfigError(f"Config values must be scalars, got {type(value).__name__} for {name!r}")
        if name == ConfigKey.PREFERRED_STYLE.value:
            if not isinstance(value, str):
                raise ConfigError("preferred_style must be a string")
            return parse_preference(value).value
        return value

    def _layer(self, scope: ConfigScope) -> dict[str, Scalar]:
        if scope not in self._layers:
            self._layers[scope] = self._load(scope)
        return self._layers[scope]

    def _load(self, scope: ConfigScope) -> dict[str, Scalar]:
        path = self._paths[scope]
        if not path.is_file():
            return {}
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("config.load_failed", scope=scope.value, path=str(path), error=str(exc))
            return {}
        if not isinstance(data, dict):
            logger.warning("config.load_failed", scope=scope.value, path=str(path), error="not an object")
            return {}
        return data

    def _persist(self, scope: ConfigScope) -> None:
        path = self._paths[scope]
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self._layers[scope], indent=2, sort_keys=True), encoding="utf-8")
