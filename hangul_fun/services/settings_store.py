from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from hangul_fun.domain.enums import RomanizationSettings, SettingKey

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the romanization options and log level

    Notes:
      - The path defaults to <project_root>/settings.yaml; HANGUL_FUN_SETTINGS overrides it.
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            env = (os.environ.get("HANGUL_FUN_SETTINGS") or "").strip()
            if env:
                self._path = Path(env).expanduser()
            else:
                project_root = Path(__file__).resolve().parents[2]
                self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        try:
            p = self._path
            if not p.exists():
                return {}
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
                return data if isinstance(data, dict) else {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings from %s: %s", self._path, e)
            return {}

    def save(self, data: dict[str, Any]) -> None:
        try:
            p = self._path
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_suffix(p.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except (OSError, yaml.YAMLError) as e:
            # Best-effort persistence; callers should not crash on save failures.
            logger.warning("Failed to write settings to %s: %s", self._path, e)

    def _set(self, key: SettingKey, value: Any) -> None:
        s = self.load()
        s[key.value] = value
        self.save(s)

    def get_romanization(self) -> RomanizationSettings:
        s = self.load()
        defaults = RomanizationSettings()

        marker = s.get(SettingKey.UNKNOWN_MARKER.value, defaults.unknown_marker)
        if not isinstance(marker, str):
            logger.debug("Ignoring non-string unknown_marker: %r", marker)
            marker = defaults.unknown_marker

        apply_rules = s.get(SettingKey.APPLY_RULES.value, defaults.apply_rules)
        if not isinstance(apply_rules, bool):
            logger.debug("Ignoring non-boolean apply_rules: %r", apply_rules)
            apply_rules = defaults.apply_rules

        return RomanizationSettings(unknown_marker=marker, apply_rules=apply_rules)

    def set_unknown_marker(self, marker: str) -> None:
        self._set(SettingKey.UNKNOWN_MARKER, str(marker))

    def set_apply_rules(self, enabled: bool) -> None:
        self._set(SettingKey.APPLY_RULES, bool(enabled))

    def get_log_level(self) -> str:
        level = str(self.load().get(SettingKey.LOG_LEVEL.value, "WARNING")).strip().upper()
        return level if level in _LOG_LEVELS else "WARNING"

    def set_log_level(self, level: str) -> None:
        self._set(SettingKey.LOG_LEVEL, str(level).strip().upper())
