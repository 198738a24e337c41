from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SettingKey(str, Enum):
    UNKNOWN_MARKER = "unknown_marker"
    APPLY_RULES = "apply_rules"
    LOG_LEVEL = "log_level"


@dataclass(frozen=True)
class RomanizationSettings:
    unknown_marker: str = "?"
    apply_rules: bool = True
