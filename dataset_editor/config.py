from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping

from dataset_editor.core.exceptions import ConfigError

ENV_PREFIX = "DATASET_EDITOR_"


@dataclass(frozen=True)
class EditorSettings:
    """
    Tunables for an editing session.

    - history_capacity: max number of undo/redo entries kept per editor
    - default_page_size: categories per chart page when the caller gives none
    """
    history_capacity: int = 50
    default_page_size: int = 10

    def __post_init__(self) -> None:
        if self.history_capacity < 1:
            raise ConfigError(f"history_capacity must be >= 1, got {self.history_capacity}")
        if self.default_page_size < 1:
            raise ConfigError(f"default_page_size must be >= 1, got {self.default_page_size}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EditorSettings:
        defaults = cls()
        try:
            return cls(
                history_capacity=int(data.get("history_capacity", defaults.history_capacity)),
                default_page_size=int(data.get("default_page_size", defaults.default_page_size)),
            )
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid editor settings: {exc}") from exc

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EditorSettings:
        """
        Build settings from DATASET_EDITOR_* environment variables:
        HISTORY_CAPACITY, PAGE_SIZE.
        """
        env = os.environ if environ is None else environ
        raw: Dict[str, Any] = {}

        if f"{ENV_PREFIX}HISTORY_CAPACITY" in env:
            raw["history_capacity"] = env[f"{ENV_PREFIX}HISTORY_CAPACITY"]
        if f"{ENV_PREFIX}PAGE_SIZE" in env:
            raw["default_page_size"] = env[f"{ENV_PREFIX}PAGE_SIZE"]

        return cls.from_dict(raw)


def load_settings(config_path: str | Path) -> EditorSettings:
    """
    Load settings from a JSON file, e.g. {"editor": {"history_capacity": 20}}.
    A flat object without the "editor" key is accepted too.
    """
    config_path = Path(config_path)
    try:
        raw = json.loads(config_path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not read settings from {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Settings file {config_path} must contain a JSON object")

    return EditorSettings.from_dict(raw.get("editor", raw))
