from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from typedash.core.words import RANDOM_WORD_URL

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TYPEDASH_CONFIG"


@dataclass(frozen=True)
class Settings:
    duration_seconds: int = 60
    word_count: int = 20
    word_api_url: str = RANDOM_WORD_URL
    request_timeout: float = 5.0
    sound_enabled: bool = True
    error_sound: Optional[str] = None


def default_config_path() -> Path:
    """``$TYPEDASH_CONFIG`` if set, otherwise ~/.typedash/config.yaml."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".typedash" / "config.yaml"


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from a YAML file, falling back to defaults.

    A missing or unreadable file yields the defaults. A file that parses
    but holds invalid values raises ``ValueError``.
    """
    config_path = path if path is not None else default_config_path()
    if not config_path.exists():
        logger.info("No config file at %s, using defaults", config_path)
        return Settings()
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Could not load config from %s: %s", config_path, e)
        return Settings()

    if raw is None:
        return Settings()
    if not isinstance(raw, dict):
        raise ValueError(f"{config_path.name}: expected a YAML mapping")
    return _settings_from_mapping(raw, config_path.name)


def _settings_from_mapping(raw: Dict[str, Any], source: str) -> Settings:
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"{source}: unknown setting(s): {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for key in ("duration_seconds", "word_count"):
        if key in raw:
            value = raw[key]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{source}: '{key}' must be a positive integer")
            values[key] = value
    if "request_timeout" in raw:
        value = raw["request_timeout"]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ValueError(f"{source}: 'request_timeout' must be a positive number")
        values["request_timeout"] = float(value)
    if "word_api_url" in raw:
        value = raw["word_api_url"]
        if not value or not isinstance(value, str):
            raise ValueError(f"{source}: missing or invalid 'word_api_url'")
        values["word_api_url"] = value.strip()
    if "sound_enabled" in raw:
        if not isinstance(raw["sound_enabled"], bool):
            raise ValueError(f"{source}: 'sound_enabled' must be true or false")
        values["sound_enabled"] = raw["sound_enabled"]
    if raw.get("error_sound") is not None:
        value = raw["error_sound"]
        if not isinstance(value, str):
            raise ValueError(f"{source}: 'error_sound' must be a file path")
        values["error_sound"] = str(Path(value).expanduser())

    return replace(Settings(), **values)
