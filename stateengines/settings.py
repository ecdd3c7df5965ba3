#!/usr/bin/env python3
"""
Settings
========
Defaults live in the packaged configs/app.yaml. A user config file, named by
the STATEENGINES_CONFIG environment variable, is merged over them section by
section, so it only needs the keys it changes:

    # my.yaml
    converter:
      lookback_length: 1

    $ STATEENGINES_CONFIG=my.yaml stateengines generate
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Optional
import os

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_ROOT.parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"
CONFIG_ENV_VAR = "STATEENGINES_CONFIG"


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Missing config: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must contain a mapping at top level")
    return data


def _merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def user_config_path() -> Optional[Path]:
    """Path named by STATEENGINES_CONFIG, if set."""
    value = os.environ.get(CONFIG_ENV_VAR)
    if not value:
        return None
    return resolve_path(value, base=Path.cwd())


@lru_cache(maxsize=4)
def _load(user_path: Optional[Path]) -> dict:
    data = _read_yaml(APP_CONFIG_PATH)
    if user_path is not None:
        data = _merge(data, _read_yaml(user_path))
    return data


def load_app_config() -> dict:
    """Packaged defaults merged with the user config, if any."""
    return _load(user_config_path())


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Resolve a path string relative to project root (unless absolute)."""
    if value is None:
        raise ValueError("path value is required")
    path = Path(os.path.expanduser(str(value)))
    if not path.is_absolute():
        path = ((base or PROJECT_ROOT) / path).resolve()
    return path


__all__ = [
    "load_app_config",
    "get_setting",
    "resolve_path",
    "user_config_path",
    "PROJECT_ROOT",
    "APP_CONFIG_PATH",
    "CONFIG_ENV_VAR",
]
