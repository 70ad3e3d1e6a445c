from __future__ import annotations

import logging
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

USER_CONFIG_PATH = Path.home() / ".tplan_config.yaml"
DEFAULT_TTIMEOUTLEN = 0.05

logger = logging.getLogger("tplan.config")


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("ignoring unreadable config %s: %s", USER_CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def get_user_file() -> Optional[Path]:
    value = str(_load_config().get("file", "") or "").strip()
    return Path(value).expanduser() if value else None


def get_user_theme() -> str:
    return str(_load_config().get("theme", "") or "").strip()


def get_user_ttimeoutlen() -> float:
    raw = os.getenv("TPLAN_TTIMEOUTLEN")
    if raw is None:
        raw = _load_config().get("ttimeoutlen", DEFAULT_TTIMEOUTLEN)
    try:
        return max(0.0, float(raw))
    except (TypeError, ValueError):
        return DEFAULT_TTIMEOUTLEN
