import os
from pathlib import Path
from typing import Optional

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_graph.yml"
CONFIG_ENV_VAR = "GEDCOM_GRAPH_CONFIG"


class GPConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.parser = data.get("parser", {}) or {}
        self.graph = data.get("graph", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def strict_depth(self) -> bool:
        return bool(self.parser.get("strict_depth", False))


def config_path() -> Path:
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return CONFIG_PATH


def load_config() -> 'GPConfig':
    path = config_path()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GPConfig(data)

_config_cache = None

def get_config() -> 'GPConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def find_config() -> Optional['GPConfig']:
    """get_config(), or None when no config file is present."""
    try:
        return get_config()
    except FileNotFoundError:
        return None


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the file."""
    global _config_cache
    _config_cache = None
