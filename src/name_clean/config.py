import os
from pathlib import Path

import yaml

from name_clean.core.exceptions import ConfigError

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "name_clean.yml"
CONFIG_ENV_VAR = "NAME_CLEAN_CONFIG"


class NCConfig:
    def __init__(self, data):
        self.logging = data.get("logging") or {}
        self.phone = data.get("phone") or {}
        self.debug = bool(data.get("debug", False))


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path: Path | None = None) -> 'NCConfig':
    path = path or config_path()
    if not path.exists():
        # Library use without a project checkout: built-in defaults.
        return NCConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")

    return NCConfig(data)

_config_cache = None

def get_config() -> 'NCConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
