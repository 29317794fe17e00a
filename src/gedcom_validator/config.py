import os

import yaml
from pathlib import Path

CONFIG_ENV_VAR = "GEDCOM_VALIDATOR_CONFIG"
CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_validator.yml"


class GVConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.parser = data.get("parser", {})
        self.validation = data.get("validation", {})
        self.logging = data.get("logging", {})
        self.debug = data.get("debug", False)

    @property
    def check_references(self) -> bool:
        return bool(self.parser.get("check_references", True))

    @property
    def fail_on_errors(self) -> bool:
        return bool(self.validation.get("fail_on_errors", False))


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path: Path | None = None) -> 'GVConfig':
    path = path or config_path()

    # Installed copies ship without the repo's config/ directory.
    if not path.exists():
        if path != CONFIG_PATH:
            raise FileNotFoundError(f"Config file not found: {path}")
        return GVConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GVConfig(data)


_config_cache = None


def get_config() -> 'GVConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
