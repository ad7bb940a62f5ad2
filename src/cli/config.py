"""Configuration loading for the CLI.

``.devkb.json`` is read from the working directory on every invocation. A
missing file means defaults; a malformed one is logged and also falls back
to defaults.
"""

import json
from pathlib import Path
from typing import Optional

import structlog
from pydantic import ValidationError

from .config_models import DevKBConfig

logger = structlog.get_logger()

CONFIG_FILENAME = ".devkb.json"

# Written by `devkb init`; broader than the built-in defaults
STARTER_CONFIG = {
    "dataDir": ".devkb",
    "indexPaths": ["./src", "./lib", "./docs", "./tests"],
    "excludePatterns": ["node_modules", "dist", "build", ".git", "*.log", ".env"],
    "includeExtensions": [
        ".ts", ".js", ".jsx", ".tsx", ".md", ".txt", ".json", ".yml", ".yaml", ".py",
    ],
}


def find_config(cwd: Optional[Path] = None) -> Path:
    return (cwd or Path.cwd()) / CONFIG_FILENAME


def load_config_model(config_path: Optional[Path] = None) -> DevKBConfig:
    """Load configuration as a validated model, defaulting on any problem."""
    path = config_path or find_config()
    if not path.exists():
        return DevKBConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("config.invalid", path=str(path), error=str(e))
        return DevKBConfig()

    if not isinstance(data, dict):
        logger.warning("config.invalid", path=str(path), error="top-level value must be an object")
        return DevKBConfig()

    try:
        return DevKBConfig.from_dict(data)
    except ValidationError as e:
        logger.warning("config.invalid", path=str(path), error=str(e))
        return DevKBConfig()


def write_config(data: dict, config_path: Optional[Path] = None) -> Path:
    path = config_path or find_config()
    path.write_text(json.dumps(data, indent=2))
    return path


def get_paths(config: DevKBConfig, cwd: Optional[Path] = None) -> dict:
    """Resolve data directory locations relative to the working directory."""
    data_dir = (cwd or Path.cwd()) / config.data_dir
    return {
        "data_dir": data_dir,
        "index_dir": data_dir / "index",
        "index_file": data_dir / "index" / "files.json",
        "knowledge_dir": data_dir / "knowledge",
    }
