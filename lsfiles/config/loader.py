# lsfiles/config/loader.py
"""
Handles loading and merging of traversal settings from TOML files.
"""
import toml
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any, Dict, Optional
import structlog

from lsfiles.exceptions import ConfigError

from .settings import TraversalConfig, require_str_list

log = structlog.get_logger(__name__)

PROJECT_CONFIG_FILENAMES = [".lsfiles.toml", "lsfiles.toml", "pyproject.toml"]
USER_CONFIG_DIR = Path.home() / ".config" / "lsfiles"
USER_CONFIG_FILE = USER_CONFIG_DIR / "config.toml"

CONFIG_KEYS = ("ignored", "extensions", "follow_symlinks")

def _load_toml_file_data(file_path: Path) -> Dict[str, Any]:
    if not file_path.is_file():
        return {}
    log.debug("loading_toml_config_file", path=str(file_path))
    try:
        data = toml.load(file_path)
    except (toml.TomlDecodeError, OSError) as e:
        log.error("config_file_load_error", path=str(file_path), error=str(e))
        return {}
    if file_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("lsfiles", {})
    return {k: v for k, v in data.items() if k in CONFIG_KEYS}

def load_and_merge_configs(project_dir: Optional[Path] = None, user_config_file: Optional[Path] = None) -> Dict[str, Any]:
    # user-global file first, then the first project file found overrides it.
    merged: Dict[str, Any] = {}
    user_file = user_config_file or USER_CONFIG_FILE
    if user_file.is_file():
        log.info("loading_user_global_config", path=str(user_file))
        merged.update(_load_toml_file_data(user_file))

    project_dir = project_dir or Path.cwd()
    for filename in PROJECT_CONFIG_FILENAMES:
        candidate = project_dir / filename
        if not candidate.is_file():
            continue
        project_settings = _load_toml_file_data(candidate)
        if project_settings:
            log.info("loading_project_local_config", path=str(candidate))
            merged.update(project_settings)
            break

    if not merged:
        log.debug("no_configuration_files_loaded")
    return merged

def build_config(overrides: Optional[Dict[str, Any]] = None, file_values: Optional[Dict[str, Any]] = None) -> TraversalConfig:
    """
    Layers dataclass defaults < config file values < explicit overrides.

    Keys whose override value is None are treated as "not given".
    """
    known = {f.name for f in dataclass_fields(TraversalConfig)}
    options: Dict[str, Any] = {}
    for source in (file_values or {}, overrides or {}):
        for key, value in source.items():
            if key not in known:
                raise ConfigError(f"unknown configuration key '{key}'")
            if value is not None:
                options[key] = value

    for key in ("ignored", "extensions"):
        if key in options:
            options[key] = require_str_list(key, options[key])
    if "follow_symlinks" in options and not isinstance(options["follow_symlinks"], bool):
        raise ConfigError(f"'follow_symlinks' must be a boolean, got {options['follow_symlinks']!r}")

    config = TraversalConfig(**options)
    log.debug("traversal_config_built", ignored=config.ignored, extensions=config.extensions,
              follow_symlinks=config.follow_symlinks)
    return config
