"""
Configuration loading utilities.

Supports environment variable interpolation and inheritance from a
base.yaml next to the config file.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from nearclass.config.settings import AppConfig


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file must contain a mapping: {path}"
        raise ValueError(msg)
    return _process_config_values(data)


def load_config(
    config_path: Path,
    base_path: Path | None = None,
) -> AppConfig:
    """
    Load application configuration from YAML file(s).

    Minimal config requires only data.path. Relative data paths are
    resolved against the directory of config_path.

    Args:
        config_path: Path to the main configuration file.
        base_path: Optional base configuration; defaults to base.yaml in the
            same directory when present.

    Returns:
        Fully validated AppConfig instance.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    if base_path is not None:
        base_data = load_yaml(base_path)
    else:
        potential_base = config_path.parent / "base.yaml"
        use_base = potential_base.exists() and potential_base.resolve() != config_path.resolve()
        base_data = load_yaml(potential_base) if use_base else {}

    merged = _deep_merge(base_data, load_yaml(config_path))

    data_section = merged.get("data") or {}
    if not data_section.get("path"):
        msg = "Config must specify 'data.path'"
        raise ValueError(msg)

    data_section = {**data_section, "base_dir": config_path.parent}
    return AppConfig.model_validate({**merged, "data": data_section})
