"""
Unified configuration loader - lightweight attribute-style config objects
=========================================================================

This module is responsible for:
1. Reading system_config.json
2. Giving attribute access to nested sections (config.logging.level)
3. Filling in default sections the file leaves out
4. Applying environment variable overrides

Config file location:
- Parameter: load_config(config_path="path/to/config.json")
- Environment variable: DRIVEPOSTURE_CONFIG=path/to/config.json
- Default: <project root>/system_config.json, then <project root>/config/system_config.json

system_config.json lives in the source checkout and is not installed with the
package. An installed copy finds no default file: pass a path or set
DRIVEPOSTURE_CONFIG, otherwise the logger runs on its built-in defaults.

Usage:
```python
from driveposture.core.config_loader import get_config
from driveposture.pose import PostureThresholds, analyze_pose

config = get_config()  # singleton
thresholds = PostureThresholds.from_config(config)
result = analyze_pose(landmarks, config.view_mode, thresholds=thresholds)
```

The classifier never reads configuration on its own; callers pass what they
built from it.
"""
from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional


PROJECT_ROOT = Path(__file__).parent.parent.parent

DEFAULT_SECTIONS: Dict[str, Any] = {
    "view_mode": "side",
    "logging": {
        "level": "INFO",
        "enable_console": True,
        "enable_file": False,
        "log_dir": "logs",
        "file_rotation": "daily",
        "max_size_mb": 10,
    },
    "ergonomics": {},
}


# ============================================================================
# Config classes
# ============================================================================

class DictConfig:
    """Dictionary-backed config with attribute access"""

    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            if isinstance(value, dict):
                # Nested dictionaries become nested configs
                setattr(self, key, DictConfig(**value))
            elif isinstance(value, list) and value and isinstance(value[0], dict):
                setattr(self, key, [DictConfig(**item) if isinstance(item, dict) else item for item in value])
            else:
                setattr(self, key, value)

    def get(self, key: str, default=None):
        """dict-style get"""
        return getattr(self, key, default)

    def __getitem__(self, key: str):
        """Support config["key"]"""
        return getattr(self, key)

    def __contains__(self, key: str) -> bool:
        return not key.startswith("_") and hasattr(self, key)

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to plain dictionaries (recursively)"""
        out: Dict[str, Any] = {}
        for key, value in self.__dict__.items():
            if key.startswith("_"):
                continue
            if isinstance(value, DictConfig):
                out[key] = value.to_dict()
            elif isinstance(value, list):
                out[key] = [item.to_dict() if isinstance(item, DictConfig) else item for item in value]
            else:
                out[key] = value
        return out

    def __repr__(self):
        attrs = {k: v for k, v in self.__dict__.items() if not k.startswith("_")}
        return f"{self.__class__.__name__}({attrs})"


class SystemConfig(DictConfig):
    """
    Top-level configuration

    Attributes:
        view_mode: Default camera perspective ("front" or "side")
        logging: Logging settings
        ergonomics: Threshold bands and feedback text overrides
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._config_path: Optional[Path] = None

    def set_config_path(self, path: Path) -> None:
        """Remember where the config came from"""
        self._config_path = path

    @property
    def config_path(self) -> Optional[Path]:
        return self._config_path


# ============================================================================
# Loader (singleton)
# ============================================================================

_config_instance: Optional[SystemConfig] = None


def find_config_path() -> Path:
    """
    Locate system_config.json

    Search order: env DRIVEPOSTURE_CONFIG > root/system_config.json > root/config/system_config.json.
    When nothing exists the root path is returned (callers check existence).
    """
    config_env = os.getenv("DRIVEPOSTURE_CONFIG")
    if config_env:
        return Path(config_env)

    root_config = PROJECT_ROOT / "system_config.json"
    nested_config = PROJECT_ROOT / "config" / "system_config.json"
    if root_config.exists():
        return root_config
    if nested_config.exists():
        return nested_config
    return root_config


def _with_defaults(raw_data: Dict[str, Any]) -> Dict[str, Any]:
    data = copy.deepcopy(raw_data)
    for section, default in DEFAULT_SECTIONS.items():
        if section not in data:
            data[section] = copy.deepcopy(default)
        elif isinstance(default, dict) and isinstance(data[section], dict):
            for key, value in default.items():
                data[section].setdefault(key, value)
    return data


def load_config(config_path: Optional[str | Path] = None) -> SystemConfig:
    """
    Load configuration from a JSON file

    Args:
        config_path: Configuration file path (default: auto-detect, see find_config_path)

    Returns:
        SystemConfig: Configuration object

    Raises:
        FileNotFoundError: Configuration file does not exist
        ValueError: Configuration file is not a valid JSON object
    """
    config_path = Path(config_path) if config_path is not None else find_config_path()

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as f:
            raw_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Configuration file JSON parsing failed: {e}") from e

    if not isinstance(raw_data, dict):
        raise ValueError(f"Configuration root must be a JSON object: {config_path}")

    config = SystemConfig(**_with_defaults(raw_data))
    config.set_config_path(config_path)
    return config


def get_config(config_path: Optional[str | Path] = None, reload: bool = False) -> SystemConfig:
    """
    Get the configuration singleton (lazy)

    Args:
        config_path: Configuration file path (only used on first load)
        reload: Force a reload

    Returns:
        SystemConfig: Configuration singleton
    """
    global _config_instance

    if _config_instance is None or reload:
        _config_instance = apply_env_overrides(load_config(config_path))

    return _config_instance


# ============================================================================
# Environment overrides
# ============================================================================

def apply_env_overrides(config: SystemConfig) -> SystemConfig:
    """
    Apply environment overrides (ENV > system_config.json > defaults)

    Supported variables:
    - DRIVEPOSTURE_LOG_LEVEL: log level
    - DRIVEPOSTURE_VIEW_MODE: default view mode ("front" / "side")

    Args:
        config: Loaded configuration

    Returns:
        The same configuration with overrides applied
    """
    if log_level := os.getenv("DRIVEPOSTURE_LOG_LEVEL"):
        config.logging.level = log_level.upper()

    if view_mode := os.getenv("DRIVEPOSTURE_VIEW_MODE"):
        config.view_mode = view_mode.strip().lower()

    return config


if __name__ == "__main__":
    import sys

    try:
        config = get_config()
        print("Config loaded successfully")
        print(f"  Source: {config.config_path}")
        print(f"  View mode: {config.view_mode}")
        print(f"  Log level: {config.logging.level}")
        print(f"  Ergonomics overrides: {sorted(config.ergonomics.to_dict())}")
    except (FileNotFoundError, ValueError) as e:
        print(f"Config loading failed: {e}", file=sys.stderr)
        sys.exit(1)
