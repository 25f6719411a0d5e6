"""Config file discovery and loading.

Walk-up finder locates base95.toml, similar to how git finds .git/.
Supports the BASE95_CONFIG env var and the --config CLI flag as overrides.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from base95.config.models import Base95Config

CONFIG_FILENAME = "base95.toml"
CONFIG_ENV_VAR = "BASE95_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for base95.toml.

    Returns the path to the config file, or None if not found.
    A set BASE95_CONFIG wins over the walk-up, even when it points nowhere.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> Base95Config:
    """Load and validate config from a TOML file.

    Returns the defaults when no file is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return Base95Config()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return Base95Config.model_validate(data)
