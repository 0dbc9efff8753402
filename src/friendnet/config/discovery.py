"""Config file discovery and loading.

Walk-up finder locates friendnet.toml, similar to how git finds .git/.
Supports FRIENDNET_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from friendnet.config.models import FriendnetConfig

CONFIG_FILENAME = "friendnet.toml"
CONFIG_ENV_VAR = "FRIENDNET_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for friendnet.toml.

    Returns the path to the config file, or None if not found.
    Checks FRIENDNET_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> FriendnetConfig:
    """Load and validate config from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns default FriendnetConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return FriendnetConfig()

    raw = path.read_text(encoding="utf-8")
    data: dict[str, Any] = tomllib.loads(raw)
    return FriendnetConfig.model_validate(data)
