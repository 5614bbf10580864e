"""
Local defaults for the CLI: a JSON config file plus environment variables.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

CONFIG_FILE = Path.home() / ".pushover" / "config.json"
CONFIG_KEYS = ("token", "user", "device", "sound")

ENV_CONFIG = "PUSHOVER_CONFIG"
ENV_VARS = {
    "token": "PUSHOVER_TOKEN",
    "user": "PUSHOVER_USER",
    "device": "PUSHOVER_DEVICE",
}


def config_path(path: Optional[Union[str, Path]] = None) -> Path:
    if path:
        return Path(path)
    env = os.environ.get(ENV_CONFIG)
    return Path(env) if env else CONFIG_FILE


def load_config(path: Optional[Union[str, Path]] = None) -> dict[str, Any]:
    """Load known keys from the config file. Missing or broken files yield {}."""
    target = config_path(path)
    try:
        raw = json.loads(target.read_text())
    except FileNotFoundError:
        return {}
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", target, e)
        return {}
    if not isinstance(raw, dict):
        logger.warning("Ignoring config file %s: expected a JSON object", target)
        return {}
    return {k: raw[k] for k in CONFIG_KEYS if raw.get(k) is not None}
