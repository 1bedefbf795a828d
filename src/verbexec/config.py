"""Configuration loading for verbexec."""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from verbexec.errors import ConfError
from verbexec.models import VerbexecConfig

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".verbexec"
CONFIG_FILE = CONFIG_DIR / "config.json"
CONFIG_ENV_VAR = "VERBEXEC_CONFIG"


def config_path() -> Path:
    """Return the configuration file path, honoring VERBEXEC_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_FILE


def load_config(path: Path | None = None) -> VerbexecConfig:
    """Load the configuration file, returning defaults when it doesn't exist."""
    path = path or config_path()
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        log.debug("no config file at %s, using defaults", path)
        return VerbexecConfig()
    except (OSError, json.JSONDecodeError) as e:
        raise ConfError(f"Can't read config file {path}: {e}") from e

    try:
        config = VerbexecConfig.model_validate(data)
    except ValidationError as e:
        raise ConfError(f"Invalid config file {path}: {e}") from e
    log.debug("loaded %d verbs from %s", len(config.verbs), path)
    return config
