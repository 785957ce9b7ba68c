"""
Settings loading for cvsite.

Settings live in a YAML file (cvsite/configs/settings.yaml by default) and are
loaded with OmegaConf so callers can merge dotlist overrides from the command line.
"""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

load_dotenv()
DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent.parent / "configs" / "settings.yaml"
SETTINGS_PATH = Path(os.getenv("CVSITE_SETTINGS_PATH", DEFAULT_SETTINGS_PATH))

# Environment variables that override individual settings keys
ENV_OVERRIDES = {
    "RESUME_PATH": "source.resume_path",
}


def load_settings(config_path: Path = None, overrides: Optional[List[str]] = None) -> DictConfig:
    """
    Load settings YAML and apply overrides.

    Precedence (later wins): defaults file, config_path file, environment
    variables from ENV_OVERRIDES, dotlist overrides.

    Args:
        config_path: Optional settings file merged over the defaults
        overrides: Dotlist overrides (e.g., ["document.missing_sections=error"])

    Returns:
        Merged settings

    Example:
        >>> settings = load_settings(overrides=["editor.json_indent=4"])
        >>> settings.editor.json_indent
        4
    """
    layers = [OmegaConf.load(DEFAULT_SETTINGS_PATH)]

    if config_path is None and SETTINGS_PATH != DEFAULT_SETTINGS_PATH:
        config_path = SETTINGS_PATH
    if config_path is not None:
        layers.append(OmegaConf.load(config_path))

    env_dotlist = [
        f"{key}={os.environ[env_name]}" for env_name, key in ENV_OVERRIDES.items() if env_name in os.environ
    ]
    if env_dotlist:
        layers.append(OmegaConf.from_dotlist(env_dotlist))

    if overrides:
        layers.append(OmegaConf.from_dotlist(list(overrides)))

    return OmegaConf.merge(*layers)
