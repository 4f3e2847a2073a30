"""
Loading of render configuration from the environment and site config files.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv

from imgix_srcset.models import RenderConfig, RenderMode


SITE_CONFIG_SECTION = "imgix"

# Site config key -> environment variable
ENV_KEYS = {
    "source": "IMGIX_SOURCE",
    "secure_url_token": "IMGIX_SECURE_URL_TOKEN",
    "include_library_param": "IMGIX_INCLUDE_LIBRARY_PARAM",
}


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def config_from_env() -> Dict[str, Any]:
    """Site-config-shaped mapping built from environment variables."""
    load_dotenv()

    section: Dict[str, Any] = {}
    for key, env_name in ENV_KEYS.items():
        value = os.getenv(env_name)
        if value is None or value == "":
            continue
        section[key] = _parse_bool(value) if key == "include_library_param" else value
    return section


def load_site_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read the imgix section of a JSON site configuration file.

    Args:
        path: Path to the JSON file.

    Returns:
        The `imgix` mapping, or an empty dict when the section is absent.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Site config not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    section = data.get(SITE_CONFIG_SECTION, {}) if isinstance(data, dict) else {}
    if not isinstance(section, dict):
        raise ValueError(f"'{SITE_CONFIG_SECTION}' section in {path} must be an object")
    return section


def environment_mode() -> RenderMode:
    """Render mode from SRCSET_ENV (defaults to development)."""
    load_dotenv()
    return RenderMode.from_environment(os.getenv("SRCSET_ENV", "development"))


def load_render_config(
    site_config_path: Optional[Union[str, Path]] = None,
    mode: Optional[RenderMode] = None
) -> RenderConfig:
    """
    Assemble a RenderConfig from the environment and an optional site file.

    Values from the site file take precedence over environment variables,
    and an explicit `mode` takes precedence over SRCSET_ENV. A missing CDN
    host is left unset.
    """
    section = config_from_env()
    if site_config_path is not None:
        section.update(load_site_config(site_config_path))

    return RenderConfig.from_site_config(section, mode=mode or environment_mode())
