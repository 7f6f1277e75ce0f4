"""Hub connection settings.

Settings come from three layers, later ones winning:
- a YAML file (`--config`, else `$DCSYNC_CONFIG`, else `~/.dcsync/config.yml`),
- `DCSYNC_*` environment variables,
- explicit overrides passed on the command line.

A missing config file is treated as empty so that environment variables alone
are enough to run.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from ..errors import ConfigurationError

DEFAULT_API_URL = "https://api.amplience.net/v2/content"
DEFAULT_AUTH_URL = "https://auth.amplience.net/oauth/token"
DEFAULT_TIMEOUT = 30.0

ENV_OVERRIDES = {
    "client_id": "DCSYNC_CLIENT_ID",
    "client_secret": "DCSYNC_CLIENT_SECRET",
    "hub_id": "DCSYNC_HUB_ID",
}


@dataclass(frozen=True)
class Settings:
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    hub_id: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    auth_url: str = DEFAULT_AUTH_URL
    timeout: float = DEFAULT_TIMEOUT

    def require_hub(self) -> "Settings":
        """Return self, or raise if the hub credentials are incomplete."""
        missing: List[str] = [
            name
            for name in ("client_id", "client_secret", "hub_id")
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}"
            )
        return self


def default_config_path() -> Path:
    env_path = os.getenv("DCSYNC_CONFIG")
    if env_path:
        return Path(env_path)
    return Path.home() / ".dcsync" / "config.yml"


def _parse_settings_dict(data: Mapping[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key in ("client_id", "client_secret", "hub_id", "api_url", "auth_url"):
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ConfigurationError(f"Configuration key '{key}' must be a string")
        out[key] = value
    timeout = data.get("timeout")
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ConfigurationError("Configuration key 'timeout' must be a number")
        out["timeout"] = float(timeout)
    return out


def _load_settings_file(path: Path) -> Dict[str, Any]:
    """Load raw settings from a YAML file path; missing files are empty."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid configuration file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")
    return _parse_settings_dict(data)


def save_settings(path: Path, settings: Settings) -> None:
    """Persist settings to a YAML file, omitting unset credentials."""
    data: Dict[str, Any] = {
        key: value
        for key, value in (
            ("client_id", settings.client_id),
            ("client_secret", settings.client_secret),
            ("hub_id", settings.hub_id),
        )
        if value
    }
    data["api_url"] = settings.api_url
    data["auth_url"] = settings.auth_url
    data["timeout"] = settings.timeout
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False)


def load_settings(
    path: Optional[Path] = None,
    overrides: Optional[Mapping[str, Optional[str]]] = None,
) -> Settings:
    """Build settings from file, environment and explicit overrides."""
    values = _load_settings_file(path or default_config_path())
    for key, env_name in ENV_OVERRIDES.items():
        env_value = os.getenv(env_name)
        if env_value:
            values[key] = env_value
    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value
    return Settings(**values)

