"""Persistent CLI configuration (control-plane URL and credentials)."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from rosa.shared.errors import ConfigError

DEFAULT_URL = "https://api.openshift.com"

URL_ALIASES = {
    "production": DEFAULT_URL,
    "staging": "https://api.stage.openshift.com",
    "integration": "https://api.integration.openshift.com",
}


class ConfigManager:
    """Read and write ``config.json`` under the user's config directory."""

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        if config_dir is None:
            base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
            config_dir = Path(base) / "rosa"
        self.config_dir = config_dir
        self.config_file = config_dir / "config.json"

    def load_config(self) -> Dict[str, Any]:
        if not self.config_file.exists():
            return {}
        try:
            with open(self.config_file, "r") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(
                f"Failed to load config file '{self.config_file}': {e}"
            ) from e

    def save_config(self, config: Dict[str, Any]) -> None:
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w") as f:
            json.dump(config, f, indent=2)
        os.chmod(self.config_file, 0o600)

    def set_credentials(self, token: str, url: Optional[str] = None) -> None:
        config = self.load_config()
        config["token"] = token
        config["url"] = resolve_url(url)
        self.save_config(config)

    def clear(self) -> None:
        if self.config_file.exists():
            self.config_file.unlink()

    def get_token(self) -> Optional[str]:
        """Return the API token, preferring the ``ROSA_TOKEN`` environment variable."""
        return os.environ.get("ROSA_TOKEN") or self.load_config().get("token")

    def get_url(self) -> str:
        return os.environ.get("OCM_URL") or self.load_config().get("url") or DEFAULT_URL


def resolve_url(url: Optional[str]) -> str:
    """Expand environment aliases such as ``staging`` into API URLs."""

    if not url:
        return DEFAULT_URL
    return URL_ALIASES.get(url, url).rstrip("/")


def get_config_manager() -> ConfigManager:
    return ConfigManager()
