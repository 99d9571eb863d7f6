# src/aoc/config.py
"""
Configuration loader for the puzzle tooling.

Settings live in config/aoc.yaml under the project root. The session token
is never stored there: the file only names the environment variable that
holds it (AOC_SESSION by default).

Resolution order for the config file:
  1. explicit path argument
  2. AOC_CONFIG environment variable
  3. <project root>/config/aoc.yaml
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
DEFAULT_CONFIG_PATH = CONFIG_ROOT / "aoc.yaml"

CONFIG_ENV_VAR = "AOC_CONFIG"


@dataclass
class AocConfig:
    """Resolved settings for fetching inputs and submitting answers."""

    year: int = 2024
    base_url: str = "https://adventofcode.com"
    cache_dir: Path = PROJECT_ROOT / ".cache"
    session_env: str = "AOC_SESSION"
    timeout: float = 30.0
    user_agent: str = "aoc-gridpath"
    log_level: str = "INFO"

    def session_token(self) -> Optional[str]:
        """Session cookie value from the environment, or None if unset."""
        token = os.getenv(self.session_env)
        return token or None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], root: Path = PROJECT_ROOT) -> "AocConfig":
        """Build from a plain mapping (e.g. YAML), filling in defaults."""
        defaults = cls()
        cache_dir = Path(data.get("cache_dir", defaults.cache_dir))
        if not cache_dir.is_absolute():
            cache_dir = root / cache_dir
        return cls(
            year=int(data.get("year", defaults.year)),
            base_url=str(data.get("base_url", defaults.base_url)).rstrip("/"),
            cache_dir=cache_dir,
            session_env=data.get("session_env", defaults.session_env),
            timeout=float(data.get("timeout", defaults.timeout)),
            user_agent=data.get("user_agent", defaults.user_agent),
            log_level=str(data.get("log_level", defaults.log_level)).upper(),
        )


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML mapping, failing loudly on a missing file or bad shape."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def load_config(path: Optional[Path | str] = None) -> AocConfig:
    """Main entry point: returns a fully resolved AocConfig."""
    if path is None:
        path = os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
    return AocConfig.from_dict(_load_yaml(Path(path)))
