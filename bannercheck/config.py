"""Configuration handling for bannercheck."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ~/.bannercheck/config.yaml
DEFAULT_CONFIG_PATH = Path.home() / ".bannercheck" / "config.yaml"


@dataclass
class Config:
    """Configuration settings for lookups.

    Attributes:
        api_base_url: Root of the provider REST API.
        timeout_seconds: Per-request timeout; expiry surfaces as a transport failure.
        max_workers: Thread pool size for batch audits.
        log_level: Console logging level.
        log_file: Optional rotating log file.
    """

    api_base_url: str = "https://api.github.com"
    timeout_seconds: float = 30.0
    max_workers: int = 8
    log_level: str = "WARNING"
    log_file: str | None = None


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If the file is not valid YAML or a section/value has the wrong shape.
    """
    config_path = Path(path).expanduser()

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"{path}: cannot read config: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level")

    api = _section(data, "api", path)
    audit = _section(data, "audit", path)
    logging_ = _section(data, "logging", path)

    try:
        return Config(
            api_base_url=str(api.get("base_url", Config.api_base_url)),
            timeout_seconds=float(api.get("timeout_seconds", Config.timeout_seconds)),
            max_workers=int(audit.get("max_workers", Config.max_workers)),
            log_level=str(logging_.get("level", Config.log_level)),
            log_file=logging_.get("file", Config.log_file),
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"{path}: invalid config value: {e}") from e


def _section(data: dict, name: str, path: str | Path) -> dict:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"{path}: section '{name}' must be a mapping, got {type(section).__name__}")
    return section


def find_config(path: str | Path | None = None) -> Config:
    """Load the explicit config, else the user config if present, else defaults."""
    if path is not None:
        return load_config(path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return Config()
