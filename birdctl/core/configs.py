"""Configuration management for birdctl.

Loads settings from ~/.config/birdctl/config.cfg, falling back to a .env
file in the working directory. Environment variables override both.
"""

import configparser
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values

CONFIG_PATH = Path.home() / ".config" / "birdctl" / "config.cfg"
ENV_PATH = Path(".env")

# BIRD's compiled-in control socket location.
DEFAULT_SOCKET_PATH = "/var/run/bird/bird.ctl"

SOCKET_ENV = "BIRDCTL_SOCKET"
TIMEOUT_ENV = "BIRDCTL_TIMEOUT_S"


@dataclass
class ClientConfig:
    socket_path: str = DEFAULT_SOCKET_PATH
    timeout: Optional[float] = None


def load_raw_config(
    path: Path = CONFIG_PATH, env_path: Path = ENV_PATH
) -> Dict[str, str]:
    """
    Load configuration values from the config file, or .env if it is missing.
    Values are returned with lowercase keys for convenience.
    """
    if path.exists():
        cfg = configparser.ConfigParser()
        cfg.read(path)
        if "DEFAULT" in cfg:
            return {k.lower(): v for k, v in cfg["DEFAULT"].items()}
        return {}

    if env_path.exists():
        return {
            k.lower(): v
            for k, v in dotenv_values(env_path).items()
            if v is not None
        }

    return {}


def parse_timeout(value) -> Optional[float]:
    """
    Parse a timeout setting in seconds.

    Empty, "none" and 0 mean no timeout. Raises ValueError for anything
    that is not a non-negative number.
    """
    if value is None:
        return None
    text = str(value).strip().lower()
    if text in {"", "none", "off"}:
        return None
    try:
        timeout = float(text)
    except ValueError:
        raise ValueError(f"Invalid timeout: {value!r}") from None
    if timeout < 0:
        raise ValueError(f"Timeout must not be negative: {value!r}")
    return timeout or None


def get_client_config(raw: Optional[Dict[str, str]] = None) -> ClientConfig:
    """Build a ClientConfig from raw values, applying environment overrides."""
    raw = load_raw_config() if raw is None else raw

    socket_path = os.environ.get(SOCKET_ENV) or raw.get("socket_path", "").strip()
    timeout_env = os.environ.get(TIMEOUT_ENV)
    if timeout_env is not None and timeout_env.strip() != "":
        timeout = parse_timeout(timeout_env)
    else:
        timeout = parse_timeout(raw.get("timeout"))

    return ClientConfig(
        socket_path=socket_path or DEFAULT_SOCKET_PATH,
        timeout=timeout,
    )
