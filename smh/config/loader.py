"""TOML hosts file loading, parsing, and validation."""

from __future__ import annotations

import tomllib
from pathlib import Path

from .protocol import HostsConfig

TOOL_NAME = "smh"


class ConfigError(Exception):
    """Raised when the hosts file is missing or invalid."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


def default_hosts_file() -> Path:
    """Location of the hosts file under the user's home directory."""
    return Path.home() / ".config" / TOOL_NAME / "hosts.toml"


def find_hosts_file(hosts_path: str | None = None) -> Path:
    """Find the hosts file.

    Order: explicit path > ~/.config/smh/hosts.toml
    """
    p = Path(hosts_path) if hosts_path is not None else default_hosts_file()
    if not p.is_file():
        raise ConfigError(f"Hosts file not found: {p}")
    else:
        return p


def parse_hosts(text: str) -> HostsConfig:
    """Parse and validate the contents of a hosts file."""
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}") from e

    if "Hosts" not in raw:
        raise ConfigError("Hosts file must contain a [Hosts] table")
    else:
        try:
            return HostsConfig.model_validate(raw)
        except Exception as e:
            raise ConfigError(str(e)) from e


def load_hosts(hosts_path: str | None = None) -> HostsConfig:
    """Load and validate the alias table from the hosts file."""
    path = find_hosts_file(hosts_path)
    try:
        with open(path, "rb") as f:
            text = f.read().decode("utf-8")
    except OSError as e:
        raise ConfigError(f"Unable to read {path}: {e}", path=path) from e
    except UnicodeDecodeError as e:
        raise ConfigError(
            f"{path} is not valid UTF-8: {e}", path=path
        ) from e

    try:
        return parse_hosts(text)
    except ConfigError as e:
        raise ConfigError(f"{path}: {e}", path=path) from e.__cause__
