"""Hosts file types and loading."""

from .loader import (
    ConfigError,
    default_hosts_file,
    find_hosts_file,
    load_hosts,
    parse_hosts,
)
from .protocol import HostsConfig

__all__ = [
    "ConfigError",
    "HostsConfig",
    "default_hosts_file",
    "find_hosts_file",
    "load_hosts",
    "parse_hosts",
]
