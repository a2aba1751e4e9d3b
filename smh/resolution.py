"""Destination resolution: alias table, then network scan."""

from __future__ import annotations

from typing import Callable

from .config import HostsConfig
from .destination import (
    AddressedHost,
    Destination,
    Host,
    NamedHost,
    ResolvedHost,
)
from .scan import ScanResult


class ResolutionError(Exception):
    """Raised when a MAC address is not present on the local network."""

    def __init__(self, address: str) -> None:
        super().__init__(
            f"Unable to find MAC address <{address}> on local network"
        )
        self.address = address


def resolve_alias(host: NamedHost, hosts: HostsConfig) -> Host:
    """Promote a named host to its aliased MAC address.

    Names missing from the alias table are returned unchanged so that
    ssh can resolve them itself (DNS, ~/.ssh/config).
    """
    address = hosts.lookup(host.name)
    if address is not None:
        return AddressedHost(address=address)
    else:
        return host


def resolve_network(host: AddressedHost, scan: ScanResult) -> ResolvedHost:
    """Map a MAC address to the IPv4 address it currently uses."""
    ip = scan.lookup(host.address)
    if ip is None:
        raise ResolutionError(host.address)
    else:
        return ResolvedHost(address=ip)


def resolve_destination(
    destination: Destination,
    *,
    load_hosts: Callable[[], HostsConfig],
    scan: Callable[[], ScanResult],
    on_step: Callable[[Host], None] | None = None,
) -> Destination:
    """Resolve a destination as far as the available data allows.

    Both sources are always loaded, hosts file first, so failures
    surface in the same order whatever the host variant: hosts file,
    then arp-scan, then the MAC address lookup. *on_step* is called
    with every host the destination advances to.
    """
    host = destination.host

    hosts = load_hosts()
    match host:
        case NamedHost():
            host = resolve_alias(host, hosts)
            if on_step is not None and host is not destination.host:
                on_step(host)

    scan_result = scan()
    match host:
        case AddressedHost():
            host = resolve_network(host, scan_result)
            if on_step is not None:
                on_step(host)

    return destination.with_host(host)
