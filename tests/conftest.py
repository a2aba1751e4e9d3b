"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from smh.config import HostsConfig
from smh.scan import ScanResult

SAMPLE_TOML = """\
[Hosts]
nas = "aa:bb:cc:dd:ee:ff"
printer = "00:1A:2B:3C:4D:5E"
"""

ARP_SCAN_OUTPUT = """\
Interface: eth0, type: EN10MB, MAC: 52:54:00:12:34:56, IPv4: 192.168.1.10
Starting arp-scan 1.10.0 with 256 hosts (https://github.com/royhills/arp-scan)
192.168.1.1\t00:11:22:33:44:55\tNETGEAR
192.168.1.5\taa:bb:cc:dd:ee:ff\tSynology Incorporated
192.168.1.7\t00:1a:2b:3c:4d:5e\t(Unknown)

3 packets received by filter, 0 packets dropped by kernel
Ending arp-scan 1.10.0: 256 hosts scanned in 1.872 seconds (136.75 hosts/sec). 3 responded
"""

EMPTY_ARP_SCAN_OUTPUT = """\
Interface: eth0, type: EN10MB, MAC: 52:54:00:12:34:56, IPv4: 192.168.1.10
Starting arp-scan 1.10.0 with 256 hosts (https://github.com/royhills/arp-scan)

0 packets received by filter, 0 packets dropped by kernel
Ending arp-scan 1.10.0: 256 hosts scanned in 1.872 seconds (136.75 hosts/sec). 0 responded
"""


@pytest.fixture()
def sample_hosts_file(tmp_path: Path) -> Path:
    """Write a sample hosts file to a temp file."""
    p = tmp_path / "hosts.toml"
    p.write_text(SAMPLE_TOML)
    return p


@pytest.fixture()
def hosts() -> HostsConfig:
    return HostsConfig(
        hosts={
            "nas": "aa:bb:cc:dd:ee:ff",
            "offline": "de:ad:be:ef:00:01",
        }
    )


@pytest.fixture()
def empty_hosts() -> HostsConfig:
    return HostsConfig(hosts={})


@pytest.fixture()
def scan_result() -> ScanResult:
    return ScanResult(
        addresses={
            "aa:bb:cc:dd:ee:ff": "192.168.1.5",
            "00:11:22:33:44:55": "192.168.1.1",
        }
    )


@pytest.fixture()
def arp_scan_output() -> str:
    return ARP_SCAN_OUTPUT


@pytest.fixture()
def empty_arp_scan_output() -> str:
    return EMPTY_ARP_SCAN_OUTPUT
