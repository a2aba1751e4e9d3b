"""Local network discovery through arp-scan."""

from __future__ import annotations

import ipaddress
import subprocess
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .destination import is_mac_address, normalize_mac

ARP_SCAN_COMMAND = ["arp-scan", "--localnet"]

# arp-scan frames its results with a fixed header and footer:
#   Interface: ..., Starting arp-scan ...  (2 lines)
#   <blank>, N packets received ..., Ending arp-scan ...  (3 lines)
_HEADER_LINES = 2
_FOOTER_LINES = 3


class ScanError(Exception):
    """Raised when the network discovery scan fails."""


class ScanResult(BaseModel):
    """MAC addresses observed on the local network.

    Keys are normalized MAC addresses, see ``normalize_mac``.
    """

    model_config = ConfigDict(frozen=True)

    addresses: Dict[str, ipaddress.IPv4Address] = Field(default_factory=dict)

    @field_validator("addresses", mode="before")
    @classmethod
    def normalize_keys(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {normalize_mac(str(mac)): ip for mac, ip in v.items()}
        return v

    def lookup(self, mac: str) -> ipaddress.IPv4Address | None:
        """Return the IPv4 address currently bound to *mac*, if any."""
        return self.addresses.get(normalize_mac(mac))


def _parse_line(line: str) -> tuple[str, ipaddress.IPv4Address]:
    fields = line.split("\t")
    if len(fields) < 2:
        raise ScanError(f"Malformed arp-scan line: {line!r}")
    try:
        ip = ipaddress.IPv4Address(fields[0])
    except ValueError as e:
        raise ScanError(
            f"Invalid IPv4 address in arp-scan line: {line!r}"
        ) from e
    if not is_mac_address(fields[1]):
        raise ScanError(f"Invalid MAC address in arp-scan line: {line!r}")
    return normalize_mac(fields[1]), ip


def _split_lines(output: str) -> list[str]:
    # Only "\n" separates lines, as in arp-scan itself.
    lines = output.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse_arp_scan_output(output: str) -> ScanResult:
    """Parse ``arp-scan --localnet`` output.

    Data lines are ``<ipv4>\\t<mac>[\\t<vendor>...]``. When a MAC
    address shows up more than once, the last line wins.
    """
    lines = _split_lines(output)
    if len(lines) < _HEADER_LINES + _FOOTER_LINES:
        raise ScanError(
            f"arp-scan returned invalid output ({len(lines)} lines)"
        )

    addresses: dict[str, ipaddress.IPv4Address] = {}
    for line in lines[_HEADER_LINES : len(lines) - _FOOTER_LINES]:
        mac, ip = _parse_line(line)
        addresses[mac] = ip
    return ScanResult(addresses=addresses)


def run_arp_scan() -> ScanResult:
    """Scan the local subnet and map MAC addresses to IPv4 addresses."""
    try:
        result = subprocess.run(
            ARP_SCAN_COMMAND,
            capture_output=True,
            text=True,
            encoding="utf-8",
        )
    except OSError as e:
        raise ScanError(
            "Unable to launch arp-scan, please verify that"
            f" arp-scan is in your path: {e}"
        ) from e
    except UnicodeDecodeError as e:
        raise ScanError(f"arp-scan output is not valid UTF-8: {e}") from e

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise ScanError(
            f"arp-scan exited with code {result.returncode}"
            + (f": {stderr}" if stderr else "")
        )
    else:
        return parse_arp_scan_output(result.stdout)
