"""SSH destination parsing and the host resolution chain."""

from __future__ import annotations

import ipaddress
import re
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

MAC_ADDRESS_PATTERN = r"[0-9A-Fa-f]{2}(?::[0-9A-Fa-f]{2}){5}"

_MAC_ADDRESS_RE = re.compile(MAC_ADDRESS_PATTERN)

# A host that is a full MAC address is tried before the non-greedy
# fallback, otherwise a trailing all-digit octet would be read as a port.
_DESTINATION_RE = re.compile(
    r"(?P<scheme>ssh://)?"
    r"(?P<user>[^@]+@)?"
    rf"(?P<host>{MAC_ADDRESS_PATTERN}|.+?)"
    r"(?P<port>:\d+)?",
    re.DOTALL,
)

MacAddress = Annotated[
    str, StringConstraints(pattern=rf"^{MAC_ADDRESS_PATTERN}$")
]


class DestinationError(ValueError):
    """Raised when a destination string cannot be parsed."""


def is_mac_address(text: str) -> bool:
    """Check whether *text* is six colon-separated hex byte pairs."""
    return _MAC_ADDRESS_RE.fullmatch(text) is not None


def normalize_mac(address: str) -> str:
    """Canonical form used to compare MAC addresses."""
    return address.lower()


class _HostModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class NamedHost(_HostModel):
    """A host identifier not yet known to be anything more specific."""

    kind: Literal["named"] = "named"
    name: str = Field(..., min_length=1)


class AddressedHost(_HostModel):
    """A hardware address not yet mapped to a network address."""

    kind: Literal["addressed"] = "addressed"
    address: MacAddress


class ResolvedHost(_HostModel):
    """A concrete IPv4 address, ready for connection."""

    kind: Literal["resolved"] = "resolved"
    address: ipaddress.IPv4Address


Host = Annotated[
    Union[NamedHost, AddressedHost, ResolvedHost],
    Field(discriminator="kind"),
]


def classify_host(text: str) -> Host:
    """Build the initial host variant for a parsed host segment."""
    if is_mac_address(text):
        return AddressedHost(address=text)
    else:
        return NamedHost(name=text)


def format_host(host: Host) -> str:
    """Format a host the way ssh expects it on the command line."""
    match host:
        case NamedHost():
            return host.name
        case AddressedHost():
            return host.address
        case ResolvedHost():
            return str(host.address)


class Destination(BaseModel):
    """An ``[ssh://][user@]host[:port]`` destination.

    The optional segments keep their separators (``ssh://``, the
    trailing ``@`` and the leading ``:``) so that formatting is a
    plain concatenation and ``str(Destination.parse(s)) == s``.
    """

    model_config = ConfigDict(frozen=True)

    scheme: Optional[str] = None
    user: Optional[str] = None
    host: Host
    port: Optional[str] = None

    @classmethod
    def parse(cls, text: str) -> Destination:
        """Parse a destination token, classifying its host segment."""
        m = _DESTINATION_RE.fullmatch(text)
        if m is None:
            raise DestinationError(f"Invalid destination: {text!r}")
        else:
            return cls(
                scheme=m.group("scheme"),
                user=m.group("user"),
                host=classify_host(m.group("host")),
                port=m.group("port"),
            )

    def with_host(self, host: Host) -> Destination:
        """Return a copy of this destination pointing at *host*."""
        return self.model_copy(update={"host": host})

    def __str__(self) -> str:
        return (
            f"{self.scheme or ''}{self.user or ''}"
            f"{format_host(self.host)}{self.port or ''}"
        )
