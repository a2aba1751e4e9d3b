from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..destination import MacAddress, is_mac_address


class HostsConfig(BaseModel):
    """Alias table mapping friendly host names to MAC addresses."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hosts: Dict[str, MacAddress] = Field(..., alias="Hosts")

    @field_validator("hosts", mode="before")
    @classmethod
    def check_addresses(cls, v: Any) -> Any:
        if not isinstance(v, dict):
            raise ValueError(
                f"Hosts must be a table of names to MAC addresses,"
                f" got: {v!r}"
            )
        for name, address in v.items():
            if not isinstance(address, str) or not is_mac_address(address):
                raise ValueError(
                    f"Host '{name}' has an invalid MAC address:"
                    f" {address!r}"
                )
        return v

    def lookup(self, name: str) -> str | None:
        """Return the MAC address aliased by *name*, if any."""
        return self.hosts.get(name)
