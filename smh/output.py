"""CLI output formatting."""

from __future__ import annotations

import shlex

from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .config import ConfigError
from .destination import (
    AddressedHost,
    Destination,
    Host,
    NamedHost,
    ResolvedHost,
    format_host,
)


def _host_style(host: Host) -> str:
    match host:
        case NamedHost():
            return "bold"
        case AddressedHost():
            return "yellow"
        case ResolvedHost():
            return "green"


def print_config_error(
    e: ConfigError,
    *,
    console: Console | None = None,
) -> None:
    """Print a ConfigError as a Rich panel to stderr."""
    if console is None:
        console = Console(stderr=True)
    cause = e.__cause__
    match cause:
        case ValidationError():
            lines: list[str] = []
            for err in cause.errors():
                loc = " → ".join(str(p) for p in err["loc"])
                msg = err["msg"]
                if msg.startswith("Value error, "):
                    prefix_len = len("Value error, ")
                    msg = msg[prefix_len:]
                if loc:
                    lines.append(f"{loc}: {msg}")
                else:
                    lines.append(msg)
            body = "\n".join(lines)
        case _:
            body = str(e)
    title = "Config error"
    if e.path is not None:
        title += f": {e.path}"
    console.print(Panel(Text(body), title=Text(title), style="red"))


def print_error(
    title: str,
    e: Exception,
    *,
    console: Console | None = None,
) -> None:
    """Print an error as a Rich panel to stderr."""
    if console is None:
        console = Console(stderr=True)
    console.print(Panel(Text(str(e)), title=title, style="red"))


def print_resolution_step(
    host: Host,
    *,
    console: Console | None = None,
) -> None:
    """Print one step of the resolution chain to stderr."""
    if console is None:
        console = Console(stderr=True)
    line = Text("→ ")
    line.append(format_host(host), style=_host_style(host))
    line.append(f" ({host.kind})", style="dim")
    console.print(line)


def print_destination(
    destination: Destination,
    *,
    console: Console | None = None,
) -> None:
    """Print the parsed destination at the head of the resolution chain."""
    if console is None:
        console = Console(stderr=True)
    line = Text(str(destination), style=_host_style(destination.host))
    line.append(f" ({destination.host.kind})", style="dim")
    console.print(line)


def format_command(args: list[str]) -> str:
    """Format a command line for copy-pasting into a shell."""
    return shlex.join(args)
