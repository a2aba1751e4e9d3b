"""Typer CLI: resolve the destination and hand off to ssh."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console

from .argv import find_destination_candidate, rewrite_destination
from .config import ConfigError, HostsConfig, load_hosts
from .destination import Destination, DestinationError, Host
from .output import (
    format_command,
    print_config_error,
    print_destination,
    print_error,
    print_resolution_step,
)
from .resolution import ResolutionError, resolve_destination
from .scan import ScanError, run_arp_scan
from .ssh import SshError, build_ssh_args, connect

app = typer.Typer(
    name="smh",
    help="ssh to hosts by alias or MAC address on the local network",
    add_completion=False,
)


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        # smh options must come first; option parsing stops at the
        # first positional token so everything after it reaches ssh.
        "allow_interspersed_args": False,
    },
)
def run(
    ctx: typer.Context,
    hosts_file: Annotated[
        Optional[str],
        typer.Option(
            "--hosts-file",
            envvar="SMH_HOSTS_FILE",
            help="Path to hosts file (default: ~/.config/smh/hosts.toml)",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Print the ssh command instead of running it",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Show how the destination was resolved",
        ),
    ] = False,
) -> None:
    """Resolve the ssh destination, then run ssh with all other arguments.

    The destination may be a hostname, an alias from the hosts file,
    or a MAC address; aliases and MAC addresses are looked up on the
    local network with arp-scan. smh options must come before any
    ssh argument.
    """
    argv = [ctx.info_name or "smh", *ctx.args]
    index, destination = _parse_destination_or_exit(argv)

    console = Console(stderr=True) if verbose else None
    if console is not None:
        print_destination(destination, console=console)

    def on_step(host: Host) -> None:
        if console is not None:
            print_resolution_step(host, console=console)

    def load() -> HostsConfig:
        return load_hosts(hosts_file)

    try:
        resolved = resolve_destination(
            destination,
            load_hosts=load,
            scan=run_arp_scan,
            on_step=on_step,
        )
    except ConfigError as e:
        print_config_error(e)
        raise typer.Exit(2)
    except ScanError as e:
        print_error("Scan error", e)
        raise typer.Exit(1)
    except ResolutionError as e:
        print_error("Host not found", e)
        raise typer.Exit(1)

    args = rewrite_destination(argv, index, str(resolved))
    if dry_run:
        typer.echo(format_command(build_ssh_args(args)))
    else:
        try:
            exit_code = connect(args)
        except SshError as e:
            print_error("ssh error", e)
            raise typer.Exit(1)
        if exit_code != 0:
            raise typer.Exit(exit_code)


def _parse_destination_or_exit(argv: list[str]) -> tuple[int, Destination]:
    """Locate and parse the destination or exit with code 2 on error."""
    try:
        index = find_destination_candidate(argv)
        return index, Destination.parse(argv[index])
    except DestinationError as e:
        print_error("Destination error", e)
        raise typer.Exit(2)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
