"""Interactive ssh session launch."""

from __future__ import annotations

import subprocess

SSH_COMMAND = "ssh"


class SshError(Exception):
    """Raised when ssh cannot be launched."""


def build_ssh_args(args: list[str]) -> list[str]:
    """Build the ssh command line for already rewritten arguments."""
    return [SSH_COMMAND, *args]


def connect(args: list[str]) -> int:
    """Run ssh attached to the terminal and return its exit status."""
    try:
        result = subprocess.run(build_ssh_args(args))
    except OSError as e:
        raise SshError(
            "Unable to launch ssh, please verify that"
            f" ssh is in your path: {e}"
        ) from e
    if result.returncode < 0:
        # Killed by a signal: report it the way a shell would.
        return 128 - result.returncode
    return result.returncode
