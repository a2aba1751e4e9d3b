"""Command-line token handling for the ssh pass-through."""

from __future__ import annotations

from .destination import DestinationError


def find_destination_candidate(argv: list[str]) -> int:
    """Return the index of the destination token in *argv*.

    ``argv[0]`` is the program name. Among the remaining tokens, the
    first one that does not start with ``-`` is skipped and the second
    one is the destination.
    """
    seen = 0
    for i, arg in enumerate(argv[1:], start=1):
        if not arg.startswith("-"):
            seen += 1
            if seen == 2:
                return i
    raise DestinationError("No destination found in arguments")


def rewrite_destination(
    argv: list[str], index: int, destination: str
) -> list[str]:
    """Replace the destination token and drop the program name."""
    args = list(argv)
    args[index] = destination
    return args[1:]
