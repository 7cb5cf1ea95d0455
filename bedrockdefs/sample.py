"""Small demonstration command printing a few definitions."""

from __future__ import annotations

import argparse
from typing import Sequence

from .commands import CommandPermissionLevel
from .network import ConnectionDefinition


def main(argv: Sequence[str] | None = None) -> int:
    """Print the default IPv6 port and the admin permission level."""
    parser = argparse.ArgumentParser(
        prog="bedrockdefs-sample",
        description="Print a default connection port and the admin permission level.",
    )
    parser.parse_args(argv)

    definition = ConnectionDefinition()
    print(definition.port_ipv6)
    print(int(CommandPermissionLevel.ADMIN))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())