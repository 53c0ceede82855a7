"""Report how many processors are online."""

from __future__ import annotations

import argparse
import os

UNKNOWN_MESSAGE = "Não foi possível determinar o número de núcleos."


def online_cpus() -> int | None:
    """Return the number of online processors, or None if it cannot be found."""
    try:
        count = os.sysconf("SC_NPROCESSORS_ONLN")
    except (AttributeError, ValueError, OSError):
        count = os.cpu_count()
    if count is None or count < 1:
        return None
    return count


def describe(count: int | None) -> str:
    """Return the message printed for a processor count."""
    if count is None or count < 1:
        return UNKNOWN_MESSAGE
    return f"Número de núcleos de CPU: {count}"


def main(argv: list[str] | None = None) -> int:
    """Print the number of online processors."""
    argparse.ArgumentParser(description="Show the number of online CPU cores.").parse_args(argv)
    print(describe(online_cpus()))
    return 0