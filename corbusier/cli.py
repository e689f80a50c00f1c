"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

__all__ = ["main"]

GREETING = "Hello from Corbusier!"


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="corbusier",
        description="AI agent orchestration platform.",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting and return the exit status."""
    _build_parser().parse_known_args(None if argv is None else list(argv))
    sys.stdout.write(f"{GREETING}\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())