"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """Run the UCI loop on stdin/stdout; logs go to stderr."""
    parser = argparse.ArgumentParser(
        prog="qchess",
        description="Chess position core speaking the UCI protocol on stdin/stdout.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging threshold for stderr output (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )

    from qchess.uci.session import UciSession

    UciSession(sys.stdout).run(sys.stdin)


if __name__ == "__main__":
    main()
