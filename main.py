"""Development entrypoint for the roster aid model."""

from __future__ import annotations

import argparse
import logging

from btechaid import LoggingLogger, load_model
from btechaid.config import get_settings


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Load the BattleTech roster aid model")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (defaults to BTECHAID_LOG_LEVEL or INFO)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    load_model(LoggingLogger())


if __name__ == "__main__":
    main()
