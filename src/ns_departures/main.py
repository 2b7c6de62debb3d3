"""Main entry point for the NS departures command line tool."""

import asyncio
import logging
import sys

from ns_departures.adapters.config import AppConfig
from ns_departures.cli import main

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging on stderr so stdout stays machine readable."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def run() -> None:
    """Synchronous entry point for the ``ns-departures`` command."""
    config = AppConfig()
    configure_logging(config.log_level)

    try:
        exit_code = asyncio.run(main(config=config))
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        exit_code = 130
    sys.exit(exit_code)


if __name__ == "__main__":
    run()
