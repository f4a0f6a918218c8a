#!/usr/bin/env python3
"""Main entrypoint for checking the Stackdriver nozzle configuration."""

import argparse
import json
import logging
import sys
from os import environ
from typing import cast

from rich.console import Console
from rich.logging import RichHandler

from src.config import load_config
from src.errors import ConfigError


class Args(argparse.Namespace):
    log_level: str
    rich_logs: bool
    print_config: bool


logger = logging.getLogger(__name__)


def parse_args() -> Args:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Build and check the Stackdriver nozzle configuration from "
        "environment variables",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set the logging level",
    )

    parser.add_argument(
        "--rich-logs",
        action="store_true",
        help="Enable rich colored logging output",
    )

    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print the resolved configuration, with secrets redacted, as JSON",
    )

    return cast(Args, parser.parse_args())


def configure_logging(log_level: str, use_rich: bool = False) -> None:
    """Configure logging with optional rich formatting.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        use_rich: Whether to use rich colored logging
    """
    if use_rich:
        logging.basicConfig(
            level=getattr(logging, log_level),
            format="%(message)s",
            datefmt="[%X]",
            handlers=[
                RichHandler(
                    # keep stdout for --print-config output
                    console=Console(stderr=True),
                    show_path=True,
                    show_time=True,
                    show_level=True,
                    markup=False,
                    rich_tracebacks=True,
                )
            ],
        )
    else:
        logging.basicConfig(
            level=getattr(logging, log_level),
            format="%(asctime)s [%(name)s:%(filename)s:%(lineno)d] %(levelname)s: %(message)s",
        )

    # silence libs logging
    # - urllib3 - we don't care about the metadata server connection debug logs
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def main() -> int:
    """Main function."""
    args = parse_args()

    configure_logging(args.log_level, args.rich_logs)

    logger.info("Loading Stackdriver nozzle configuration")

    try:
        config = load_config(environ)
    except ConfigError as e:
        logger.error("Invalid nozzle configuration (%s): %s", e.stage, e)
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted before the nozzle configuration was loaded")
        return 1
    except Exception as e:
        logger.error("Error loading nozzle configuration: %s", e, exc_info=True)
        return 1

    if config.debug_nozzle:
        logging.getLogger().setLevel(logging.DEBUG)

    log_data = config.to_log_data()
    logger.info("Nozzle configuration: %s", log_data)

    if args.print_config:
        logger.info("Printing resolved configuration")
        print(json.dumps(log_data, indent=2, sort_keys=True))

    return 0


if __name__ == "__main__":
    sys.exit(main())
