"""
Build the blocked services file and the combined group localizations.

Usage:
    python tools/build_services.py [--source DIR] [--dist FILE] [--locales DIR] [--i18n FILE]

Defaults come from core.config (environment or .env).
"""

from __future__ import annotations

import argparse
import logging
import sys

from core import config
from core.logging import BuildLogger, new_run_id, setup_logging
from core.services import ServicesDataError, build_services


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Merge services data and build localizations")
    parser.add_argument("--source", default=config.SERVICES_SOURCE_DIR, help="services source directory")
    parser.add_argument("--dist", default=config.SERVICES_DIST_FILE, help="output services file")
    parser.add_argument("--locales", default=config.SERVICES_LOCALES_DIR, help="locales directory")
    parser.add_argument("--i18n", default=config.SERVICES_I18N_FILE, help="output localizations file")
    parser.add_argument("--log-dir", default=config.SERVICES_LOG_DIR)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_dir, config.SERVICES_LOG_LEVEL)
    new_run_id()
    logger = BuildLogger(logging.getLogger("services.build"))

    try:
        build_services(args.source, args.dist, args.locales, args.i18n, logger=logger)
    except ServicesDataError as error:
        logger.error(f"Services build failed: {error}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
