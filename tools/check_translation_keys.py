from __future__ import annotations

"""
Utility script to validate services group translations across locales.

Usage:
    python tools/check_translation_keys.py [--locales DIR] [--base en] [--strict]

The script uses the base locale (en) as the baseline and reports invalid keys
in every locale plus missing or extra group ids compared to the baseline. It
exits with a non-zero status code if invalid keys are found, or, with
--strict, on any mismatch.
"""

import argparse
import logging
import sys
from pathlib import Path

from core import config
from core.logging import BuildLogger, setup_logging
from core.services.errors import ServicesDataError
from core.services.localizations import get_dir_names, read_json
from core.services.translations import TODO_MARKER, parse_translations, split_translation_key


def collect_locale_translations(locales_folder: str | Path, logger: BuildLogger) -> dict:
    """Return ``{locale: (group ids, invalid keys)}`` for every locale with a services file."""
    collected = {}
    for locale in get_dir_names(locales_folder, logger=logger):
        path = Path(locales_folder) / locale / config.SERVICES_TRANSLATION_FILE
        if not path.is_file():
            continue
        entries = read_json(path)
        parsed = parse_translations(entries, locale, logger=logger)
        # placeholders still count as present
        ids = set(parsed.groups) | _placeholder_ids(entries)
        collected[locale] = (ids, parsed.invalid_keys)
    return collected


def _placeholder_ids(entries: list[dict[str, str]]) -> set[str]:
    ids = set()
    for entry in entries:
        for key, value in entry.items():
            parsed = split_translation_key(key)
            if TODO_MARKER in value and parsed is not None:
                ids.add(parsed[0])
    return ids


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check services group translation keys")
    parser.add_argument("--locales", default=config.SERVICES_LOCALES_DIR)
    parser.add_argument("--base", default=config.SERVICES_BASE_LOCALE)
    parser.add_argument("--strict", action="store_true", help="fail on missing or extra ids")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logger = BuildLogger(logging.getLogger("services.check"))

    try:
        collected = collect_locale_translations(args.locales, logger)
    except (OSError, ValueError, ServicesDataError) as error:
        logger.error(f"Error reading translations from {args.locales}: {error}")
        return 1

    if args.base not in collected:
        print(f"Base locale '{args.base}' has no {config.SERVICES_TRANSLATION_FILE}")
        return 1

    baseline = collected[args.base][0]
    status = 0

    for locale, (ids, invalid_keys) in sorted(collected.items()):
        if invalid_keys:
            print(f"[{locale}] invalid: {invalid_keys}")
            status = 1
        if locale == args.base:
            continue

        missing = sorted(baseline - ids)
        extra = sorted(ids - baseline)
        print(f"[{locale}] missing: {missing or 'none'}")
        print(f"[{locale}] extra:   {extra or 'none'}")
        if args.strict and (missing or extra):
            status = 1

    return status


if __name__ == "__main__":
    setup_logging(config.SERVICES_LOG_DIR, config.SERVICES_LOG_LEVEL)
    sys.exit(main())
