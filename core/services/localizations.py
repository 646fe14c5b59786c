from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core import config
from core.logging import BuildLogger

from .errors import LocalizationError
from .schemas import validate_services_i18n, validate_translations
from .translations import (
    GroupTranslationByLocale,
    merge_grouped_translations,
    parse_translations,
    sort_by_first_key_name,
    todo_translation,
    translation_key,
)


def read_json(path: str | Path) -> Any:
    with open(path, encoding="utf-8") as file:
        return json.load(file)


def write_json(path: str | Path, data: Any) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w", encoding="utf-8") as file:
        json.dump(data, file, ensure_ascii=False, indent=4)


def get_dir_names(folder_path: str | Path, *, logger: BuildLogger | None = None) -> list[str]:
    """Return the names of the directories directly inside ``folder_path``."""
    logger = logger or BuildLogger()
    try:
        return sorted(entry.name for entry in Path(folder_path).iterdir() if entry.is_dir())
    except OSError:
        logger.error(f"Error getting directories names in {folder_path}")
        raise


def get_grouped_translations(
    locales_folder: str | Path, *, logger: BuildLogger | None = None
) -> GroupTranslationByLocale:
    """Read ``<locale>/services.json`` from every locale directory and merge them."""
    logger = logger or BuildLogger()
    try:
        existing: list[GroupTranslationByLocale] = []
        for locale in get_dir_names(locales_folder, logger=logger):
            translation_file = Path(locales_folder) / locale / config.SERVICES_TRANSLATION_FILE
            if not translation_file.is_file():
                continue
            parsed = parse_translations(read_json(translation_file), locale, logger=logger)
            existing.append(parsed.groups)
        return merge_grouped_translations(existing)
    except Exception as error:
        logger.error(f"Error getting grouped translations: {error}")
        raise LocalizationError(f"Error getting grouped translations: {error}") from error


def get_locales(
    locales_folder: str | Path, *, logger: BuildLogger | None = None
) -> dict[str, GroupTranslationByLocale]:
    return {"groups": get_grouped_translations(locales_folder, logger=logger)}


def check_base_translations(
    services_file: str | Path,
    translations_file: str | Path,
    *,
    logger: BuildLogger | None = None,
) -> list[dict[str, str]]:
    """Add ``TODO:`` placeholders to the base locale for groups without a name.

    The file is rewritten sorted by key only when something was added. Any
    failure is logged and an empty list is returned.
    """
    logger = logger or BuildLogger()
    try:
        groups = read_json(services_file)["groups"]
        translations = read_json(translations_file)
        translation_ids = {next(iter(translation), None) for translation in translations}

        missing = [
            todo_translation(group["id"])
            for group in groups
            if translation_key(group["id"]) not in translation_ids
        ]
        if not missing:
            return []

        sorted_translations = sort_by_first_key_name([*translations, *missing])
        validate_translations(sorted_translations)
        write_json(translations_file, sorted_translations)
        logger.warning("Please do not forget to add missing translations to the base locale")
        return missing
    except Exception as error:
        logger.error(f"Error when checking for translations in base locale: {error}")
        return []


def add_service_localizations(
    output_services_file: str | Path,
    locales_folder: str | Path,
    i18n_file_path: str | Path,
    *,
    logger: BuildLogger | None = None,
    base_translations_file: str | Path | None = None,
) -> dict[str, GroupTranslationByLocale]:
    """Fill the base locale, collect every locale and write the combined file."""
    logger = logger or BuildLogger()
    if base_translations_file is None:
        base_translations_file = (
            Path(locales_folder) / config.SERVICES_BASE_LOCALE / config.SERVICES_TRANSLATION_FILE
        )
    try:
        check_base_translations(output_services_file, base_translations_file, logger=logger)
        localizations = get_locales(locales_folder, logger=logger)
        validate_services_i18n(localizations)
        write_json(i18n_file_path, localizations)
        logger.success("Successfully added localizations")
        return localizations
    except Exception as error:
        logger.error(f"Error adding localizations: {error}")
        raise LocalizationError(f"Error adding localizations: {error}") from error


__all__ = [
    "add_service_localizations",
    "check_base_translations",
    "get_dir_names",
    "get_grouped_translations",
    "get_locales",
    "read_json",
    "write_json",
]
