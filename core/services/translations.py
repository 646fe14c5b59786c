from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from core.logging import BuildLogger

from .schemas import validate_translations

KEY_PREFIX = "servicesgroup"
KEY_SIGN = "name"
TODO_MARKER = "TODO:"

# id -> locale -> {sign: value}
GroupTranslationByLocale = dict[str, dict[str, dict[str, str]]]


@dataclass
class ParsedTranslations:
    groups: GroupTranslationByLocale = field(default_factory=dict)
    invalid_keys: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.invalid_keys


def translation_key(group_id: str, sign: str = KEY_SIGN) -> str:
    return f"{KEY_PREFIX}.{group_id}.{sign}"


def todo_translation(group_id: str) -> dict[str, str]:
    return {translation_key(group_id): f"TODO: name for group {group_id}"}


def split_translation_key(key: str) -> tuple[str, str] | None:
    """Return ``(id, sign)`` for a well-formed key, otherwise ``None``."""
    parts = key.split(".")
    if len(parts) != 3:
        return None
    prefix, group_id, sign = parts
    if prefix != KEY_PREFIX or not group_id or sign != KEY_SIGN:
        return None
    return group_id, sign


def parse_translations(
    entries: Any, locale: str, *, logger: BuildLogger | None = None
) -> ParsedTranslations:
    """Group one locale's flat translations by group id, locale and sign.

    ``TODO:`` placeholders are skipped. Malformed keys are collected into
    ``invalid_keys`` and reported with a single warning; the well-formed
    entries are still returned.
    """
    logger = logger or BuildLogger()
    entries = validate_translations(entries)
    result = ParsedTranslations()

    for entry in entries:
        for key, value in entry.items():
            if TODO_MARKER in value:
                continue
            parsed = split_translation_key(key)
            if parsed is None:
                result.invalid_keys.append(key)
                continue
            group_id, sign = parsed
            result.groups.setdefault(group_id, {}).setdefault(locale, {})[sign] = value

    if result.invalid_keys:
        logger.warning(
            f"Invalid key format: {', '.join(result.invalid_keys)}. "
            f"Expected format: '{KEY_PREFIX}.id.{KEY_SIGN}'"
        )
    return result


def merge_grouped_translations(
    grouped: Iterable[Mapping[str, Mapping[str, Any]]],
) -> GroupTranslationByLocale:
    """Merge per-locale results; locales of the same id are combined."""
    merged: GroupTranslationByLocale = {}
    for translations in grouped:
        for group_id, locales in translations.items():
            merged[group_id] = {**merged.get(group_id, {}), **locales}
    return merged


def sort_by_first_key_name(entries: Iterable[Mapping[str, str]]) -> list[dict[str, str]]:
    return sorted((dict(entry) for entry in entries), key=lambda entry: next(iter(entry), ""))


__all__ = [
    "GroupTranslationByLocale",
    "KEY_PREFIX",
    "KEY_SIGN",
    "ParsedTranslations",
    "TODO_MARKER",
    "merge_grouped_translations",
    "parse_translations",
    "sort_by_first_key_name",
    "split_translation_key",
    "todo_translation",
    "translation_key",
]
