from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from core.logging import BuildLogger

from .errors import ServicesDataError, ValidationError
from .localizations import add_service_localizations, read_json, write_json
from .merge import group_services_data, merge_services_data
from .schemas import validate_service, validate_services_data

SOURCE_PATTERNS = ("*.yml", "*.yaml")


def _validated_records(records: list[Any], origin: str) -> list[dict[str, Any]]:
    for record in records:
        try:
            validate_service(record)
        except ValidationError as error:
            raise ValidationError(f"{origin}: {error}") from error
    return records


def load_source_services(source_dir: str | Path) -> list[dict[str, Any]]:
    """Read service records from every ``*.yml``/``*.yaml`` file in ``source_dir``.

    A file holds either one record or a list of records.
    """
    folder = Path(source_dir)
    if not folder.is_dir():
        raise ValidationError(f"Services source directory not found: {folder}")

    paths = sorted(path for pattern in SOURCE_PATTERNS for path in folder.glob(pattern))
    services: list[dict[str, Any]] = []
    for path in paths:
        with open(path, encoding="utf-8") as file:
            content = yaml.safe_load(file)
        if content is None:
            continue
        records = content if isinstance(content, list) else [content]
        services.extend(_validated_records(records, path.name))
    return services


def load_dist_services(dist_file: str | Path) -> list[dict[str, Any]]:
    """Return ``blocked_services`` of a previous build, or ``[]`` when there is none."""
    path = Path(dist_file)
    if not path.is_file():
        return []
    content = read_json(path)
    if not isinstance(content, dict):
        raise ValidationError(f"{path.name}: expected an object with 'blocked_services'")
    records = content.get("blocked_services", [])
    if not isinstance(records, list):
        raise ValidationError(f"{path.name}: 'blocked_services' must be a list")
    return _validated_records(list(records), path.name)


def build_services(
    source_dir: str | Path,
    dist_file: str | Path,
    locales_folder: str | Path,
    i18n_file: str | Path,
    *,
    logger: BuildLogger | None = None,
    base_translations_file: str | Path | None = None,
) -> dict[str, Any]:
    """Merge source services into ``dist_file`` and rebuild the localizations."""
    logger = logger or BuildLogger()

    try:
        merged = merge_services_data(
            load_dist_services(dist_file), load_source_services(source_dir)
        )
    except (OSError, ValueError, yaml.YAMLError) as error:
        logger.error(f"Error reading services data: {error}")
        raise ServicesDataError(f"Error reading services data: {error}") from error

    services_data = group_services_data(merged, logger=logger).unwrap()
    validate_services_data(services_data)
    try:
        write_json(dist_file, services_data)
    except OSError as error:
        logger.error(f"Error writing services data: {error}")
        raise ServicesDataError(f"Error writing services data: {error}") from error
    logger.success(
        f"Wrote {len(services_data['blocked_services'])} services "
        f"in {len(services_data['groups'])} groups to {dist_file}"
    )

    add_service_localizations(
        dist_file,
        locales_folder,
        i18n_file,
        logger=logger,
        base_translations_file=base_translations_file,
    )
    return services_data


__all__ = ["build_services", "load_dist_services", "load_source_services"]
