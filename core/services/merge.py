from __future__ import annotations

from typing import Any, Iterable

from core.logging import BuildLogger

from .errors import ValidationError
from .result import Err, Ok, Result

Service = dict[str, Any]


def merge_services_data(
    dist_services: Iterable[Service], source_services: Iterable[Service]
) -> list[Service]:
    """Merge two service lists by ``id``; a source record replaces a dist record.

    A replaced record keeps the position of the first record with that id.
    """
    merged: dict[str, Service] = {}
    for services in (dist_services, source_services):
        for service in services:
            merged[service["id"]] = service
    return list(merged.values())


def group_services_data(
    services: list[Service], *, logger: BuildLogger | None = None
) -> Result[dict[str, Any]]:
    """Collect the sorted group list for ``services``.

    Returns ``Ok({"blocked_services": ..., "groups": ...})`` or ``Err`` with a
    :class:`ValidationError` naming every service without a group.
    """
    logger = logger or BuildLogger()
    seen_groups: set[str] = set()
    groups: list[dict[str, str]] = []
    invalid_ids: list[str] = []

    for service in services:
        group = service.get("group")
        if not group:
            invalid_ids.append(str(service.get("id")))
            continue
        if group not in seen_groups:
            seen_groups.add(group)
            groups.append({"id": group})

    if invalid_ids:
        error = ValidationError(
            f"Services with id: {','.join(invalid_ids)} has an empty or missing 'group' key."
        )
        logger.error(f"Error while grouping services data: {error}")
        return Err(error)

    # blocked_services keeps merge order
    return Ok(
        {
            "blocked_services": list(services),
            "groups": sorted(groups, key=lambda group: group["id"]),
        }
    )


__all__ = ["group_services_data", "merge_services_data"]
