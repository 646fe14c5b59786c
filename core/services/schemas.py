from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError


def _single_key(value: dict[str, str]) -> dict[str, str]:
    if len(value) != 1:
        raise ValueError(f"translation must have exactly one key, got {len(value)}")
    return value


# { "servicesgroup.cdn.name": "Content Delivery Network" }
Translation = Annotated[dict[str, str], AfterValidator(_single_key)]


class Service(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., min_length=1)
    group: str | None = None


class ServiceGroup(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)


class ServicesData(BaseModel):
    blocked_services: list[Service]
    groups: list[ServiceGroup]


class GroupTranslation(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str


class ServicesI18n(BaseModel):
    """Combined localizations: group id -> locale -> translation."""

    groups: dict[str, dict[str, GroupTranslation]]


_translations_adapter = TypeAdapter(list[Translation])


def _validate(model: Any, data: Any, what: str) -> Any:
    try:
        if isinstance(model, TypeAdapter):
            return model.validate_python(data, strict=True)
        return model.model_validate(data)
    except PydanticValidationError as error:
        raise ValidationError(f"Invalid {what}: {error}") from error


def validate_translations(entries: Any) -> list[dict[str, str]]:
    return _validate(_translations_adapter, entries, "translations collection")


def validate_service(record: Any) -> Service:
    return _validate(Service, record, "service record")


def validate_services_data(data: Any) -> ServicesData:
    return _validate(ServicesData, data, "services data")


def validate_services_i18n(data: Any) -> ServicesI18n:
    return _validate(ServicesI18n, data, "services localizations")


__all__ = [
    "GroupTranslation",
    "Service",
    "ServiceGroup",
    "ServicesData",
    "ServicesI18n",
    "Translation",
    "validate_service",
    "validate_services_data",
    "validate_services_i18n",
    "validate_translations",
]
