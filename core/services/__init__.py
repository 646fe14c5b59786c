from .errors import LocalizationError, ServicesDataError, ValidationError
from .result import Err, Ok, Result
from .merge import group_services_data, merge_services_data
from .translations import (
    ParsedTranslations,
    merge_grouped_translations,
    parse_translations,
    sort_by_first_key_name,
)
from .localizations import (
    add_service_localizations,
    check_base_translations,
    get_dir_names,
    get_grouped_translations,
    get_locales,
)
from .build import build_services, load_source_services

__all__ = [
    "Err",
    "LocalizationError",
    "Ok",
    "ParsedTranslations",
    "Result",
    "ServicesDataError",
    "ValidationError",
    "add_service_localizations",
    "build_services",
    "check_base_translations",
    "get_dir_names",
    "get_grouped_translations",
    "get_locales",
    "group_services_data",
    "load_source_services",
    "merge_grouped_translations",
    "merge_services_data",
    "parse_translations",
    "sort_by_first_key_name",
]
