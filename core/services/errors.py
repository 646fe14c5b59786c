class ServicesDataError(Exception):
    """Base error for the services build."""


class ValidationError(ServicesDataError):
    """Service or translation data does not have the expected shape."""


class LocalizationError(ServicesDataError):
    """Collecting or writing the combined localizations failed."""


__all__ = ["LocalizationError", "ServicesDataError", "ValidationError"]
